"""
GST Engine Test Configuration and Fixtures

This module provides:
- Test environment variables
- Fixtures for the tax service and common addresses
- Factories for multi-item orders
"""

import os
import sys
import pytest
from decimal import Decimal
from typing import Any, Dict, List

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Business details come from defaults in tests
os.environ.pop("COMPANY_GSTIN", None)
os.environ.pop("COMPANY_ADDRESS", None)


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def tax_service():
    """Fresh TaxService instance."""
    from gst_engine.services.tax_service import TaxService
    return TaxService()


# =============================================================================
# Address Fixtures
# =============================================================================

@pytest.fixture
def home_address():
    """Billing address in the seller's registered state (intra-state)."""
    from gst_engine.models.tax import Address
    return Address(state="Maharashtra", country="India")


@pytest.fixture
def delhi_address():
    """Billing address in another state (inter-state)."""
    from gst_engine.models.tax import Address
    return Address(state="Delhi", country="India")


@pytest.fixture
def unknown_state_address() -> Dict[str, str]:
    """Billing address whose state is not in the state code table."""
    return {"state": "Atlantis", "country": "India"}


# =============================================================================
# Data Factories
# =============================================================================

@pytest.fixture
def mixed_cart_items() -> List[Dict[str, Any]]:
    """Cart with one item per rate slab."""
    return [
        {"amount": Decimal("1000.00"), "category": "gifts"},      # 18%
        {"amount": Decimal("500.00"), "category": "clothing"},    # 12%
        {"amount": Decimal("200.00"), "category": "food"},        # 5%
        {"amount": Decimal("300.00"), "category": "books"},       # 0%
        {"amount": Decimal("100.00"), "category": "luxury"},      # 28%
    ]
