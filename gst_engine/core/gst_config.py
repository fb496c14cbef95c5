"""
GST Configuration for the storefront
India GST rate slabs, category rates, state codes and the seller's home state

All tables here are read-only after import. Lookups fall back instead of
raising so that a category typo never blocks a checkout.
"""

from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional


class GSTRate(Enum):
    """Valid GST rates in India"""
    ZERO = Decimal("0")
    FIVE = Decimal("5")
    TWELVE = Decimal("12")
    EIGHTEEN = Decimal("18")
    TWENTY_EIGHT = Decimal("28")


# ============================================================================
# CATEGORY RATES
# ============================================================================

DEFAULT_CATEGORY = "default"

# Category assumed when a caller does not name one
DEFAULT_ITEM_CATEGORY = "gifts"

GST_RATES: Mapping[str, GSTRate] = MappingProxyType({
    DEFAULT_CATEGORY: GSTRate.EIGHTEEN,
    "essential": GSTRate.FIVE,
    "luxury": GSTRate.TWENTY_EIGHT,
    "books": GSTRate.ZERO,
    "food": GSTRate.FIVE,
    "electronics": GSTRate.EIGHTEEN,
    "clothing": GSTRate.TWELVE,
    "gifts": GSTRate.EIGHTEEN,
})


# ============================================================================
# STATE CODES
# ============================================================================

STATE_CODES: Mapping[str, str] = MappingProxyType({
    "Andhra Pradesh": "AP",
    "Arunachal Pradesh": "AR",
    "Assam": "AS",
    "Bihar": "BR",
    "Chhattisgarh": "CG",
    "Goa": "GA",
    "Gujarat": "GJ",
    "Haryana": "HR",
    "Himachal Pradesh": "HP",
    "Jharkhand": "JH",
    "Karnataka": "KA",
    "Kerala": "KL",
    "Madhya Pradesh": "MP",
    "Maharashtra": "MH",
    "Manipur": "MN",
    "Meghalaya": "ML",
    "Mizoram": "MZ",
    "Nagaland": "NL",
    "Odisha": "OR",
    "Punjab": "PB",
    "Rajasthan": "RJ",
    "Sikkim": "SK",
    "Tamil Nadu": "TN",
    "Telangana": "TS",
    "Tripura": "TR",
    "Uttar Pradesh": "UP",
    "Uttarakhand": "UK",
    "West Bengal": "WB",
    # Union territories
    "Delhi": "DL",
    "Jammu and Kashmir": "JK",
    "Ladakh": "LA",
    "Chandigarh": "CH",
    "Dadra and Nagar Haveli and Daman and Diu": "DN",
    "Lakshadweep": "LD",
    "Puducherry": "PY",
    "Andaman and Nicobar Islands": "AN",
})

# State where the business is registered for GST
HOME_STATE = "Maharashtra"

# HSN code for gift items (chapter 95)
DEFAULT_HSN_CODE = "9505"


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def get_gst_rate_for_category(category: Optional[str]) -> Decimal:
    """
    Get GST rate for a product category.

    Args:
        category: Category key (e.g., 'books', 'clothing'). None means the
            default item category.

    Returns:
        Rate as a percentage, falling back to the default (18%) for unknown
        categories
    """
    if category is None:
        category = DEFAULT_ITEM_CATEGORY
    rate = GST_RATES.get(category, get_default_gst_rate())
    return rate.value


def get_default_gst_rate() -> GSTRate:
    """Get default GST rate for categories without a mapping (18%)."""
    return GST_RATES[DEFAULT_CATEGORY]


def get_category_rates() -> Dict[str, Decimal]:
    """Return a fresh, mutable copy of the category rate table."""
    return {category: rate.value for category, rate in GST_RATES.items()}


def is_valid_indian_state(state_name: str) -> bool:
    """Exact, case-sensitive membership test against STATE_CODES."""
    return state_name in STATE_CODES


def get_state_code(state_name: str) -> Optional[str]:
    """
    Get the two-letter GST state code for a state name.

    Returns:
        State code if found, None otherwise
    """
    return STATE_CODES.get(state_name)


def is_interstate(state_name: str) -> bool:
    """True when the customer's state differs from HOME_STATE."""
    return state_name != HOME_STATE
