"""
GST Engine
India GST calculation for storefront orders and tax invoices
"""

from gst_engine.services.tax_service import TaxService, tax_service

__version__ = "1.0.0"

__all__ = ["TaxService", "tax_service", "__version__"]
