"""
Models Initialization
Exports the tax calculation models
"""

from .tax import (
    Address,
    BusinessDetails,
    ComplianceDetails,
    InvoiceData,
    InvoiceSummary,
    OrderDetails,
    ReverseTaxCalculation,
    TaxBreakdown,
    TaxCalculation,
    TaxExemption,
    TaxItem,
)
