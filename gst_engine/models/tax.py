"""
Tax Models for the GST engine
Pydantic models for GST calculations and invoice payloads
"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field


# ============================================================================
# INPUT MODELS
# ============================================================================

class Address(BaseModel):
    """Customer billing location. Only the state affects tax."""

    state: str = Field(
        ...,
        description="State or UT name, exactly as listed in the state code table"
    )
    country: str = Field(default="India", description="Country (display only)")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {"state": "Maharashtra", "country": "India"}
        }
    }


class TaxItem(BaseModel):
    """A single line amount to be taxed"""

    amount: Decimal = Field(..., description="Line amount before tax")
    category: Optional[str] = Field(
        default=None,
        description="Product category; unknown values use the default rate"
    )

    model_config = {
        "json_schema_extra": {
            "example": {"amount": "499.00", "category": "clothing"}
        }
    }


class OrderDetails(BaseModel):
    """Order metadata needed to build a tax invoice"""

    billing_address: Address
    order_id: Optional[str] = Field(default=None, description="Order identifier")
    order_number: Optional[str] = Field(default=None, description="Customer-facing order number")


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class TaxBreakdown(BaseModel):
    """
    CGST/SGST/IGST split.

    Intra-state sales populate cgst and sgst; inter-state sales populate igst.
    total is always cgst + sgst + igst.
    """

    cgst: Decimal = Field(default=Decimal("0"), description="Central GST amount")
    sgst: Decimal = Field(default=Decimal("0"), description="State GST amount")
    igst: Decimal = Field(default=Decimal("0"), description="Integrated GST amount")
    total: Decimal = Field(default=Decimal("0"), description="CGST + SGST + IGST")

    model_config = {
        "json_schema_extra": {
            "example": {
                "cgst": "90.00",
                "sgst": "90.00",
                "igst": "0",
                "total": "180.00"
            }
        }
    }


class TaxCalculation(BaseModel):
    """Result of a forward GST calculation"""

    subtotal: Decimal = Field(..., description="Amount before tax")
    tax_breakdown: TaxBreakdown
    tax_total: Decimal = Field(..., description="Total tax (same as tax_breakdown.total)")
    grand_total: Decimal = Field(..., description="subtotal + tax_total")
    tax_rate: Decimal = Field(
        ...,
        description="Nominal GST rate applied; 0 on multi-item results with mixed rates"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "subtotal": "1000.00",
                "tax_breakdown": {
                    "cgst": "90.00",
                    "sgst": "90.00",
                    "igst": "0",
                    "total": "180.00"
                },
                "tax_total": "180.00",
                "grand_total": "1180.00",
                "tax_rate": "18"
            }
        }
    }


class ReverseTaxCalculation(BaseModel):
    """Pre-tax base recovered from a tax-inclusive amount"""

    amount_before_tax: Decimal
    tax_amount: Decimal


class TaxExemption(BaseModel):
    """Outcome of the exemption rules"""

    exempt: bool
    reason: Optional[str] = None


# ============================================================================
# INVOICE MODELS
# ============================================================================

class InvoiceSummary(BaseModel):
    type: str = Field(..., description="INTERSTATE or INTRASTATE")
    gst_type: str = Field(..., description="IGST or CGST + SGST")
    tax_breakdown: TaxBreakdown
    subtotal: Decimal
    tax_total: Decimal
    grand_total: Decimal
    order_id: Optional[str] = None
    order_number: Optional[str] = None


class ComplianceDetails(BaseModel):
    hsn_code: str
    place_of_supply: str
    place_of_supply_code: Optional[str] = None
    tax_rate: Decimal
    is_reverse_charge: bool = False
    exemption_reason: Optional[str] = None


class BusinessDetails(BaseModel):
    gstin: str
    state: str
    address: str


class InvoiceData(BaseModel):
    """Structured tax invoice payload"""

    invoice: InvoiceSummary
    compliance: ComplianceDetails
    business: BusinessDetails

    model_config = {
        "json_schema_extra": {
            "example": {
                "invoice": {
                    "type": "INTERSTATE",
                    "gst_type": "IGST",
                    "tax_breakdown": {
                        "cgst": "0",
                        "sgst": "0",
                        "igst": "180.00",
                        "total": "180.00"
                    },
                    "subtotal": "1000.00",
                    "tax_total": "180.00",
                    "grand_total": "1180.00"
                },
                "compliance": {
                    "hsn_code": "9505",
                    "place_of_supply": "Delhi",
                    "place_of_supply_code": "DL",
                    "tax_rate": "18",
                    "is_reverse_charge": False,
                    "exemption_reason": None
                },
                "business": {
                    "gstin": "DUMMY1234567890Z",
                    "state": "Maharashtra",
                    "address": "Business Address"
                }
            }
        }
    }
