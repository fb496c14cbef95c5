"""
Tax Service for the storefront
India GST Calculation Service

Handles:
- Category based rate lookup
- CGST/SGST (intra-state) vs IGST (inter-state) split
- Multi-item orders with mixed rates
- Reverse calculation from tax-inclusive amounts (returns/refunds)
- Exemption rules and tax invoice payloads
"""

import logging
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation, ROUND_HALF_DOWN, ROUND_HALF_UP
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from gst_engine.core.config import get_settings
from gst_engine.core.exceptions import InvalidAmountError
from gst_engine.core.gst_config import (
    DEFAULT_HSN_CODE,
    DEFAULT_ITEM_CATEGORY,
    HOME_STATE,
    get_category_rates,
    get_gst_rate_for_category,
    get_state_code,
    is_interstate,
    is_valid_indian_state,
)
from gst_engine.models.tax import (
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

logger = logging.getLogger(__name__)

Amount = Union[Decimal, int, float, str]
AddressLike = Union[Address, Mapping[str, Any]]

ZERO = Decimal("0")
HUNDRED = Decimal("100")

# Orders below this amount qualify for the small order exemption
SMALL_ORDER_THRESHOLD = Decimal("500")
SMALL_ORDER_REASON = "Small order exemption"
EDUCATIONAL_REASON = "Educational material exemption"


class TaxService:
    """
    GST Calculation Service

    Stateless: every method is a pure function of its arguments and the
    static tables in gst_engine.core.gst_config. Unknown categories use the
    default rate and unknown states are treated as inter-state; neither
    raises.

    Usage:
        from gst_engine.services.tax_service import tax_service

        calc = tax_service.calculate_gst(
            Decimal("1000"),
            {"state": "Delhi", "country": "India"},
            category="clothing"
        )
        calc.tax_breakdown.igst  # Decimal("120.00")
    """

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _round_tax(self, amount: Decimal) -> Decimal:
        """
        Round amount to 2 decimal places using standard GST rounding.

        Halves round towards positive infinity, so a negative half moves
        towards zero (-0.045 -> -0.04).

        Args:
            amount: Amount to round

        Returns:
            Rounded amount (ROUND_HALF_UP for positives)
        """
        rounding = ROUND_HALF_DOWN if amount < ZERO else ROUND_HALF_UP
        return amount.quantize(Decimal('0.01'), rounding=rounding)

    def _to_amount(self, value: Amount, field: str) -> Decimal:
        """
        Convert an input amount to Decimal.

        Floats go through str() so 0.1 stays 0.1. Negative amounts pass
        through (credit notes); non-finite or unparseable values raise.
        """
        if isinstance(value, Decimal):
            amount = value
        else:
            try:
                amount = Decimal(str(value))
            except (InvalidOperation, ValueError, TypeError):
                raise InvalidAmountError(field, value)

        if not amount.is_finite():
            raise InvalidAmountError(field, value)

        if amount < ZERO:
            logger.warning(f"Negative {field} passed to tax calculation: {amount}")

        return amount

    def _to_address(self, billing_address: AddressLike) -> Address:
        if isinstance(billing_address, Address):
            return billing_address
        return Address.model_validate(billing_address, from_attributes=True)

    def _item_fields(self, item: Union[TaxItem, Mapping[str, Any]]) -> Tuple[Any, Optional[str]]:
        if isinstance(item, Mapping):
            return item["amount"], item.get("category")
        return item.amount, getattr(item, "category", None)

    def _split_gst(
        self,
        gst_rate: Decimal,
        taxable_amount: Decimal,
        is_inter_state: bool = False
    ) -> TaxBreakdown:
        """
        Split GST into CGST/SGST or IGST based on transaction type.

        For intra-state: GST split equally into CGST (Central) and SGST (State)
        For inter-state: Full GST as IGST (Integrated)

        Each component is rounded on its own and the total is the sum of the
        rounded components, so total == cgst + sgst + igst holds exactly.

        Args:
            gst_rate: Total GST rate (e.g., 18)
            taxable_amount: Amount before tax
            is_inter_state: True for inter-state supply

        Returns:
            TaxBreakdown with rounded amounts
        """
        if is_inter_state:
            igst = self._round_tax(taxable_amount * gst_rate / HUNDRED)
            cgst = sgst = ZERO
        else:
            half_rate = gst_rate / Decimal('2')
            cgst = sgst = self._round_tax(taxable_amount * half_rate / HUNDRED)
            igst = ZERO

        return TaxBreakdown(cgst=cgst, sgst=sgst, igst=igst, total=cgst + sgst + igst)

    # ------------------------------------------------------------------
    # Forward calculation
    # ------------------------------------------------------------------

    def calculate_gst(
        self,
        subtotal: Amount,
        billing_address: AddressLike,
        category: Optional[str] = DEFAULT_ITEM_CATEGORY
    ) -> TaxCalculation:
        """
        Calculate GST for a purchase.

        Args:
            subtotal: Total amount before tax
            billing_address: Customer's billing address (state is matched
                exactly against the home state)
            category: Product category (defaults to 'gifts')

        Returns:
            TaxCalculation with the tax breakdown
        """
        amount = self._to_amount(subtotal, "subtotal")
        address = self._to_address(billing_address)
        gst_rate = get_gst_rate_for_category(category)
        inter_state = is_interstate(address.state)

        breakdown = self._split_gst(gst_rate, amount, inter_state)

        logger.debug(
            f"GST calculated: subtotal={amount}, category={category}, "
            f"rate={gst_rate}, interstate={inter_state}, tax={breakdown.total}"
        )

        return TaxCalculation(
            subtotal=self._round_tax(amount),
            tax_breakdown=breakdown,
            tax_total=breakdown.total,
            grand_total=self._round_tax(amount + breakdown.total),
            tax_rate=gst_rate
        )

    def calculate_tax_for_items(
        self,
        items: Iterable[Union[TaxItem, Mapping[str, Any]]],
        billing_address: AddressLike
    ) -> TaxCalculation:
        """
        Calculate tax for multiple items with different categories.

        Each item is taxed at its own category rate and the components are
        summed. tax_rate on the result is 0 because the rates may be mixed;
        read tax_total for the amount of tax.

        Args:
            items: Items as TaxItem or {"amount": ..., "category": ...}
            billing_address: Customer's billing address

        Returns:
            Aggregated TaxCalculation
        """
        address = self._to_address(billing_address)

        total_subtotal = ZERO
        total_cgst = ZERO
        total_sgst = ZERO
        total_igst = ZERO
        count = 0

        for item in items:
            amount, category = self._item_fields(item)
            calculation = self.calculate_gst(amount, address, category)
            total_subtotal += calculation.subtotal
            total_cgst += calculation.tax_breakdown.cgst
            total_sgst += calculation.tax_breakdown.sgst
            total_igst += calculation.tax_breakdown.igst
            count += 1

        cgst = self._round_tax(total_cgst)
        sgst = self._round_tax(total_sgst)
        igst = self._round_tax(total_igst)
        breakdown = TaxBreakdown(cgst=cgst, sgst=sgst, igst=igst, total=cgst + sgst + igst)

        logger.debug(f"GST calculated for {count} items: tax={breakdown.total}")

        return TaxCalculation(
            subtotal=self._round_tax(total_subtotal),
            tax_breakdown=breakdown,
            tax_total=breakdown.total,
            grand_total=self._round_tax(total_subtotal + breakdown.total),
            tax_rate=ZERO  # Mixed rates
        )

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_gst_rate_for_category(self, category: Optional[str]) -> Decimal:
        """Get GST rate for a product category (default 18%)."""
        return get_gst_rate_for_category(category)

    def get_available_gst_rates(self) -> Dict[str, Decimal]:
        """Get all category rates as a copy the caller may modify."""
        return get_category_rates()

    def is_valid_indian_state(self, state_name: str) -> bool:
        return is_valid_indian_state(state_name)

    def get_state_code(self, state_name: str) -> Optional[str]:
        return get_state_code(state_name)

    def is_interstate_transaction(self, customer_state: str) -> bool:
        return is_interstate(customer_state)

    # ------------------------------------------------------------------
    # Invoices
    # ------------------------------------------------------------------

    def generate_tax_invoice_data(
        self,
        calculation: Union[TaxCalculation, Mapping[str, Any]],
        order_details: Union[OrderDetails, Mapping[str, Any]]
    ) -> InvoiceData:
        """
        Assemble a tax invoice payload from a prior calculation.

        Business GSTIN and address are read from the environment on every
        call (COMPANY_GSTIN, COMPANY_ADDRESS). No exemption logic is applied
        here.

        Args:
            calculation: Result of calculate_gst / calculate_tax_for_items
            order_details: Order metadata; billing_address.state is required

        Returns:
            InvoiceData
        """
        if not isinstance(calculation, TaxCalculation):
            calculation = TaxCalculation.model_validate(calculation, from_attributes=True)
        if not isinstance(order_details, OrderDetails):
            order_details = OrderDetails.model_validate(order_details, from_attributes=True)

        state = order_details.billing_address.state
        inter_state = is_interstate(state)
        current = get_settings()

        return InvoiceData(
            invoice=InvoiceSummary(
                type='INTERSTATE' if inter_state else 'INTRASTATE',
                gst_type='IGST' if inter_state else 'CGST + SGST',
                tax_breakdown=calculation.tax_breakdown,
                subtotal=calculation.subtotal,
                tax_total=calculation.tax_total,
                grand_total=calculation.grand_total,
                order_id=order_details.order_id,
                order_number=order_details.order_number
            ),
            compliance=ComplianceDetails(
                hsn_code=DEFAULT_HSN_CODE,
                place_of_supply=state,
                place_of_supply_code=get_state_code(state),
                tax_rate=calculation.tax_rate,
                is_reverse_charge=False,
                exemption_reason=None
            ),
            business=BusinessDetails(
                gstin=current.COMPANY_GSTIN,
                state=HOME_STATE,
                address=current.COMPANY_ADDRESS
            )
        )

    # ------------------------------------------------------------------
    # Returns / exemptions
    # ------------------------------------------------------------------

    def calculate_reverse_gst(
        self,
        amount_including_tax: Amount,
        billing_address: AddressLike,
        category: Optional[str] = DEFAULT_ITEM_CATEGORY
    ) -> ReverseTaxCalculation:
        """
        Calculate reverse tax (for returns/refunds).

        amount_before_tax = total / (1 + rate / 100). Only the composite
        rate is needed, so billing_address does not change the result.

        Args:
            amount_including_tax: Tax-inclusive amount
            billing_address: Customer's billing address
            category: Product category (defaults to 'gifts')

        Returns:
            ReverseTaxCalculation with both figures rounded to 2 places
        """
        amount = self._to_amount(amount_including_tax, "amount_including_tax")
        gst_rate = get_gst_rate_for_category(category)

        amount_before_tax = amount / (Decimal('1') + gst_rate / HUNDRED)
        tax_amount = amount - amount_before_tax

        return ReverseTaxCalculation(
            amount_before_tax=self._round_tax(amount_before_tax),
            tax_amount=self._round_tax(tax_amount)
        )

    def check_tax_exemption(self, order_amount: Amount, category: Optional[str]) -> TaxExemption:
        """
        Check if order qualifies for tax exemption.

        Rules, first match wins:
        1. order_amount below 500 -> small order exemption
        2. category 'books' -> educational material exemption

        This is advisory; calculate_gst does not consult it.
        """
        amount = self._to_amount(order_amount, "order_amount")

        if amount < SMALL_ORDER_THRESHOLD:
            return TaxExemption(exempt=True, reason=SMALL_ORDER_REASON)

        if category == 'books':
            return TaxExemption(exempt=True, reason=EDUCATIONAL_REASON)

        return TaxExemption(exempt=False)


# Global singleton instance
tax_service = TaxService()
