"""Application service: Generate Bill use case.

Parses the operator's payment and discount input, lets the billing
service finalize the cart, and records the bill in the session's order
history.  The billing service itself never touches the history; this
handler is the layer that decides to log the sale.
"""

from __future__ import annotations

from decimal import Decimal

from pos.application.dto import BillDTO
from pos.domain.model.cart import Cart
from pos.domain.model.order_history import OrderHistory
from pos.domain.model.value_objects import parse_amount, parse_discount_percentage
from pos.domain.service.billing_service import BillingService


class GenerateBillHandler:

    def __init__(
        self,
        cart: Cart,
        history: OrderHistory,
        billing: BillingService | None = None,
    ) -> None:
        self._cart = cart
        self._history = history
        self._billing = billing or BillingService()

    def handle(
        self,
        payment: str | int | Decimal,
        discount: str | None = None,
    ) -> BillDTO:
        """Bill the cart.

        ``payment`` must be a well-formed number (ValidationError
        otherwise); a negative one is left for billing to reject as
        insufficient.  ``discount`` is free text: blank or malformed input
        means 0%.
        """
        tendered = parse_amount(payment)
        percentage = parse_discount_percentage(discount)

        bill = self._billing.generate_bill(self._cart, tendered, percentage)
        self._history.append(bill.text)
        return BillDTO.from_domain(bill)


class ShowHistoryHandler:

    def __init__(self, history: OrderHistory) -> None:
        self._history = history

    def handle(self) -> list[str]:
        """Rendered bills, oldest first."""
        return self._history.all()
