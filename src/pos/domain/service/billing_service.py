"""Domain service: Billing.

Turns a cart into a Bill.  Validation runs in a fixed order (empty
cart, discount range, payment) so the same bad input always produces
the same error.  Nothing is mutated until every check has passed; the
cart is cleared only after the bill text has been rendered.

Figures are computed at full Decimal precision.  Rounding to cents
happens in the rendered text alone, so discount and change never pick
up compounded rounding error.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from pos.domain.exceptions import (
    EmptyCartError,
    InsufficientPaymentError,
    InvalidDiscountError,
    ValidationError,
)
from pos.domain.model.bill import Bill
from pos.domain.model.cart import Cart, CartLine
from pos.domain.model.value_objects import HUNDRED, Money, round_cents

logger = logging.getLogger(__name__)

BILL_TITLE = "Cafe POS Bill"
RULE_WIDTH = 48
LABEL_WIDTH = 20


class BillingService:

    def __init__(self, title: str = BILL_TITLE) -> None:
        self._title = title

    def generate_bill(
        self,
        cart: Cart,
        payment: Money | Decimal | int,
        discount_percentage: Decimal | int = 0,
    ) -> Bill:
        """Finalize *cart* and return the Bill.

        *payment* may be a raw Decimal so that a negative tender is
        reported as insufficient rather than as a malformed amount.

        Raises:
            EmptyCartError: the cart has no lines.
            InvalidDiscountError: the discount is outside 0..100.
            InsufficientPaymentError: payment is below the final total.
        """
        if cart.is_empty:
            logger.info("Bill rejected: cart is empty")
            raise EmptyCartError("Cart is empty")

        discount = Decimal(discount_percentage)
        if not discount.is_finite() or not (0 <= discount <= HUNDRED):
            logger.info("Bill rejected: discount %s out of range", discount)
            raise InvalidDiscountError(
                "Discount percentage must be between 0 and 100"
            )

        subtotal = cart.subtotal()
        discount_amount = subtotal.percent(discount)
        final_total = subtotal - discount_amount

        tendered = payment.amount if isinstance(payment, Money) else Decimal(payment)
        if not tendered.is_finite():
            raise ValidationError(f"Payment must be finite, got {tendered}")
        if tendered < final_total.amount:
            logger.info(
                "Bill rejected: payment %s below final total %s", tendered, final_total
            )
            raise InsufficientPaymentError(required=final_total)

        payment = Money(tendered)
        change = payment - final_total
        lines = cart.items()
        text = self.render(
            lines,
            subtotal=subtotal,
            discount_percentage=discount,
            discount_amount=discount_amount,
            final_total=final_total,
            payment=payment,
            change=change,
        )

        cart.clear()
        logger.info(
            "Bill generated: %d line(s), total %s, change %s",
            len(lines),
            final_total,
            change,
        )

        return Bill(
            lines=lines,
            subtotal=subtotal,
            discount_percentage=discount,
            discount_amount=discount_amount,
            final_total=final_total,
            payment=payment,
            change=change,
            text=text,
        )

    # --- Rendering ------------------------------------------------------------

    def render(
        self,
        lines: tuple[CartLine, ...],
        *,
        subtotal: Money,
        discount_percentage: Decimal,
        discount_amount: Money,
        final_total: Money,
        payment: Money,
        change: Money,
    ) -> str:
        """Lay out the receipt text. Every figure is shown to two places."""
        rows = [
            f"{'':15}===== {self._title} =====",
            f"{'Item':<20} {'Qty':<10} {'Price':<10} {'Total':<10}",
            "-" * RULE_WIDTH,
        ]
        for line in lines:
            rows.append(
                f"{line.product_name:<20} {str(line.quantity):<10} "
                f"${_cents(line.unit_price):<9} ${_cents(line.line_total):<9}"
            )
        rows.append("-" * RULE_WIDTH)
        rows.append(_money_row("Subtotal:", subtotal))
        if discount_percentage > 0:
            pct = str(round_cents(discount_percentage))
            rows.append(f"{'Discount:':<{LABEL_WIDTH}} {pct:<9}%")
            rows.append(_money_row("Discount Amount:", discount_amount))
        rows.append(_money_row("Final Total:", final_total))
        rows.append(_money_row("Payment:", payment))
        rows.append(_money_row("Change:", change))

        return "\n".join(rows) + "\n" + "=" * RULE_WIDTH


def _cents(money: Money) -> str:
    return str(money.rounded)


def _money_row(label: str, money: Money) -> str:
    return f"{label:<{LABEL_WIDTH}} ${_cents(money):<9}"
