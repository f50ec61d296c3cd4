"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from decimal import Decimal

from pos.application.dto import CartDTO, CartLineDTO
from pos.domain.model.cart import Cart
from pos.domain.model.value_objects import (
    HUNDRED,
    parse_discount_percentage,
    round_cents,
)


class ShowCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self, discount_text: str | None = None) -> CartDTO:
        """Return the cart lines with subtotal and discounted total.

        The discount is read the same tolerant way billing reads it.  A
        percentage outside 0..100 is not previewed; the discounted total
        then equals the subtotal and billing will reject it.
        """
        subtotal = self._cart.subtotal()
        discount = parse_discount_percentage(discount_text)
        if not 0 <= discount <= HUNDRED:
            discount = Decimal("0")
        discounted = subtotal - subtotal.percent(discount)

        return CartDTO(
            items=[
                CartLineDTO.from_domain(i, line)
                for i, line in enumerate(self._cart.items())
            ],
            subtotal=str(subtotal),
            discount_percentage=str(round_cents(discount)),
            discounted_total=str(discounted),
        )
