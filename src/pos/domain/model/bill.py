"""The immutable result of finalizing a cart."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pos.domain.model.cart import CartLine
from pos.domain.model.value_objects import Money


@dataclass(frozen=True)
class Bill:
    """Figures and rendered receipt for one completed sale.

    ``lines`` are the cart lines as they stood at generation time.  All
    amounts keep full precision; only ``text`` is rounded.
    """

    lines: tuple[CartLine, ...]
    subtotal: Money
    discount_percentage: Decimal
    discount_amount: Money
    final_total: Money
    payment: Money
    change: Money
    text: str

    @property
    def has_discount(self) -> bool:
        return self.discount_percentage > 0

    def __str__(self) -> str:
        return self.text
