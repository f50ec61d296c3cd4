"""Cart aggregate — the sale currently being rung up.

The Cart is an aggregate root that owns its lines.  It looks products
up in the catalog it was built with, but each line keeps its own copy
of the price and image taken at add-time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from pos.domain.exceptions import IndexOutOfRangeError, UnknownProductError
from pos.domain.model.catalog import ProductCatalog
from pos.domain.model.value_objects import Money, Quantity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartLine:
    """Captures the price snapshot of a product at add-time.

    Lines are immutable.  A quantity change replaces the line in the
    cart with a new one, so lines already handed out (or held by a
    Bill) never move.
    """

    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at add-time
    image: str = ""

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    def with_quantity(self, qty: int) -> CartLine:
        return replace(self, quantity=Quantity(qty))


class Cart:
    """Ordered list of lines for one sale.

    Adding the same product twice yields two separate lines; lines are
    never merged, so bill order follows add order.
    """

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog
        self._lines: list[CartLine] = []

    # --- Commands -------------------------------------------------------------

    def add_item(self, product_name: str, quantity: int) -> CartLine:
        """Append a new line for *quantity* units of *product_name*."""
        product = self._catalog.get(product_name)
        if product is None:
            raise UnknownProductError(
                f"Item not found in product database: {product_name}"
            )

        line = CartLine(
            product_name=product.name,
            quantity=Quantity(quantity),
            unit_price=product.price,  # <-- price snapshot
            image=product.image,
        )
        self._lines.append(line)
        logger.debug("Added %s x %s to cart", line.quantity, line.product_name)
        return line

    def remove_item(self, index: int) -> None:
        self._check_index(index)
        line = self._lines.pop(index)
        logger.debug("Removed line %d (%s) from cart", index, line.product_name)

    def update_quantity(self, index: int, quantity: int) -> None:
        """Reset the quantity of the line at *index*."""
        self._check_index(index)
        self._lines[index] = self._lines[index].with_quantity(quantity)

    def clear(self) -> None:
        if self._lines:
            logger.debug("Clearing %d line(s) from cart", len(self._lines))
        self._lines.clear()

    # --- Queries --------------------------------------------------------------

    def items(self) -> tuple[CartLine, ...]:
        """The current lines, in add order."""
        return tuple(self._lines)

    def subtotal(self) -> Money:
        result = Money.zero()
        for line in self._lines:
            result = result + line.line_total
        return result

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    # --- Internal helpers -----------------------------------------------------

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._lines):
            raise IndexOutOfRangeError(f"Invalid item index: {index}")
