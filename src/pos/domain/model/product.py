"""Products sold at the till.

Products are created once when the catalog is loaded and never change
during a session.  Cart lines copy the price and image they need at
add-time instead of holding a reference back to the product.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog, keyed by ``name``.

    ``image`` is an opaque reference (usually a resource path); the
    engine never checks that it exists.
    """

    name: str
    category: str
    price: Money
    image: str = ""

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if not isinstance(self.price, Money):
            raise ValidationError(
                f"Product price must be Money, got {type(self.price).__name__}"
            )
