"""Application services: Cart editing use cases.

Each handler performs one change on the open cart.  The Cart aggregate
validates its own input, so a failed command leaves the cart exactly
as it was.
"""

from __future__ import annotations

from pos.application.dto import CartLineDTO
from pos.domain.model.cart import Cart


class AddToCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self, product_name: str, quantity: int) -> CartLineDTO:
        """Add a new line; price and image are taken from the catalog now."""
        line = self._cart.add_item(product_name, quantity)
        return CartLineDTO.from_domain(len(self._cart) - 1, line)


class UpdateQuantityHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self, index: int, quantity: int) -> None:
        self._cart.update_quantity(index, quantity)


class RemoveFromCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self, index: int) -> None:
        self._cart.remove_item(index)


class ClearCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self) -> None:
        self._cart.clear()
