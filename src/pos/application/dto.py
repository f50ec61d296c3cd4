"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Amounts are already
formatted for display.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.model.bill import Bill
from pos.domain.model.cart import CartLine
from pos.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    name: str
    category: str
    price: str  # formatted, e.g. "$3.75"
    image: str

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            name=product.name,
            category=product.category,
            price=str(product.price),
            image=product.image,
        )


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    index: int
    product_name: str
    quantity: int
    unit_price: str
    line_total: str

    @staticmethod
    def from_domain(index: int, line: CartLine) -> CartLineDTO:
        return CartLineDTO(
            index=index,
            product_name=line.product_name,
            quantity=line.quantity.value,
            unit_price=str(line.unit_price),
            line_total=str(line.line_total),
        )


@dataclass(frozen=True)
class CartDTO:
    """Output: the open cart, with a discount preview."""

    items: list[CartLineDTO]
    subtotal: str
    discount_percentage: str
    discounted_total: str

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class BillDTO:
    """Output: a completed sale."""

    text: str
    final_total: str
    payment: str
    change: str

    @staticmethod
    def from_domain(bill: Bill) -> BillDTO:
        return BillDTO(
            text=bill.text,
            final_total=str(bill.final_total),
            payment=str(bill.payment),
            change=str(bill.change),
        )
