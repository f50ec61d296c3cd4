"""ProductCatalog — the read-only set of sellable products.

Built once by a CatalogLoader and passed explicitly to whatever needs
it.  Every accessor returns a fresh list so callers can never reach the
internal mapping.
"""

from __future__ import annotations

from collections.abc import Iterable

from pos.domain.model.product import Product


class ProductCatalog:

    def __init__(self, products: Iterable[Product] = ()) -> None:
        # Later entries with the same name replace earlier ones.
        self._products: dict[str, Product] = {}
        for product in products:
            self._products[product.name] = product

    # --- Queries --------------------------------------------------------------

    def get(self, name: str) -> Product | None:
        return self._products.get(name)

    def list_all(self) -> list[Product]:
        return list(self._products.values())

    def list_by_category(self, category: str) -> list[Product]:
        """Products in *category*, sorted by name ascending."""
        return sorted(
            (p for p in self._products.values() if p.category == category),
            key=lambda p: p.name,
        )

    def list_categories(self) -> list[str]:
        """Distinct categories, sorted ascending."""
        return sorted({p.category for p in self._products.values()})

    # --- Container protocol ---------------------------------------------------

    def __contains__(self, name: object) -> bool:
        return name in self._products

    def __len__(self) -> int:
        return len(self._products)

    def __repr__(self) -> str:
        return f"ProductCatalog({len(self)} products)"
