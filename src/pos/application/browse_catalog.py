"""Application services: catalog browsing (queries)."""

from __future__ import annotations

from pos.application.dto import ProductDTO
from pos.domain.model.catalog import ProductCatalog


class ListCategoriesHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(self) -> list[str]:
        return self._catalog.list_categories()


class ListProductsHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(self, category: str | None = None) -> list[ProductDTO]:
        """Products in *category* sorted by name, or the whole catalog.

        The whole catalog is sorted by category, then name, so listings
        are stable between runs.
        """
        if category is not None:
            products = self._catalog.list_by_category(category)
        else:
            products = sorted(
                self._catalog.list_all(), key=lambda p: (p.category, p.name)
            )
        return [ProductDTO.from_domain(p) for p in products]
