"""JSON-file-backed implementation of CatalogLoader."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pos.domain.exceptions import CatalogLoadError, ValidationError
from pos.domain.model.catalog import ProductCatalog
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.domain.repository.catalog_loader import CatalogLoader

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "category", "price", "image")


class JsonCatalogLoader(CatalogLoader):
    """Loads a JSON array of product records.

    Fields other than ``name``, ``category``, ``price`` and ``image``
    are ignored.  Records that cannot be turned into a Product are
    skipped with a warning; the load fails only if fewer than
    ``min_products`` usable records remain.
    """

    def __init__(self, file_path: Path | str, min_products: int = 1) -> None:
        self._file_path = Path(file_path)
        self._min_products = min_products

    # --- CatalogLoader interface ----------------------------------------------

    def load(self) -> ProductCatalog:
        raw = self._load_raw()

        products: dict[str, Product] = {}
        for position, record in enumerate(raw):
            try:
                product = self._to_domain(record)
            except (KeyError, TypeError, ValidationError) as exc:
                logger.warning(
                    "Skipping product record %d in %s: %s",
                    position,
                    self._file_path,
                    exc,
                )
                continue
            if product.name in products:
                logger.warning(
                    "Duplicate product name %r in %s; later record wins",
                    product.name,
                    self._file_path,
                )
            products[product.name] = product

        if len(products) < self._min_products:
            raise CatalogLoadError(
                f"Catalog {self._file_path} has {len(products)} usable product(s), "
                f"expected at least {self._min_products}"
            )

        logger.info("Loaded %d products from %s", len(products), self._file_path)
        return ProductCatalog(products.values())

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        if not isinstance(raw, dict):
            raise TypeError(f"expected an object, got {type(raw).__name__}")
        missing = [f for f in REQUIRED_FIELDS if f not in raw]
        if missing:
            raise KeyError(f"missing field(s): {', '.join(missing)}")
        price = raw["price"]
        if isinstance(price, bool) or not isinstance(price, (int, float, str)):
            raise TypeError(f"price must be a number, got {type(price).__name__}")
        for field in ("name", "category", "image"):
            if not isinstance(raw[field], str):
                raise TypeError(
                    f"{field} must be a string, got {type(raw[field]).__name__}"
                )
        return Product(
            name=raw["name"],
            category=raw["category"],
            price=Money.of(price),
            image=raw["image"],
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list:
        if not self._file_path.is_file():
            raise CatalogLoadError(f"Catalog file not found: {self._file_path}")
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise CatalogLoadError(
                f"Failed to load products from {self._file_path}: {exc}"
            ) from exc
        if not isinstance(raw, list):
            raise CatalogLoadError(
                f"Catalog {self._file_path} must contain a JSON array of products"
            )
        return raw
