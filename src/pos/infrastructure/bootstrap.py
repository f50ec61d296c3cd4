"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from pos.domain.model.cart import Cart
from pos.domain.model.catalog import ProductCatalog
from pos.domain.model.order_history import OrderHistory
from pos.domain.service.billing_service import BillingService
from pos.infrastructure.catalog.json_catalog_loader import JsonCatalogLoader

# The default catalog ships inside the package.
DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[1] / "data" / "products.json"

CATALOG_PATH_ENV = "POS_CATALOG_PATH"


def catalog_path(override: Path | str | None = None) -> Path:
    """Explicit override first, then the environment, then the bundled file."""
    if override:
        return Path(override)
    from_env = os.environ.get(CATALOG_PATH_ENV)
    if from_env:
        return Path(from_env)
    return DEFAULT_CATALOG_PATH


def product_catalog(path: Path | str | None = None) -> ProductCatalog:
    return JsonCatalogLoader(catalog_path(path)).load()


@dataclass
class Session:
    """State for one till: the catalog, the open cart and its history."""

    catalog: ProductCatalog
    cart: Cart
    history: OrderHistory = field(default_factory=OrderHistory)
    billing: BillingService = field(default_factory=BillingService)


def new_session(catalog: ProductCatalog) -> Session:
    return Session(catalog=catalog, cart=Cart(catalog))
