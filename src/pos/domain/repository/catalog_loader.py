"""Abstract source of the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, in-memory)
live in the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.catalog import ProductCatalog


class CatalogLoader(ABC):

    @abstractmethod
    def load(self) -> ProductCatalog:
        """Read the source once and return the catalog.

        Raises CatalogLoadError if no usable catalog can be built.
        """
