"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pos.domain.model.value_objects import Money


class DomainException(Exception):
    """Base class for all domain errors."""


class CatalogLoadError(DomainException):
    """The product catalog could not be loaded. Fatal at startup."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class UnknownProductError(EntityNotFoundError):
    """The product name is not in the catalog."""


class InvalidQuantityError(ValidationError):
    """A line quantity was zero or negative."""


class IndexOutOfRangeError(ValidationError):
    """A cart line index does not point at an existing line."""


class EmptyCartError(ValidationError):
    """A bill was requested for a cart with no lines."""


class InvalidDiscountError(ValidationError):
    """A discount percentage fell outside 0..100."""


class InsufficientPaymentError(ValidationError):
    """The tendered payment does not cover the final total."""

    def __init__(self, required: Money) -> None:
        super().__init__(f"Payment must be at least {required}")
        self.required = required
