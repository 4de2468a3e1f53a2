from .base import SingleTableError

from .domain_exceptions import (
    ValidationError,
    ItemNotFoundError,
    NotFoundError,
    ConflictError,
    ConnectionError,
    RetryableError,
)

__all__ = [
    "SingleTableError",

    "ConflictError",
    "ConnectionError",
    "ItemNotFoundError",
    "NotFoundError",
    "RetryableError",
    "ValidationError",
]
