"""Domain layer: errors and schemas."""

from .errors import (
    CardError,
    CardNotFoundError,
    CardRenderError,
    CardValidationError,
    ErrorCodes,
)
from .schemas import CardFields, CardRecord

__all__ = [
    "CardError",
    "CardNotFoundError",
    "CardRenderError",
    "CardValidationError",
    "ErrorCodes",
    "CardFields",
    "CardRecord",
]
