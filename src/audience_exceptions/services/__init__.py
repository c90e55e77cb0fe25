"""Application services."""

from .exception_service import (
    ElementType,
    ExceptionService,
    TierSelection,
    UnknownElementTypeError,
)

__all__ = [
    "ElementType",
    "ExceptionService",
    "TierSelection",
    "UnknownElementTypeError",
]
