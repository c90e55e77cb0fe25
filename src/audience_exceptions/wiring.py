"""Composition root: the one place where services are constructed.

Call ``build_exception_service()`` to get a service backed by the
configured reference data file.
"""

from __future__ import annotations

from .config.runtime import RuntimeSettings, get_settings
from .ports.value_store import ValueStore
from .reference.loader import load_reference_data
from .services.exception_service import ExceptionService


def build_exception_service(
    settings: RuntimeSettings | None = None,
    value_store: ValueStore | None = None,
    reference_path: str | None = None,
) -> ExceptionService:
    """Construct an ExceptionService. Raises ReferenceDataError if the tables cannot be loaded."""
    settings = settings or get_settings()
    reference = load_reference_data(reference_path or settings.reference_data_path)
    return ExceptionService(reference=reference, value_store=value_store, settings=settings)
