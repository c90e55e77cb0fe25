from .loader import ReferenceData, ReferenceDataError, load_reference_data

__all__ = [
    "ReferenceData",
    "ReferenceDataError",
    "load_reference_data",
]
