"""Reference tables: countries, world regions and user groups."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from ..domain.entities import Country, Usergroup, WorldRegion


class ReferenceDataError(ValueError):
    """Reference data file is missing or unreadable."""


class ReferenceData(BaseModel):
    """Complete, already-loaded lookup tables handed to the resolvers."""

    countries: list[Country] = Field(default_factory=list, description="All countries")
    world_regions: list[WorldRegion] = Field(
        default_factory=list, description="All world regions with member countries"
    )
    usergroups: list[Usergroup] = Field(default_factory=list, description="All user groups")


def load_reference_data(path: Path | str) -> ReferenceData:
    """Load reference tables from a JSON file. Raises ReferenceDataError on any failure."""
    path = Path(path)
    if not path.exists():
        raise ReferenceDataError(f"reference data file not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ReferenceDataError(f"invalid JSON in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ReferenceDataError(f"{path} must contain a JSON object")
    try:
        return ReferenceData.model_validate(raw)
    except ValidationError as e:
        raise ReferenceDataError(f"invalid reference data in {path}: {e}") from e
