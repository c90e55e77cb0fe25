"""Reference entities and display options."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field


class Country(BaseModel):
    """Leaf entity of the geographic hierarchy.

    Extra fields carried by the reference tables (geo data, restrictions)
    are ignored.
    """

    id: str = Field(..., description="Country identifier (e.g. 'us')")
    name: str = Field(..., description="Display name")


class WorldRegion(BaseModel):
    """Group entity owning an ordered list of member countries."""

    id: str = Field(..., description="World region identifier (e.g. 'WHP')")
    name: str = Field(..., description="Display name")
    countries: list[Country] = Field(default_factory=list, description="Member countries")


class Usergroup(BaseModel):
    """Leaf entity of the flat user group domain."""

    id: str = Field(..., description="User group identifier")
    name: str = Field(..., description="Display name")


class Option(BaseModel):
    """Display projection of an entity: ``value`` is the entity id."""

    model_config = {"frozen": True}

    value: str = Field(..., description="Entity identifier")
    label: str = Field(..., description="Display label")


Entity = Union[Country, WorldRegion, Usergroup]
