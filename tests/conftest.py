"""Shared reference tables for resolver tests."""

import pytest

from audience_exceptions.config.runtime import RuntimeSettings
from audience_exceptions.domain.entities import Country, Option, Usergroup, WorldRegion
from audience_exceptions.reference.loader import ReferenceData

MOCK_US = Country(id="us", name="united states")
MOCK_CA = Country(id="ca", name="canada")
MOCK_DE = Country(id="de", name="germany")

MOCK_WHP = WorldRegion(id="WHP", name="western hemisphere", countries=[MOCK_US, MOCK_CA])
MOCK_EHP = WorldRegion(id="EHP", name="emea", countries=[MOCK_DE])

MOCK_USERGROUP = Usergroup(id="test_usergroup", name="test usergroup")
MOCK_USERGROUP_2 = Usergroup(id="test_usergroup2", name="test usergroup2")

MOCK_WORLD_REGIONS = [MOCK_WHP, MOCK_EHP]
MOCK_COUNTRIES = [MOCK_US, MOCK_DE, MOCK_CA]
MOCK_USERGROUPS = [MOCK_USERGROUP, MOCK_USERGROUP_2]


def opt(value: str, label: str | None = None) -> Option:
    return Option(value=value, label=label or value)


@pytest.fixture
def reference() -> ReferenceData:
    return ReferenceData(
        countries=MOCK_COUNTRIES,
        world_regions=MOCK_WORLD_REGIONS,
        usergroups=MOCK_USERGROUPS,
    )


@pytest.fixture
def settings() -> RuntimeSettings:
    return RuntimeSettings(debug=False, reference_data_path="unused.json", log_level="INFO")


@pytest.fixture
def reference_file(tmp_path, reference):
    path = tmp_path / "reference.json"
    path.write_text(reference.model_dump_json(), encoding="utf-8")
    return path
