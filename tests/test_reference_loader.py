"""Reference data loading."""

import json

import pytest

from audience_exceptions.reference.loader import ReferenceDataError, load_reference_data


def test_loads_tables(reference_file):
    data = load_reference_data(reference_file)
    assert [c.id for c in data.countries] == ["us", "de", "ca"]
    assert [r.id for r in data.world_regions] == ["WHP", "EHP"]
    assert [c.id for c in data.world_regions[0].countries] == ["us", "ca"]
    assert len(data.usergroups) == 2


def test_extra_country_fields_are_ignored(tmp_path):
    path = tmp_path / "ref.json"
    path.write_text(
        json.dumps({"countries": [{"id": "us", "name": "united states", "geo_data": "", "restrictions": []}]}),
        encoding="utf-8",
    )
    data = load_reference_data(path)
    assert data.countries[0].id == "us"
    assert data.world_regions == []
    assert data.usergroups == []


def test_missing_file(tmp_path):
    with pytest.raises(ReferenceDataError, match="not found"):
        load_reference_data(tmp_path / "missing.json")


def test_invalid_json(tmp_path):
    path = tmp_path / "ref.json"
    path.write_text("{", encoding="utf-8")
    with pytest.raises(ReferenceDataError, match="invalid JSON"):
        load_reference_data(path)


def test_not_an_object(tmp_path):
    path = tmp_path / "ref.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ReferenceDataError):
        load_reference_data(path)


def test_schema_failure(tmp_path):
    path = tmp_path / "ref.json"
    path.write_text(json.dumps({"countries": [{"id": "us"}]}), encoding="utf-8")
    with pytest.raises(ReferenceDataError, match="invalid reference data"):
        load_reference_data(path)
