"""ExceptionRecord serialization and prior-value decoding."""

import json

import pytest

from audience_exceptions.domain.exception_record import ExceptionRecord, decode_prior_value


class TestSerializedForm:

    def test_field_names_and_shapes(self):
        record = ExceptionRecord(include=["us", "WHP"], exclude=["de"], whitelist={"us": True, "ca": True})
        assert record.to_json() == (
            '{"include":["us","WHP"],"exclude":["de"],"whitelist":{"us":true,"ca":true}}'
        )

    def test_empty_record(self):
        assert json.loads(ExceptionRecord.empty().to_json()) == {
            "include": [],
            "exclude": [],
            "whitelist": {},
        }

    def test_whitelisted_ids_sorted(self):
        record = ExceptionRecord(whitelist={"us": True, "ca": True, "de": False})
        assert record.whitelisted_ids() == ["ca", "us"]
        assert record.is_allowed("us")
        assert not record.is_allowed("de")
        assert not record.is_allowed("fr")


class TestDecodePriorValue:

    def test_decodes_persisted_value(self):
        raw = '{"include":["test_usergroup"],"exclude":[],"whitelist":{"test_usergroup":true}}'
        record = decode_prior_value(raw)
        assert record.include == ["test_usergroup"]
        assert record.whitelist == {"test_usergroup": True}

    def test_legacy_empty_whitelist_array(self):
        record = decode_prior_value(json.dumps({"include": ["US", "WHP"], "exclude": [], "whitelist": []}))
        assert record.include == ["US", "WHP"]
        assert record.whitelist == {}

    def test_missing_fields_default_to_empty(self):
        record = decode_prior_value('{"exclude":["de"]}')
        assert record == ExceptionRecord(exclude=["de"])

    @pytest.mark.parametrize(
        "raw",
        [None, "", "not json", "[]", "42", '{"include": "us"}', '{"include": [1, 2]}'],
    )
    def test_unreadable_values_mean_no_prior_selection(self, raw):
        assert decode_prior_value(raw) == ExceptionRecord.empty()

    def test_roundtrip_through_storage(self):
        record = ExceptionRecord(include=["ca"], exclude=["WHP"], whitelist={"de": True, "ca": True})
        assert decode_prior_value(record.to_json()) == record
