"""Whitelist summary messages."""

from audience_exceptions.domain.exception_record import ExceptionRecord
from audience_exceptions.domain.geographic_resolver import resolve_geographic
from audience_exceptions.domain.summary import ALL_EXCLUDED, NO_EXCEPTIONS, describe_whitelist

from conftest import MOCK_COUNTRIES, MOCK_WORLD_REGIONS, opt


def test_no_selection_means_no_exceptions():
    assert describe_whitelist(ExceptionRecord.empty()) == NO_EXCEPTIONS


def test_empty_whitelist_with_exclusions_means_all_excluded():
    record = resolve_geographic([opt("EHP")], [], [], [opt("de")], MOCK_COUNTRIES, MOCK_WORLD_REGIONS)
    assert record.whitelist == {}
    assert describe_whitelist(record) == ALL_EXCLUDED


def test_explicit_exclusion_flag_overrides_record():
    record = ExceptionRecord(exclude=["de"])
    assert describe_whitelist(record, exclusions_selected=False) == NO_EXCEPTIONS


def test_lists_whitelisted_ids():
    record = ExceptionRecord(whitelist={"us": True, "ca": True})
    assert describe_whitelist(record) == "ca, us"
