"""Human-readable whitelist summary."""

from __future__ import annotations

from .exception_record import ExceptionRecord

ALL_EXCLUDED = "None (All Excluded)"
NO_EXCEPTIONS = "All (No Exceptions)"


def describe_whitelist(record: ExceptionRecord, exclusions_selected: bool | None = None) -> str:
    """Summarize a record.

    An empty whitelist means "all excluded" when some exclusion was selected,
    otherwise "no exceptions configured". ``exclusions_selected`` defaults to
    whether the record persists any exclusion. Ids are listed sorted, not in
    whitelist insertion order, so equal records always give the same text.
    """
    ids = record.whitelisted_ids()
    if ids:
        return ", ".join(ids)
    if exclusions_selected is None:
        exclusions_selected = bool(record.exclude)
    return ALL_EXCLUDED if exclusions_selected else NO_EXCEPTIONS
