"""Tool registry for the MCP server.

Tools take plain id lists, resolve against the configured reference data,
and return JSON strings.
"""

from __future__ import annotations

import json
import time

from ...domain.exception_record import decode_prior_value
from ...domain.options import select_options, to_options
from ...domain.resolution_rules import GEOGRAPHIC_RULES, USERGROUP_RULES
from ...domain.summary import describe_whitelist
from ...observability import log_tool_invocation
from ...reference.loader import ReferenceDataError
from ...services.exception_service import ElementType, ExceptionService

ALLOWED_TOOLS = frozenset({
    "exceptions_resolve_geographic",
    "exceptions_resolve_usergroups",
    "exceptions_describe",
    "exceptions_capabilities",
})


def _get_exception_service() -> ExceptionService:
    from ...wiring import build_exception_service
    return build_exception_service()


def _error_payload(tool: str, t0: float, error: ReferenceDataError) -> str:
    latency_ms = (time.monotonic() - t0) * 1000
    log_tool_invocation(tool, latency_ms, error=str(error))
    return json.dumps({"error": str(error)})


def _record_payload(record) -> dict:
    return {
        "record": record.model_dump(),
        "value": record.to_json(),
        "summary": describe_whitelist(record),
    }


def register_tools(mcp):
    """Register the exception resolution tools."""

    @mcp.tool()
    def exceptions_resolve_geographic(
        include_regions: list[str] | None = None,
        exclude_regions: list[str] | None = None,
        include_countries: list[str] | None = None,
        exclude_countries: list[str] | None = None,
    ) -> str:
        """Resolve world region and country selections into a country whitelist.

        Country decisions override region decisions. Excluding only, at either
        tier, includes everything else at that tier.

        Args:
            include_regions: World region ids to include
            exclude_regions: World region ids to exclude
            include_countries: Country ids to include
            exclude_countries: Country ids to exclude

        Returns:
            JSON with record (include, exclude, whitelist), serialized value and summary
        """
        t0 = time.monotonic()
        try:
            service = _get_exception_service()
        except ReferenceDataError as e:
            return _error_payload("exceptions_resolve_geographic", t0, e)
        regions = to_options(service.reference.world_regions)
        countries = to_options(service.reference.countries)
        record = service.update_geographic(
            include_regions=select_options(include_regions or [], regions),
            exclude_regions=select_options(exclude_regions or [], regions),
            include_countries=select_options(include_countries or [], countries),
            exclude_countries=select_options(exclude_countries or [], countries),
        )
        latency_ms = (time.monotonic() - t0) * 1000
        log_tool_invocation(
            "exceptions_resolve_geographic", latency_ms, extra={"whitelist_size": len(record.whitelist)}
        )
        return json.dumps(_record_payload(record), indent=2)

    @mcp.tool()
    def exceptions_resolve_usergroups(
        include: list[str] | None = None,
        exclude: list[str] | None = None,
    ) -> str:
        """Resolve user group selections into a user group whitelist.

        Args:
            include: User group ids to include
            exclude: User group ids to exclude

        Returns:
            JSON with record (include, exclude, whitelist), serialized value and summary
        """
        t0 = time.monotonic()
        try:
            service = _get_exception_service()
        except ReferenceDataError as e:
            return _error_payload("exceptions_resolve_usergroups", t0, e)
        groups = to_options(service.reference.usergroups)
        record = service.update_usergroups(
            include_groups=select_options(include or [], groups),
            exclude_groups=select_options(exclude or [], groups),
        )
        latency_ms = (time.monotonic() - t0) * 1000
        log_tool_invocation(
            "exceptions_resolve_usergroups", latency_ms, extra={"whitelist_size": len(record.whitelist)}
        )
        return json.dumps(_record_payload(record), indent=2)

    @mcp.tool()
    def exceptions_describe(value: str) -> str:
        """Summarize a persisted exception value.

        Args:
            value: Serialized record as stored by the host

        Returns:
            JSON with include, exclude, whitelisted ids and summary
        """
        t0 = time.monotonic()
        record = decode_prior_value(value)
        latency_ms = (time.monotonic() - t0) * 1000
        log_tool_invocation("exceptions_describe", latency_ms)
        return json.dumps({
            "include": record.include,
            "exclude": record.exclude,
            "whitelisted": record.whitelisted_ids(),
            "summary": describe_whitelist(record),
        }, indent=2)

    @mcp.tool()
    def exceptions_capabilities() -> str:
        """Element types and the resolution rules applied to each."""
        t0 = time.monotonic()
        payload = {
            "element_types": [t.value for t in ElementType],
            "rules": {
                ElementType.geographic.value: list(GEOGRAPHIC_RULES),
                ElementType.usergroup.value: list(USERGROUP_RULES),
            },
        }
        log_tool_invocation("exceptions_capabilities", (time.monotonic() - t0) * 1000)
        return json.dumps(payload)
