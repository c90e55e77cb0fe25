"""Observability: logging setup and structured tool logs (tool, latency_ms)."""

from __future__ import annotations

import logging
from typing import Any

_LOGGER = logging.getLogger("audience_exceptions.mcp")

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for an entrypoint."""
    logging.basicConfig(level=level, format=_LOG_FORMAT)


def log_tool_invocation(
    tool: str,
    latency_ms: float,
    error: str | None = None,
    extra: dict[str, Any] | None = None,
) -> None:
    """Emit a structured log line for one tool call."""
    payload: dict[str, Any] = {
        "tool": tool,
        "latency_ms": round(latency_ms, 2),
    }
    if error:
        payload["error"] = error
    if extra:
        payload.update(extra)
    _LOGGER.info("tool_invocation", extra=payload)
