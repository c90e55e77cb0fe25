"""ExceptionRecord: canonical include/exclude lists plus the resolved whitelist."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


class ExceptionRecord(BaseModel):
    """Result of resolving include/exclude selections.

    ``include`` and ``exclude`` are the normalized selections to persist and
    reload. ``whitelist`` maps every allowed leaf id to ``True``; ids that are
    absent are not allowed.
    """

    include: list[str] = Field(default_factory=list, description="Persisted inclusion ids")
    exclude: list[str] = Field(default_factory=list, description="Persisted exclusion ids")
    whitelist: dict[str, bool] = Field(default_factory=dict, description="Allowed leaf ids")

    @field_validator("whitelist", mode="before")
    @classmethod
    def _legacy_empty_whitelist(cls, value: Any) -> Any:
        # Older values were stored with ``"whitelist": []``.
        if isinstance(value, list) and not value:
            return {}
        return value

    @classmethod
    def empty(cls) -> ExceptionRecord:
        """Record meaning "no exceptions configured"."""
        return cls()

    def is_allowed(self, leaf_id: str) -> bool:
        return self.whitelist.get(leaf_id, False)

    def whitelisted_ids(self) -> list[str]:
        """Sorted ids mapped to ``True``."""
        return sorted(k for k, v in self.whitelist.items() if v)

    def to_json(self) -> str:
        """Serialize with the persisted field names ``include``, ``exclude``, ``whitelist``."""
        return self.model_dump_json()


def decode_prior_value(raw: str | None) -> ExceptionRecord:
    """Parse a persisted value; anything unreadable means no prior selection."""
    if not raw:
        return ExceptionRecord.empty()
    try:
        return ExceptionRecord.model_validate_json(raw)
    except ValidationError as exc:
        logger.debug("prior_value_invalid", extra={"error_count": exc.error_count()})
        return ExceptionRecord.empty()
