"""ExceptionService: ties prior values, resolvers and the value store together."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum

from pydantic import BaseModel, Field

from ..config.runtime import RuntimeSettings, get_settings
from ..domain.entities import Option
from ..domain.exception_record import ExceptionRecord, decode_prior_value
from ..domain.geographic_resolver import GeographicResolver
from ..domain.options import available_options, initial_selections, to_options
from ..domain.summary import describe_whitelist
from ..domain.usergroup_resolver import UsergroupResolver
from ..ports.value_store import ValueStore
from ..reference.loader import ReferenceData

_LOGGER = logging.getLogger(__name__)


class UnknownElementTypeError(ValueError):
    """Element type is missing or not one of ElementType."""


class ElementType(str, Enum):
    """Which exception editor an element hosts."""

    geographic = "geographic"
    usergroup = "usergroup"

    @classmethod
    def parse(cls, raw: str | None) -> ElementType:
        if not raw or not raw.strip():
            raise UnknownElementTypeError("element is missing its 'type'")
        try:
            return cls(raw.strip().lower())
        except ValueError:
            raise UnknownElementTypeError(
                f"unknown element type {raw!r}; expected 'geographic' or 'usergroup'"
            ) from None


class TierSelection(BaseModel):
    """Initial include/exclude selections for one tier of an editor."""

    include: list[Option] = Field(default_factory=list, description="Selected inclusions")
    exclude: list[Option] = Field(default_factory=list, description="Selected exclusions")
    available: list[Option] = Field(default_factory=list, description="Options selected in neither list")


class ExceptionService:
    """Resolve selections and publish the resulting record.

    Records are written to the value store, or only logged when running in
    debug mode or without a store.
    """

    def __init__(
        self,
        reference: ReferenceData,
        value_store: ValueStore | None = None,
        settings: RuntimeSettings | None = None,
        geographic_resolver: GeographicResolver | None = None,
        usergroup_resolver: UsergroupResolver | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._reference = reference
        self._store = value_store
        self._settings = settings or get_settings()
        self._geographic = geographic_resolver or GeographicResolver()
        self._usergroups = usergroup_resolver or UsergroupResolver()
        self._logger = logger or _LOGGER

    @property
    def reference(self) -> ReferenceData:
        return self._reference

    def prior_record(self) -> ExceptionRecord:
        """Decode the value store's current value (empty when there is none)."""
        if self._store is None:
            return ExceptionRecord.empty()
        return decode_prior_value(self._store.read())

    def initial_state(self, element_type: ElementType | str) -> dict[str, TierSelection]:
        """Initial selections per tier, re-derived from the prior value."""
        element_type = ElementType.parse(element_type)
        record = self.prior_record()
        if element_type is ElementType.geographic:
            tiers = {
                "countries": to_options(self._reference.countries),
                "world_regions": to_options(self._reference.world_regions),
            }
        else:
            tiers = {"usergroups": to_options(self._reference.usergroups)}

        state: dict[str, TierSelection] = {}
        for name, options in tiers.items():
            include, exclude = initial_selections(record, options)
            state[name] = TierSelection(
                include=include,
                exclude=exclude,
                available=available_options(options, include, exclude),
            )
        return state

    def update_geographic(
        self,
        include_regions: Sequence[Option] | None = None,
        exclude_regions: Sequence[Option] | None = None,
        include_countries: Sequence[Option] | None = None,
        exclude_countries: Sequence[Option] | None = None,
    ) -> ExceptionRecord:
        record = self._geographic.resolve(
            include_regions or [],
            exclude_regions or [],
            include_countries or [],
            exclude_countries or [],
            self._reference.countries,
            self._reference.world_regions,
        )
        self._publish(ElementType.geographic, record)
        return record

    def update_usergroups(
        self,
        include_groups: Sequence[Option] | None = None,
        exclude_groups: Sequence[Option] | None = None,
    ) -> ExceptionRecord:
        record = self._usergroups.resolve(
            include_groups or [],
            exclude_groups or [],
            self._reference.usergroups,
        )
        self._publish(ElementType.usergroup, record)
        return record

    def describe(self, record: ExceptionRecord) -> str:
        return describe_whitelist(record)

    def _publish(self, element_type: ElementType, record: ExceptionRecord) -> None:
        value = record.to_json()
        if self._settings.debug or self._store is None:
            self._logger.info(
                "exception_update",
                extra={
                    "element_type": element_type.value,
                    "whitelist_size": len(record.whitelist),
                    "value": value,
                },
            )
            return
        self._store.write(value)
