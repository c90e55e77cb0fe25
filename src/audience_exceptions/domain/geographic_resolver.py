"""GeographicResolver: world regions + countries -> flat country whitelist."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .entities import Country, Option, WorldRegion
from .exception_record import ExceptionRecord
from .options import option_values


def _complement(all_ids: Iterable[str], excluded: Sequence[str]) -> list[str]:
    excluded_set = set(excluded)
    return [i for i in all_ids if i not in excluded_set]


def _expand_regions(regions: Sequence[WorldRegion], region_ids: Sequence[str]) -> list[str]:
    """Country ids of every region whose id is in ``region_ids``."""
    wanted = set(region_ids)
    return [country.id for region in regions if region.id in wanted for country in region.countries]


class GeographicResolver:
    """Resolve region and country selections into a country whitelist.

    Precedence, highest first: explicit country inclusion, explicit country
    exclusion, region exclusion, region inclusion. A country not reached by
    any inclusion path is not whitelisted.
    """

    def resolve(
        self,
        include_regions: Sequence[Option],
        exclude_regions: Sequence[Option],
        include_countries: Sequence[Option],
        exclude_countries: Sequence[Option],
        all_countries: Sequence[Country],
        all_regions: Sequence[WorldRegion],
    ) -> ExceptionRecord:
        wr_include = option_values(include_regions)
        wr_exclude = option_values(exclude_regions)
        c_include = option_values(include_countries)
        c_exclude = option_values(exclude_countries)

        # Only country exclusions given: every other country is included.
        opposite_countries = bool(c_exclude) and not (c_include or wr_include or wr_exclude)
        effective_c_include = c_include
        if opposite_countries:
            effective_c_include = _complement((c.id for c in all_countries), c_exclude)

        # Only region exclusions given: every other region is included.
        # Country selections still override the outcome below.
        opposite_regions = bool(wr_exclude) and not wr_include
        effective_wr_include = wr_include
        if opposite_regions:
            effective_wr_include = _complement((r.id for r in all_regions), wr_exclude)

        wr_included_countries = _expand_regions(all_regions, effective_wr_include)
        wr_excluded_countries = set(_expand_regions(all_regions, wr_exclude))
        c_excluded = set(c_exclude)

        allowed = [
            cid
            for cid in wr_included_countries
            if cid not in wr_excluded_countries and cid not in c_excluded
        ]
        allowed.extend(effective_c_include)

        include = ([] if opposite_countries else list(c_include)) + (
            [] if opposite_regions else list(wr_include)
        )
        return ExceptionRecord(
            include=include,
            exclude=c_exclude + wr_exclude,
            whitelist=dict.fromkeys(allowed, True),
        )


def resolve_geographic(
    include_regions: Sequence[Option],
    exclude_regions: Sequence[Option],
    include_countries: Sequence[Option],
    exclude_countries: Sequence[Option],
    all_countries: Sequence[Country],
    all_regions: Sequence[WorldRegion],
) -> ExceptionRecord:
    """Module-level shortcut for :meth:`GeographicResolver.resolve`."""
    return GeographicResolver().resolve(
        include_regions,
        exclude_regions,
        include_countries,
        exclude_countries,
        all_countries,
        all_regions,
    )
