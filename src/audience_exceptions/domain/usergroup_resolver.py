"""UsergroupResolver: flat user group selections -> whitelist."""

from __future__ import annotations

from collections.abc import Sequence

from .entities import Option, Usergroup
from .exception_record import ExceptionRecord
from .options import option_values


class UsergroupResolver:
    """Single-tier resolver with no override tier."""

    def resolve(
        self,
        include_groups: Sequence[Option],
        exclude_groups: Sequence[Option],
        all_groups: Sequence[Usergroup],
    ) -> ExceptionRecord:
        g_include = option_values(include_groups)
        g_exclude = option_values(exclude_groups)

        if not g_include and g_exclude:
            excluded = set(g_exclude)
            allowed = [g.id for g in all_groups if g.id not in excluded]
        else:
            allowed = g_include

        # include is persisted verbatim even on the complement path;
        # reload logic relies on an empty include with a non-empty exclude.
        return ExceptionRecord(
            include=list(g_include),
            exclude=list(g_exclude),
            whitelist=dict.fromkeys(allowed, True),
        )


def resolve_usergroups(
    include_groups: Sequence[Option],
    exclude_groups: Sequence[Option],
    all_groups: Sequence[Usergroup],
) -> ExceptionRecord:
    return UsergroupResolver().resolve(include_groups, exclude_groups, all_groups)
