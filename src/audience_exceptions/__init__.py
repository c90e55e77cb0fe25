"""Audience exceptions: resolve include/exclude selections into whitelists."""

from .domain import (
    Country,
    ExceptionRecord,
    Option,
    Usergroup,
    WorldRegion,
    resolve_geographic,
    resolve_usergroups,
    to_options,
)

__version__ = "0.1.0"
__all__ = [
    "Country",
    "ExceptionRecord",
    "Option",
    "Usergroup",
    "WorldRegion",
    "resolve_geographic",
    "resolve_usergroups",
    "to_options",
]
