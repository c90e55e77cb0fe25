"""Domain layer: entities, resolvers and the exception record."""

from .entities import Country, Entity, Option, Usergroup, WorldRegion
from .exception_record import ExceptionRecord, decode_prior_value
from .geographic_resolver import GeographicResolver, resolve_geographic
from .options import (
    available_options,
    initial_selections,
    option_values,
    select_options,
    to_options,
)
from .resolution_rules import GEOGRAPHIC_RULES, USERGROUP_RULES
from .summary import ALL_EXCLUDED, NO_EXCEPTIONS, describe_whitelist
from .usergroup_resolver import UsergroupResolver, resolve_usergroups

__all__ = [
    "ALL_EXCLUDED",
    "Country",
    "Entity",
    "ExceptionRecord",
    "GEOGRAPHIC_RULES",
    "GeographicResolver",
    "NO_EXCEPTIONS",
    "Option",
    "USERGROUP_RULES",
    "Usergroup",
    "UsergroupResolver",
    "WorldRegion",
    "available_options",
    "decode_prior_value",
    "describe_whitelist",
    "initial_selections",
    "option_values",
    "resolve_geographic",
    "resolve_usergroups",
    "select_options",
    "to_options",
]
