"""Option mapping and selection helpers.

Options are compared by ``value`` only; ``label`` is carried along.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .entities import Entity, Option
from .exception_record import ExceptionRecord


def to_options(entities: Iterable[Entity]) -> list[Option]:
    """Project entities to options, one per input, preserving order."""
    return [Option(value=entity.id, label=entity.name) for entity in entities]


def option_values(options: Iterable[Option]) -> list[str]:
    return [option.value for option in options]


def select_options(values: Iterable[str], options: Sequence[Option]) -> list[Option]:
    """Look up options for ``values`` in the given order.

    Unknown ids still produce an option (labelled with the id) so they are
    persisted like any other selection.
    """
    by_value = {option.value: option for option in options}
    selected: list[Option] = []
    seen: set[str] = set()
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        option = by_value.get(value)
        selected.append(option if option is not None else Option(value=value, label=value))
    return selected


def initial_selections(
    record: ExceptionRecord,
    options: Sequence[Option],
) -> tuple[list[Option], list[Option]]:
    """Re-derive include/exclude defaults from a decoded prior record."""
    include_ids = set(record.include)
    exclude_ids = set(record.exclude)
    include = [o for o in options if o.value in include_ids]
    exclude = [o for o in options if o.value in exclude_ids]
    return include, exclude


def available_options(
    all_options: Sequence[Option],
    include: Iterable[Option],
    exclude: Iterable[Option],
) -> list[Option]:
    """Options selected in neither list."""
    taken = set(option_values(include)) | set(option_values(exclude))
    return [o for o in all_options if o.value not in taken]
