"""Port: host value store holding the serialized exception record."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ValueStore(Protocol):
    """Read/write access to the persisted (string-encoded) value."""

    def read(self) -> str | None: ...

    def write(self, value: str) -> None: ...


# ---------------------------------------------------------------------------
# Default implementation (pure stdlib, no host deps)
# ---------------------------------------------------------------------------


class InMemoryValueStore:
    """Keeps the value in memory; records every write."""

    def __init__(self, value: str | None = None) -> None:
        self._value = value
        self.writes: list[str] = []

    def read(self) -> str | None:
        return self._value

    def write(self, value: str) -> None:
        self._value = value
        self.writes.append(value)
