"""Port interfaces (Protocols).

Services depend only on these, never on a concrete host integration.
"""

from .value_store import InMemoryValueStore, ValueStore

__all__ = [
    "InMemoryValueStore",
    "ValueStore",
]
