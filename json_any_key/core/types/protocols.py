# json_any_key/core/types/protocols.py

"""Protocol definitions for collections, sinks and key codecs."""

# Standard library imports
from typing import Callable
from typing import Iterable
from typing import Protocol

# A single (key, value) entry of a keyed collection
type Entry[K, V] = tuple[K, V]

# "Can be built from (key, value) pairs": dict, OrderedDict, list, tuple, ...
type PairCollector[K, V, C] = Callable[[Iterable[tuple[K, V]]], C]


# ============================================================================
# Serialization Protocols
# ============================================================================


class ObjectSink[R](Protocol):
    """Receives one JSON object property at a time."""

    def write_entry(self, name: str, value: object) -> None: ...
    def finish(self) -> R: ...


class KeyEncoder[K](Protocol):
    """Turns a key into a JSON property name."""

    def encode(self, key: K) -> str: ...


# ============================================================================
# Deserialization Protocols
# ============================================================================


class KeyDecoder[K](Protocol):
    """Turns a JSON property name, or an already-native key, back into a key."""

    def decode(self, name: str) -> K: ...
    def coerce(self, raw: object) -> K: ...


__all__ = ["Entry", "PairCollector", "ObjectSink", "KeyEncoder", "KeyDecoder"]
