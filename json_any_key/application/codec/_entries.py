# json_any_key/application/codec/_entries.py

"""Entry access modes for source collections

Serialization runs one write loop over ``(key, value)`` pairs. These
generators decide how the pairs are read from the caller's collection:
borrowed (the collection is left as it was) or drained (the collection is
emptied, as if its contents had been moved out).
"""

# Standard library imports
from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import Mapping

# Local imports
from json_any_key.core.domain.enums import EntryAccess
from json_any_key.core.domain.errors import EncodeError
from json_any_key.core.types.protocols import Entry


def _as_pair(item: object) -> tuple[object, object]:
    try:
        key, value = item  # type: ignore[misc]
    except (TypeError, ValueError) as e:
        raise EncodeError(f"Expected a (key, value) pair, got {item!r}") from e
    return key, value


def _iter_pairs(
    source: Iterable[object] | Mapping[object, object],
) -> Iterator[tuple[object, object]]:
    if isinstance(source, Mapping):
        yield from source.items()
        return
    for item in source:
        yield _as_pair(item)


def borrowed_entries[K, V](
    source: Mapping[K, V] | Iterable[tuple[K, V]],
) -> Iterator[Entry[K, V]]:
    """Yield entries without modifying ``source``

    Mappings yield their items; any other iterable must yield pairs.
    """
    yield from _iter_pairs(source)  # type: ignore[misc]


def drained_entries[K, V](
    source: Mapping[K, V] | Iterable[tuple[K, V]],
) -> Iterator[Entry[K, V]]:
    """Yield entries and leave ``source`` empty afterwards

    The source is emptied once iteration stops for any reason, including an
    aborted serialization, as long as the generator is closed. Containers
    without ``clear()`` (plain iterators) are simply exhausted.
    """
    try:
        yield from _iter_pairs(source)  # type: ignore[misc]
    finally:
        clear = getattr(source, "clear", None)
        if callable(clear):
            clear()


def entries_for[K, V](
    source: Mapping[K, V] | Iterable[tuple[K, V]], access: EntryAccess
) -> Iterator[Entry[K, V]]:
    """Entry generator for the given access mode"""
    match access:
        case EntryAccess.BORROWED:
            return borrowed_entries(source)
        case EntryAccess.DRAINED:
            return drained_entries(source)
