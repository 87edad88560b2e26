# json_any_key/adapters/api/_functions.py

"""Module-level encode/decode functions"""

# Standard library imports
from collections.abc import Iterator
from typing import Any

# Local imports
from json_any_key.application.codec import AnyKeyCodec
from json_any_key.application.codec import PairSource
from json_any_key.core.types.protocols import PairCollector
from json_any_key.core.types.results import Result
from json_any_key.infrastructure.config import CodecOptions


def encode_pairs_to_json[K, V](
    pairs: PairSource[K, V],
    key_type: Any,
    value_type: Any = Any,
    *,
    options: CodecOptions | None = None,
) -> str:
    """Serialize a keyed collection to JSON object text without modifying it

    Args:
        pairs: A mapping or an iterable of ``(key, value)`` pairs
        key_type: Type of the keys; ``str`` keys are written unchanged
        value_type: Type of the values
        options: Host serializer options

    Returns:
        JSON object text, entries in the source's iteration order

    Raises:
        EncodeError: A key or value could not be serialized
    """
    return AnyKeyCodec(key_type, value_type, options).to_json(pairs)


def encode_pairs_consuming_to_json[K, V](
    pairs: PairSource[K, V],
    key_type: Any,
    value_type: Any = Any,
    *,
    options: CodecOptions | None = None,
) -> str:
    """Serialize a keyed collection to JSON object text, emptying it

    Same output as ``encode_pairs_to_json``; afterwards ``pairs`` is cleared
    (or exhausted, for plain iterators), even if serialization failed.
    """
    return AnyKeyCodec(key_type, value_type, options).into_json(pairs)


def decode_json_to_map[K, V](
    text: str | bytes,
    key_type: type[K] | Any,
    value_type: type[V] | Any = Any,
    *,
    options: CodecOptions | None = None,
) -> dict[K, V]:
    """Parse JSON object text into a dict

    Raises:
        InvalidJsonError: text is not JSON
        NotAnObjectError: the top-level value is not an object
        KeyDecodeError: a property name does not decode to the key type
        ValueDecodeError: a property value does not match the value type
    """
    return AnyKeyCodec(key_type, value_type, options).to_dict(text)


def decode_json_to_pair_list[K, V](
    text: str | bytes,
    key_type: type[K] | Any,
    value_type: type[V] | Any = Any,
    *,
    options: CodecOptions | None = None,
) -> list[tuple[K, V]]:
    """Parse JSON object text into a list of pairs in property order"""
    return AnyKeyCodec(key_type, value_type, options).to_list(text)


def decode_json_to_pair_sequence[K, V](
    text: str | bytes,
    key_type: type[K] | Any,
    value_type: type[V] | Any = Any,
    *,
    options: CodecOptions | None = None,
) -> Iterator[Result[tuple[K, V]]]:
    """Parse JSON object text into a lazy, single-pass sequence of results

    The text is parsed immediately, so invalid JSON and non-object values
    raise here. Each property is decoded only when pulled and yields
    ``Ok((key, value))`` or ``Err(error)``; one bad property does not stop
    the ones after it.
    """
    return AnyKeyCodec(key_type, value_type, options).iter_pairs(text)


def decode_json_to_collection[K, V, C](
    text: str | bytes,
    key_type: type[K] | Any,
    value_type: type[V] | Any,
    into: PairCollector[K, V, C],
    *,
    options: CodecOptions | None = None,
) -> C:
    """Parse JSON object text and build ``into`` from the decoded pairs

    ``into`` is any callable taking an iterable of pairs, e.g. ``dict``,
    ``OrderedDict``, ``list`` or ``tuple``.
    """
    return AnyKeyCodec(key_type, value_type, options).collect(text, into)
