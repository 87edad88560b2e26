# json_any_key/application/codec/_deserializer.py

"""Decoding of JSON object properties back into typed entries"""

# Standard library imports
from collections.abc import Iterable
from collections.abc import Iterator
from logging import getLogger
from typing import Any

# Third party imports
from pydantic import TypeAdapter
from pydantic import ValidationError

# Local imports
from json_any_key.application.codec._host import describe
from json_any_key.core.domain.errors import DecodeError
from json_any_key.core.domain.errors import ValueDecodeError
from json_any_key.core.types.protocols import Entry
from json_any_key.core.types.protocols import KeyDecoder
from json_any_key.core.types.results import Err
from json_any_key.core.types.results import Ok
from json_any_key.core.types.results import Result

logger = getLogger(__name__)

# Validation context telling field hooks that every nested keyed collection
# holds encoded property names, even though values arrive as Python objects
CONTEXT_KEY = "json_any_key"
ENCODED_CONTEXT: dict[str, str] = {CONTEXT_KEY: "encoded"}


def is_encoded_context(context: object) -> bool:
    """True if a validation context marks its input as encoded"""
    return isinstance(context, dict) and context.get(CONTEXT_KEY) == "encoded"


class EntryDecoder[K, V]:
    """Decodes ``(property name, parsed JSON value)`` pairs into ``(K, V)``"""

    def __init__(self, key_decoder: KeyDecoder[K], value_adapter: TypeAdapter[V]):
        self.key_decoder = key_decoder
        self.value_adapter = value_adapter

    def decode_value(self, name: str, raw: Any, encoded: bool = True) -> V:
        """Validate a property value

        Encoded values are validated with ``ENCODED_CONTEXT`` so keyed
        collections nested inside them decode their property names.
        """
        try:
            return self.value_adapter.validate_python(
                raw, context=ENCODED_CONTEXT if encoded else None
            )
        except ValidationError as e:
            raise ValueDecodeError(name, describe(e)) from e

    def decode_entry(self, name: str, raw: Any) -> Entry[K, V]:
        """Decode one property; the key is decoded before the value"""
        return self.key_decoder.decode(name), self.decode_value(name, raw)

    def coerce_entry(self, raw_key: object, raw: Any) -> Entry[K, V]:
        """Decode one entry whose key and value may already be native values"""
        key = self.key_decoder.coerce(raw_key)
        name = raw_key if isinstance(raw_key, str) else repr(raw_key)
        return key, self.decode_value(name, raw, encoded=False)

    def iter_entries(self, properties: Iterable[tuple[str, Any]]) -> Iterator[Entry[K, V]]:
        """Decode properties in order, raising on the first failure"""
        decoded = 0
        for name, raw in properties:
            yield self.decode_entry(name, raw)
            decoded += 1
        logger.debug(f"Decoded {decoded} entries")

    def iter_results(
        self, properties: Iterable[tuple[str, Any]]
    ) -> Iterator[Result[Entry[K, V]]]:
        """Decode properties in order, yielding one result per property

        A failed property yields ``Err`` and decoding carries on with the
        next one.
        """
        for name, raw in properties:
            try:
                entry = self.decode_entry(name, raw)
            except DecodeError as e:
                logger.debug(f"Property {name!r} failed to decode: {e}")
                yield Err(error=e)
                continue
            yield Ok(value=entry)
