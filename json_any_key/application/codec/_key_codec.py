# json_any_key/application/codec/_key_codec.py

"""Conversion between keys and JSON object property names

Keys of the built-in ``str`` type are used as property names unchanged.
Every other key is dumped to canonical JSON text and that text becomes the
property name, so ``{"a": 3, "b": 5}`` as a key ends up as the escaped
property name ``"{\\"a\\":3,\\"b\\":5}"``.
"""

# Standard library imports
from logging import getLogger
from typing import Any

# Third party imports
from pydantic import TypeAdapter
from pydantic import ValidationError

# Local imports
from json_any_key.application.codec._host import SERIALIZATION_ERRORS
from json_any_key.application.codec._host import describe
from json_any_key.core.domain.enums import KeyKind
from json_any_key.core.domain.errors import EncodeError
from json_any_key.core.domain.errors import KeyDecodeError
from json_any_key.core.domain.errors import StringKeyInvariantError
from json_any_key.infrastructure.config import CodecOptions
from json_any_key.infrastructure.config import resolve_options

logger = getLogger(__name__)

# Class attribute a key type can set to declare its kind explicitly
KEY_KIND_ATTRIBUTE = "__json_key_kind__"


def classify_key_type(key_type: Any) -> KeyKind:
    """Decide how keys of ``key_type`` become property names

    Only the built-in ``str`` type is a raw string by default; subclasses of
    ``str`` (including ``StrEnum``) and constrained string annotations are
    structured. A type can override this with a ``__json_key_kind__`` class
    attribute.
    """
    declared = getattr(key_type, KEY_KIND_ATTRIBUTE, None)
    if isinstance(declared, KeyKind):
        return declared
    if key_type is str:
        return KeyKind.RAW_STRING
    return KeyKind.STRUCTURED


def _is_instance(value: object, key_type: Any) -> bool:
    try:
        return isinstance(value, key_type)
    except TypeError:
        # Generic aliases and special forms cannot be used with isinstance
        return False


class KeyCodec[K]:
    """Encodes keys of one type to property names and decodes them back"""

    def __init__(self, key_type: Any, options: CodecOptions | None = None):
        self.key_type = key_type
        self.kind = classify_key_type(key_type)
        self._adapter: TypeAdapter[K] = TypeAdapter(key_type)
        self._dump_kwargs = resolve_options(options).dump_kwargs()
        logger.debug(f"Key type {key_type!r} classified as {self.kind.value}")

    @property
    def is_raw_string(self) -> bool:
        return self.kind is KeyKind.RAW_STRING

    def encode(self, key: K) -> str:
        """Property name for ``key``

        Raises:
            EncodeError: the host serializer rejected the key
            StringKeyInvariantError: a raw-string key type produced a non-str key
        """
        if self.kind is KeyKind.RAW_STRING:
            if not isinstance(key, str):
                raise StringKeyInvariantError(
                    f"Failed to serialize {type(key).__name__} key as string"
                )
            return key

        try:
            return self._adapter.dump_json(key, **self._dump_kwargs).decode("utf-8")
        except SERIALIZATION_ERRORS as e:
            raise EncodeError(f"Failed to encode key {key!r}: {e}") from e

    def decode(self, name: str) -> K:
        """Key for the property ``name``

        Raises:
            KeyDecodeError: the name is not a valid encoding of the key type
            StringKeyInvariantError: a raw-string key type decoded to a non-str
        """
        if self.kind is KeyKind.RAW_STRING:
            try:
                key = self._adapter.validate_python(name)
            except ValidationError as e:
                raise KeyDecodeError(name, describe(e)) from e
            if not isinstance(key, str):
                raise StringKeyInvariantError(
                    f"Key type {self.key_type!r} is declared raw string "
                    f"but decoded {name!r} to {type(key).__name__}"
                )
            return key

        try:
            return self._adapter.validate_json(name)
        except ValidationError as e:
            raise KeyDecodeError(name, describe(e)) from e

    def coerce(self, raw: object) -> K:
        """Key from either a property name or an already-native key

        Used where input may come from Python objects rather than JSON text:
        strings that are not themselves instances of the key type are decoded,
        anything else is validated as a key value directly.
        """
        if isinstance(raw, str) and (self.is_raw_string or not _is_instance(raw, self.key_type)):
            return self.decode(raw)

        try:
            return self._adapter.validate_python(raw)
        except ValidationError as e:
            raise KeyDecodeError(repr(raw), describe(e)) from e
