# json_any_key/adapters/fields/_any_key_field.py

"""Pydantic field annotation for keyed collections with non-string keys"""

# Standard library imports
from collections.abc import Iterable
from collections.abc import Mapping
from collections.abc import Sequence
from functools import cached_property
from inspect import isabstract
from logging import getLogger
from typing import Any
from typing import get_args
from typing import get_origin

# Third party imports
from pydantic import GetCoreSchemaHandler
from pydantic import GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

# Local imports
from json_any_key.application.codec import AnyKeyCodec
from json_any_key.application.codec import is_encoded_context
from json_any_key.application.codec import json_type_name
from json_any_key.core.domain.errors import DecodeError
from json_any_key.core.domain.errors import NotAnObjectError
from json_any_key.core.types.protocols import PairCollector
from json_any_key.infrastructure.config import CodecOptions

logger = getLogger(__name__)


def infer_field_types(source_type: Any) -> tuple[Any, Any, PairCollector[Any, Any, Any]]:
    """Key type, value type and container for an annotated field type

    Mapping annotations such as ``dict[K, V]`` give ``(K, V, dict)``; pair
    sequences such as ``list[tuple[K, V]]`` give ``(K, V, list)``. Abstract
    origins are built as ``dict`` or ``list``. Missing arguments are ``Any``.
    """
    origin = get_origin(source_type) or source_type
    args = get_args(source_type)
    if not isinstance(origin, type):
        raise TypeError(f"AnyKeyField cannot be applied to {source_type!r}")

    if issubclass(origin, Mapping):
        key_type, value_type = args if len(args) == 2 else (Any, Any)
        return key_type, value_type, dict if isabstract(origin) else origin

    if issubclass(origin, Iterable) and not issubclass(origin, (str, bytes)):
        pair = get_args(args[0]) if args else ()
        key_type, value_type = pair if len(pair) == 2 else (Any, Any)
        return key_type, value_type, list if isabstract(origin) else origin

    raise TypeError(f"AnyKeyField cannot be applied to {source_type!r}")


class AnyKeyField:
    """Annotation that (de)serializes a keyed collection field

    The field is written as a JSON object whose property names are the
    encoded keys, exactly as ``AnyKeyCodec.to_json`` would write it, and read
    back into the annotated container type.

    Example:
        >>> class Inventory(BaseModel):
        ...     counts: Annotated[dict[Point, int], AnyKeyField()]
        ...     history: Annotated[list[tuple[int, str]], AnyKeyField()]

    Keys and values may themselves be models with ``AnyKeyField`` fields;
    nesting works to any depth.
    """

    def __init__(
        self,
        key_type: Any = None,
        value_type: Any = None,
        container: PairCollector[Any, Any, Any] | None = None,
        options: CodecOptions | None = None,
    ):
        self.key_type = key_type
        self.value_type = value_type
        self.container = container
        self.options = options

    def bind(self, source_type: Any) -> "FieldHooks":
        """Hooks for a field declared as ``source_type``"""
        key_type, value_type, container = infer_field_types(source_type)
        return FieldHooks(
            key_type if self.key_type is None else self.key_type,
            value_type if self.value_type is None else self.value_type,
            container if self.container is None else self.container,
            self.options,
        )

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        hooks = self.bind(source_type)
        return core_schema.with_info_plain_validator_function(
            hooks.deserialize_field,
            serialization=core_schema.plain_serializer_function_ser_schema(
                hooks.serialize_field,
                info_arg=True,
                return_schema=core_schema.dict_schema(
                    core_schema.str_schema(), core_schema.any_schema()
                ),
            ),
        )

    def __get_pydantic_json_schema__(
        self, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "object", "additionalProperties": True}


class FieldHooks:
    """Serialize/deserialize hooks bound to one field's types"""

    def __init__(
        self,
        key_type: Any,
        value_type: Any,
        container: PairCollector[Any, Any, Any],
        options: CodecOptions | None = None,
    ):
        self.key_type = key_type
        self.value_type = value_type
        self.container = container
        self.options = options

    @cached_property
    def codec(self) -> AnyKeyCodec[Any, Any]:
        # Built on first use so self-referencing models are fully defined by then
        return AnyKeyCodec(self.key_type, self.value_type, self.options)

    def serialize_field(
        self, collection: object, info: core_schema.SerializationInfo
    ) -> dict[str, object]:
        """Encode the field's entries into a string-keyed dict"""
        sink = self.codec.dict_sink(
            info.mode,
            by_alias=bool(info.by_alias) or self.codec.options.by_alias,
            exclude_none=info.exclude_none or self.codec.options.exclude_none,
            round_trip=info.round_trip or self.codec.options.round_trip,
        )
        return self.codec.write(collection, sink)  # type: ignore[arg-type]

    def deserialize_field(self, source: object, info: core_schema.ValidationInfo) -> object:
        """Build the field's container from an object or, in Python mode, native pairs

        Property names are always decoded when validating JSON or when the
        validation context is ``ENCODED_CONTEXT``; otherwise Python-mode keys
        may also be native key values.
        """
        decoder = self.codec.decoder

        if isinstance(source, Mapping):
            if info.mode == "json" or is_encoded_context(info.context):
                entries = decoder.iter_entries(source.items())
            else:
                entries = (decoder.coerce_entry(key, raw) for key, raw in source.items())
        elif info.mode == "python" and _is_pair_iterable(source):
            entries = (decoder.coerce_entry(*_as_pair(item)) for item in source)
        else:
            raise NotAnObjectError(json_type_name(source))

        return self.container(entries)


def _as_pair(item: object) -> tuple[object, object]:
    if isinstance(item, Sequence) and not isinstance(item, (str, bytes)) and len(item) == 2:
        return item[0], item[1]
    raise DecodeError(f"Expected a (key, value) pair, got {item!r}")


def _is_pair_iterable(source: object) -> bool:
    return isinstance(source, Iterable) and not isinstance(source, (str, bytes))
