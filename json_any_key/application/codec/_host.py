# json_any_key/application/codec/_host.py

"""Thin helpers over the pydantic JSON layer"""

# Third party imports
from pydantic import TypeAdapter
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError
from pydantic_core import from_json

# Local imports
from json_any_key.core.domain.errors import EncodeError
from json_any_key.core.domain.errors import InvalidJsonError
from json_any_key.core.domain.errors import NotAnObjectError
from json_any_key.core.types.json import JSONObject

_NAME_ADAPTER: TypeAdapter[str] = TypeAdapter(str)

# Errors the host serializer raises for values it cannot write as JSON text
SERIALIZATION_ERRORS = (PydanticSerializationError, UnicodeEncodeError)


def dump_name(name: str) -> str:
    """Render a property name as a JSON string literal

    Raises:
        EncodeError: the name cannot be written as JSON text (e.g. a lone surrogate)
    """
    try:
        return _NAME_ADAPTER.dump_json(name).decode("utf-8")
    except SERIALIZATION_ERRORS as e:
        raise EncodeError(f"Failed to encode property name {name!r}: {e}") from e


def json_type_name(value: object) -> str:
    """Name of the JSON type a parsed value belongs to"""
    match value:
        case dict():
            return "object"
        case list() | tuple():
            return "array"
        case str():
            return "string"
        case bool():
            return "boolean"
        case int() | float():
            return "number"
        case None:
            return "null"
        case _:
            return type(value).__name__


def parse_object(text: str | bytes) -> JSONObject:
    """Parse JSON text that must hold an object at the top level

    ``NaN`` and ``Infinity`` are rejected, as in standard JSON.

    Raises:
        InvalidJsonError: text is not valid JSON
        NotAnObjectError: the top-level value is not an object
    """
    try:
        value = from_json(text, allow_inf_nan=False)
    except ValueError as e:
        raise InvalidJsonError(f"Invalid JSON: {e}") from e

    if not isinstance(value, dict):
        raise NotAnObjectError(json_type_name(value))
    return value


def describe(error: ValidationError) -> str:
    """One-line summary of a pydantic validation error"""
    messages = [detail["msg"] for detail in error.errors()]
    return "; ".join(messages) if messages else str(error)
