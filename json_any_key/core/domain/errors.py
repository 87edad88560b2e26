# json_any_key/core/domain/errors.py

"""Exception hierarchy for encoding and decoding keyed collections

All decode failures derive from ``ValueError`` so that pydantic reports
them as validation errors when raised from a field hook.
"""


class AnyKeyError(Exception):
    """Base class for every error raised by this package"""


class EncodeError(AnyKeyError, ValueError):
    """A key or value could not be turned into JSON text"""


class DecodeError(AnyKeyError, ValueError):
    """JSON text could not be turned back into keys and values"""


class InvalidJsonError(DecodeError):
    """The input is not syntactically valid JSON"""


class NotAnObjectError(DecodeError):
    """The top-level JSON value parsed but is not an object"""

    def __init__(self, found: str):
        self.found = found
        super().__init__(f"Value is not a JSON map (found {found})")


class _EntryDecodeError(DecodeError):
    """Decode failure tied to one property of the input object"""

    part = "entry"

    def __init__(self, name: str, detail: str):
        self.name = name
        self.detail = detail
        super().__init__(f"Failed to decode {self.part} of property {name!r}: {detail}")


class KeyDecodeError(_EntryDecodeError):
    """A property name is not valid JSON for the key type"""

    part = "key"


class ValueDecodeError(_EntryDecodeError):
    """A property value does not match the value type"""

    part = "value"


class StringKeyInvariantError(EncodeError, DecodeError):
    """A key classified as a raw string did not behave like one

    Signals a mismatch between a key type's declared kind and its values, not
    bad input.
    """


__all__ = [
    "AnyKeyError",
    "EncodeError",
    "DecodeError",
    "InvalidJsonError",
    "NotAnObjectError",
    "KeyDecodeError",
    "ValueDecodeError",
    "StringKeyInvariantError",
]
