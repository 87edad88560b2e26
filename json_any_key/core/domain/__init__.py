# json_any_key/core/domain/__init__.py

"""Domain enumerations and errors"""

# Local imports
from json_any_key.core.domain.enums import EntryAccess
from json_any_key.core.domain.enums import KeyKind
from json_any_key.core.domain.errors import AnyKeyError
from json_any_key.core.domain.errors import DecodeError
from json_any_key.core.domain.errors import EncodeError
from json_any_key.core.domain.errors import InvalidJsonError
from json_any_key.core.domain.errors import KeyDecodeError
from json_any_key.core.domain.errors import NotAnObjectError
from json_any_key.core.domain.errors import StringKeyInvariantError
from json_any_key.core.domain.errors import ValueDecodeError

__all__ = [
    "EntryAccess",
    "KeyKind",
    "AnyKeyError",
    "DecodeError",
    "EncodeError",
    "InvalidJsonError",
    "KeyDecodeError",
    "NotAnObjectError",
    "StringKeyInvariantError",
    "ValueDecodeError",
]
