# json_any_key/__init__.py

"""JSON Any Key

Serialize maps and lists of pairs whose keys are not strings (integers,
tuples, enums, pydantic models) to JSON objects, and parse them back. Each
key's canonical JSON text becomes the property name; ``str`` keys are used
as-is.
"""

# Local imports
# Function API
from json_any_key.adapters.api import decode_json_to_collection
from json_any_key.adapters.api import decode_json_to_map
from json_any_key.adapters.api import decode_json_to_pair_list
from json_any_key.adapters.api import decode_json_to_pair_sequence
from json_any_key.adapters.api import encode_pairs_consuming_to_json
from json_any_key.adapters.api import encode_pairs_to_json

# Field hooks for pydantic models
from json_any_key.adapters.fields import AnyKeyField

# For users who want lower-level control
from json_any_key.application.codec import ENCODED_CONTEXT
from json_any_key.application.codec import AnyKeyCodec
from json_any_key.application.codec import KeyCodec
from json_any_key.application.codec import classify_key_type

# Errors and domain types
from json_any_key.core.domain.enums import KeyKind
from json_any_key.core.domain.errors import AnyKeyError
from json_any_key.core.domain.errors import DecodeError
from json_any_key.core.domain.errors import EncodeError
from json_any_key.core.domain.errors import InvalidJsonError
from json_any_key.core.domain.errors import KeyDecodeError
from json_any_key.core.domain.errors import NotAnObjectError
from json_any_key.core.domain.errors import StringKeyInvariantError
from json_any_key.core.domain.errors import ValueDecodeError
from json_any_key.core.types.results import Err
from json_any_key.core.types.results import Ok
from json_any_key.core.types.results import Result

# Configuration
from json_any_key.infrastructure.config import CodecOptions
from json_any_key.infrastructure.config import load_options

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Function API
    "encode_pairs_to_json",
    "encode_pairs_consuming_to_json",
    "decode_json_to_map",
    "decode_json_to_pair_list",
    "decode_json_to_pair_sequence",
    "decode_json_to_collection",
    # Field hooks
    "AnyKeyField",
    "ENCODED_CONTEXT",
    # Lower-level codec
    "AnyKeyCodec",
    "KeyCodec",
    "KeyKind",
    "classify_key_type",
    # Results
    "Ok",
    "Err",
    "Result",
    # Errors
    "AnyKeyError",
    "EncodeError",
    "DecodeError",
    "InvalidJsonError",
    "NotAnObjectError",
    "KeyDecodeError",
    "ValueDecodeError",
    "StringKeyInvariantError",
    # Configuration
    "CodecOptions",
    "load_options",
    # Version
    "__version__",
]
