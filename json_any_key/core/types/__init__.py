# json_any_key/core/types/__init__.py

"""Type definitions for json_any_key

This package contains type aliases, protocols and the result type used
throughout the codebase. These are pure type definitions with no
implementation logic.
"""

# Local imports
from json_any_key.core.types.json import JSONList
from json_any_key.core.types.json import JSONObject
from json_any_key.core.types.json import JSONPrimitive
from json_any_key.core.types.json import JSONType
from json_any_key.core.types.protocols import Entry
from json_any_key.core.types.protocols import KeyDecoder
from json_any_key.core.types.protocols import KeyEncoder
from json_any_key.core.types.protocols import ObjectSink
from json_any_key.core.types.protocols import PairCollector
from json_any_key.core.types.results import Err
from json_any_key.core.types.results import Ok
from json_any_key.core.types.results import Result

__all__ = [
    # JSON types
    "JSONList",
    "JSONObject",
    "JSONPrimitive",
    "JSONType",
    # Protocols
    "Entry",
    "KeyDecoder",
    "KeyEncoder",
    "ObjectSink",
    "PairCollector",
    # Results
    "Err",
    "Ok",
    "Result",
]
