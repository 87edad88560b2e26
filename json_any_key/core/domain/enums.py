# json_any_key/core/domain/enums.py

"""Domain enumerations for key encoding"""

# Standard library imports
from enum import Enum


class KeyKind(Enum):
    """How keys of a given type become JSON property names

    The kind is a property of the key *type*, never of an individual key, so
    every key of one type takes the same branch.
    """

    RAW_STRING = "raw_string"  # Key is the property name itself
    STRUCTURED = "structured"  # Key's canonical JSON text is the property name


class EntryAccess(Enum):
    """How a serializer reads entries out of its source collection"""

    BORROWED = "borrowed"  # Source is left untouched
    DRAINED = "drained"  # Source is emptied by the pass
