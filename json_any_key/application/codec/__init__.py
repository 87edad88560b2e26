# json_any_key/application/codec/__init__.py

"""Key codec, entry access modes, sinks and the shared write loop"""

# Local imports
from json_any_key.application.codec._any_key_codec import AnyKeyCodec
from json_any_key.application.codec._any_key_codec import PairSource
from json_any_key.application.codec._deserializer import ENCODED_CONTEXT
from json_any_key.application.codec._deserializer import EntryDecoder
from json_any_key.application.codec._deserializer import is_encoded_context
from json_any_key.application.codec._entries import borrowed_entries
from json_any_key.application.codec._entries import drained_entries
from json_any_key.application.codec._entries import entries_for
from json_any_key.application.codec._host import json_type_name
from json_any_key.application.codec._host import parse_object
from json_any_key.application.codec._key_codec import KeyCodec
from json_any_key.application.codec._key_codec import classify_key_type
from json_any_key.application.codec._serializer import write_entries
from json_any_key.application.codec._sinks import DictSink
from json_any_key.application.codec._sinks import JsonTextSink

__all__ = [
    "AnyKeyCodec",
    "PairSource",
    "ENCODED_CONTEXT",
    "EntryDecoder",
    "is_encoded_context",
    "borrowed_entries",
    "drained_entries",
    "entries_for",
    "json_type_name",
    "parse_object",
    "KeyCodec",
    "classify_key_type",
    "write_entries",
    "DictSink",
    "JsonTextSink",
]
