# json_any_key/adapters/api/__init__.py

"""Function API for encoding and decoding keyed collections

Each function builds a codec for the given key and value types, runs one
pass and returns. Nothing is kept between calls.
"""

# Local imports
from json_any_key.adapters.api._functions import decode_json_to_collection
from json_any_key.adapters.api._functions import decode_json_to_map
from json_any_key.adapters.api._functions import decode_json_to_pair_list
from json_any_key.adapters.api._functions import decode_json_to_pair_sequence
from json_any_key.adapters.api._functions import encode_pairs_consuming_to_json
from json_any_key.adapters.api._functions import encode_pairs_to_json

__all__ = [
    "decode_json_to_collection",
    "decode_json_to_map",
    "decode_json_to_pair_list",
    "decode_json_to_pair_sequence",
    "encode_pairs_consuming_to_json",
    "encode_pairs_to_json",
]
