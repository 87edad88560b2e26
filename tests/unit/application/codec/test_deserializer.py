# tests/unit/application/codec/test_deserializer.py

"""Tests for decoding JSON objects into dicts, pair lists and lazy results"""

# Standard library imports
from collections import OrderedDict
from types import GeneratorType

# Third party imports
from pydantic import TypeAdapter
import pytest

# Local imports
from json_any_key.application.codec import ENCODED_CONTEXT
from json_any_key.application.codec import AnyKeyCodec
from json_any_key.application.codec import EntryDecoder
from json_any_key.application.codec import KeyCodec
from json_any_key.application.codec import is_encoded_context
from json_any_key.application.codec import json_type_name
from json_any_key.application.codec import parse_object
from json_any_key.core.domain.errors import InvalidJsonError
from json_any_key.core.domain.errors import KeyDecodeError
from json_any_key.core.domain.errors import NotAnObjectError
from json_any_key.core.domain.errors import ValueDecodeError
from json_any_key.core.types.results import Err
from json_any_key.core.types.results import Ok
from tests.fixtures.models import OptionalKeyMap
from tests.fixtures.models import Point


class TestParseObject:
    """Test top-level parsing"""

    def test_object(self):
        assert parse_object('{"a": 1}') == {"a": 1}

    def test_bytes_input(self):
        assert parse_object(b'{"a": 1}') == {"a": 1}

    @pytest.mark.parametrize(
        "text, found",
        [("[1,2,3]", "array"), ('"just a string"', "string"), ("5", "number"), ("null", "null")],
    )
    def test_non_object(self, text, found):
        with pytest.raises(NotAnObjectError) as exc_info:
            parse_object(text)
        assert exc_info.value.found == found

    def test_invalid_json(self):
        with pytest.raises(InvalidJsonError):
            parse_object("{not json")

    @pytest.mark.parametrize("text", ['{"1": NaN}', '{"1": Infinity}', '{"1": -Infinity}'])
    def test_non_standard_numbers_rejected(self, text):
        with pytest.raises(InvalidJsonError):
            parse_object(text)

    def test_json_type_name(self):
        assert json_type_name(True) == "boolean"
        assert json_type_name(1.5) == "number"
        assert json_type_name({}) == "object"


class TestEntryDecoder:
    """Test per-entry decoding"""

    def setup_method(self):
        self.decoder = EntryDecoder(KeyCodec(int), TypeAdapter(str))

    def test_decode_entry(self):
        assert self.decoder.decode_entry("5", "foo") == (5, "foo")

    def test_bad_key(self):
        with pytest.raises(KeyDecodeError) as exc_info:
            self.decoder.decode_entry("x", "foo")
        assert exc_info.value.name == "x"

    def test_bad_value(self):
        with pytest.raises(ValueDecodeError) as exc_info:
            self.decoder.decode_entry("5", [1])
        assert exc_info.value.name == "5"

    def test_coerce_entry_accepts_native_key(self):
        assert self.decoder.coerce_entry(5, "foo") == (5, "foo")
        assert self.decoder.coerce_entry("5", "foo") == (5, "foo")

    def test_encoded_values_decode_nested_names(self):
        decoder = EntryDecoder(KeyCodec(int), TypeAdapter(OptionalKeyMap))
        entry = decoder.decode_entry("1", {"inner": {'"foo"': 1, "null": 2}})
        assert entry == (1, OptionalKeyMap(inner={"foo": 1, None: 2}))

    def test_coerced_values_keep_native_names(self):
        decoder = EntryDecoder(KeyCodec(int), TypeAdapter(OptionalKeyMap))
        entry = decoder.coerce_entry(1, {"inner": {"foo": 1, None: 2}})
        assert entry == (1, OptionalKeyMap(inner={"foo": 1, None: 2}))

    def test_is_encoded_context(self):
        assert is_encoded_context(ENCODED_CONTEXT)
        assert is_encoded_context({**ENCODED_CONTEXT, "other": 1})
        assert not is_encoded_context(None)
        assert not is_encoded_context({"json_any_key": "native"})


class TestEagerShapes:
    """Test to_dict, to_list and collect"""

    def test_to_dict_struct(self):
        codec = AnyKeyCodec(Point, Point)
        text = r'{"{\"a\":3,\"b\":5}":{"a":7,"b":9}}'
        assert codec.to_dict(text) == {Point(a=3, b=5): Point(a=7, b=9)}

    def test_to_list_string_key(self):
        assert AnyKeyCodec(str, int).to_list('{"foo":5}') == [("foo", 5)]

    def test_to_list_keeps_property_order(self):
        codec = AnyKeyCodec(int, str)
        assert codec.to_list('{"3":"c","1":"a","2":"b"}') == [(3, "c"), (1, "a"), (2, "b")]

    def test_equal_decoded_keys_last_write_wins(self):
        """Different property texts that decode to equal keys collapse in a dict"""
        codec = AnyKeyCodec(Point, str)
        text = r'{"{\"a\":1,\"b\":2}":"first","{\"b\":2,\"a\":1}":"second"}'
        assert codec.to_dict(text) == {Point(a=1, b=2): "second"}
        assert codec.to_list(text) == [(Point(a=1, b=2), "first"), (Point(a=1, b=2), "second")]

    def test_collect_into_ordered_dict(self):
        result = AnyKeyCodec(int, str).collect('{"2":"b","1":"a"}', OrderedDict)
        assert isinstance(result, OrderedDict)
        assert list(result.items()) == [(2, "b"), (1, "a")]

    def test_empty_object(self):
        assert AnyKeyCodec(int, int).to_dict("{}") == {}

    def test_aborts_on_first_bad_key(self):
        with pytest.raises(KeyDecodeError) as exc_info:
            AnyKeyCodec(int, str).to_dict('{"1":"a","x":"b","y":"c"}')
        assert exc_info.value.name == "x"

    def test_aborts_on_bad_value(self):
        with pytest.raises(ValueDecodeError):
            AnyKeyCodec(int, int).to_list('{"1":1,"2":"abc"}')

    def test_not_an_object(self):
        with pytest.raises(NotAnObjectError):
            AnyKeyCodec(int, int).to_dict("[1,2,3]")


class TestLazyShape:
    """Test iter_pairs"""

    def test_partial_failure_does_not_stop_later_entries(self):
        results = list(AnyKeyCodec(int, str).iter_pairs('{"1":"a","x":"b","3":"c"}'))
        assert len(results) == 3
        assert results[0] == Ok(value=(1, "a"))
        assert isinstance(results[1], Err)
        assert isinstance(results[1].error, KeyDecodeError)
        assert results[2] == Ok(value=(3, "c"))

    def test_value_failure_is_yielded(self):
        results = list(AnyKeyCodec(int, int).iter_pairs('{"1":"abc","2":2}'))
        assert isinstance(results[0].error, ValueDecodeError)
        assert results[1].unwrap() == (2, 2)

    def test_outer_errors_raise_immediately(self):
        codec = AnyKeyCodec(int, int)
        with pytest.raises(NotAnObjectError):
            codec.iter_pairs('"just a string"')
        with pytest.raises(InvalidJsonError):
            codec.iter_pairs("{")

    def test_single_pass(self):
        pairs = AnyKeyCodec(int, int).iter_pairs('{"1":1,"2":2}')
        assert isinstance(pairs, GeneratorType)
        assert [r.unwrap() for r in pairs] == [(1, 1), (2, 2)]
        assert list(pairs) == []

    def test_fold_skipping_errors(self):
        pairs = AnyKeyCodec(int, str).iter_pairs('{"1":"a","x":"b","3":"c"}')
        assert dict(r.unwrap() for r in pairs if r.is_ok()) == {1: "a", 3: "c"}
