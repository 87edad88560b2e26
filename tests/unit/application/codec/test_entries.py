# tests/unit/application/codec/test_entries.py

"""Tests for borrowed and drained entry access"""

# Standard library imports
from collections import OrderedDict
from types import MappingProxyType

# Third party imports
import pytest

# Local imports
from json_any_key.application.codec import borrowed_entries
from json_any_key.application.codec import drained_entries
from json_any_key.application.codec import entries_for
from json_any_key.core.domain.enums import EntryAccess
from json_any_key.core.domain.errors import EncodeError


class TestBorrowedEntries:
    """Test that borrowing leaves the source usable"""

    def test_mapping_yields_items_in_order(self):
        source = OrderedDict([(2, "b"), (1, "a")])
        assert list(borrowed_entries(source)) == [(2, "b"), (1, "a")]
        assert source == OrderedDict([(2, "b"), (1, "a")])

    def test_pair_list(self):
        source = [(1, "a"), (1, "b")]
        assert list(borrowed_entries(source)) == [(1, "a"), (1, "b")]
        assert source == [(1, "a"), (1, "b")]

    def test_read_only_mapping(self):
        source = MappingProxyType({1: "a"})
        assert list(borrowed_entries(source)) == [(1, "a")]

    def test_non_pair_item(self):
        with pytest.raises(EncodeError):
            list(borrowed_entries([(1, "a"), 5]))

    def test_wrong_length_item(self):
        with pytest.raises(EncodeError):
            list(borrowed_entries([(1, "a", "extra")]))


class TestDrainedEntries:
    """Test that draining empties the source"""

    def test_dict_is_cleared(self):
        source = {1: "a", 2: "b"}
        assert list(drained_entries(source)) == [(1, "a"), (2, "b")]
        assert source == {}

    def test_list_is_cleared(self):
        source = [(1, "a")]
        assert list(drained_entries(source)) == [(1, "a")]
        assert source == []

    def test_iterator_is_exhausted(self):
        source = iter([(1, "a"), (2, "b")])
        assert list(drained_entries(source)) == [(1, "a"), (2, "b")]
        assert list(source) == []

    def test_cleared_when_closed_early(self):
        source = {1: "a", 2: "b"}
        entries = drained_entries(source)
        assert next(entries) == (1, "a")
        entries.close()
        assert source == {}


class TestEntriesFor:
    def test_dispatches_on_access_mode(self):
        source = {1: "a"}
        assert list(entries_for(source, EntryAccess.BORROWED)) == [(1, "a")]
        assert source == {1: "a"}
        assert list(entries_for(source, EntryAccess.DRAINED)) == [(1, "a")]
        assert source == {}
