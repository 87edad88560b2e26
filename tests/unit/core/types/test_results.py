# tests/unit/core/types/test_results.py

"""Tests for the Ok/Err result type"""

# Third party imports
import pytest

# Local imports
from json_any_key.core.domain.errors import KeyDecodeError
from json_any_key.core.types.results import Err
from json_any_key.core.types.results import Ok


class TestOk:
    def test_unwrap_and_map(self):
        result = Ok(value=(1, "a"))
        assert result.is_ok()
        assert result.unwrap() == (1, "a")
        assert result.map(lambda pair: pair[0]) == Ok(value=1)

    def test_flat_map(self):
        assert Ok(value=2).flat_map(lambda v: Ok(value=v * 2)) == Ok(value=4)


class TestErr:
    def test_unwrap_raises_carried_error(self):
        error = KeyDecodeError("x", "invalid")
        result = Err(error=error)
        assert not result.is_ok()
        with pytest.raises(KeyDecodeError) as exc_info:
            result.unwrap()
        assert exc_info.value is error

    def test_map_is_noop(self):
        result = Err(error=KeyDecodeError("x", "invalid"))
        assert result.map(lambda v: v) is result
        assert result.flat_map(lambda v: Ok(value=v)) is result

    def test_message_names_property(self):
        message = str(KeyDecodeError("x", "invalid"))
        assert message == "Failed to decode key of property 'x': invalid"
