# tests/unit/infrastructure/config/test_options.py

"""Test codec option loading"""

# Standard library imports
from json import dumps
from logging import WARNING

# Third party imports
from pydantic import ValidationError
import pytest

# Local imports
from json_any_key.infrastructure.config import CodecOptions
from json_any_key.infrastructure.config import load_options
from json_any_key.infrastructure.config import resolve_options


class TestCodecOptions:
    """Test the CodecOptions model"""

    def test_defaults(self):
        options = CodecOptions()
        assert options.dump_kwargs() == {
            "by_alias": False,
            "exclude_none": False,
            "round_trip": False,
        }

    def test_frozen(self):
        with pytest.raises(ValidationError):
            CodecOptions().by_alias = True

    def test_unknown_option_rejected(self):
        with pytest.raises(ValidationError):
            CodecOptions(indent=2)

    def test_load_from_file(self, options_file):
        path = options_file(dumps({"by_alias": True, "exclude_none": True}))
        options = CodecOptions.load(path)
        assert options.by_alias is True
        assert options.exclude_none is True
        assert options.round_trip is False

    def test_load_none_gives_defaults(self):
        assert CodecOptions.load(None) == CodecOptions()

    def test_missing_file_falls_back(self, tmp_path, caplog):
        with caplog.at_level(WARNING):
            options = CodecOptions.load(tmp_path / "absent.json")
        assert options == CodecOptions()
        assert "not found" in caplog.text

    def test_invalid_file_falls_back(self, options_file, caplog):
        path = options_file("{not json")
        with caplog.at_level(WARNING):
            options = CodecOptions.load(path)
        assert options == CodecOptions()
        assert "Failed to load options" in caplog.text

    def test_invalid_values_fall_back(self, options_file, caplog):
        path = options_file(dumps({"by_alias": "sometimes"}))
        with caplog.at_level(WARNING):
            options = CodecOptions.load(str(path))
        assert options == CodecOptions()


class TestLoadOptions:
    def test_overrides_win_over_file(self, options_file):
        path = options_file(dumps({"by_alias": True, "round_trip": True}))
        options = load_options(path, round_trip=False)
        assert options.by_alias is True
        assert options.round_trip is False

    def test_resolve_options(self):
        options = CodecOptions(round_trip=True)
        assert resolve_options(options) is options
        assert resolve_options(None) == CodecOptions()
