# json_any_key/infrastructure/config/_models.py

"""Pydantic models for codec configuration with validation"""

# Standard library imports
from json import JSONDecodeError
from json import load
from logging import getLogger
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import ValidationError

logger = getLogger(__name__)


class CodecOptions(BaseModel):
    """Options forwarded to the host serializer for keys and values

    Key and value encoding share the same options, so a key type whose
    fields have aliases is encoded with the same naming as a value of that
    type would be.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    by_alias: bool = Field(False, description="Serialize model fields by alias")
    exclude_none: bool = Field(False, description="Drop fields whose value is None")
    round_trip: bool = Field(
        False, description="Dump values so they can be validated back unchanged"
    )

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "CodecOptions":
        """Load options from a JSON file with defaults

        Args:
            config_path: Path to options JSON file

        Returns:
            Validated CodecOptions instance
        """
        if config_path is None:
            return cls()

        config_path = Path(config_path)
        if not config_path.exists():
            logger.warning(f"Options file {config_path} not found. Using defaults.")
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = load(f)
            return cls.model_validate(data)
        except (OSError, JSONDecodeError, ValidationError) as e:
            logger.warning(f"Failed to load options from {config_path}: {e}. Using defaults.")
            return cls()

    def dump_kwargs(self) -> dict[str, bool]:
        """Keyword arguments for ``TypeAdapter.dump_json``/``dump_python``"""
        return {
            "by_alias": self.by_alias,
            "exclude_none": self.exclude_none,
            "round_trip": self.round_trip,
        }
