# json_any_key/infrastructure/config/_loader.py

"""Options loading entry points"""

# Standard library imports
from logging import getLogger
from pathlib import Path

# Local imports
from json_any_key.infrastructure.config._models import CodecOptions

logger = getLogger(__name__)


def load_options(config_path: Path | str | None = None, **overrides: bool) -> CodecOptions:
    """Load codec options from a JSON file, then apply keyword overrides

    Args:
        config_path: Path to options JSON file, None for defaults
        **overrides: Individual option values that win over the file

    Returns:
        CodecOptions instance
    """
    options = CodecOptions.load(config_path)
    if overrides:
        options = CodecOptions.model_validate({**options.model_dump(), **overrides})
    logger.debug(f"Codec options: {options.model_dump()}")
    return options


def resolve_options(options: CodecOptions | None) -> CodecOptions:
    """Return the given options or the defaults"""
    return options if options is not None else CodecOptions()
