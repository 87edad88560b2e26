# json_any_key/infrastructure/config/__init__.py

"""Configuration infrastructure for json_any_key.

This module manages codec option loading, validation, and models.
"""

# Local imports
from json_any_key.infrastructure.config._loader import load_options
from json_any_key.infrastructure.config._loader import resolve_options
from json_any_key.infrastructure.config._models import CodecOptions

__all__ = ["CodecOptions", "load_options", "resolve_options"]
