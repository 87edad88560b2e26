# json_any_key/infrastructure/__init__.py

"""Infrastructure layer: configuration"""

# Local imports
from json_any_key.infrastructure.config import CodecOptions
from json_any_key.infrastructure.config import load_options

__all__ = ["CodecOptions", "load_options"]
