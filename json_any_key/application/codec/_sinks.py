# json_any_key/application/codec/_sinks.py

"""JSON object sinks: where encoded properties are written"""

# Standard library imports
from io import StringIO
from typing import Any

# Third party imports
from pydantic import TypeAdapter

# Local imports
from json_any_key.application.codec._host import SERIALIZATION_ERRORS
from json_any_key.application.codec._host import dump_name
from json_any_key.core.domain.errors import EncodeError


class JsonTextSink:
    """Streams properties into compact JSON object text

    Values are encoded exactly as the value type's adapter would encode them
    standalone, so the output for ``str`` keys matches
    ``TypeAdapter(dict[str, V]).dump_json``.
    """

    def __init__(self, value_adapter: TypeAdapter[Any], **dump_kwargs: bool):
        self._value_adapter = value_adapter
        self._dump_kwargs = dump_kwargs
        self._buffer = StringIO()
        self._buffer.write("{")
        self.count = 0

    def write_entry(self, name: str, value: object) -> None:
        name_text = dump_name(name)
        try:
            value_text = self._value_adapter.dump_json(value, **self._dump_kwargs)
        except SERIALIZATION_ERRORS as e:
            raise EncodeError(f"Failed to encode value of property {name!r}: {e}") from e

        if self.count:
            self._buffer.write(",")
        self._buffer.write(name_text)
        self._buffer.write(":")
        self._buffer.write(value_text.decode("utf-8"))
        self.count += 1

    def finish(self) -> str:
        self._buffer.write("}")
        return self._buffer.getvalue()


class DictSink:
    """Collects properties into a string-keyed dict

    Used by field hooks, where the surrounding model's serializer writes the
    final output. ``mode`` is the pydantic dump mode (``"python"`` or
    ``"json"``) the values are dumped in. In ``"json"`` mode names are
    checked up front so they cannot fail later in the model's serializer.
    """

    def __init__(self, value_adapter: TypeAdapter[Any], mode: str = "python", **dump_kwargs: bool):
        self._value_adapter = value_adapter
        self._mode = mode
        self._dump_kwargs = dump_kwargs
        self._properties: dict[str, object] = {}
        self.count = 0

    def write_entry(self, name: str, value: object) -> None:
        if self._mode == "json":
            dump_name(name)
        try:
            dumped = self._value_adapter.dump_python(value, mode=self._mode, **self._dump_kwargs)
        except SERIALIZATION_ERRORS as e:
            raise EncodeError(f"Failed to encode value of property {name!r}: {e}") from e

        self._properties[name] = dumped
        self.count += 1

    def finish(self) -> dict[str, object]:
        return self._properties
