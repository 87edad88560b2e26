# json_any_key/application/codec/_any_key_codec.py

"""Codec for keyed collections of one key type and one value type"""

# Standard library imports
from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import Mapping
from logging import getLogger
from typing import Any

# Third party imports
from pydantic import TypeAdapter

# Local imports
from json_any_key.application.codec._deserializer import EntryDecoder
from json_any_key.application.codec._entries import entries_for
from json_any_key.application.codec._host import parse_object
from json_any_key.application.codec._key_codec import KeyCodec
from json_any_key.application.codec._serializer import write_entries
from json_any_key.application.codec._sinks import DictSink
from json_any_key.application.codec._sinks import JsonTextSink
from json_any_key.core.domain.enums import EntryAccess
from json_any_key.core.types.protocols import ObjectSink
from json_any_key.core.types.protocols import PairCollector
from json_any_key.core.types.results import Result
from json_any_key.infrastructure.config import CodecOptions
from json_any_key.infrastructure.config import resolve_options

logger = getLogger(__name__)

type PairSource[K, V] = Mapping[K, V] | Iterable[tuple[K, V]]


class AnyKeyCodec[K, V]:
    """Serialize keyed collections to JSON objects and back

    Works with any source that yields ``(key, value)`` pairs: dicts,
    ``OrderedDict``, lists or tuples of pairs, generators. Adapters for the
    key and value types are built once per codec instance.

    Example:
        >>> codec = AnyKeyCodec(int, str)
        >>> codec.to_json({5: "foo"})
        '{"5":"foo"}'
        >>> codec.to_dict('{"5":"foo"}')
        {5: 'foo'}
    """

    def __init__(self, key_type: Any, value_type: Any = Any, options: CodecOptions | None = None):
        self.options = resolve_options(options)
        self.key_codec: KeyCodec[K] = KeyCodec(key_type, self.options)
        self.value_adapter: TypeAdapter[V] = TypeAdapter(value_type)
        self.decoder: EntryDecoder[K, V] = EntryDecoder(self.key_codec, self.value_adapter)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def write[R](
        self,
        source: PairSource[K, V],
        sink: ObjectSink[R],
        access: EntryAccess = EntryAccess.BORROWED,
    ) -> R:
        """Write every entry of ``source`` to ``sink``"""
        entries = entries_for(source, access)
        try:
            return write_entries(entries, self.key_codec, sink)
        finally:
            entries.close()

    def to_json(self, source: PairSource[K, V]) -> str:
        """JSON object text for ``source``; the source is left untouched"""
        return self.write(source, self.text_sink())

    def into_json(self, source: PairSource[K, V]) -> str:
        """JSON object text for ``source``; the source is emptied"""
        return self.write(source, self.text_sink(), EntryAccess.DRAINED)

    def to_object(self, source: PairSource[K, V], mode: str = "python") -> dict[str, object]:
        """String-keyed dict for ``source`` with values dumped in ``mode``"""
        return self.write(source, self.dict_sink(mode))

    def text_sink(self) -> JsonTextSink:
        return JsonTextSink(self.value_adapter, **self.options.dump_kwargs())

    def dict_sink(self, mode: str = "python", **dump_kwargs: bool) -> DictSink:
        return DictSink(self.value_adapter, mode, **{**self.options.dump_kwargs(), **dump_kwargs})

    # ------------------------------------------------------------------
    # Deserialization
    # ------------------------------------------------------------------

    def to_dict(self, text: str | bytes) -> dict[K, V]:
        """Decode JSON object text into a dict; later duplicates win"""
        return self.collect(text, dict)

    def to_list(self, text: str | bytes) -> list[tuple[K, V]]:
        """Decode JSON object text into pairs in property order"""
        return self.collect(text, list)

    def collect[C](self, text: str | bytes, into: PairCollector[K, V, C]) -> C:
        """Decode JSON object text and build ``into`` from the pairs

        Aborts on the first property that fails to decode.
        """
        properties = parse_object(text)
        return into(self.decoder.iter_entries(properties.items()))

    def iter_pairs(self, text: str | bytes) -> Iterator[Result[tuple[K, V]]]:
        """Lazily decode JSON object text, one result per property

        Errors in the text as a whole (invalid JSON, not an object) are raised
        here; errors in individual properties are yielded as ``Err``.
        """
        properties = parse_object(text)
        return self.decoder.iter_results(properties.items())
