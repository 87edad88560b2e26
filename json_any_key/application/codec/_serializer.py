# json_any_key/application/codec/_serializer.py

"""Write loop shared by every serialization entry point"""

# Standard library imports
from collections.abc import Iterable
from logging import getLogger

# Local imports
from json_any_key.core.types.protocols import Entry
from json_any_key.core.types.protocols import KeyEncoder
from json_any_key.core.types.protocols import ObjectSink

logger = getLogger(__name__)


def write_entries[K, R](
    entries: Iterable[Entry[K, object]], key_encoder: KeyEncoder[K], sink: ObjectSink[R]
) -> R:
    """Write each entry to ``sink`` in iteration order and return its result

    Entries are read one at a time; the first key or value that fails to
    encode aborts the pass with that error.

    Args:
        entries: Source pairs, already borrowed or drained from a collection
        key_encoder: Encoder for the key type, usually a ``KeyCodec``
        sink: Destination object writer

    Returns:
        Whatever ``sink.finish()`` produces
    """
    written = 0
    for key, value in entries:
        sink.write_entry(key_encoder.encode(key), value)
        written += 1

    logger.debug(f"Wrote {written} entries")
    return sink.finish()
