from __future__ import annotations

import io

from jsonwriter.json_types import JsonValue, value_of
from jsonwriter.writer import JsonWriter, Sink


def dump(value: JsonValue, sink: Sink) -> None:
    JsonWriter(sink).write_value(value)


def dumps(value: JsonValue) -> str:
    buffer = io.StringIO()
    dump(value, buffer)
    return buffer.getvalue()


def compact_text(value: object) -> str:
    """Compact JSON text for plain Python data.

    Mapping order and sequence order are preserved as given; unsupported
    types raise `TypeError` and non-finite numbers raise `ValueError`.
    """
    return dumps(value_of(value))


def compact_bytes(value: object) -> bytes:
    return compact_text(value).encode("utf-8")
