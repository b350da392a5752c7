"""Compact JSON writer.

`JsonWriter` emits JSON text into a caller-owned sink. The single-token
emitters (`write_begin_object`, `write_name_value_separator`, ...) do no
bookkeeping: they append their literal token and nothing else. Separator
placement for composites lives entirely in `write_array` and `write_object`.
"""

from __future__ import annotations

from typing import Protocol, assert_never

from jsonwriter.escape import escape_chunks
from jsonwriter.exceptions import SinkWriteError
from jsonwriter.json_types import (
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)


class Sink(Protocol):
    def write(self, text: str, /) -> object: ...


class JsonWriter:
    """Write JSON values to ``sink`` in compact form.

    The writer keeps a reference to the sink for its lifetime and never
    flushes or closes it. It holds no lock; one instance must not be shared
    by concurrent callers.
    """

    def __init__(self, sink: Sink):
        self._sink = sink

    @property
    def sink(self) -> Sink:
        return self._sink

    def _emit(self, text: str) -> None:
        try:
            self._sink.write(text)
        except (OSError, ValueError) as exc:
            raise SinkWriteError(f"sink write failed: {exc}", fragment=text) from exc

    def write(self, text: str) -> None:
        """Append ``text`` unmodified."""
        self._emit(text)

    def write_null(self) -> None:
        self._emit("null")

    def write_boolean(self, value: bool) -> None:
        self._emit("true" if value else "false")

    def write_number(self, text: str) -> None:
        self._emit(text)

    def write_string(self, value: str) -> None:
        self._emit('"')
        for chunk in escape_chunks(value):
            self._emit(chunk)
        self._emit('"')

    def write_begin_array(self) -> None:
        self._emit("[")

    def write_end_array(self) -> None:
        self._emit("]")

    def write_array_value_separator(self) -> None:
        self._emit(",")

    def write_begin_object(self) -> None:
        self._emit("{")

    def write_end_object(self) -> None:
        self._emit("}")

    def write_name_value_separator(self) -> None:
        self._emit(":")

    def write_object_value_separator(self) -> None:
        self._emit(",")

    def write_array(self, array: JsonArray) -> None:
        self.write_begin_array()
        first = True
        for value in array.values:
            if not first:
                self.write_array_value_separator()
            self.write_value(value)
            first = False
        self.write_end_array()

    def write_object(self, obj: JsonObject) -> None:
        self.write_begin_object()
        first = True
        for name, value in obj.members:
            if not first:
                self.write_object_value_separator()
            self.write_string(name)
            self.write_name_value_separator()
            self.write_value(value)
            first = False
        self.write_end_object()

    def write_value(self, value: JsonValue) -> None:
        match value:
            case JsonNull():
                self.write_null()
            case JsonBoolean(value=flag):
                self.write_boolean(flag)
            case JsonNumber(text=text):
                self.write_number(text)
            case JsonString(value=text):
                self.write_string(text)
            case JsonArray():
                self.write_array(value)
            case JsonObject():
                self.write_object(value)
            case _:
                assert_never(value)
