from __future__ import annotations

import io

import pytest

from jsonwriter.exceptions import SinkWriteError
from jsonwriter.json_types import (
    FALSE,
    NULL,
    TRUE,
    JsonArray,
    JsonNumber,
    JsonObject,
    JsonString,
)
from jsonwriter.writer import JsonWriter


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def writer(output: io.StringIO) -> JsonWriter:
    return JsonWriter(output)


class _FailingSink:
    def __init__(self, *, fail_after: int, error: Exception):
        self.parts: list[str] = []
        self._fail_after = fail_after
        self._error = error

    def write(self, text: str) -> int:
        if len(self.parts) >= self._fail_after:
            raise self._error
        self.parts.append(text)
        return len(text)


def test_write_passes_through(writer: JsonWriter, output: io.StringIO) -> None:
    writer.write("foo")
    assert output.getvalue() == "foo"


def test_write_literals(writer: JsonWriter, output: io.StringIO) -> None:
    writer.write_null()
    writer.write_boolean(True)
    writer.write_boolean(False)
    assert output.getvalue() == "nulltruefalse"


def test_write_number_is_verbatim(writer: JsonWriter, output: io.StringIO) -> None:
    writer.write_number("1.50e+010")
    assert output.getvalue() == "1.50e+010"


def test_write_string_empty(writer: JsonWriter, output: io.StringIO) -> None:
    writer.write_string("")
    assert output.getvalue() == '""'


def test_write_string_escapes(writer: JsonWriter, output: io.StringIO) -> None:
    writer.write_string('foo\\"bar\n\u2028')
    assert output.getvalue() == '"foo\\\\\\"bar\\n\\u2028"'


def test_write_object_parts_are_literal(writer: JsonWriter, output: io.StringIO) -> None:
    writer.write_begin_object()
    writer.write_name_value_separator()
    writer.write_object_value_separator()
    writer.write_end_object()
    assert output.getvalue() == "{:,}"


def test_write_array_parts_are_literal(writer: JsonWriter, output: io.StringIO) -> None:
    writer.write_begin_array()
    writer.write_array_value_separator()
    writer.write_end_array()
    assert output.getvalue() == "[,]"


def test_write_object_empty(writer: JsonWriter, output: io.StringIO) -> None:
    writer.write_object(JsonObject())
    assert output.getvalue() == "{}"


def test_write_object_with_single_value(writer: JsonWriter, output: io.StringIO) -> None:
    writer.write_object(JsonObject().add("a", 23))
    assert output.getvalue() == '{"a":23}'


def test_write_object_with_multiple_values(writer: JsonWriter, output: io.StringIO) -> None:
    obj = JsonObject()
    obj.add("a", 23)
    obj.add("b", 3.14)
    obj.add("c", "foo")
    obj.add("d", True)
    obj.add("e", None)
    writer.write_object(obj)
    assert output.getvalue() == '{"a":23,"b":3.14,"c":"foo","d":true,"e":null}'


def test_write_object_keeps_repeated_names(writer: JsonWriter, output: io.StringIO) -> None:
    writer.write_object(JsonObject().add("a", 1).add("a", 2))
    assert output.getvalue() == '{"a":1,"a":2}'


def test_write_object_escapes_names(writer: JsonWriter, output: io.StringIO) -> None:
    writer.write_object(JsonObject().add('q"\n', 0))
    assert output.getvalue() == '{"q\\"\\n":0}'


def test_write_array_empty(writer: JsonWriter, output: io.StringIO) -> None:
    writer.write_array(JsonArray())
    assert output.getvalue() == "[]"


def test_write_array_with_single_value(writer: JsonWriter, output: io.StringIO) -> None:
    writer.write_array(JsonArray().add(23))
    assert output.getvalue() == "[23]"


def test_write_array_with_multiple_values(writer: JsonWriter, output: io.StringIO) -> None:
    writer.write_array(JsonArray().add(23).add("foo").add(False))
    assert output.getvalue() == '[23,"foo",false]'


def test_write_value_nested(writer: JsonWriter, output: io.StringIO) -> None:
    value = (
        JsonObject()
        .add("list", [1, [2, {}], []])
        .add("obj", {"k": None, "t": (True,)})
    )
    writer.write_value(value)
    assert output.getvalue() == '{"list":[1,[2,{}],[]],"obj":{"k":null,"t":[true]}}'


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (NULL, "null"),
        (TRUE, "true"),
        (FALSE, "false"),
        (JsonNumber("-0.5"), "-0.5"),
        (JsonString("x"), '"x"'),
        (JsonArray(), "[]"),
        (JsonObject(), "{}"),
    ],
)
def test_write_value_dispatches_each_kind(value, expected: str) -> None:
    output = io.StringIO()
    JsonWriter(output).write_value(value)
    assert output.getvalue() == expected


def test_sink_failure_is_wrapped_and_chained() -> None:
    cause = OSError("disk full")
    sink = _FailingSink(fail_after=0, error=cause)
    with pytest.raises(SinkWriteError) as exc_info:
        JsonWriter(sink).write_null()
    assert exc_info.value.__cause__ is cause
    assert exc_info.value.fragment == "null"
    assert isinstance(exc_info.value, OSError)


def test_sink_failure_leaves_partial_output() -> None:
    sink = _FailingSink(fail_after=3, error=OSError("broken pipe"))
    with pytest.raises(SinkWriteError):
        JsonWriter(sink).write_array(JsonArray().add(1).add(2).add(3))
    assert "".join(sink.parts) == "[1,"


def test_closed_sink_raises_sink_write_error() -> None:
    output = io.StringIO()
    output.close()
    with pytest.raises(SinkWriteError) as exc_info:
        JsonWriter(output).write_begin_object()
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_writer_does_not_close_sink(output: io.StringIO) -> None:
    writer = JsonWriter(output)
    writer.write_value(JsonArray().add("a"))
    assert writer.sink is output
    assert not output.closed
