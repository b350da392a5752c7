"""jsonwriter package root."""

from jsonwriter.encode import compact_bytes, compact_text, dump, dumps
from jsonwriter.escape import escape
from jsonwriter.exceptions import SinkWriteError
from jsonwriter.json_types import (
    FALSE,
    NULL,
    TRUE,
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
    value_of,
)
from jsonwriter.writer import JsonWriter

__all__ = [
    "__version__",
    "FALSE",
    "NULL",
    "TRUE",
    "JsonArray",
    "JsonBoolean",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "JsonValue",
    "JsonWriter",
    "SinkWriteError",
    "compact_bytes",
    "compact_text",
    "dump",
    "dumps",
    "escape",
    "value_of",
]

__version__ = "0.1.0"
