from __future__ import annotations

import json
import logging
from pathlib import Path

from jsonwriter.exceptions import SinkWriteError
from jsonwriter.json_types import JsonMember, JsonNumber, JsonObject, JsonValue, value_of
from jsonwriter.writer import JsonWriter

logger = logging.getLogger(__name__)


def _object_from_pairs(pairs: list[tuple[str, object]]) -> JsonObject:
    return JsonObject([JsonMember(key, value_of(item)) for key, item in pairs])


def _reject_constant(name: str) -> object:
    raise ValueError(f"{name} is not a valid JSON number")


def load_json_value_text(text: str) -> JsonValue:
    """Parse JSON text into the value model.

    Member order, repeated names and the source text of numbers are kept.
    Malformed input raises `ValueError`.
    """
    payload = json.loads(
        text,
        object_pairs_hook=_object_from_pairs,
        parse_int=JsonNumber,
        parse_float=JsonNumber,
        parse_constant=_reject_constant,
    )
    return value_of(payload)


def load_json_value_path(
    path: Path,
    *,
    encoding: str = "utf-8",
) -> JsonValue:
    logger.debug("Loading JSON value from %s", path)
    return load_json_value_text(path.read_text(encoding=encoding))


def dump_json_path(
    value: JsonValue,
    path: Path,
    *,
    encoding: str = "utf-8",
    trailing_newline: bool = False,
) -> None:
    try:
        handle = path.open("w", encoding=encoding)
    except (OSError, LookupError) as exc:
        raise SinkWriteError(f"cannot open {path}: {exc}") from exc
    try:
        writer = JsonWriter(handle)
        writer.write_value(value)
        if trailing_newline:
            writer.write("\n")
    finally:
        # Closing flushes the buffered tail, which can still fail.
        try:
            handle.close()
        except OSError as exc:
            raise SinkWriteError(f"cannot finish writing {path}: {exc}") from exc
    logger.debug("Wrote JSON value to %s", path)
