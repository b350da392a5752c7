from __future__ import annotations

import codecs
import logging
from datetime import date, datetime, time
from pathlib import Path
from typing import TypeAlias
import tomllib

DEFAULT_CONFIG_NAME = "jsonwriter.toml"
DEFAULT_ENCODING = "utf-8"

TomlScalar: TypeAlias = str | int | float | bool | None | date | datetime | time
TomlValue: TypeAlias = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]
TomlTable: TypeAlias = dict[str, TomlValue]

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})

logger = logging.getLogger(__name__)


def output_defaults(
    root: Path | None = None, config_path: Path | None = None
) -> TomlTable:
    """Return the ``[output]`` table of ``jsonwriter.toml``.

    A missing, unreadable or invalid file, or a non-table section, yields
    an empty table.
    """
    if config_path is None:
        config_path = (root if root is not None else Path.cwd()) / DEFAULT_CONFIG_NAME
    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("No usable config at %s: %s", config_path, exc)
        return {}
    except tomllib.TOMLDecodeError as exc:
        logger.warning("Ignoring invalid config file %s: %s", config_path, exc)
        return {}
    logger.debug("Loaded config from %s", config_path)
    section = data.get("output", {})
    return section if isinstance(section, dict) else {}


def output_encoding(section: TomlTable | None) -> str:
    """Encoding for ``--output`` files; unknown codec names fall back."""
    value = section.get("encoding") if isinstance(section, dict) else None
    if not isinstance(value, str) or not value.strip():
        return DEFAULT_ENCODING
    name = value.strip()
    try:
        codecs.lookup(name)
    except LookupError:
        logger.warning("Unknown output encoding %r, using %s", name, DEFAULT_ENCODING)
        return DEFAULT_ENCODING
    return name


def output_trailing_newline(section: TomlTable | None) -> bool:
    value = section.get("trailing_newline") if isinstance(section, dict) else None
    match value:
        case bool():
            return value
        case int():
            return value != 0
        case str():
            return value.strip().lower() in _TRUE_WORDS
    return False


def merge_payload(payload: TomlTable, defaults: TomlTable) -> TomlTable:
    """Overlay the non-``None`` entries of ``payload`` on ``defaults``."""
    return {**defaults, **{key: value for key, value in payload.items() if value is not None}}
