"""JSON value model consumed by the writer.

The six kinds form a closed union (`JsonValue`); consumers match on it
exhaustively. Composites keep their entries in insertion order and objects
allow repeated names.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterator, Mapping, NamedTuple, TypeAlias


@dataclass(frozen=True)
class JsonNull:
    pass


@dataclass(frozen=True)
class JsonBoolean:
    value: bool


@dataclass(frozen=True)
class JsonNumber:
    """A number carried as already-formatted decimal text."""

    text: str


@dataclass(frozen=True)
class JsonString:
    value: str


@dataclass
class JsonArray:
    values: list[JsonValue] = field(default_factory=list)

    def add(self, value: object) -> JsonArray:
        self.values.append(value_of(value))
        return self

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self.values)


class JsonMember(NamedTuple):
    name: str
    value: JsonValue


@dataclass
class JsonObject:
    members: list[JsonMember] = field(default_factory=list)

    def add(self, name: str, value: object) -> JsonObject:
        """Append a member; an existing member with the same name is kept."""
        self.members.append(JsonMember(name, value_of(value)))
        return self

    def get(self, name: str) -> JsonValue | None:
        for member in reversed(self.members):
            if member.name == name:
                return member.value
        return None

    def names(self) -> list[str]:
        return [member.name for member in self.members]

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[JsonMember]:
        return iter(self.members)


JsonValue: TypeAlias = (
    JsonNull | JsonBoolean | JsonNumber | JsonString | JsonArray | JsonObject
)

NULL = JsonNull()
TRUE = JsonBoolean(True)
FALSE = JsonBoolean(False)

_JSON_VALUE_TYPES = (JsonNull, JsonBoolean, JsonNumber, JsonString, JsonArray, JsonObject)


def number_text(value: int | float | Decimal) -> str:
    """Format a Python number as JSON number text.

    Floats use their shortest round-tripping form with a trailing ``.0``
    removed, so ``23.0`` becomes ``23``.
    """
    if isinstance(value, bool):
        raise TypeError("bool is not a JSON number")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError("Infinite and NaN values are not permitted in JSON")
        text = repr(value)
        if text.endswith(".0"):
            return text[:-2]
        return text
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError("Infinite and NaN values are not permitted in JSON")
        return str(value)
    raise TypeError(f"unsupported number type {type(value).__name__}")


def value_of(raw: object) -> JsonValue:
    """Convert plain Python data into the value model."""
    if isinstance(raw, _JSON_VALUE_TYPES):
        return raw
    if raw is None:
        return NULL
    if isinstance(raw, bool):
        return TRUE if raw else FALSE
    if isinstance(raw, (int, float, Decimal)):
        return JsonNumber(number_text(raw))
    if isinstance(raw, str):
        return JsonString(raw)
    if isinstance(raw, Mapping):
        return JsonObject(
            [JsonMember(str(key), value_of(item)) for key, item in raw.items()]
        )
    if isinstance(raw, (list, tuple)):
        return JsonArray([value_of(item) for item in raw])
    raise TypeError(f"value_of does not support value type {type(raw).__name__}")
