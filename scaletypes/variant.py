"""Enum type definitions and their variants."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from scaletypes.fields import Field

_MAX_INDEX = 0xFF


@dataclass(frozen=True)
class Variant:
    """One variant of an enum: unit, tuple-like or struct-like.

    ``index`` is the variant's codec index, a value from 0 to 255.
    """

    name: str
    fields: tuple[Field, ...] = field(default_factory=tuple)
    index: int = 0
    docs: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))
        object.__setattr__(self, "docs", tuple(self.docs))
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise TypeError("a variant index must be an integer")
        if not 0 <= self.index <= _MAX_INDEX:
            raise ValueError(f"variant index {self.index} does not fit in a byte")

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name}
        if self.fields:
            data["fields"] = [f.to_json() for f in self.fields]
        data["index"] = self.index
        if self.docs:
            data["docs"] = list(self.docs)
        return data

    @classmethod
    def from_json(cls, data: Any) -> Variant:
        if not isinstance(data, dict):
            raise TypeError("a variant must be a JSON object")
        for key in ("name", "index"):
            if key not in data:
                raise ValueError(f"a variant needs a {key!r} entry")
        raw_fields = data.get("fields", [])
        if not isinstance(raw_fields, list):
            raise TypeError("variant 'fields' must be a list")
        return cls(
            name=data["name"],
            fields=tuple(Field.from_json(item) for item in raw_fields),
            index=data["index"],
            docs=tuple(data.get("docs", ())),
        )


@dataclass(frozen=True)
class TypeDefVariant:
    """An enum type, described by its variants."""

    variants: tuple[Variant, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "variants", tuple(self.variants))

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.variants:
            data["variants"] = [v.to_json() for v in self.variants]
        return data

    @classmethod
    def from_json(cls, data: Any) -> TypeDefVariant:
        if not isinstance(data, dict):
            raise TypeError("a variant definition must be a JSON object")
        raw_variants = data.get("variants", [])
        if not isinstance(raw_variants, list):
            raise TypeError("'variants' must be a list")
        return cls(tuple(Variant.from_json(item) for item in raw_variants))