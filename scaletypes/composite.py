"""Composite type definitions: structs, tuple structs and unit structs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from scaletypes.fields import Field


@dataclass(frozen=True)
class TypeDefComposite:
    """A struct-like type made of named fields, unnamed fields, or none at all."""

    fields: tuple[Field, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.fields:
            data["fields"] = [f.to_json() for f in self.fields]
        return data

    @classmethod
    def from_json(cls, data: Any) -> TypeDefComposite:
        if not isinstance(data, dict):
            raise TypeError("a composite definition must be a JSON object")
        raw_fields = data.get("fields", [])
        if not isinstance(raw_fields, list):
            raise TypeError("composite 'fields' must be a list")
        return cls(tuple(Field.from_json(item) for item in raw_fields))