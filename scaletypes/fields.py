"""Fields of struct-like type definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Field:
    """A named or unnamed field of a struct, tuple struct or enum variant.

    ``ty`` is the field's type: a type description, or an integer id once the
    type has been registered. ``type_name`` is the type as written in source
    and is informational only.
    """

    name: str | None
    ty: Any
    type_name: str | None = None
    docs: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "docs", tuple(self.docs))

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.name is not None:
            data["name"] = self.name
        data["type"] = self.ty
        if self.type_name is not None:
            data["typeName"] = self.type_name
        if self.docs:
            data["docs"] = list(self.docs)
        return data

    @classmethod
    def from_json(cls, data: Any) -> Field:
        if not isinstance(data, dict):
            raise TypeError("a field must be a JSON object")
        if "type" not in data:
            raise ValueError("a field needs a 'type' entry")
        return cls(
            name=data.get("name"),
            ty=data["type"],
            type_name=data.get("typeName"),
            docs=tuple(data.get("docs", ())),
        )