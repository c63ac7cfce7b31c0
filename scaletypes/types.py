"""Type descriptions: the type definition kinds and the type that wraps them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Union

from scaletypes.composite import TypeDefComposite
from scaletypes.path import Path
from scaletypes.variant import TypeDefVariant

_MAX_ARRAY_LEN = 0xFFFF_FFFF


class TypeDefPrimitive(Enum):
    """A primitive type, listed in codec index order."""

    BOOL = "bool"
    CHAR = "char"
    STR = "str"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    U256 = "u256"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    I256 = "i256"

    @property
    def codec_index(self) -> int:
        """The fixed index of this primitive in the binary encoding."""
        return list(TypeDefPrimitive).index(self)


@dataclass(frozen=True)
class TypeDefArray:
    """An array type with a length known ahead of time."""

    len: int
    type_param: Any

    def __post_init__(self) -> None:
        if isinstance(self.len, bool) or not isinstance(self.len, int):
            raise TypeError("an array length must be an integer")
        if not 0 <= self.len <= _MAX_ARRAY_LEN:
            raise ValueError(f"array length {self.len} does not fit in 32 bits")

    def to_json(self) -> dict[str, Any]:
        return {"len": self.len, "type": self.type_param}

    @classmethod
    def from_json(cls, data: Any) -> TypeDefArray:
        if not isinstance(data, dict):
            raise TypeError("an array definition must be a JSON object")
        for key in ("len", "type"):
            if key not in data:
                raise ValueError(f"an array definition needs a {key!r} entry")
        return cls(data["len"], data["type"])


@dataclass(frozen=True)
class TypeDefTuple:
    """A tuple type, described by the types of its elements."""

    fields: tuple[Any, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))

    @classmethod
    def unit(cls) -> TypeDefTuple:
        """The empty tuple, standing for the unit type."""
        return cls(())

    def to_json(self) -> list[Any]:
        return list(self.fields)

    @classmethod
    def from_json(cls, data: Any) -> TypeDefTuple:
        if not isinstance(data, list):
            raise TypeError("a tuple definition must be a JSON list")
        return cls(tuple(data))


@dataclass(frozen=True)
class TypeDefSequence:
    """A sequence of elements of one type, with a length known only at run time."""

    type_param: Any

    def to_json(self) -> dict[str, Any]:
        return {"type": self.type_param}

    @classmethod
    def from_json(cls, data: Any) -> TypeDefSequence:
        return cls(_single_type_entry(data, "sequence"))


@dataclass(frozen=True)
class TypeDefCompact:
    """A type using the compact encoding."""

    type_param: Any

    def to_json(self) -> dict[str, Any]:
        return {"type": self.type_param}

    @classmethod
    def from_json(cls, data: Any) -> TypeDefCompact:
        return cls(_single_type_entry(data, "compact"))


@dataclass(frozen=True)
class TypeDefBitSequence:
    """A sequence of bits, described by its storage type and its bit order type."""

    bit_store_type: Any
    bit_order_type: Any

    def to_json(self) -> dict[str, Any]:
        return {
            "bit_store_type": self.bit_store_type,
            "bit_order_type": self.bit_order_type,
        }

    @classmethod
    def from_json(cls, data: Any) -> TypeDefBitSequence:
        if not isinstance(data, dict):
            raise TypeError("a bit sequence definition must be a JSON object")
        for key in ("bit_store_type", "bit_order_type"):
            if key not in data:
                raise ValueError(f"a bit sequence definition needs a {key!r} entry")
        return cls(data["bit_store_type"], data["bit_order_type"])


def _single_type_entry(data: Any, kind: str) -> Any:
    if not isinstance(data, dict):
        raise TypeError(f"a {kind} definition must be a JSON object")
    if "type" not in data:
        raise ValueError(f"a {kind} definition needs a 'type' entry")
    return data["type"]


TypeDef = Union[
    TypeDefComposite,
    TypeDefVariant,
    TypeDefSequence,
    TypeDefArray,
    TypeDefTuple,
    TypeDefPrimitive,
    TypeDefCompact,
    TypeDefBitSequence,
]

_TAGS: dict[type, str] = {
    TypeDefComposite: "composite",
    TypeDefVariant: "variant",
    TypeDefSequence: "sequence",
    TypeDefArray: "array",
    TypeDefTuple: "tuple",
    TypeDefPrimitive: "primitive",
    TypeDefCompact: "compact",
    TypeDefBitSequence: "bitsequence",
}


def _primitive_from_json(data: Any) -> TypeDefPrimitive:
    if not isinstance(data, str):
        raise TypeError("a primitive definition must be a string")
    return TypeDefPrimitive(data)


_DECODERS = {
    "composite": TypeDefComposite.from_json,
    "variant": TypeDefVariant.from_json,
    "sequence": TypeDefSequence.from_json,
    "array": TypeDefArray.from_json,
    "tuple": TypeDefTuple.from_json,
    "primitive": _primitive_from_json,
    "compact": TypeDefCompact.from_json,
    "bitsequence": TypeDefBitSequence.from_json,
}


def _tag_of(type_def: Any) -> str:
    try:
        return _TAGS[type(type_def)]
    except KeyError:
        raise TypeError(f"{type(type_def).__name__} is not a type definition") from None


def type_def_to_json(type_def: TypeDef) -> dict[str, Any]:
    """Encode a type definition as a single-key object tagged with its kind."""
    tag = _tag_of(type_def)
    if isinstance(type_def, TypeDefPrimitive):
        return {tag: type_def.value}
    return {tag: type_def.to_json()}


def type_def_from_json(data: Any) -> TypeDef:
    """Decode a type definition from its tagged JSON form."""
    if not isinstance(data, dict):
        raise TypeError("a type definition must be a JSON object")
    if len(data) != 1:
        raise ValueError("a type definition must have exactly one kind")
    ((tag, body),) = data.items()
    try:
        decoder = _DECODERS[tag]
    except KeyError:
        raise ValueError(f"unknown type definition kind {tag!r}") from None
    return decoder(body)


@dataclass(frozen=True)
class TypeParameter:
    """A generic type parameter; ``ty`` is None when the parameter is skipped."""

    name: str
    ty: Any = None

    def to_json(self) -> dict[str, Any]:
        return {"name": self.name, "type": self.ty}

    @classmethod
    def from_json(cls, data: Any) -> TypeParameter:
        if not isinstance(data, dict):
            raise TypeError("a type parameter must be a JSON object")
        if "name" not in data:
            raise ValueError("a type parameter needs a 'name' entry")
        return cls(data["name"], data.get("type"))


@dataclass(frozen=True, kw_only=True)
class Type:
    """A type: its path, generic parameters, definition and documentation."""

    type_def: TypeDef
    path: Path = field(default_factory=Path)
    type_params: tuple[TypeParameter, ...] = field(default_factory=tuple)
    docs: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _tag_of(self.type_def)
        object.__setattr__(self, "type_params", tuple(self.type_params))
        object.__setattr__(self, "docs", tuple(self.docs))

    @classmethod
    def from_def(cls, type_def: TypeDef) -> Type:
        """A type with no path, parameters or docs around the given definition."""
        return cls(type_def=type_def, path=Path.voldemort())

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if not self.path.is_empty():
            data["path"] = self.path.to_json()
        if self.type_params:
            data["params"] = [p.to_json() for p in self.type_params]
        data["def"] = type_def_to_json(self.type_def)
        if self.docs:
            data["docs"] = list(self.docs)
        return data

    @classmethod
    def from_json(cls, data: Any) -> Type:
        if not isinstance(data, dict):
            raise TypeError("a type must be a JSON object")
        if "def" not in data:
            raise ValueError("a type needs a 'def' entry")
        raw_params = data.get("params", [])
        if not isinstance(raw_params, list):
            raise TypeError("'params' must be a list")
        return cls(
            type_def=type_def_from_json(data["def"]),
            path=Path.from_json(data.get("path", [])),
            type_params=_params_from_json(raw_params),
            docs=tuple(data.get("docs", ())),
        )


def _params_from_json(raw: Iterable[Any]) -> tuple[TypeParameter, ...]:
    return tuple(TypeParameter.from_json(item) for item in raw)