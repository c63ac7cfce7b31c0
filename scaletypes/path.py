"""Namespaced paths of type definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from scaletypes.identifiers import is_rust_identifier

_SEPARATOR = "::"


class PathError(ValueError):
    """Raised when a path cannot be constructed."""


class MissingSegmentsError(PathError):
    """Raised when a path is built from no segments at all."""

    def __init__(self) -> None:
        super().__init__("a path needs at least one segment")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, MissingSegmentsError)

    def __hash__(self) -> int:
        return hash(MissingSegmentsError)


class InvalidIdentifierError(PathError):
    """Raised when a path segment is not a valid identifier."""

    def __init__(self, segment: int) -> None:
        super().__init__(f"path segment {segment} is not a valid identifier")
        self.segment = segment

    def __eq__(self, other: object) -> bool:
        return isinstance(other, InvalidIdentifierError) and other.segment == self.segment

    def __hash__(self) -> int:
        return hash((InvalidIdentifierError, self.segment))


@dataclass(frozen=True, order=True)
class Path:
    """The segments naming a type: module namespace followed by the type's identifier."""

    segments: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", tuple(self.segments))

    @classmethod
    def new(cls, ident: str, module_path: str) -> Path:
        """Build a path from an identifier and a ``::``-separated module path."""
        return cls.from_segments([*module_path.split(_SEPARATOR), ident])

    @classmethod
    def from_segments(cls, segments: Iterable[str]) -> Path:
        """Build a path, checking that there are segments and each is a valid identifier."""
        collected = tuple(segments)
        if not collected:
            raise MissingSegmentsError()
        for position, segment in enumerate(collected):
            if not is_rust_identifier(segment):
                raise InvalidIdentifierError(position)
        return cls(collected)

    @classmethod
    def from_segments_unchecked(cls, segments: Iterable[str]) -> Path:
        """Build a path without validating its segments."""
        return cls(tuple(segments))

    @classmethod
    def prelude(cls, ident: str) -> Path:
        """Build a single-segment path for a prelude type."""
        try:
            return cls.from_segments([ident])
        except PathError as exc:
            raise ValueError(f"{ident!r} is not a valid identifier") from exc

    @classmethod
    def voldemort(cls) -> Path:
        """Return the empty path used for types that are not named."""
        return cls(())

    def is_empty(self) -> bool:
        return not self.segments

    def ident(self) -> str | None:
        """The last segment, or None for an empty path."""
        return self.segments[-1] if self.segments else None

    def namespace(self) -> tuple[str, ...]:
        """All segments but the last."""
        return self.segments[:-1]

    def to_json(self) -> list[str]:
        return list(self.segments)

    @classmethod
    def from_json(cls, data: Any) -> Path:
        if not isinstance(data, list) or not all(isinstance(s, str) for s in data):
            raise TypeError("a path must be a list of strings")
        return cls.from_segments_unchecked(data)

    def __str__(self) -> str:
        return _SEPARATOR.join(self.segments)