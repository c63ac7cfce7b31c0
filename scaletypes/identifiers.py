"""Validation of identifiers used as type path segments."""

from __future__ import annotations

import re

_RAW_PREFIX = "r#"
_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def is_rust_identifier(s: str) -> bool:
    """Return True if ``s`` is a valid identifier, optionally with ``r#`` raw prefixes."""
    if not s.isascii():
        return False
    trimmed = s
    while trimmed.startswith(_RAW_PREFIX):
        trimmed = trimmed[len(_RAW_PREFIX):]
    return _IDENTIFIER.fullmatch(trimmed) is not None