"""Type metadata for SCALE-encodable types: paths, fields, composites, variants and definitions, with JSON round trips."""

__version__ = "0.1.0"

__all__ = ["identifiers", "path", "fields", "composite", "variant", "types"]