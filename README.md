# scaletypes

Immutable data types that describe the shape of SCALE-encodable values:
named type paths, struct-like fields, composites (structs, tuple structs and
unit structs), variants (enums), and the built-in definitions for primitives,
arrays, tuples, sequences, compact-encoded values and bit sequences. Every
type converts to and from a JSON-ready dictionary or list.

## Installation

```
pip install scaletypes
```

## Identifiers

`scaletypes.identifiers.is_rust_identifier(s)` returns `True` for an ASCII
string that starts with a letter or `_` and continues with letters, digits or
`_`. Leading `r#` raw prefixes are stripped before the check, so `r#mod` is
accepted; the empty string is not.

## Paths

A `Path` holds a tuple of segments. `Path.from_segments` checks that there is
at least one segment and that each is a valid identifier.

```python
from scaletypes.path import Path, InvalidIdentifierError, MissingSegmentsError

path = Path.new("Planet", "hello::world")
path.segments      # ("hello", "world", "Planet")
path.namespace()   # ("hello", "world")
path.ident()       # "Planet"
str(path)          # "hello::world::Planet"

Path.from_segments(["Hello", ", World!"])   # raises InvalidIdentifierError; .segment == 1
Path.from_segments([])                      # raises MissingSegmentsError
```

Both errors derive from `PathError`, itself a `ValueError`.
`Path.prelude(ident)` builds a one-segment path and raises `ValueError` if
the identifier is invalid. `Path.from_segments_unchecked` builds a path
without validation, and `Path.voldemort()` gives the empty path used for
types that have no name; `is_empty()` tells the two apart. In JSON a path is
a plain list of strings.

## Fields, composites and variants

- `scaletypes.fields.Field(name, ty, type_name=None, docs=())`: `name` is
  `None` for unnamed fields; `ty` is any value identifying the field's type,
  typically an integer id.
- `scaletypes.composite.TypeDefComposite(fields=())`: a struct-like type.
- `scaletypes.variant.Variant(name, fields=(), index=0, docs=())`: one enum
  variant; `index` must be an integer from 0 to 255.
- `scaletypes.variant.TypeDefVariant(variants=())`: an enum type.

## Type definitions

`scaletypes.types` holds the remaining definition kinds:

- `TypeDefPrimitive`: an enum of `bool`, `char`, `str`, `u8` … `u256`,
  `i8` … `i256`; `codec_index` gives each member's position in that order.
- `TypeDefArray(len, type_param)`: `len` must fit in 32 bits.
- `TypeDefTuple(fields=())`, with `TypeDefTuple.unit()` for the empty tuple.
- `TypeDefSequence(type_param)` and `TypeDefCompact(type_param)`.
- `TypeDefBitSequence(bit_store_type, bit_order_type)`.
- `TypeParameter(name, ty=None)`: `ty` is `None` for a skipped parameter.
- `Type(type_def=..., path=Path(), type_params=(), docs=())`, keyword-only.

```python
from scaletypes.fields import Field
from scaletypes.composite import TypeDefComposite
from scaletypes.path import Path
from scaletypes.types import Type, TypeDefPrimitive

point = Type(
    path=Path.new("Point", "geometry"),
    type_def=TypeDefComposite([
        Field(name="x", ty=0, type_name="i32"),
        Field(name="y", ty=0, type_name="i32"),
    ]),
)

point.to_json()
# {"path": ["geometry", "Point"],
#  "def": {"composite": {"fields": [
#      {"name": "x", "type": 0, "typeName": "i32"},
#      {"name": "y", "type": 0, "typeName": "i32"}]}}}

Type.from_def(TypeDefPrimitive.U8).to_json()
# {"def": {"primitive": "u8"}}
```

Empty collections and absent optional values are left out of the JSON. Each
class has a `from_json` that reads the same form back and raises `TypeError`
or `ValueError` on malformed input. `type_def_to_json` and
`type_def_from_json` encode and decode any definition kind as a single-key
object tagged with its kind (`composite`, `variant`, `sequence`, `array`,
`tuple`, `primitive`, `compact`, `bitsequence`).

## What this package does not do

It only describes types. It has no registry that assigns integer ids to
types and resolves references between them, no way to derive a description
from a Python class, and no binary encoding of the descriptions; type
references are whatever values the caller puts in them.

## Running the tests

```
pip install "scaletypes[test]"
python -m pytest
```