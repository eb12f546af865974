"""
Core package aggregator for typefield contracts (descriptors, markers, casing, errors, serde).

## Contracts (single source of truth)
- Descriptor: the frozen, recursive FieldDescriptor value and its source variants.
- Markers: SchemaFieldName, SchemaCaseFormat, SchemaFieldNumber,
  SchemaFieldDescription, SchemaIgnore, Nullable and their lookups.
- Casing: CaseFormat and name conversion.
- Errors: the SchemaError taxonomy raised at construction time.
- Serde: canonical JSON rendering and fingerprints of descriptor trees.

## Notes
- Zero-IO policy: stdlib only; no file/network IO.
- Construction of descriptors lives in typefield.infer; reflection over
  classes and typing objects lives in typefield.reflect.

## Examples
```python
from typefield.core import CaseFormat, convert_case
convert_case("userId", CaseFormat.UPPER_UNDERSCORE)  # 'USER_ID'
```
"""

from __future__ import annotations

from .casing import CaseFormat, convert_case
from .descriptor import (
    FieldDescriptor,
    FieldSource,
    FromAccessor,
    FromMember,
    OneOfValue,
    Synthesized,
)
from .errors import (
    ConfigurationConflict,
    DescriptorShapeError,
    InvalidAccessorName,
    InvalidFieldNumber,
    InvalidSetterArity,
    RecursiveTypeError,
    SchemaError,
)
from .markers import (
    Nullable,
    SchemaCaseFormat,
    SchemaFieldDescription,
    SchemaFieldName,
    SchemaFieldNumber,
    SchemaIgnore,
)

__all__ = [
    "CaseFormat",
    "convert_case",
    "FieldDescriptor",
    "FieldSource",
    "FromAccessor",
    "FromMember",
    "OneOfValue",
    "Synthesized",
    "SchemaError",
    "ConfigurationConflict",
    "DescriptorShapeError",
    "InvalidAccessorName",
    "InvalidFieldNumber",
    "InvalidSetterArity",
    "RecursiveTypeError",
    "Nullable",
    "SchemaCaseFormat",
    "SchemaFieldDescription",
    "SchemaFieldName",
    "SchemaFieldNumber",
    "SchemaIgnore",
]
