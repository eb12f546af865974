"""
typefield: schema field descriptors inferred from typed Python declarations.

## Layers
- typefield.core: FieldDescriptor, markers, casing, errors, serde (zero-IO).
- typefield.reflect: member/accessor enumeration and type resolution.
- typefield.infer: descriptor builders, class-level suppliers, settings.

## Examples
```python
from typing import Annotated
from dataclasses import dataclass
from typefield import Nullable, SchemaFieldName, member_fields

@dataclass
class User:
    user_id: Annotated[int, SchemaFieldName("id")]
    email: str | None
    tags: list[str]

fields = member_fields(User)
[(f.name, f.nullable) for f in fields]  # [('id', False), ('email', True), ('tags', False)]
fields[2].element_type.raw_type  # <class 'str'>
```
"""

from __future__ import annotations

from .core import (
    CaseFormat,
    ConfigurationConflict,
    FieldDescriptor,
    InvalidAccessorName,
    InvalidFieldNumber,
    InvalidSetterArity,
    Nullable,
    OneOfValue,
    SchemaCaseFormat,
    SchemaError,
    SchemaFieldDescription,
    SchemaFieldName,
    SchemaFieldNumber,
    SchemaIgnore,
)
from .infer import (
    InferenceSettings,
    for_getter,
    for_member,
    for_one_of,
    for_setter,
    getter_fields,
    member_fields,
    setter_fields,
)

__all__ = [
    "CaseFormat",
    "ConfigurationConflict",
    "FieldDescriptor",
    "InvalidAccessorName",
    "InvalidFieldNumber",
    "InvalidSetterArity",
    "Nullable",
    "OneOfValue",
    "SchemaCaseFormat",
    "SchemaError",
    "SchemaFieldDescription",
    "SchemaFieldName",
    "SchemaFieldNumber",
    "SchemaIgnore",
    "InferenceSettings",
    "for_getter",
    "for_member",
    "for_one_of",
    "for_setter",
    "getter_fields",
    "member_fields",
    "setter_fields",
]
