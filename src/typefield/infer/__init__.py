"""
typefield.infer: field descriptor construction.

## Public API
- for_member / for_getter / for_setter / for_one_of: build one FieldDescriptor.
- member_fields / getter_fields / setter_fields: build every field of a class.
- InferenceSettings: supplier configuration (env > TOML > defaults).

## Examples
```python
from dataclasses import dataclass
from typefield.infer import member_fields

@dataclass
class Order:
    order_id: int
    lines: list[dict[str, float]]

[f.name for f in member_fields(Order)]  # ['order_id', 'lines']
```

## Notes
- Every call is synchronous, side-effect free and thread-safe; nothing is cached.
- Modules log through ``logging.getLogger(__name__)`` at debug level; no
  handlers are installed.
"""

from __future__ import annotations

from .build import for_getter, for_member, for_one_of, for_setter
from .config import InferenceSettings
from .suppliers import getter_fields, member_fields, setter_fields

__all__ = [
    "for_member",
    "for_getter",
    "for_setter",
    "for_one_of",
    "member_fields",
    "getter_fields",
    "setter_fields",
    "InferenceSettings",
]
