"""
typefield.reflect: introspection over classes and typing objects.

## Responsibilities
- Enumerate members, getters and setters of record-like classes (dataclasses,
  pydantic models, plain annotated classes) as hashable handles.
- Resolve TypeVar bindings, compute erasures, and classify sequence and
  mapping shapes.

## Import DAG discipline
- Depends only on stdlib, pydantic and typefield.core.
- MUST NOT import typefield.infer.
"""

from __future__ import annotations

from .members import Accessor, Member, list_getters, list_members, list_setters
from .types import bound_types, raw_type_of, resolve_type

__all__ = [
    "Accessor",
    "Member",
    "list_getters",
    "list_members",
    "list_setters",
    "bound_types",
    "raw_type_of",
    "resolve_type",
]
