"""
Canonical JSON rendering and hashing of descriptor trees.

Provides a single canonical JSON policy and a SHA-256 fingerprint so callers
that memoize descriptors (for example by ``(type, bindings)``) can compare and
persist them. This module is zero-IO and uses only the Python standard library.

Notes:
    - Canonical JSON: sort_keys=True, separators=(",", ":"), ensure_ascii=False.
    - Types are rendered as stable ``module.qualname`` strings (builtins without
      a module); runtime ``at 0x...`` addresses are removed from reprs.
    - The fingerprint covers the whole tree, including source declarations.
"""

from __future__ import annotations

import hashlib
import json
import re
from typing import Any

from .descriptor import FieldDescriptor, FromAccessor, FromMember

__all__ = [
    "type_name",
    "descriptor_to_dict",
    "json_dumps_canonical",
    "descriptor_fingerprint",
]

_RUNTIME_ADDRESS_RE = re.compile(r" at 0x[0-9A-Fa-f]+")


def type_name(tp: Any) -> str:
    """
    Stable string for a type expression.

    Examples:
        >>> type_name(int), type_name(list[int])
        ('int', 'list[int]')
    """
    if isinstance(tp, type):
        if tp.__module__ == "builtins":
            return tp.__qualname__
        return f"{tp.__module__}.{tp.__qualname__}"
    return _RUNTIME_ADDRESS_RE.sub("", repr(tp))


def _source_to_dict(descriptor: FieldDescriptor) -> dict[str, Any]:
    source = descriptor.source
    if isinstance(source, FromMember):
        return {"kind": "member", "owner": type_name(source.member.owner), "name": source.member.name}
    if isinstance(source, FromAccessor):
        return {
            "kind": "accessor",
            "owner": type_name(source.accessor.owner),
            "name": source.accessor.name,
        }
    return {"kind": "synthesized"}


def descriptor_to_dict(descriptor: FieldDescriptor) -> dict[str, Any]:
    """
    Render a descriptor tree to JSON-compatible data.

    Absent sub-descriptors are rendered as None; variants as a nested mapping.
    """

    def sub(d: FieldDescriptor | None) -> dict[str, Any] | None:
        return None if d is None else descriptor_to_dict(d)

    return {
        "name": descriptor.name,
        "position": descriptor.position,
        "nullable": descriptor.nullable,
        "declared_type": type_name(descriptor.declared_type),
        "raw_type": type_name(descriptor.raw_type),
        "source": _source_to_dict(descriptor),
        "variants": {tag: descriptor_to_dict(v) for tag, v in descriptor.variants.items()},
        "element_type": sub(descriptor.element_type),
        "key_type": sub(descriptor.key_type),
        "value_type": sub(descriptor.value_type),
        "description": descriptor.description,
    }


def json_dumps_canonical(obj: Any) -> str:
    """
    Serialize an object to a canonical JSON string.

    Notes:
        Assumes the input is JSON-serializable; no coercion is performed.
    """
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def descriptor_fingerprint(descriptor: FieldDescriptor) -> str:
    """
    SHA-256 hex digest over the canonical JSON of a descriptor tree.

    Examples:
        >>> from typefield.core.descriptor import FieldDescriptor
        >>> d = FieldDescriptor(name="n", position=0, nullable=False, declared_type=int, raw_type=int)
        >>> descriptor_fingerprint(d) == descriptor_fingerprint(d.rename("m").rename("n"))
        True
    """
    h = hashlib.sha256()
    h.update(json_dumps_canonical(descriptor_to_dict(descriptor)).encode("utf-8"))
    return h.hexdigest()
