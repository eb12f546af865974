"""
Nullability detection for members, getters and setters.

A declaration is nullable iff a nullability marker appears either on the
declaration itself (decorator markers, field metadata, top-level ``Annotated``
metadata) or on its resolved type (``Annotated`` metadata that arrived through
a TypeVar binding, or an ``X | None`` union).

Markers are matched on their bare class name (``Nullable``), so markers from
any library are accepted.
"""

from __future__ import annotations

import inspect
from collections.abc import Iterable
from typing import Any

from typefield.core.errors import InvalidSetterArity
from typefield.core.markers import annotated_markers, is_nullable_marker
from typefield.reflect.members import Accessor, Member
from typefield.reflect.types import is_optional

__all__ = [
    "has_nullable_marker",
    "is_nullable_type",
    "member_is_nullable",
    "getter_is_nullable",
    "setter_parameter",
    "setter_is_nullable",
]


def has_nullable_marker(markers: Iterable[Any]) -> bool:
    return any(is_nullable_marker(m) for m in markers)


def is_nullable_type(resolved: Any) -> bool:
    """Type-site check on a resolved type expression."""
    return has_nullable_marker(annotated_markers(resolved)) or is_optional(resolved)


def member_is_nullable(member: Member, resolved: Any) -> bool:
    return has_nullable_marker(member.markers) or is_nullable_type(resolved)


def getter_is_nullable(accessor: Accessor, resolved_return: Any) -> bool:
    """
    Nullable when the method or its return type carries a nullability marker.
    """
    return (
        has_nullable_marker(accessor.markers)
        or has_nullable_marker(annotated_markers(accessor.return_annotation))
        or is_nullable_type(resolved_return)
    )


def setter_parameter(accessor: Accessor) -> inspect.Parameter:
    """
    The sole parameter of a setter.

    Raises:
        InvalidSetterArity: If the setter does not take exactly one argument.
    """
    params = accessor.parameters
    if len(params) != 1:
        raise InvalidSetterArity(
            f"Setter methods should take a single argument {accessor.qualname!r} "
            f"(got {len(params)})"
        )
    return params[0]


def setter_is_nullable(accessor: Accessor, resolved_parameter: Any) -> bool:
    """Nullable when the sole parameter's annotation or its resolved type is marked."""
    param = setter_parameter(accessor)
    return has_nullable_marker(
        annotated_markers(accessor.parameter_annotation(param))
    ) or is_nullable_type(resolved_parameter)
