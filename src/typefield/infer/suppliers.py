"""
Class-level field suppliers.

Drive the descriptor builders over every member, getter or setter of a class
(or a parametrized alias such as ``Page[User]``), binding the class's type
parameters first.

Notes:
    - Members and accessors carrying SchemaIgnore are skipped before indexes
      are assigned, so indexes stay contiguous.
    - When any field declares SchemaFieldNumber, the result is sorted by
      position and the positions must be exactly 0..n-1 (unless
      InferenceSettings.validate_numbers is off).
"""

from __future__ import annotations

import logging
from typing import Any

from typefield.core.descriptor import FieldDescriptor
from typefield.core.errors import InvalidFieldNumber
from typefield.core.markers import SchemaFieldNumber, SchemaIgnore, find_marker
from typefield.reflect.members import Accessor, Member, list_getters, list_members, list_setters
from typefield.reflect.types import bound_types

from .build import for_getter, for_member, for_setter
from .config import InferenceSettings

__all__ = [
    "member_fields",
    "getter_fields",
    "setter_fields",
    "validate_field_numbers",
]

logger = logging.getLogger(__name__)


def _kept(declarations: list[Any]) -> list[Any]:
    return [d for d in declarations if find_marker(d.markers, SchemaIgnore) is None]


def _has_numbers(declarations: list[Member] | list[Accessor]) -> bool:
    return any(find_marker(d.markers, SchemaFieldNumber) is not None for d in declarations)


def validate_field_numbers(fields: list[FieldDescriptor]) -> None:
    """
    Require ``fields`` (already sorted) to be numbered exactly 0..n-1.

    Raises:
        InvalidFieldNumber: On a missing, duplicate or skipped number.
    """
    for i, f in enumerate(fields):
        if f.position is None:
            raise InvalidFieldNumber(f"Unexpected missing number for field {f.name!r}")
        if f.position != i:
            raise InvalidFieldNumber(
                f"Expected field number {i} for field {f.name!r} instead got {f.position}"
            )


def _ordered(
    fields: list[FieldDescriptor], numbered: bool, settings: InferenceSettings
) -> list[FieldDescriptor]:
    if not numbered:
        return fields
    fields = sorted(fields, key=lambda f: f.position if f.position is not None else -1)
    if settings.validate_numbers:
        validate_field_numbers(fields)
    return fields


def member_fields(tp: Any, settings: InferenceSettings | None = None) -> list[FieldDescriptor]:
    """
    Descriptors for the directly declared members of ``tp``.

    Args:
        tp: Record class or parametrized alias.
        settings: Supplier settings (defaults when None).

    Returns:
        list[FieldDescriptor]: In declaration order, or by field number when numbered.
    """
    settings = settings or InferenceSettings()
    bindings = bound_types(tp)
    members = _kept(list_members(tp, include_private=settings.include_private))
    fields = [
        for_member(m, i, bindings, case_format=settings.case_format)
        for i, m in enumerate(members)
    ]
    logger.debug("inferred %d member fields for %r", len(fields), tp)
    return _ordered(fields, _has_numbers(members), settings)


def getter_fields(tp: Any, settings: InferenceSettings | None = None) -> list[FieldDescriptor]:
    """Descriptors for the getters of ``tp`` (see member_fields)."""
    settings = settings or InferenceSettings()
    bindings = bound_types(tp)
    getters = _kept(list_getters(tp, settings.getter_prefixes))
    fields = [
        for_getter(
            a, i, bindings, prefixes=settings.getter_prefixes, case_format=settings.case_format
        )
        for i, a in enumerate(getters)
    ]
    logger.debug("inferred %d getter fields for %r", len(fields), tp)
    return _ordered(fields, _has_numbers(getters), settings)


def setter_fields(tp: Any, settings: InferenceSettings | None = None) -> list[FieldDescriptor]:
    """Descriptors for the setters of ``tp``; positions are always None."""
    settings = settings or InferenceSettings()
    bindings = bound_types(tp)
    setters = _kept(list_setters(tp, settings.setter_prefix))
    fields = [
        for_setter(a, bindings, prefix=settings.setter_prefix, case_format=settings.case_format)
        for a in setters
    ]
    logger.debug("inferred %d setter fields for %r", len(fields), tp)
    return fields
