"""
External field name, position and description resolution.

Name precedence (highest first)
1) SchemaFieldName on the member -> its literal value.
2) SchemaFieldName together with SchemaCaseFormat on the same member ->
   ConfigurationConflict.
3) SchemaCaseFormat on the member -> natural name converted to that format.
4) SchemaCaseFormat on the declaring class -> natural name converted.
5) Caller default case format (InferenceSettings.case_format) -> converted.
6) Natural name unchanged.

The natural name of a member is its attribute name; for an accessor it is the
method name with its getter/setter prefix stripped (InvalidAccessorName when
no prefix applies).

Position: SchemaFieldNumber parsed as an int wins over the declaration index.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from typefield.core.casing import CaseFormat, convert_case
from typefield.core.errors import ConfigurationConflict, InvalidAccessorName, InvalidFieldNumber
from typefield.core.markers import (
    SchemaCaseFormat,
    SchemaFieldDescription,
    SchemaFieldName,
    SchemaFieldNumber,
    attached_markers,
    find_marker,
)
from typefield.reflect.members import Accessor, Member, strip_accessor_prefix

__all__ = [
    "accessor_natural_name",
    "resolve_name",
    "resolve_number",
    "parse_field_number",
    "resolve_description",
]


def accessor_natural_name(accessor: Accessor, prefixes: Sequence[str]) -> str:
    """
    Strip the first matching prefix from an accessor name.

    Raises:
        InvalidAccessorName: If none of ``prefixes`` applies.
    """
    for prefix in prefixes:
        stripped = strip_accessor_prefix(accessor.name, prefix)
        if stripped:
            return stripped
    raise InvalidAccessorName(
        f"accessor {accessor.qualname!r} has wrong prefix; expected one of {list(prefixes)}"
    )


def resolve_name(
    natural: str, declaration: Member | Accessor, default_format: CaseFormat | None = None
) -> str:
    """
    Apply the name precedence to a member or accessor.

    Args:
        natural (str): Natural declared name (prefix already stripped for accessors).
        declaration (Member | Accessor): Source of the markers.
        default_format (CaseFormat | None): Applied when no marker picks a format.

    Returns:
        str: External field name.

    Raises:
        ConfigurationConflict: If SchemaFieldName and SchemaCaseFormat are both present.
    """
    markers = declaration.markers
    field_name = find_marker(markers, SchemaFieldName)
    case_format = find_marker(markers, SchemaCaseFormat)
    if field_name is not None:
        if case_format is not None:
            raise ConfigurationConflict(
                "Cannot define both SchemaFieldName and SchemaCaseFormat. "
                f"From member {declaration.name!r}."
            )
        return field_name.value
    if case_format is not None:
        return convert_case(natural, case_format.value)
    class_format = find_marker(attached_markers(declaration.owner), SchemaCaseFormat)
    if class_format is not None:
        return convert_case(natural, class_format.value)
    if default_format is not None:
        return convert_case(natural, default_format)
    return natural


def parse_field_number(value: Any, where: str) -> int:
    """
    Parse a SchemaFieldNumber literal.

    Raises:
        InvalidFieldNumber: If the literal is not a non-negative integer.
    """
    if isinstance(value, bool):
        raise InvalidFieldNumber(f"{where}: field number must be an integer, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise InvalidFieldNumber(f"{where}: field number must be an integer, got {value!r}") from exc
    if number < 0:
        raise InvalidFieldNumber(f"{where}: field number must be non-negative, got {number}")
    return number


def resolve_number(index: int, declaration: Member | Accessor) -> int:
    """Explicit SchemaFieldNumber if present, else ``index``."""
    marker = find_marker(declaration.markers, SchemaFieldNumber)
    if marker is None:
        return index
    return parse_field_number(marker.value, declaration.qualname)


def resolve_description(declaration: Member | Accessor) -> str | None:
    marker = find_marker(declaration.markers, SchemaFieldDescription)
    if marker is not None:
        return marker.value
    return getattr(declaration, "description", None)
