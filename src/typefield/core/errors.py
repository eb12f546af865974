"""
Core exception types raised while building field descriptors.

Provides typed exceptions for declaration-level failures:
- ConfigurationConflict when mutually exclusive markers sit on one member.
- InvalidAccessorName when a getter/setter name lacks its prefix.
- InvalidSetterArity when a setter does not take exactly one argument.
- InvalidFieldNumber when a SchemaFieldNumber literal cannot be used as a position.
- RecursiveTypeError when a container type re-enters its own decomposition.
- DescriptorShapeError when a descriptor would violate its shape invariants.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - Every error is raised eagerly at construction time; the only remedy is to
      fix the type declaration, so nothing here is retried or recovered.

Examples:
    Catch a conflicting declaration.

    >>> from typefield.core.errors import ConfigurationConflict, SchemaError
    >>> try:
    ...     raise ConfigurationConflict("member 'user_id' declares both markers")
    ... except SchemaError as e:
    ...     msg = str(e)
    >>> "user_id" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "SchemaError",
    "ConfigurationConflict",
    "InvalidAccessorName",
    "InvalidSetterArity",
    "InvalidFieldNumber",
    "RecursiveTypeError",
    "DescriptorShapeError",
]


class SchemaError(ValueError):
    """Base class for descriptor construction failures."""


class ConfigurationConflict(SchemaError):
    """SchemaFieldName and SchemaCaseFormat were both declared on the same member."""


class InvalidAccessorName(SchemaError):
    """Accessor name does not start with a recognized getter/setter prefix."""


class InvalidSetterArity(SchemaError):
    """Setter does not declare exactly one parameter."""


class InvalidFieldNumber(SchemaError):
    """
    Field number literal is malformed, negative, or inconsistent with its siblings.

    Notes:
        Suppliers also raise this when explicit numbers are not exactly 0..n-1.
    """


class RecursiveTypeError(SchemaError):
    """Container decomposition reached a type already on the current path."""


class DescriptorShapeError(SchemaError):
    """Descriptor attributes describe more than one shape (sequence, map, union)."""
