"""
Descriptor inference defaults.

Defines the accessor prefixes, marker designators and metadata keys shared by
the reflection and inference layers. This module is zero-IO and uses only the
Python standard library.

Notes:
    - typefield.infer.config.InferenceSettings sources its defaults from here.
    - NULLABLE_DESIGNATOR is matched against a marker's bare class name, never
      its module, so equivalent markers from other libraries are accepted.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_SETTER_PREFIX",
    "GETTER_PREFIXES",
    "NULLABLE_DESIGNATOR",
    "MARKERS_ATTR",
    "METADATA_KEY",
]

# Prefix stripped from setter names when none is supplied (set_amount, setAmount).
DEFAULT_SETTER_PREFIX: str = "set"

# Prefixes stripped from getter names, tried in order.
GETTER_PREFIXES: tuple[str, ...] = ("get", "is")

# Bare class name identifying a nullability marker.
NULLABLE_DESIGNATOR: str = "Nullable"

# Attribute holding markers attached by decorators to functions and classes.
MARKERS_ATTR: str = "__typefield_markers__"

# dataclasses.field(metadata=...) key holding member markers.
METADATA_KEY: str = "typefield"
