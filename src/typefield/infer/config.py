"""
Configuration for the typefield.infer suppliers.

Defines InferenceSettings, a frozen dataclass carrying the knobs the field
suppliers use when enumerating a whole class. Defaults are sourced from
typefield.core.constants (the single source of truth).

Source of truth
- typefield.core.constants.DEFAULT_SETTER_PREFIX, GETTER_PREFIXES

Notes
- Precedence: environment (TYPEFIELD_*) > TOML > defaults.
- TOML search order: ./typefield.toml ([infer] table or top-level keys), then
  ./pyproject.toml under [tool.typefield.infer].
- Unrecognized or malformed values are ignored and the previous value kept.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from typefield.core.casing import CaseFormat, case_format_from_value
from typefield.core.constants import DEFAULT_SETTER_PREFIX, GETTER_PREFIXES

__all__ = ["InferenceSettings"]


def _bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        return v.strip().lower() in {"1", "true", "t", "yes", "y", "on"}
    return False


def _prefixes(v: Any) -> tuple[str, ...] | None:
    if isinstance(v, str):
        items = [p.strip() for p in v.split(",")]
    elif isinstance(v, (list, tuple)):
        items = [str(p).strip() for p in v]
    else:
        return None
    items = [p for p in items if p]
    return tuple(items) or None


@dataclass(frozen=True)
class InferenceSettings:
    """
    Runtime settings for class-level field suppliers.

    Attributes:
        setter_prefix (str): Prefix stripped from setter names (default "set").
        getter_prefixes (tuple[str, ...]): Prefixes stripped from getter names, in order.
        include_private (bool): Enumerate ``_private`` members too.
        validate_numbers (bool): Require explicit field numbers to be exactly 0..n-1.
        case_format (CaseFormat | None): Default name format for members and accessors
            whose class carries no SchemaCaseFormat.

    Examples:
        >>> from typefield.infer.config import InferenceSettings
        >>> InferenceSettings(setter_prefix="with")  # doctest: +ELLIPSIS
        InferenceSettings(setter_prefix='with', ...)
    """

    setter_prefix: str = DEFAULT_SETTER_PREFIX
    getter_prefixes: tuple[str, ...] = GETTER_PREFIXES
    include_private: bool = False
    validate_numbers: bool = True
    case_format: CaseFormat | None = None

    @classmethod
    def _apply_mapping(
        cls, base: InferenceSettings, cfg: dict[str, Any] | None
    ) -> InferenceSettings:
        """Apply a loose config mapping onto InferenceSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        # setter_prefix
        if "setter_prefix" in cfg and isinstance(cfg["setter_prefix"], str):
            prefix = cfg["setter_prefix"].strip()
            if prefix:
                s = replace(s, setter_prefix=prefix)

        # getter_prefixes (list in TOML, comma separated in env)
        if "getter_prefixes" in cfg:
            prefixes = _prefixes(cfg["getter_prefixes"])
            if prefixes is not None:
                s = replace(s, getter_prefixes=prefixes)

        if "include_private" in cfg:
            s = replace(s, include_private=_bool(cfg["include_private"]))

        if "validate_numbers" in cfg:
            s = replace(s, validate_numbers=_bool(cfg["validate_numbers"]))

        # case_format ("upper_underscore", "LOWER_CAMEL", ...)
        if "case_format" in cfg and isinstance(cfg["case_format"], str):
            try:
                s = replace(s, case_format=case_format_from_value(cfg["case_format"]))
            except ValueError:
                pass

        return s

    @classmethod
    def from_env(
        cls, base: InferenceSettings | None = None, prefix: str = "TYPEFIELD_"
    ) -> InferenceSettings:
        """
        Build InferenceSettings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - TYPEFIELD_SETTER_PREFIX
            - TYPEFIELD_GETTER_PREFIXES (comma separated, e.g. "get,is,has")
            - TYPEFIELD_INCLUDE_PRIVATE (1/0/true/false/yes/no/on/off)
            - TYPEFIELD_VALIDATE_NUMBERS (1/0/true/false/yes/no/on/off)
            - TYPEFIELD_CASE_FORMAT (e.g. "upper_underscore", "lower_camel")
        """
        s = base or cls()

        def get(name: str) -> str | None:
            return os.getenv(prefix + name)

        mapping: dict[str, Any] = {}
        for key in (
            "SETTER_PREFIX",
            "GETTER_PREFIXES",
            "INCLUDE_PRIVATE",
            "VALIDATE_NUMBERS",
            "CASE_FORMAT",
        ):
            v = get(key)
            if v:
                mapping[key.lower()] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> InferenceSettings:
        """
        Build InferenceSettings from a TOML file.

        Search order when `path` is None:
            1) ./typefield.toml (with either top-level [infer] or direct keys)
            2) ./pyproject.toml under [tool.typefield.infer]

        Returns defaults if no file is present or none parses.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError):
                return None

        cfg: dict[str, Any] | None = None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "typefield.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("typefield", {}).get("infer", {}) if isinstance(tool, dict) else None
            elif "infer" in data and isinstance(data["infer"], dict):
                cfg = data["infer"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> InferenceSettings:
        """
        Load InferenceSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search typefield.toml, pyproject.toml.
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
