import dataclasses

import pytest

from typefield.core.descriptor import FieldDescriptor, OneOfValue, Synthesized
from typefield.core.errors import DescriptorShapeError


def _scalar(tp: type, name: str = "") -> FieldDescriptor:
    return FieldDescriptor(name=name, position=None, nullable=False, declared_type=tp, raw_type=tp)


def _list_of_int() -> FieldDescriptor:
    return FieldDescriptor(
        name="ids",
        position=2,
        nullable=True,
        declared_type=list[int],
        raw_type=list,
        element_type=_scalar(int),
        description="identifiers",
    )


def test_rename_round_trip_preserves_everything_else() -> None:
    d = _list_of_int()
    renamed = d.rename("other")
    assert renamed.name == "other"
    assert dataclasses.replace(renamed, name="ids") == d
    assert renamed.rename(d.name) == d
    assert renamed.element_type is d.element_type
    assert (renamed.position, renamed.nullable, renamed.description) == (2, True, "identifiers")


def test_descriptor_is_frozen() -> None:
    d = _list_of_int()
    with pytest.raises(dataclasses.FrozenInstanceError):
        d.name = "changed"  # type: ignore[misc]


def test_key_without_value_is_rejected() -> None:
    with pytest.raises(DescriptorShapeError):
        FieldDescriptor(
            name="m",
            position=0,
            nullable=False,
            declared_type=dict[str, int],
            raw_type=dict,
            key_type=_scalar(str),
        )


def test_more_than_one_shape_is_rejected() -> None:
    with pytest.raises(DescriptorShapeError):
        FieldDescriptor(
            name="x",
            position=0,
            nullable=False,
            declared_type=OneOfValue,
            raw_type=OneOfValue,
            element_type=_scalar(int),
            variants={"a": _scalar(int)},
        )


def test_negative_position_is_rejected() -> None:
    with pytest.raises(DescriptorShapeError):
        FieldDescriptor(name="x", position=-1, nullable=False, declared_type=int, raw_type=int)


def test_variants_are_read_only_copies() -> None:
    variants = {"intVal": _scalar(int)}
    d = FieldDescriptor(
        name="u",
        position=None,
        nullable=False,
        declared_type=OneOfValue,
        raw_type=OneOfValue,
        variants=variants,
    )
    variants["strVal"] = _scalar(str)
    assert list(d.variants) == ["intVal"]
    with pytest.raises(TypeError):
        d.variants["x"] = _scalar(int)  # type: ignore[index]
    assert d.is_one_of and not d.is_sequence and not d.is_map


def test_default_source_is_synthesized() -> None:
    d = _scalar(int)
    assert d.source == Synthesized()
    assert d.member is None
    assert d.accessor is None
    assert hash(d) == hash(_scalar(int))
