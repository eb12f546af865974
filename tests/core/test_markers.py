from typing import Annotated

from typefield.core.casing import CaseFormat
from typefield.core.markers import (
    Nullable,
    SchemaCaseFormat,
    SchemaFieldDescription,
    SchemaFieldName,
    SchemaFieldNumber,
    annotated_markers,
    attached_markers,
    find_marker,
    is_nullable_marker,
    metadata_markers,
)


@SchemaCaseFormat(CaseFormat.UPPER_UNDERSCORE)
class Account:
    @SchemaFieldDescription("primary key")
    @SchemaFieldNumber("0")
    def get_account_id(self) -> int:
        return 1


class SavingsAccount(Account):
    pass


class Nullable_:  # noqa: N801
    pass


def test_decorators_stack_on_methods() -> None:
    markers = attached_markers(Account.get_account_id)
    assert SchemaFieldNumber("0") in markers
    assert SchemaFieldDescription("primary key") in markers
    # decorated function is returned unchanged
    assert Account().get_account_id() == 1


def test_class_markers_are_not_inherited() -> None:
    assert attached_markers(Account) == (SchemaCaseFormat(CaseFormat.UPPER_UNDERSCORE),)
    assert attached_markers(SavingsAccount) == ()


def test_annotated_markers_top_level_only() -> None:
    tp = Annotated[list[Annotated[int, Nullable()]], SchemaFieldName("ids")]
    assert annotated_markers(tp) == (SchemaFieldName("ids"),)
    assert annotated_markers(int) == ()


def test_metadata_markers_single_and_sequence() -> None:
    assert metadata_markers({"typefield": Nullable()}) == (Nullable(),)
    assert metadata_markers({"typefield": [Nullable(), SchemaFieldName("x")]}) == (
        Nullable(),
        SchemaFieldName("x"),
    )
    assert metadata_markers({"other": 1}) == ()
    assert metadata_markers(None) == ()


def test_find_marker_returns_first_of_kind() -> None:
    markers = (Nullable(), SchemaFieldName("a"), SchemaFieldName("b"))
    assert find_marker(markers, SchemaFieldName) == SchemaFieldName("a")
    assert find_marker(markers, SchemaFieldNumber) is None


def test_nullable_marker_recognized_by_bare_name_from_any_module() -> None:
    # A marker defined elsewhere with the same simple name is accepted.
    ForeignNullable = type("Nullable", (), {"__module__": "some.other.lib"})
    assert is_nullable_marker(ForeignNullable())
    assert is_nullable_marker(ForeignNullable)
    assert is_nullable_marker(Nullable())
    assert not is_nullable_marker(Nullable_())
    assert not is_nullable_marker("Nullable")
