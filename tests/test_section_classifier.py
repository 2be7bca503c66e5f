"""Tests for classifying members into ordered sections."""

from unittest.mock import MagicMock

import pytest

from doxyview.compound_def import MemberDef, MemberRefDef, SectionDef
from doxyview.errors import ParseContractError
from doxyview.section import Section
from doxyview.section_classifier import (
    ClassifiedSection,
    adjust_section_kind,
    compute_adjusted_kind,
    reorder_section_defs,
)


def create_member(name: str, kind: str = "function", mid: str = "") -> MemberDef:
    """Create a MemberDef for testing."""
    return MemberDef(id=mid or f"classfoo_1{name.encode().hex()}", kind=kind, name=name)


@pytest.mark.parametrize(
    ("section_kind", "member_kind", "name", "expected"),
    [
        ("public-func", "function", "Foo", "public-constructor"),
        ("protected-func", "function", "~Foo", "protected-destructor"),
        ("public-func", "function", "operator==", "public-operator"),
        ("public-func", "function", "bar", "public-func"),
        ("public-static-func", "function", "Foo", "public-static-func"),
        ("public-static-func", "function", "operator+", "public-static-operator"),
        ("public-attrib", "variable", "x", "public-attrib"),
        ("private-type", "typedef", "T", "private-type"),
        ("public-slot", "slot", "onClick", "public-slot"),
        ("public-func", "enum", "E", "enum"),
        ("func", "function", "bar", "function"),
        ("var", "variable", "x", "variable"),
        ("user-defined", "function", "Foo", "function"),
    ],
)
def test_adjust_section_kind(
    section_kind: str, member_kind: str, name: str, expected: str
) -> None:
    """Verify per-member reclassification keeps the visibility prefix."""
    assert adjust_section_kind(section_kind, member_kind, name, "Foo") == expected


def test_function_without_class_name_stays_function() -> None:
    """Verify that free functions are never constructors."""
    assert adjust_section_kind("func", "function", "Foo", None) == "function"


def test_compute_adjusted_kind_without_prefix() -> None:
    """Verify that sections without a prefix use the member suffix."""
    assert compute_adjusted_kind("typedef", "type", "typedef") == "typedef"
    assert compute_adjusted_kind("package-attrib", "attrib", "variable") == (
        "package-attrib"
    )


def test_reorder_splits_mixed_section() -> None:
    """Verify that one raw section can produce several buckets."""
    section = SectionDef(
        kind="public-func",
        member_defs=[
            create_member("Foo"),
            create_member("~Foo"),
            create_member("bar"),
            create_member("operator="),
        ],
    )
    result = reorder_section_defs([section], "Foo")
    assert [s.kind for s in result] == [
        "public-constructor",
        "public-destructor",
        "public-func",
        "public-operator",
    ]
    assert [m.name for m in result[2].member_defs] == ["bar"]


def test_reorder_keeps_user_sections_verbatim() -> None:
    """Verify that user sections with a header are not regrouped."""
    user = SectionDef(
        kind="user-defined",
        header="Helpers",
        member_defs=[create_member("Foo"), create_member("x", "variable")],
    )
    result = reorder_section_defs([user], "Foo")
    assert len(result) == 1
    assert result[0].kind == "user-defined"
    assert result[0].header == "Helpers"
    assert [m.name for m in result[0].member_defs] == ["Foo", "x"]


def test_reorder_buckets_member_refs() -> None:
    """Verify that member references are classified like definitions."""
    section = SectionDef(
        kind="public-func",
        members=[MemberRefDef(refid="classbar_1a1", name="Foo", kind="function")],
    )
    result = reorder_section_defs([section], "Foo")
    assert result[0].kind == "public-constructor"
    assert result[0].members[0].refid == "classbar_1a1"


def test_section_headers_and_order() -> None:
    """Verify headers and sort keys come from the kind table."""
    compound = MagicMock()
    section = Section(compound, ClassifiedSection(kind="public-constructor"))
    assert section.header == "Public Constructors"
    assert section.order == 200


def test_user_section_header_is_preserved() -> None:
    """Verify the author-supplied header is kept and stripped."""
    compound = MagicMock()
    section = Section(compound, ClassifiedSection(kind="user-defined", header=" Helpers "))
    assert section.header == "Helpers"
    assert section.order == 1000

    unnamed = Section(compound, ClassifiedSection(kind="user-defined"))
    assert unnamed.header == "User Defined"


def test_unknown_section_kind_is_a_hard_failure() -> None:
    """Verify that a section with no header and unknown kind aborts."""
    compound = MagicMock()
    compound.id = "classfoo"
    with pytest.raises(ParseContractError):
        Section(compound, ClassifiedSection(kind="bogus-kind"))


def test_definition_members_are_sorted() -> None:
    """Verify definition members are sorted by name, index members are not."""
    compound = MagicMock()
    classified = ClassifiedSection(
        kind="public-func",
        member_defs=[create_member("zeta"), create_member("Alpha")],
        members=[MemberRefDef(refid="classbar_1a1", name="beta", kind="function")],
    )
    section = Section(compound, classified)
    assert [m.name for m in section.index_members] == ["zeta", "Alpha", "beta"]
    assert [m.name for m in section.definition_members] == ["Alpha", "zeta"]
