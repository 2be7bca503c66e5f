"""Tests for permalink sanitizing, anchors and page paths."""

from doxyview.compound_def import TemplateParam
from doxyview.is_operator_name import is_operator_name
from doxyview.page_path_for_name import page_path_for_name
from doxyview.path_sanitizer import (
    flatten_path,
    sanitize_anonymous_namespace,
    sanitize_hierarchical_path,
    short_hash,
)
from doxyview.permalink_anchor import (
    get_permalink_anchor,
    strip_permalink_hex_anchor,
    strip_permalink_text_anchor,
)
from doxyview.template_parameters import (
    render_template_param_names,
    strip_template_parameters,
    template_parameters_of,
    unqualified_name,
)


def test_sanitize_lowercases_and_drops_spaces() -> None:
    """Verify that paths are lowercased and spaces removed."""
    assert sanitize_hierarchical_path("ns/Foo Bar") == "ns/foobar"


def test_sanitize_hex_encodes_operator_characters() -> None:
    """Verify that operator characters are encoded instead of collapsed."""
    assert sanitize_hierarchical_path("operator*") == "operator2a"
    assert sanitize_hierarchical_path("operator&") == "operator26"
    assert sanitize_hierarchical_path("Foo<int>") == "foo3cint3e"


def test_sanitize_replaces_other_characters() -> None:
    """Verify that anything outside [a-z0-9/-] becomes a dash."""
    assert sanitize_hierarchical_path("a_b.c") == "a-b-c"


def test_flatten_path() -> None:
    """Verify that slashes become dashes."""
    assert flatten_path("ns/sub/foo") == "ns-sub-foo"


def test_sanitize_anonymous_namespace() -> None:
    """Verify the Doxygen anonymous namespace spelling is shortened."""
    assert (
        sanitize_anonymous_namespace("ns::anonymous_namespace{a.cpp}::X")
        == "ns::anonymous{a.cpp}::X"
    )


def test_page_path_for_qualified_name() -> None:
    """Verify that scope separators become path separators."""
    assert page_path_for_name("classes", "ns::Foo") == "classes/ns/foo"


def test_page_path_for_anonymous_segments() -> None:
    """Verify that anonymous segments map to the placeholder."""
    assert (
        page_path_for_name("namespaces", "ns::anonymous_namespace{a.cpp}")
        == "namespaces/ns/anonymous"
    )
    assert page_path_for_name("classes", "ns::@0") == "classes/ns/anonymous"
    assert (
        page_path_for_name("classes", "@1", anonymous_placeholder="unnamed")
        == "classes/unnamed"
    )


def test_page_path_template_suffix_is_short_hash() -> None:
    """Verify that specializations get distinct, stable, short suffixes."""
    int_path = page_path_for_name("classes", "ns::Foo", "<int>")
    char_path = page_path_for_name("classes", "ns::Foo", "<char>")

    assert int_path == f"classes/ns/foo-{short_hash('<int>')}"
    assert len(int_path.rsplit("-", 1)[1]) == 8
    assert int_path != char_path
    assert page_path_for_name("classes", "ns::Foo", "<int>") == int_path


def test_page_path_hash_length_is_configurable() -> None:
    """Verify the hash length option."""
    path = page_path_for_name("classes", "Foo", "<int>", hash_length=4)
    assert path == f"classes/foo-{short_hash('<int>', 4)}"


def test_strip_hex_anchor() -> None:
    """Verify the owning compound id is recovered from a member id."""
    assert strip_permalink_hex_anchor("classfoo_1a3f2b") == "classfoo"
    assert strip_permalink_hex_anchor("classns_1_1foo_1a3f") == "classns_1_1foo"
    assert strip_permalink_hex_anchor("classfoo") == "classfoo"


def test_get_anchor() -> None:
    """Verify the in-page anchor is the part after the last _1."""
    assert get_permalink_anchor("classns_1_1foo_1a3f") == "a3f"


def test_strip_text_anchor() -> None:
    """Verify xref section ids map back to their page."""
    assert strip_permalink_text_anchor("todo_1_todo000001") == "todo"


def test_is_operator_name() -> None:
    """Verify operator detection needs a non-identifier character."""
    assert is_operator_name("operator==")
    assert is_operator_name("operator()")
    assert is_operator_name("operator new")
    assert not is_operator_name("operators")
    assert not is_operator_name("operator")
    assert not is_operator_name("get")


def test_template_name_helpers() -> None:
    """Verify splitting template arguments and scopes off names."""
    assert template_parameters_of("ns::Foo<int, 3>") == "<int, 3>"
    assert template_parameters_of("ns::Foo") == ""
    assert strip_template_parameters("ns::Foo<int>") == "ns::Foo"
    assert unqualified_name("a::b::C") == "C"


def test_template_parameter_names() -> None:
    """Verify parameter names are listed, unnamed ones by their type."""
    params = [
        TemplateParam(type="class", declname="T"),
        TemplateParam(type="typename..."),
        TemplateParam(type="int", declname="N", defval="3"),
    ]
    assert render_template_param_names(params) == "<T, typename..., N>"
    assert render_template_param_names([]) == ""
