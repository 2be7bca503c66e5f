"""Tests for the namespace, file, group and page collections."""

import logging

import pytest

from doxyview.compound_def import (
    CompoundDef,
    CompoundRef,
    Location,
    MemberDef,
    SectionDef,
)
from doxyview.files_and_folders import File, FilesAndFolders, Folder
from doxyview.load_config import load_config
from doxyview.namespaces import Namespace
from doxyview.workspace import Workspace


def ref(refid: str) -> CompoundRef:
    """Create a by-id reference."""
    return CompoundRef(text=refid, refid=refid)


def build(*defs: CompoundDef, config: dict | None = None) -> Workspace:
    """Build a workspace from the given definitions."""
    workspace = Workspace(config)
    workspace.register_from_parsed_set(defs)
    return workspace


def test_namespace_tree() -> None:
    """Verify nested namespaces form a tree with one top-level entry."""
    ws = build(
        CompoundDef(
            id="namespacens",
            kind="namespace",
            compound_name="ns",
            inner_namespaces=[ref("namespacens_1_1sub")],
        ),
        CompoundDef(id="namespacens_1_1sub", kind="namespace", compound_name="ns::sub"),
    )
    ns = ws.compounds_by_id["namespacens"]
    sub = ws.compounds_by_id["namespacens_1_1sub"]
    assert sub.parent is ns
    assert ns.children == [sub]
    assert ws.collections["namespaces"].top_level_entries == [ns]
    assert sub.relative_permalink == "namespaces/ns/sub"
    assert sub.nav_id == "namespaces/ns-sub"

    tree = ws.collections["namespaces"].build_navigation_tree()
    assert [n.label for n in tree] == ["ns"]
    assert [n.label for n in tree[0].children] == ["sub"]


def test_unnamed_namespace_is_not_addressable(caplog: pytest.LogCaptureFixture) -> None:
    """Verify a namespace without a name gets no permalink and no nav node."""
    with caplog.at_level(logging.WARNING):
        ws = build(CompoundDef(id="namespace_0", kind="namespace", compound_name=""))
    assert ws.get_page_permalink("namespace_0") is None
    assert ws.collections["namespaces"].build_navigation_tree() == []
    assert "Skipping unnamed namespace" in caplog.text


def test_anonymous_namespaces_are_told_apart() -> None:
    """Verify anonymous namespaces share the placeholder and get suffixes."""
    ws = build(
        CompoundDef(
            id="namespacens_1_1anon_a",
            kind="namespace",
            compound_name="ns::anonymous_namespace{a.cpp}",
        ),
        CompoundDef(
            id="namespacens_1_1anon_b",
            kind="namespace",
            compound_name="ns::anonymous_namespace{b.cpp}",
        ),
    )
    a = ws.compounds_by_id["namespacens_1_1anon_a"]
    assert isinstance(a, Namespace)
    assert a.is_anonymous
    assert a.index_name == "anonymous{a.cpp}"
    assert ws.get_page_permalink("namespacens_1_1anon_a") == "namespaces/ns/anonymous"
    assert ws.get_page_permalink("namespacens_1_1anon_b") == "namespaces/ns/anonymous-1"


def test_unknown_inner_namespace_is_warned(caplog: pytest.LogCaptureFixture) -> None:
    """Verify a dangling inner namespace reference is ignored."""
    with caplog.at_level(logging.WARNING):
        ws = build(
            CompoundDef(
                id="namespacens",
                kind="namespace",
                compound_name="ns",
                inner_namespaces=[ref("namespacegone")],
            )
        )
    assert ws.compounds_by_id["namespacens"].children == []
    assert "namespacegone" in caplog.text


def test_namespace_listing_includes_inner_classes() -> None:
    """Verify namespace indices list classes and members in context."""
    ws = build(
        CompoundDef(
            id="namespacens",
            kind="namespace",
            compound_name="ns",
            inner_classes=[ref("classns_1_1foo")],
            section_defs=[
                SectionDef(
                    kind="func",
                    member_defs=[
                        MemberDef(id="namespacens_1a1", kind="function", name="make")
                    ],
                )
            ],
        ),
        CompoundDef(id="classns_1_1foo", kind="class", compound_name="ns::Foo"),
    )
    listing = ws.collections["namespaces"].build_full_listing()
    assert set(listing) == {"all", "namespaces", "classes", "functions"}
    make = listing["functions"][0].entries[0]
    assert make.describe() == "make(): as function in namespace ns"
    assert make.permalink == "namespaces/ns/#a1"


def create_tree() -> list[CompoundDef]:
    """Create src/util/util.h plus a top-level README file."""
    return [
        CompoundDef(
            id="dir_src",
            kind="dir",
            compound_name="src",
            inner_dirs=[ref("dir_util")],
        ),
        CompoundDef(
            id="dir_util",
            kind="dir",
            compound_name="src/util",
            inner_files=[ref("util_8h")],
        ),
        CompoundDef(
            id="util_8h",
            kind="file",
            compound_name="util.h",
            location=Location(file="src/util/util.h"),
            section_defs=[
                SectionDef(
                    kind="define",
                    member_defs=[
                        MemberDef(
                            id="util_8h_1a1",
                            kind="define",
                            name="UTIL_MAX",
                            location=Location(file="src/util/util.h", line=3),
                        )
                    ],
                )
            ],
        ),
        CompoundDef(id="readme_8md", kind="file", compound_name="README.md"),
    ]


def test_folders_and_files_hierarchy() -> None:
    """Verify folders keep separate child lists and paths follow the chain."""
    ws = build(*create_tree())
    collection = ws.collections["files"]
    assert isinstance(collection, FilesAndFolders)
    src = ws.compounds_by_id["dir_src"]
    util = ws.compounds_by_id["dir_util"]
    header = ws.compounds_by_id["util_8h"]
    assert isinstance(src, Folder)
    assert isinstance(util, Folder)
    assert isinstance(header, File)

    assert src.children_folders == [util]
    assert util.children_files == [header]
    assert collection.top_level_folders == [src]
    assert [f.id for f in collection.top_level_files] == ["readme_8md"]

    assert util.relative_path == "src/util"
    assert header.relative_path == "src/util/util.h"
    assert util.relative_permalink == "folders/src/util"
    assert header.relative_permalink == "files/src/util/util-h"
    assert header.nav_id == "files/src-util-util-h"
    assert ws.files_by_path["src/util/util.h"] is header


def test_file_navigation_and_locations() -> None:
    """Verify the folder tree and the member location links."""
    ws = build(*create_tree())
    tree = ws.collections["files"].build_navigation_tree()
    assert [n.label for n in tree] == ["src", "README.md"]
    assert [n.label for n in tree[0].children] == ["util"]
    assert [n.label for n in tree[0].children[0].children] == ["util.h"]

    macro = ws.members_by_id["util_8h_1a1"]
    assert macro.location_lines == [
        "Declaration at line 3 of file [util.h](files/src/util/util-h)."
    ]
    assert macro.signature == "#define UTIL_MAX"


def test_file_listing_has_defines() -> None:
    """Verify macros are listed as macro definitions of their file."""
    ws = build(*create_tree())
    listing = ws.collections["files"].build_full_listing()
    entry = listing["defines"][0].entries[0]
    assert entry.describe() == "UTIL_MAX: as macro definition in file src/util/util.h"


def test_group_label_and_tree() -> None:
    """Verify group labels drop the trailing period and groups nest."""
    ws = build(
        CompoundDef(
            id="group__core",
            kind="group",
            compound_name="core",
            title="Core API.",
            inner_groups=[ref("group__io")],
        ),
        CompoundDef(id="group__io", kind="group", compound_name="io_helpers", title="IO"),
    )
    core = ws.compounds_by_id["group__core"]
    assert core.nav_label == "Core API"
    assert core.relative_permalink == "groups/core"
    assert ws.get_page_permalink("group__io") == "groups/io-helpers"
    tree = ws.collections["groups"].build_navigation_tree()
    assert [n.label for n in tree] == ["Core API"]
    assert [n.label for n in tree[0].children] == ["IO"]


def test_pages_main_page_and_hidden_pages() -> None:
    """Verify the main page is detected and hidden pages are not top level."""
    ws = build(
        CompoundDef(id="indexpage", kind="page", compound_name="index", title="Home"),
        CompoundDef(id="todo", kind="page", compound_name="todo", title="Todo List"),
        CompoundDef(
            id="guide",
            kind="page",
            compound_name="guide",
            title="Guide",
            inner_pages=[ref("install")],
        ),
        CompoundDef(id="install", kind="page", compound_name="install", title="Install"),
    )
    assert ws.main_page is ws.compounds_by_id["indexpage"]
    pages = ws.collections["pages"]
    assert [p.id for p in pages.top_level_entries] == ["guide"]
    tree = pages.build_navigation_tree()
    assert [n.label for n in tree] == ["Guide"]
    assert [n.label for n in tree[0].children] == ["Install"]


def test_hidden_pages_are_configurable() -> None:
    """Verify configured hidden pages extend the defaults."""
    config = load_config(None)
    config["hidden_pages"] = [*config["hidden_pages"], "bug"]
    ws = build(
        CompoundDef(id="bug", kind="page", compound_name="bug"),
        CompoundDef(id="todo", kind="page", compound_name="todo"),
        CompoundDef(id="faq", kind="page", compound_name="faq"),
        config=config,
    )
    assert [p.id for p in ws.collections["pages"].top_level_entries] == ["faq"]
