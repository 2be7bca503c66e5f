"""Collection of namespaces, nested as a tree."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from doxyview.collection_base import CollectionBase
from doxyview.compound_base import CompoundBase
from doxyview.index_entry import IndexContext, IndexEntry
from doxyview.page_path_for_name import page_path_for_name
from doxyview.path_sanitizer import sanitize_anonymous_namespace
from doxyview.template_parameters import unqualified_name

if TYPE_CHECKING:
    from doxyview.compound_def import CompoundDef

logger = logging.getLogger(__name__)

NAMESPACES_PLURAL = "namespaces"


class Namespace(CompoundBase):
    """A namespace; unnamed ones get no permalink."""

    def __init__(self, collection: Namespaces, compound_def: CompoundDef) -> None:
        super().__init__(collection, compound_def)

        self.children_ids = [r.refid for r in compound_def.inner_namespaces if r.refid]
        self.inner_class_ids = [r.refid for r in compound_def.inner_classes if r.refid]

        self.unqualified_name = unqualified_name(self.compound_name)
        self.is_anonymous = self.unqualified_name.startswith("anonymous_namespace{")
        self.index_name = sanitize_anonymous_namespace(self.unqualified_name)
        self.tree_entry_name = self.index_name
        self.nav_label = self.index_name
        self.page_title = f"The `{self.index_name}` Namespace Reference"

        if self.compound_name:
            path = page_path_for_name(
                NAMESPACES_PLURAL,
                self.compound_name,
                **collection.workspace.permalink_options,
            )
            self.set_permalink(NAMESPACES_PLURAL, path.split("/", 1)[1])
        else:
            logger.warning("Skipping unnamed namespace %s", self.id)

        self.create_sections()

    def index_context(self) -> IndexContext:
        return IndexContext(
            "namespace",
            sanitize_anonymous_namespace(self.compound_name),
            self.tree_entry_name,
        )


class Namespaces(CollectionBase):
    """Namespaces, linked by their inner namespace references."""

    name = "namespaces"
    listings = {
        "all": None,
        "namespaces": frozenset({"namespace"}),
        "classes": frozenset({"class", "struct", "union"}),
        "functions": frozenset({"function"}),
        "variables": frozenset({"variable"}),
        "typedefs": frozenset({"typedef"}),
        "enums": frozenset({"enum"}),
        "enumvalues": frozenset({"enumvalue"}),
    }

    def create_compound(self, compound_def: CompoundDef) -> Namespace:
        return Namespace(self, compound_def)

    def build_hierarchy(self) -> None:
        for ns in self.compounds_by_id.values():
            self.link_children(ns, ns.children_ids)

    @property
    def top_level_entries(self) -> list[CompoundBase]:
        return [
            ns
            for ns in self.compounds_by_id.values()
            if ns.parent is None and ns.compound_name
        ]

    def iter_index_entries(self) -> Iterator[IndexEntry]:
        for ns in self.compounds_by_id.values():
            if not isinstance(ns, Namespace) or not ns.compound_name:
                continue
            context = ns.index_context()
            yield self.compound_entry(ns, context, ns.unqualified_name)
            for class_id in ns.inner_class_ids:
                cls = self.workspace.compounds_by_id.get(class_id)
                if cls is not None:
                    yield self.compound_entry(cls, context, cls.compound_name)
            yield from self.member_entries(ns, context)
