"""Collection of topics (Doxygen groups)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from doxyview.collection_base import CollectionBase
from doxyview.compound_base import CompoundBase
from doxyview.path_sanitizer import sanitize_hierarchical_path

if TYPE_CHECKING:
    from doxyview.compound_def import CompoundDef


class Group(CompoundBase):
    """A topic; labelled by its title without a trailing period."""

    def __init__(self, collection: Groups, compound_def: CompoundDef) -> None:
        super().__init__(collection, compound_def)
        self.children_ids = [r.refid for r in compound_def.inner_groups if r.refid]

        label = (self.title or self.compound_name).strip().removesuffix(".")
        self.index_name = label
        self.tree_entry_name = label
        self.nav_label = label
        self.page_title = label
        self.set_permalink("groups", sanitize_hierarchical_path(self.compound_name))

        self.create_sections()


class Groups(CollectionBase):
    """Topics, linked by their inner group references."""

    name = "groups"

    def create_compound(self, compound_def: CompoundDef) -> Group:
        return Group(self, compound_def)

    def build_hierarchy(self) -> None:
        for group in self.compounds_by_id.values():
            self.link_children(group, group.children_ids)
