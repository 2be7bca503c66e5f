"""Collection of free-standing documentation pages."""

from __future__ import annotations

from typing import TYPE_CHECKING

from doxyview.collection_base import CollectionBase
from doxyview.compound_base import CompoundBase
from doxyview.path_sanitizer import sanitize_hierarchical_path

if TYPE_CHECKING:
    from doxyview.compound_def import CompoundDef

MAIN_PAGE_ID = "indexpage"


class Page(CompoundBase):
    """A page written by the author (``\\page``), or the main page."""

    def __init__(self, collection: Pages, compound_def: CompoundDef) -> None:
        super().__init__(collection, compound_def)
        self.children_ids = [r.refid for r in compound_def.inner_pages if r.refid]

        label = self.title or self.compound_name
        self.index_name = label
        self.tree_entry_name = label
        self.nav_label = label
        self.page_title = label
        self.set_permalink("pages", sanitize_hierarchical_path(self.compound_name))

        self.create_sections()

    @property
    def is_main_page(self) -> bool:
        return self.id == MAIN_PAGE_ID


class Pages(CollectionBase):
    """Pages, linked by their inner page references."""

    name = "pages"

    def create_compound(self, compound_def: CompoundDef) -> Page:
        page = Page(self, compound_def)
        if page.is_main_page:
            self.workspace.main_page = page
        return page

    def build_hierarchy(self) -> None:
        for page in self.compounds_by_id.values():
            self.link_children(page, page.children_ids)

    @property
    def top_level_entries(self) -> list[CompoundBase]:
        """Top pages, minus the main page and the configured hidden pages."""
        hidden = set(self.workspace.config.get("hidden_pages", []))
        return [
            p
            for p in self.compounds_by_id.values()
            if p.parent is None
            and p.id != MAIN_PAGE_ID
            and p.compound_name not in hidden
        ]
