"""Base view model shared by every compound kind."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from doxyview.errors import PhaseOrderError
from doxyview.link_target import LinkTarget
from doxyview.path_sanitizer import flatten_path
from doxyview.section import Section
from doxyview.section_classifier import reorder_section_defs

if TYPE_CHECKING:
    from doxyview.collection_base import CollectionBase
    from doxyview.compound_def import CompoundDef, CompoundRef, Location
    from doxyview.index_entry import IndexContext
    from doxyview.member import Member
    from doxyview.workspace import Workspace

logger = logging.getLogger(__name__)

INNER_KEYS = (
    "inner_namespaces",
    "inner_classes",
    "inner_dirs",
    "inner_files",
    "inner_groups",
    "inner_pages",
)


class CompoundBase:
    """A documented unit, owned by the collection of its kind.

    Fields are filled in stages: names and sections on creation, edges by
    the collection hierarchy pass, text and links during late init.
    """

    def __init__(self, collection: CollectionBase, compound_def: CompoundDef) -> None:
        self.collection = collection
        self._compound_def: CompoundDef | None = compound_def

        self.id = compound_def.id
        self.kind = compound_def.kind
        self.compound_name = compound_def.compound_name
        self.title = compound_def.title

        self.parent: CompoundBase | None = None
        self.children_ids: list[str] = []
        self.children: list[CompoundBase] = []
        self.sections: list[Section] = []

        # Absent permalink => the compound is not addressable.
        self.relative_permalink: str | None = None
        self.nav_id: str | None = None

        self.index_name = self.compound_name
        self.tree_entry_name = self.compound_name
        self.nav_label = self.compound_name
        self.page_title = self.compound_name

        self.brief_description = ""
        self.detailed_description = ""
        self.location_lines: list[str] = []
        self.location_set: set[str] = set()
        self.includes: list[LinkTarget] = []
        self.inner_compounds: dict[str, list[LinkTarget]] = {}

    @property
    def workspace(self) -> Workspace:
        return self.collection.workspace

    @property
    def compound_def(self) -> CompoundDef:
        """Return the parsed definition; only valid until cleanup."""
        if self._compound_def is None:
            msg = f"Parsed definition of compound {self.id} was already dropped"
            raise PhaseOrderError(msg)
        return self._compound_def

    def set_permalink(self, plural_kind: str, relative_path: str) -> None:
        """Assign ``<plural>/<path>`` as permalink and the matching nav id."""
        self.relative_permalink = f"{plural_kind}/{relative_path}"
        self.nav_id = f"{plural_kind}/{flatten_path(relative_path)}"

    def create_sections(self, class_name: str | None = None) -> None:
        """Classify the raw sections and sort them by display order."""
        classified = reorder_section_defs(self.compound_def.section_defs, class_name)
        sections = [Section(self, c) for c in classified]
        # sorted() is stable, user sections keep their encounter order.
        self.sections = sorted(sections, key=lambda s: s.order)

    def iter_members(self) -> Iterator[Member]:
        """Yield every member defined (not just referenced) by this compound."""
        for section in self.sections:
            yield from section.definition_members

    def init_late(self) -> None:
        """Render descriptions and resolve links that need other compounds."""
        cd = self.compound_def
        workspace = self.workspace

        self.brief_description = workspace.render_text(cd.brief_description)
        self.detailed_description = workspace.render_text(cd.detailed_description)

        for member in self.iter_members():
            loc = member.member_def.location
            if loc is not None:
                self.location_set.add(loc.file)
                if loc.bodyfile:
                    self.location_set.add(loc.bodyfile)

        self.resolve_links()

    def resolve_links(self) -> None:
        """(Re)compute everything that embeds another compound's permalink."""
        cd = self.compound_def
        if cd.location is not None and self.kind not in {"page", "dir"}:
            self.location_lines = self.render_location_lines(cd.location)

        self.includes = [self._link_for(ref) for ref in cd.includes]
        self.inner_compounds = {}
        for key in INNER_KEYS:
            refs = getattr(cd, key)
            if refs:
                self.inner_compounds[key] = [self._link_for(ref) for ref in refs]

    def _link_for(self, ref: CompoundRef) -> LinkTarget:
        permalink = None
        if ref.refid:
            permalink = self.workspace.get_page_permalink(ref.refid, no_warn=True)
            if permalink is None:
                logger.debug("%s in %s has no page", ref.refid, self.id)
        return LinkTarget(ref.text, permalink)

    def render_location_lines(self, location: Location) -> list[str]:
        """Describe where a declaration and its definition live."""
        lines: list[str] = []
        file_link = self._file_link(location.file)
        if location.line is not None:
            lines.append(f"Declaration at line {location.line} of file {file_link}.")
        else:
            lines.append(f"Declaration in file {file_link}.")
        if location.bodyfile and location.bodystart is not None:
            body_link = self._file_link(location.bodyfile)
            lines.append(
                f"Definition at line {location.bodystart} of file {body_link}."
            )
        return lines

    def _file_link(self, path: str) -> str:
        file = self.workspace.files_by_path.get(path)
        name = path.rsplit("/", 1)[-1]
        if file is None:
            return name
        return LinkTarget(name, self.workspace.get_page_permalink(file.id)).to_markdown()

    def index_context(self) -> IndexContext | None:
        """Return the context members of this compound are indexed under."""
        return None

    def drop_parse_data(self) -> None:
        self._compound_def = None
        for section in self.sections:
            section.drop_parse_data()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id} {self.compound_name!r}>"
