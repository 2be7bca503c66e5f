"""The workspace: global identity maps and the seven phase build of the view model."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from enum import IntEnum
from typing import TYPE_CHECKING, Any

from doxyview.as_text import as_text
from doxyview.classes import Classes
from doxyview.errors import PhaseOrderError
from doxyview.files_and_folders import FilesAndFolders
from doxyview.groups import Groups
from doxyview.load_config import load_config
from doxyview.namespaces import Namespaces
from doxyview.pages import Pages
from doxyview.permalink_anchor import (
    get_permalink_anchor,
    strip_permalink_hex_anchor,
    strip_permalink_text_anchor,
)

if TYPE_CHECKING:
    from doxyview.alphabetical_index import IndexGroup
    from doxyview.collection_base import CollectionBase
    from doxyview.compound_base import CompoundBase
    from doxyview.compound_def import CompoundDef
    from doxyview.files_and_folders import File
    from doxyview.member import EnumValue, Member
    from doxyview.navigation_node import NavigationNode
    from doxyview.pages import Page

logger = logging.getLogger(__name__)

COLLECTION_FACTORIES: dict[str, Callable[[Workspace], CollectionBase]] = {
    "classes": Classes,
    "namespaces": Namespaces,
    "files": FilesAndFolders,
    "groups": Groups,
    "pages": Pages,
}


class Phase(IntEnum):
    """Build phases, in the only order they may run."""

    NEW = 0
    CREATED = 1
    HIERARCHIES_BUILT = 2
    COMPOUNDS_INITIALIZED = 3
    MEMBER_MAP_BUILT = 4
    MEMBERS_INITIALIZED = 5
    PERMALINKS_VALIDATED = 6
    CLEANED_UP = 7


class Workspace:
    """Owns every collection and the id maps for one generation run.

    Build it with ``register_from_parsed_set()``; afterwards the view model
    is read-only and can be handed to renderers.
    """

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        text_renderer: Callable[[object], str] | None = None,
    ) -> None:
        self.config = config if config is not None else load_config(None)
        self.text_renderer = text_renderer or as_text

        self.page_base_url: str = self.config.get("page_base_url", "")
        permalinks = self.config.get("permalinks", {})
        self.permalink_options: dict[str, Any] = {
            "anonymous_placeholder": permalinks.get("anonymous_placeholder", "anonymous"),
            "hash_length": permalinks.get("template_hash_length", 8),
        }
        self.collection_names_by_kind: dict[str, str] = dict(
            self.config.get("collection_names_by_kind", {})
        )

        self.collections: dict[str, CollectionBase] = {
            name: factory(self) for name, factory in COLLECTION_FACTORIES.items()
        }

        self.compounds_by_id: dict[str, CompoundBase] = {}
        self.members_by_id: dict[str, Member] = {}
        self.enum_values_by_id: dict[str, EnumValue] = {}
        self.files_by_path: dict[str, File] = {}
        self.description_anchors_by_id: dict[str, CompoundBase] = {}
        self.main_page: Page | None = None
        self.current_compound: CompoundBase | None = None

        # bare permalink -> ids sharing it, in registration order
        self.collisions: dict[str, list[str]] = {}
        self.dropped_compound_ids: list[str] = []
        self.phase = Phase.NEW

    # ------------------------------------------------------------------
    # Phases

    def register_from_parsed_set(self, compound_defs: Iterable[CompoundDef]) -> None:
        """Build the whole view model from the parsed compounds."""
        self.create_compounds(compound_defs)
        self.build_hierarchies()
        self.init_compounds_late()
        self.build_member_map()
        self.init_members_late()
        self.validate_permalinks()
        self.cleanup()
        logger.info(
            "View model ready: %d compounds, %d members, %d permalink collisions",
            len(self.compounds_by_id),
            len(self.members_by_id),
            len(self.collisions),
        )

    def _enter(self, phase: Phase) -> None:
        if self.phase != phase - 1:
            msg = (
                f"Phase {phase.name} requires {Phase(phase - 1).name}, "
                f"workspace is at {self.phase.name}"
            )
            raise PhaseOrderError(msg)
        logger.debug("Entering phase %s", phase.name)

    def create_compounds(self, compound_defs: Iterable[CompoundDef]) -> None:
        """Phase 1: create every compound in the collection of its kind."""
        self._enter(Phase.CREATED)
        for cd in compound_defs:
            name = self.collection_names_by_kind.get(cd.kind)
            collection = self.collections.get(name) if name else None
            if collection is None:
                logger.warning(
                    "Compound %s of kind %s not supported, dropped", cd.id, cd.kind
                )
                self.dropped_compound_ids.append(cd.id)
                continue
            if cd.id in self.compounds_by_id:
                logger.warning("Duplicate compound id %s, keeping the first", cd.id)
                self.dropped_compound_ids.append(cd.id)
                continue
            compound = collection.add_child(cd)
            self.compounds_by_id[compound.id] = compound
            for anchor_id in cd.description_anchor_ids:
                self.description_anchors_by_id.setdefault(anchor_id, compound)
        self.phase = Phase.CREATED

    def build_hierarchies(self) -> None:
        """Phase 2: let every collection link its compounds."""
        self._enter(Phase.HIERARCHIES_BUILT)
        for collection in self.collections.values():
            collection.build_hierarchy()
        self.phase = Phase.HIERARCHIES_BUILT

    def init_compounds_late(self) -> None:
        """Phase 3: descriptions, locations and links to other compounds."""
        self._enter(Phase.COMPOUNDS_INITIALIZED)
        for compound in self.compounds_by_id.values():
            with self.rendering(compound):
                compound.init_late()
        self.phase = Phase.COMPOUNDS_INITIALIZED

    def build_member_map(self) -> None:
        """Phase 4: register the members each compound owns."""
        self._enter(Phase.MEMBER_MAP_BUILT)
        for compound in self.compounds_by_id.values():
            for member in compound.iter_members():
                owner_id = strip_permalink_hex_anchor(member.id)
                if owner_id != compound.id:
                    logger.debug(
                        "Member %s listed in %s belongs to %s, not registered",
                        member.id,
                        compound.id,
                        owner_id,
                    )
                    continue
                if member.id in self.members_by_id:
                    logger.warning("Duplicate member id %s, keeping the first", member.id)
                    continue
                self.members_by_id[member.id] = member
        self.phase = Phase.MEMBER_MAP_BUILT

    def init_members_late(self) -> None:
        """Phase 5: resolve member references and compute member text."""
        self._enter(Phase.MEMBERS_INITIALIZED)
        for compound in self.compounds_by_id.values():
            with self.rendering(compound):
                for section in compound.sections:
                    section.init_late()
                    for member in section.definition_members:
                        member.init_late()
                        for enum_value in member.enum_values:
                            self.enum_values_by_id.setdefault(enum_value.id, enum_value)
        self.phase = Phase.MEMBERS_INITIALIZED

    def validate_permalinks(self) -> None:
        """Phase 6: make permalinks, nav ids and member anchors unique.

        Within a group of equal addresses the first compound in registration
        order keeps the bare address and the others get ``-1``, ``-2``...
        Links computed in earlier phases are then resolved again.
        """
        self._enter(Phase.PERMALINKS_VALIDATED)
        compounds = list(self.compounds_by_id.values())

        groups: dict[str, list[CompoundBase]] = {}
        for compound in compounds:
            if compound.relative_permalink is not None:
                groups.setdefault(compound.relative_permalink, []).append(compound)
        taken = set(groups)
        for permalink, group in groups.items():
            if len(group) == 1:
                continue
            self.collisions[permalink] = [c.id for c in group]
            logger.warning(
                "Permalink %s shared by %s, suffixing",
                permalink,
                ", ".join(c.id for c in group),
            )
            n = 0
            for compound in group[1:]:
                n += 1
                while f"{permalink}-{n}" in taken:
                    n += 1
                compound.relative_permalink = f"{permalink}-{n}"
                taken.add(compound.relative_permalink)
                if compound.nav_id is not None:
                    compound.nav_id = f"{compound.nav_id}-{n}"

        self._dedup_nav_ids(compounds)
        for compound in compounds:
            self._dedup_anchors(compound)

        for compound in compounds:
            with self.rendering(compound):
                compound.resolve_links()
                for member in compound.iter_members():
                    member.resolve_links()
        self.phase = Phase.PERMALINKS_VALIDATED

    def _dedup_nav_ids(self, compounds: list[CompoundBase]) -> None:
        # Distinct permalinks can still flatten to one nav id ("a/b" and "a-b").
        seen: set[str] = set()
        for compound in compounds:
            if compound.nav_id is None:
                continue
            nav_id, n = compound.nav_id, 0
            while nav_id in seen:
                n += 1
                nav_id = f"{compound.nav_id}-{n}"
            if n:
                logger.warning(
                    "Nav id %s already used, %s gets %s",
                    compound.nav_id,
                    compound.id,
                    nav_id,
                )
                compound.nav_id = nav_id
            seen.add(nav_id)

    def _dedup_anchors(self, compound: CompoundBase) -> None:
        targets: list[Member | EnumValue] = []
        for member in compound.iter_members():
            targets.append(member)
            targets.extend(member.enum_values)
        taken = {t.anchor for t in targets}
        seen: set[str] = set()
        for target in targets:
            if target.anchor not in seen:
                seen.add(target.anchor)
                continue
            anchor, n = target.anchor, 1
            while f"{anchor}-{n}" in taken:
                n += 1
            logger.warning("Anchor %s repeated in %s, suffixing", anchor, compound.id)
            target.anchor = f"{anchor}-{n}"
            taken.add(target.anchor)
            seen.add(target.anchor)

    def cleanup(self) -> None:
        """Phase 7: drop the parsed definitions."""
        self._enter(Phase.CLEANED_UP)
        for compound in self.compounds_by_id.values():
            compound.drop_parse_data()
        self.phase = Phase.CLEANED_UP

    # ------------------------------------------------------------------
    # Resolution

    @contextmanager
    def rendering(self, compound: CompoundBase) -> Iterator[CompoundBase]:
        """Make ``compound`` the current page; links into it become ``#anchor``."""
        previous = self.current_compound
        self.current_compound = compound
        try:
            yield compound
        finally:
            self.current_compound = previous

    def render_text(self, payload: object) -> str:
        return self.text_renderer(payload)

    def get_page_permalink(self, refid: str, *, no_warn: bool = False) -> str | None:
        """Return the page address of a compound, or None if it has none."""
        compound = self.compounds_by_id.get(refid)
        if compound is None:
            if not no_warn:
                logger.warning("Compound %s not documented, no permalink", refid)
            return None
        if compound.relative_permalink is None:
            return None
        return f"{self.page_base_url}{compound.relative_permalink}"

    def get_permalink(self, refid: str, kindref: str = "compound") -> str | None:
        """Return the address of a compound, member or xref section.

        Unresolved ids give None; callers then render plain text.
        """
        if kindref == "compound":
            return self.get_page_permalink(refid)
        if kindref == "member":
            return self._member_permalink(refid)
        if kindref == "xrefsect":
            return self._xref_permalink(refid)
        logger.warning("Reference kind %s of %s not supported", kindref, refid)
        return None

    def _member_permalink(self, refid: str) -> str | None:
        target = self.members_by_id.get(refid) or self.enum_values_by_id.get(refid)
        if target is not None:
            owner: CompoundBase | None = target.compound
            anchor = target.anchor
        else:
            owner = self.description_anchors_by_id.get(refid)
            anchor = get_permalink_anchor(refid)
        if owner is None:
            logger.warning("Member %s not documented, no permalink", refid)
            return None
        return self._anchor_permalink(owner, anchor)

    def _xref_permalink(self, refid: str) -> str | None:
        # todo_1_todo000001 -> page "todo", anchor "_todo000001"
        page_id = strip_permalink_text_anchor(refid)
        owner = self.compounds_by_id.get(page_id)
        if owner is None:
            logger.warning("Xref page %s of %s not documented", page_id, refid)
            return None
        return self._anchor_permalink(owner, get_permalink_anchor(refid))

    def _anchor_permalink(self, owner: CompoundBase, anchor: str) -> str | None:
        if owner is self.current_compound:
            return f"#{anchor}"
        page = self.get_page_permalink(owner.id)
        if page is None:
            return None
        return f"{page}/#{anchor}"

    # ------------------------------------------------------------------
    # Views

    def _require_built(self) -> None:
        if self.phase != Phase.CLEANED_UP:
            msg = f"View model not built yet (workspace is at {self.phase.name})"
            raise PhaseOrderError(msg)

    def build_navigation(self) -> dict[str, list[NavigationNode]]:
        """Navigation trees of every non-empty collection."""
        self._require_built()
        return {
            name: collection.build_navigation_tree()
            for name, collection in self.collections.items()
            if collection.is_visible()
        }

    def build_indices(self) -> dict[str, dict[str, list[IndexGroup]]]:
        """Alphabetical listings of every non-empty collection."""
        self._require_built()
        indices = {}
        for name, collection in self.collections.items():
            listing = collection.build_full_listing()
            if listing:
                indices[name] = listing
        return indices

    def stats(self) -> dict[str, Any]:
        per_kind: dict[str, int] = {}
        for compound in self.compounds_by_id.values():
            per_kind[compound.kind] = per_kind.get(compound.kind, 0) + 1
        return {
            "compounds_per_kind": per_kind,
            "total_compounds": len(self.compounds_by_id),
            "total_members": len(self.members_by_id),
            "dropped_compounds": len(self.dropped_compound_ids),
            "collisions": dict(self.collisions),
        }
