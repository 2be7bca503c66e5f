"""Shared behaviour of the per-kind compound collections."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from doxyview.alphabetical_index import IndexGroup, order_per_initials
from doxyview.index_entry import IndexContext, IndexEntry
from doxyview.navigation_node import NavigationNode

if TYPE_CHECKING:
    from doxyview.compound_base import CompoundBase
    from doxyview.compound_def import CompoundDef
    from doxyview.member import EnumValue, Member
    from doxyview.workspace import Workspace

logger = logging.getLogger(__name__)


class CollectionBase:
    """All compounds of one kind plus their hierarchy.

    Subclasses implement ``create_compound`` and ``build_hierarchy``; the
    navigation tree and the listings are derived from ``top_level_entries``
    and ``navigation_children``.
    """

    name = ""
    # listing kind -> member/compound kinds included (None means all)
    listings: dict[str, frozenset[str] | None] = {"all": None}

    def __init__(self, workspace: Workspace) -> None:
        self.workspace = workspace
        self.compounds_by_id: dict[str, CompoundBase] = {}

    def create_compound(self, compound_def: CompoundDef) -> CompoundBase:
        raise NotImplementedError

    def add_child(self, compound_def: CompoundDef) -> CompoundBase:
        """Create the compound for a parsed definition and register it."""
        compound = self.create_compound(compound_def)
        self.compounds_by_id[compound.id] = compound
        return compound

    def build_hierarchy(self) -> None:
        raise NotImplementedError

    @property
    def top_level_entries(self) -> list[CompoundBase]:
        return [c for c in self.compounds_by_id.values() if c.parent is None]

    def navigation_children(self, compound: CompoundBase) -> list[CompoundBase]:
        return compound.children

    def is_visible(self) -> bool:
        return bool(self.compounds_by_id)

    def link_children(self, parent: CompoundBase, child_ids: list[str]) -> None:
        """Attach children by id as a single-parent tree; unknown ids are logged."""
        for child_id in child_ids:
            child = self.compounds_by_id.get(child_id)
            if child is None:
                logger.warning(
                    "Child %s of %s %s not found, ignored",
                    child_id,
                    parent.kind,
                    parent.id,
                )
                continue
            if child.parent is not None and child.parent is not parent:
                logger.warning(
                    "%s already has parent %s, not re-parented under %s",
                    child.id,
                    child.parent.id,
                    parent.id,
                )
                continue
            child.parent = parent
            parent.children.append(child)

    def build_navigation_tree(self) -> list[NavigationNode]:
        """Depth-first walk of the hierarchy, one node per addressable compound.

        Compounds without a permalink are skipped together with their
        subtrees. Multiple inheritance makes the class hierarchy a DAG, so a
        compound may appear under several parents; only an edge back to an
        ancestor on the current path is refused.
        """
        roots: list[NavigationNode] = []
        stack: list[tuple[CompoundBase, list[NavigationNode], frozenset[str]]] = [
            (c, roots, frozenset()) for c in reversed(self.top_level_entries)
        ]
        while stack:
            compound, siblings, ancestors = stack.pop()
            if compound.id in ancestors:
                logger.warning("Cycle through %s in %s hierarchy", compound.id, self.name)
                continue
            permalink = self.workspace.get_page_permalink(compound.id, no_warn=True)
            if permalink is None or compound.nav_id is None:
                logger.debug("%s has no permalink, not in navigation", compound.id)
                continue
            node = NavigationNode(
                label=compound.nav_label,
                nav_id=compound.nav_id,
                permalink=permalink,
                kind=compound.kind,
            )
            siblings.append(node)
            path = ancestors | {compound.id}
            stack.extend(
                (child, node.children, path)
                for child in reversed(self.navigation_children(compound))
            )
        return roots

    def iter_index_entries(self) -> Iterator[IndexEntry]:
        """Yield the entries of this collection's alphabetical indices."""
        return iter(())

    def build_full_listing(self) -> dict[str, list[IndexGroup]]:
        """Group this collection's entries by initial, one listing per kind."""
        entries = list(self.iter_index_entries())
        result: dict[str, list[IndexGroup]] = {}
        for listing, kinds in self.listings.items():
            selected = [e for e in entries if kinds is None or e.kind in kinds]
            if selected:
                result[listing] = order_per_initials(selected)
        return result

    # Entry factories shared by the collections.

    def compound_entry(
        self,
        compound: CompoundBase,
        context: IndexContext,
        long_name: str,
    ) -> IndexEntry:
        return IndexEntry(
            id=compound.id,
            name=compound.tree_entry_name,
            long_name=long_name,
            kind=compound.kind,
            context=context,
            permalink=self.workspace.get_permalink(compound.id, "compound"),
        )

    def member_entries(
        self, compound: CompoundBase, context: IndexContext
    ) -> Iterator[IndexEntry]:
        """Entries for every member and enumerator defined by a compound."""
        for member in compound.iter_members():
            yield self._member_entry(member, context)
            for enum_value in member.enum_values:
                yield self._enum_value_entry(enum_value, context)

    def _member_entry(self, member: Member, context: IndexContext) -> IndexEntry:
        name = f"{member.name}()" if member.kind == "function" else member.name
        return IndexEntry(
            id=member.id,
            name=name,
            long_name=member.qualified_name or member.name,
            kind=member.kind,
            context=context,
            permalink=self.workspace.get_permalink(member.id, "member"),
        )

    def _enum_value_entry(self, enum_value: EnumValue, context: IndexContext) -> IndexEntry:
        return IndexEntry(
            id=enum_value.id,
            name=enum_value.name,
            long_name=enum_value.name,
            kind="enumvalue",
            context=context,
            permalink=self.workspace.get_permalink(enum_value.id, "member"),
        )
