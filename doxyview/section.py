"""View model for a classified documentation section."""

from __future__ import annotations

from typing import TYPE_CHECKING

from doxyview.errors import ParseContractError, PhaseOrderError
from doxyview.member import Member, MemberRef
from doxyview.section_headers import (
    USER_DEFINED_HEADER,
    USER_DEFINED_KIND,
    header_for_kind,
    order_for_kind,
)

if TYPE_CHECKING:
    from doxyview.compound_base import CompoundBase
    from doxyview.section_classifier import ClassifiedSection


class Section:
    """A bucket of members sharing one visibility and role."""

    def __init__(self, compound: CompoundBase, classified: ClassifiedSection) -> None:
        self.compound = compound
        self._classified: ClassifiedSection | None = classified
        self.kind = classified.kind
        self.header = self._header_for(classified)
        if not self.header:
            msg = (
                f"Section of kind {self.kind!r} in {compound.id} has neither "
                "a header nor a known kind"
            )
            raise ParseContractError(msg)
        self.order = order_for_kind(self.kind)
        self.description = ""

        self.index_members: list[Member | MemberRef] = [
            Member(self, md) for md in classified.member_defs
        ]
        self.index_members.extend(
            MemberRef(self, m.refid, m.name, m.kind) for m in classified.members
        )
        self.definition_members: list[Member] = sorted(
            (m for m in self.index_members if isinstance(m, Member)),
            key=lambda m: m.name.casefold(),
        )

    @staticmethod
    def _header_for(classified: ClassifiedSection) -> str:
        if classified.kind == USER_DEFINED_KIND:
            return classified.header.strip() or USER_DEFINED_HEADER
        return header_for_kind(classified.kind)

    def init_late(self) -> None:
        """Render the description and resolve member references."""
        if self._classified is None:
            msg = f"Section {self.kind} of {self.compound.id} was already cleaned up"
            raise PhaseOrderError(msg)
        self.description = self.compound.workspace.render_text(
            self._classified.description
        )
        for m in self.index_members:
            if isinstance(m, MemberRef):
                m.resolve()

    def drop_parse_data(self) -> None:
        self._classified = None
        for m in self.definition_members:
            m.drop_parse_data()
