"""View models for members, member references and enumerators."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from doxyview.errors import PhaseOrderError
from doxyview.link_target import LinkTarget
from doxyview.path_sanitizer import sanitize_anonymous_namespace
from doxyview.permalink_anchor import get_permalink_anchor
from doxyview.template_parameters import render_template_params

if TYPE_CHECKING:
    from doxyview.compound_base import CompoundBase
    from doxyview.compound_def import CompoundRef, EnumValueDef, MemberDef
    from doxyview.section import Section

logger = logging.getLogger(__name__)


class EnumValue:
    """One enumerator of an enum member."""

    def __init__(self, member: Member, enum_value_def: EnumValueDef) -> None:
        self.member = member
        self.id = enum_value_def.id
        self.name = enum_value_def.name
        self.initializer = enum_value_def.initializer
        self.anchor = get_permalink_anchor(self.id)
        self.brief_description = member.compound.workspace.render_text(
            enum_value_def.brief_description
        )

    @property
    def compound(self) -> CompoundBase:
        return self.member.compound


class Member:
    """A documented declaration, owned by the section that defines it."""

    def __init__(self, section: Section, member_def: MemberDef) -> None:
        self.section = section
        self._member_def: MemberDef | None = member_def

        self.id = member_def.id
        self.kind = member_def.kind
        self.name = member_def.name
        self.prot = member_def.prot
        self.is_static = member_def.is_static
        self.is_const = member_def.is_const
        self.is_strong = member_def.is_strong

        # Filled during late init.
        self.anchor = get_permalink_anchor(self.id)
        self.labels: list[str] = []
        self.type = ""
        self.argsstring = ""
        self.definition = ""
        self.qualified_name = ""
        self.initializer = ""
        self.template_parameters = ""
        self.parameters = ""
        self.signature = ""
        self.brief_description = ""
        self.detailed_description = ""
        self.location_lines: list[str] = []
        self.enum_values: list[EnumValue] = []
        self.references: list[LinkTarget] = []
        self.referenced_by: list[LinkTarget] = []

    @property
    def member_def(self) -> MemberDef:
        """Return the parsed definition; only valid until cleanup."""
        if self._member_def is None:
            msg = f"Parsed definition of member {self.id} was already dropped"
            raise PhaseOrderError(msg)
        return self._member_def

    @property
    def compound(self) -> CompoundBase:
        return self.section.compound

    def init_late(self) -> None:
        """Compute derived text, labels, enumerators and reference links."""
        md = self.member_def
        workspace = self.compound.workspace

        self.brief_description = workspace.render_text(md.brief_description)
        self.detailed_description = workspace.render_text(md.detailed_description)
        self.type = md.type.strip()
        self.argsstring = md.argsstring
        self.initializer = md.initializer
        self.qualified_name = sanitize_anonymous_namespace(md.qualified_name)
        self.definition = sanitize_anonymous_namespace(md.definition)
        self.labels = self._compute_labels(md)
        self.template_parameters = sanitize_anonymous_namespace(
            render_template_params(md.template_params)
        )
        self.parameters = ", ".join(
            " ".join(x for x in (p.type, p.declname) if x)
            + (f" = {p.defval}" if p.defval else "")
            for p in md.params
        )
        self.signature = self._compute_signature()

        if md.kind == "enum":
            self.enum_values = [EnumValue(self, v) for v in md.enum_values]

        self.resolve_links()

    def resolve_links(self) -> None:
        """(Re)compute location lines and reference links."""
        md = self.member_def
        if md.location is not None:
            self.location_lines = self.compound.render_location_lines(md.location)
        self.references = self._resolve_refs(md.references)
        self.referenced_by = self._resolve_refs(md.referenced_by)

    def _compute_labels(self, md: MemberDef) -> list[str]:
        labels: list[str] = []
        if md.is_inline:
            labels.append("inline")
        if md.is_explicit:
            labels.append("explicit")
        if md.is_nodiscard:
            labels.append("nodiscard")
        if md.is_constexpr:
            labels.append("constexpr")
        if md.is_noexcept:
            labels.append("noexcept")
        if md.prot == "protected":
            labels.append("protected")
        if md.is_static:
            labels.append("static")
        if md.virt in {"virtual", "pure-virtual"}:
            labels.append("virtual")
        if md.argsstring.replace(" ", "").endswith("=delete"):
            labels.append("delete")
        if md.argsstring.replace(" ", "").endswith("=default"):
            labels.append("default")
        if md.is_strong:
            labels.append("strong")
        if md.is_mutable:
            labels.append("mutable")
        return labels

    def _compute_signature(self) -> str:
        if self.kind == "function":
            prefix = "static " if self.is_static else ""
            return f"{prefix}{self.type} {self.name}{self.argsstring}".strip()
        if self.kind == "typedef":
            if self.definition.startswith("using"):
                return f"using {self.name} = {self.type}"
            return f"typedef {self.type} {self.name}{self.argsstring}"
        if self.kind == "enum":
            return f"enum {'class ' if self.is_strong else ''}{self.name}".strip()
        if self.kind == "variable":
            return f"{self.type} {self.name}{self.argsstring}".strip()
        if self.kind == "define":
            return f"#define {self.name}{self.argsstring}"
        return self.definition or self.name

    def _resolve_refs(self, refs: list[CompoundRef]) -> list[LinkTarget]:
        workspace = self.compound.workspace
        resolved: list[LinkTarget] = []
        for ref in refs:
            permalink = None
            if ref.refid in workspace.members_by_id:
                permalink = workspace.get_permalink(ref.refid, "member")
            elif ref.refid:
                permalink = workspace.get_page_permalink(ref.refid, no_warn=True)
            if permalink is None:
                logger.debug("Reference %s from %s not documented", ref.text, self.id)
            resolved.append(LinkTarget(ref.text, permalink))
        return resolved

    def drop_parse_data(self) -> None:
        self._member_def = None


class MemberRef:
    """A lightweight reference to a member defined in another section."""

    def __init__(self, section: Section, refid: str, name: str, kind: str = "") -> None:
        self.section = section
        self.refid = refid
        self.name = name
        self.kind = kind
        self.member: Member | None = None

    def resolve(self) -> Member | None:
        """Look the referenced member up in the workspace; None if undocumented."""
        self.member = self.section.compound.workspace.members_by_id.get(self.refid)
        if self.member is None:
            logger.warning(
                "Member reference %s (%s) in %s not resolved",
                self.refid,
                self.name,
                self.section.compound.id,
            )
        return self.member
