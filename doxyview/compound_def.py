"""Data models for the parsed Doxygen definitions fed into the workspace."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class CompoundRef:
    """A by-id reference to another compound (base class, include, inner)."""

    text: str
    refid: str | None = None
    prot: str = ""
    virt: str = ""


@dataclass
class Location:
    """Source location of a compound or member."""

    file: str
    line: int | None = None
    column: int | None = None
    bodyfile: str | None = None
    bodystart: int | None = None
    bodyend: int | None = None


@dataclass
class TemplateParam:
    """One template parameter, e.g. ``class T = int``."""

    type: str = ""
    declname: str = ""
    defname: str = ""
    defval: str = ""


@dataclass
class Param:
    """One function parameter."""

    type: str = ""
    declname: str = ""
    defval: str = ""


@dataclass
class EnumValueDef:
    """A parsed enumerator."""

    id: str
    name: str
    initializer: str = ""
    brief_description: Any = None


@dataclass
class MemberDef:
    """A member declaration defined in a section."""

    id: str
    kind: str
    name: str
    prot: str = "public"
    is_static: bool = False
    is_const: bool = False
    is_constexpr: bool = False
    is_inline: bool = False
    is_explicit: bool = False
    is_noexcept: bool = False
    is_nodiscard: bool = False
    is_mutable: bool = False
    is_strong: bool = False
    virt: str = "non-virtual"
    type: str = ""
    argsstring: str = ""
    definition: str = ""
    qualified_name: str = ""
    params: list[Param] = field(default_factory=list)
    template_params: list[TemplateParam] = field(default_factory=list)
    initializer: str = ""
    enum_values: list[EnumValueDef] = field(default_factory=list)
    location: Location | None = None
    references: list[CompoundRef] = field(default_factory=list)
    referenced_by: list[CompoundRef] = field(default_factory=list)
    brief_description: Any = None
    detailed_description: Any = None


@dataclass
class MemberRefDef:
    """A member listed in a section but defined in another compound."""

    refid: str
    name: str
    kind: str = ""


@dataclass
class SectionDef:
    """A raw, kind-labelled section of a compound."""

    kind: str
    header: str = ""
    description: Any = None
    member_defs: list[MemberDef] = field(default_factory=list)
    members: list[MemberRefDef] = field(default_factory=list)


@dataclass
class CompoundDef:
    """A parsed compound (class, namespace, file, dir, group or page)."""

    id: str
    kind: str
    compound_name: str
    title: str = ""
    template_params: list[TemplateParam] = field(default_factory=list)
    location: Location | None = None
    section_defs: list[SectionDef] = field(default_factory=list)
    base_compound_refs: list[CompoundRef] = field(default_factory=list)
    derived_compound_refs: list[CompoundRef] = field(default_factory=list)
    includes: list[CompoundRef] = field(default_factory=list)
    inner_namespaces: list[CompoundRef] = field(default_factory=list)
    inner_classes: list[CompoundRef] = field(default_factory=list)
    inner_dirs: list[CompoundRef] = field(default_factory=list)
    inner_files: list[CompoundRef] = field(default_factory=list)
    inner_groups: list[CompoundRef] = field(default_factory=list)
    inner_pages: list[CompoundRef] = field(default_factory=list)
    description_anchor_ids: list[str] = field(default_factory=list)
    brief_description: Any = None
    detailed_description: Any = None
