"""Logic for regrouping a compound's raw sections into ordered, labelled buckets."""

import logging
from dataclasses import dataclass, field

from doxyview.compound_def import MemberDef, MemberRefDef, SectionDef
from doxyview.is_operator_name import is_operator_name
from doxyview.section_headers import USER_DEFINED_KIND

logger = logging.getLogger(__name__)

DESTRUCTOR_SIGIL = "~"


@dataclass
class ClassifiedSection:
    """A section after per-member reclassification, before it becomes a Section."""

    kind: str
    header: str = ""
    description: object = None
    member_defs: list[MemberDef] = field(default_factory=list)
    members: list[MemberRefDef] = field(default_factory=list)


def compute_adjusted_kind(
    section_kind: str, section_suffix: str, member_suffix: str | None = None
) -> str:
    """Compose the final section kind, keeping the source visibility prefix.

    ``public-func`` + ``operator`` -> ``public-operator``; sections without a
    prefix (and user sections) use the member suffix alone.
    """
    if member_suffix is None:
        member_suffix = section_suffix
    if section_kind == USER_DEFINED_KIND:
        return member_suffix
    if "-" in section_kind:
        prefix = section_kind.rsplit("-", 1)[0]
        return f"{prefix}-{section_suffix}"
    return member_suffix


def adjust_section_kind(
    section_kind: str,
    member_kind: str,
    member_name: str,
    class_name: str | None = None,
) -> str:
    """Return the section kind a single member belongs in."""
    if section_kind == USER_DEFINED_KIND:
        return member_kind
    if member_kind == "function":
        if is_operator_name(member_name):
            return compute_adjusted_kind(section_kind, "operator")
        # Static sections have no constructors or destructors.
        if class_name and "-static-" not in section_kind:
            if member_name == class_name:
                return compute_adjusted_kind(section_kind, "constructor")
            if member_name.replace(DESTRUCTOR_SIGIL, "") == class_name:
                return compute_adjusted_kind(section_kind, "destructor")
        return compute_adjusted_kind(section_kind, "func", "function")
    if member_kind == "variable":
        return compute_adjusted_kind(section_kind, "attrib", "variable")
    if member_kind == "typedef":
        return compute_adjusted_kind(section_kind, "type", "typedef")
    if member_kind == "slot":
        return compute_adjusted_kind(section_kind, "slot")
    return member_kind


def reorder_section_defs(
    section_defs: list[SectionDef], class_name: str | None = None
) -> list[ClassifiedSection]:
    """Regroup raw sections by the adjusted kind of each of their members.

    User sections that carry a header are kept verbatim, ahead of the
    regrouped buckets; sorting by order happens later, and is stable.
    """
    result: list[ClassifiedSection] = []
    by_kind: dict[str, ClassifiedSection] = {}

    def bucket(kind: str) -> ClassifiedSection:
        if kind not in by_kind:
            by_kind[kind] = ClassifiedSection(kind=kind)
        return by_kind[kind]

    for section_def in section_defs:
        if section_def.kind == USER_DEFINED_KIND and section_def.header:
            result.append(
                ClassifiedSection(
                    kind=section_def.kind,
                    header=section_def.header,
                    description=section_def.description,
                    member_defs=list(section_def.member_defs),
                    members=list(section_def.members),
                )
            )
            continue
        if section_def.description is not None:
            logger.debug(
                "Description of regrouped section %s not carried over",
                section_def.kind,
            )
        for member_def in section_def.member_defs:
            kind = adjust_section_kind(
                section_def.kind, member_def.kind, member_def.name, class_name
            )
            bucket(kind).member_defs.append(member_def)
        for member_ref in section_def.members:
            kind = adjust_section_kind(
                section_def.kind, member_ref.kind, member_ref.name, class_name
            )
            bucket(kind).members.append(member_ref)

    result.extend(by_kind.values())
    return result
