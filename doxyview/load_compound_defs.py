"""Logic for loading parsed compound dumps (YAML or JSON) into definitions."""

import logging
from pathlib import Path
from typing import Any

import yaml

from doxyview.compound_def import (
    CompoundDef,
    CompoundRef,
    EnumValueDef,
    Location,
    MemberDef,
    MemberRefDef,
    Param,
    SectionDef,
    TemplateParam,
)
from doxyview.errors import ParseContractError

logger = logging.getLogger(__name__)

DUMP_SUFFIXES = (".yml", ".yaml", ".json")

_INNER_KEYS = (
    "inner_namespaces",
    "inner_classes",
    "inner_dirs",
    "inner_files",
    "inner_groups",
    "inner_pages",
)


def _refs(raw: list[Any] | None) -> list[CompoundRef]:
    refs: list[CompoundRef] = []
    for x in raw or []:
        if isinstance(x, dict):
            refs.append(
                CompoundRef(
                    text=str(x.get("text") or x.get("name") or ""),
                    refid=str(x["refid"]) if x.get("refid") else None,
                    prot=str(x.get("prot") or ""),
                    virt=str(x.get("virt") or ""),
                )
            )
        else:
            # A bare string is an id with no display text.
            refs.append(CompoundRef(text=str(x), refid=str(x)))
    return refs


def _location(raw: dict[str, Any] | None) -> Location | None:
    if not raw:
        return None
    return Location(
        file=str(raw.get("file") or ""),
        line=raw.get("line"),
        column=raw.get("column"),
        bodyfile=raw.get("bodyfile"),
        bodystart=raw.get("bodystart"),
        bodyend=raw.get("bodyend"),
    )


def _template_params(raw: list[Any] | None) -> list[TemplateParam]:
    return [
        TemplateParam(
            type=str(p.get("type") or ""),
            declname=str(p.get("declname") or ""),
            defname=str(p.get("defname") or ""),
            defval=str(p.get("defval") or ""),
        )
        for p in raw or []
        if isinstance(p, dict)
    ]


def _member_def(raw: dict[str, Any]) -> MemberDef:
    if not raw.get("id") or not raw.get("kind"):
        msg = f"Member definition without id or kind: {raw.get('name')!r}"
        raise ParseContractError(msg)
    return MemberDef(
        id=str(raw["id"]),
        kind=str(raw["kind"]),
        name=str(raw.get("name") or ""),
        prot=str(raw.get("prot") or "public"),
        is_static=bool(raw.get("static")),
        is_const=bool(raw.get("const")),
        is_constexpr=bool(raw.get("constexpr")),
        is_inline=bool(raw.get("inline")),
        is_explicit=bool(raw.get("explicit")),
        is_noexcept=bool(raw.get("noexcept")),
        is_nodiscard=bool(raw.get("nodiscard")),
        is_mutable=bool(raw.get("mutable")),
        is_strong=bool(raw.get("strong")),
        virt=str(raw.get("virt") or "non-virtual"),
        type=str(raw.get("type") or ""),
        argsstring=str(raw.get("argsstring") or ""),
        definition=str(raw.get("definition") or ""),
        qualified_name=str(raw.get("qualified_name") or ""),
        params=[
            Param(
                type=str(p.get("type") or ""),
                declname=str(p.get("declname") or ""),
                defval=str(p.get("defval") or ""),
            )
            for p in raw.get("params") or []
            if isinstance(p, dict)
        ],
        template_params=_template_params(raw.get("template_params")),
        initializer=str(raw.get("initializer") or ""),
        enum_values=[
            EnumValueDef(
                id=str(v["id"]),
                name=str(v.get("name") or ""),
                initializer=str(v.get("initializer") or ""),
                brief_description=v.get("brief_description"),
            )
            for v in raw.get("enum_values") or []
            if isinstance(v, dict) and v.get("id")
        ],
        location=_location(raw.get("location")),
        references=_refs(raw.get("references")),
        referenced_by=_refs(raw.get("referenced_by")),
        brief_description=raw.get("brief_description"),
        detailed_description=raw.get("detailed_description"),
    )


def _section_def(raw: dict[str, Any]) -> SectionDef:
    return SectionDef(
        kind=str(raw.get("kind") or ""),
        header=str(raw.get("header") or ""),
        description=raw.get("description"),
        member_defs=[_member_def(m) for m in raw.get("member_defs") or []],
        members=[
            MemberRefDef(
                refid=str(m["refid"]),
                name=str(m.get("name") or ""),
                kind=str(m.get("kind") or ""),
            )
            for m in raw.get("members") or []
            if isinstance(m, dict) and m.get("refid")
        ],
    )


def compound_def_from_dict(raw: dict[str, Any]) -> CompoundDef:
    """Build a CompoundDef from its plain mapping form."""
    if not raw.get("id") or not raw.get("kind"):
        msg = f"Compound definition without id or kind: {raw.get('compound_name')!r}"
        raise ParseContractError(msg)
    inner = {key: _refs(raw.get(key)) for key in _INNER_KEYS}
    return CompoundDef(
        id=str(raw["id"]),
        kind=str(raw["kind"]),
        compound_name=str(raw.get("compound_name") or ""),
        title=str(raw.get("title") or ""),
        template_params=_template_params(raw.get("template_params")),
        location=_location(raw.get("location")),
        section_defs=[_section_def(s) for s in raw.get("section_defs") or []],
        base_compound_refs=_refs(raw.get("base_compound_refs")),
        derived_compound_refs=_refs(raw.get("derived_compound_refs")),
        includes=_refs(raw.get("includes")),
        description_anchor_ids=[str(a) for a in raw.get("description_anchor_ids") or []],
        brief_description=raw.get("brief_description"),
        detailed_description=raw.get("detailed_description"),
        **inner,
    )


def load_compound_defs(paths: list[Path]) -> list[CompoundDef]:
    """Load every compound from a list of dump files, keeping file order.

    A file holds either a single compound mapping, a list of them, or a
    mapping with a ``compounds`` list.
    """
    defs: list[CompoundDef] = []
    for f in paths:
        doc = yaml.safe_load(f.read_text(encoding="utf-8"))
        if not doc:
            logger.warning("Empty compound dump: %s", f)
            continue
        if isinstance(doc, dict) and "compounds" in doc:
            doc = doc["compounds"]
        items = doc if isinstance(doc, list) else [doc]
        for it in items:
            if not isinstance(it, dict):
                logger.warning("Ignoring non-mapping entry in %s", f)
                continue
            defs.append(compound_def_from_dict(it))
    logger.info("Loaded %d compound definitions from %d files", len(defs), len(paths))
    return defs
