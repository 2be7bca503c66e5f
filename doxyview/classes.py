"""Collection of classes, structs and unions, with the inheritance graph."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from doxyview.collection_base import CollectionBase
from doxyview.compound_base import CompoundBase
from doxyview.index_entry import IndexContext, IndexEntry
from doxyview.link_target import LinkTarget
from doxyview.page_path_for_name import page_path_for_name
from doxyview.path_sanitizer import sanitize_anonymous_namespace
from doxyview.template_parameters import (
    render_template_param_names,
    render_template_params,
    strip_template_parameters,
    template_parameters_of,
    unqualified_name,
)

if TYPE_CHECKING:
    from doxyview.compound_def import CompoundDef
    from doxyview.workspace import Workspace

logger = logging.getLogger(__name__)

CLASS_KINDS = frozenset({"class", "struct", "union"})
PLURAL_KINDS = {"class": "classes", "struct": "structs", "union": "unions"}
MAX_TREE_ENTRY_LENGTH = 42


def plural_of(kind: str) -> str:
    return PLURAL_KINDS.get(kind, f"{kind}s")


class Class(CompoundBase):
    """A class, struct or union."""

    def __init__(self, collection: Classes, compound_def: CompoundDef) -> None:
        super().__init__(collection, compound_def)

        # Base ids in declaration order; repeated ids collapse to one edge.
        self.base_class_ids: list[str] = []
        for ref in compound_def.base_compound_refs:
            if ref.refid and ref.refid not in self.base_class_ids:
                self.base_class_ids.append(ref.refid)
        self.base_classes: list[Class] = []

        self.fully_qualified_name = strip_template_parameters(self.compound_name)
        self.unqualified_name = unqualified_name(self.fully_qualified_name)
        self.template_parameters = template_parameters_of(self.compound_name)
        # Primary templates carry no <...> in their name; list the parameters.
        name_parameters = self.template_parameters or render_template_param_names(
            compound_def.template_params
        )
        self.class_full_name = sanitize_anonymous_namespace(
            self.fully_qualified_name + name_parameters
        )

        self.index_name = f"{self.unqualified_name}{name_parameters}"
        if len(self.index_name) < MAX_TREE_ENTRY_LENGTH:
            self.tree_entry_name = self.index_name
        else:
            self.tree_entry_name = f"{self.unqualified_name}<...>"
        self.nav_label = self.tree_entry_name

        kind_title = self.kind.capitalize()
        is_template = bool(self.template_parameters or compound_def.template_params)
        template_word = " Template" if is_template else ""
        self.page_title = f"The `{self.index_name}` {kind_title}{template_word} Reference"

        options = collection.workspace.permalink_options
        path = page_path_for_name(
            plural_of(self.kind),
            self.fully_qualified_name,
            self.template_parameters,
            **options,
        )
        self.set_permalink(plural_of(self.kind), path.split("/", 1)[1])

        self.template_declaration = ""
        self.base_links: list[LinkTarget] = []
        self.derived_links: list[LinkTarget] = []

        self.create_sections(self.unqualified_name)

    def init_late(self) -> None:
        self.template_declaration = render_template_params(
            self.compound_def.template_params
        )
        super().init_late()

    def resolve_links(self) -> None:
        super().resolve_links()
        cd = self.compound_def
        self.base_links = [self._link_for(ref) for ref in cd.base_compound_refs]
        self.derived_links = [self._link_for(ref) for ref in cd.derived_compound_refs]

    def index_context(self) -> IndexContext:
        return IndexContext(self.kind, self.class_full_name, self.tree_entry_name)


class Classes(CollectionBase):
    """Classes, structs and unions plus their inheritance DAG."""

    name = "classes"
    listings = {
        "all": None,
        "classes": CLASS_KINDS,
        "functions": frozenset({"function"}),
        "variables": frozenset({"variable"}),
        "typedefs": frozenset({"typedef"}),
        "enums": frozenset({"enum"}),
        "enumvalues": frozenset({"enumvalue"}),
    }

    def __init__(self, workspace: Workspace) -> None:
        super().__init__(workspace)
        self.top_level_classes: list[Class] = []

    @property
    def classes(self) -> list[Class]:
        return [c for c in self.compounds_by_id.values() if isinstance(c, Class)]

    def create_compound(self, compound_def: CompoundDef) -> Class:
        return Class(self, compound_def)

    def build_hierarchy(self) -> None:
        """Add base/derived edges; classes with no resolved base are top level."""
        for cls in self.classes:
            for base_id in cls.base_class_ids:
                base = self.compounds_by_id.get(base_id)
                if not isinstance(base, Class):
                    logger.warning(
                        "%s ignored as base class of %s, not documented",
                        base_id,
                        cls.compound_name,
                    )
                    continue
                base.children.append(cls)
                base.children_ids.append(cls.id)
                cls.base_classes.append(base)

        self.top_level_classes = [c for c in self.classes if not c.base_classes]
        logger.debug(
            "%d classes, %d top level",
            len(self.compounds_by_id),
            len(self.top_level_classes),
        )

    @property
    def top_level_entries(self) -> list[CompoundBase]:
        return list(self.top_level_classes)

    def iter_index_entries(self) -> Iterator[IndexEntry]:
        for cls in self.classes:
            context = cls.index_context()
            yield self.compound_entry(cls, context, cls.fully_qualified_name)
            yield from self.member_entries(cls, context)
