"""Data model for one node of a collection's navigation tree."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class NavigationNode:
    """A compound as it appears in the navigation sidebar."""

    label: str
    nav_id: str
    permalink: str
    kind: str
    children: list["NavigationNode"] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "id": self.nav_id,
            "permalink": self.permalink,
            "kind": self.kind,
            "children": [c.to_dict() for c in self.children],
        }
