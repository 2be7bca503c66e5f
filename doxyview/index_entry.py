"""Data models for entries of the alphabetical indices."""

from dataclasses import dataclass

# kind -> wording used in the index text
_KIND_WORDING = {
    "enumvalue": "enum value",
    "define": "macro definition",
}


@dataclass
class IndexContext:
    """The compound an index entry is listed under."""

    link_kind: str
    link_name: str
    comparable_link_name: str = ""


@dataclass
class IndexEntry:
    """One line of an alphabetical index."""

    id: str
    name: str
    long_name: str
    kind: str
    context: IndexContext
    permalink: str | None = None

    def describe(self) -> str:
        """Return ``name: as [kind in] link-kind link-name`` text."""
        text = f"{self.name}: as "
        if self.name != self.context.comparable_link_name:
            text += f"{_KIND_WORDING.get(self.kind, self.kind)} in "
        if self.context.link_kind:
            text += f"{self.context.link_kind} "
        return text + self.context.link_name
