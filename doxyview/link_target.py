"""Data models for representing resolved cross-reference targets."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkTarget:
    """Represents the target of a cross-reference."""

    title: str
    page_path: str | None  # None when the target is not documented

    def to_markdown(self) -> str:
        """Render as a Markdown link, or plain text when unresolved."""
        if not self.page_path:
            return self.title
        return f"[{self.title}]({self.page_path})"
