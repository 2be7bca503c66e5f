"""Logic for grouping index entries by initial letter."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from doxyview.index_entry import IndexEntry

DESTRUCTOR_SIGIL = "~"


@dataclass
class IndexGroup:
    """All entries sharing one initial letter."""

    initial: str
    entries: list[IndexEntry] = field(default_factory=list)


def initial_of(name: str) -> str:
    """Return the lowercase first letter of a name, ignoring a leading ``~``."""
    return name.removeprefix(DESTRUCTOR_SIGIL)[:1].lower()


def _sort_key(entry: IndexEntry) -> tuple[str, str, str]:
    return (
        entry.name.removeprefix(DESTRUCTOR_SIGIL).casefold(),
        entry.long_name.removeprefix(DESTRUCTOR_SIGIL).casefold(),
        entry.id,
    )


def order_per_initials(entries: Iterable[IndexEntry]) -> list[IndexGroup]:
    """Group entries by initial; groups and entries are sorted.

    Comparison is case-insensitive, so ``~Foo``, ``foo`` and ``Foo`` sort
    next to each other in the ``f`` group. Entries with an empty name are
    skipped.
    """
    groups: dict[str, list[IndexEntry]] = {}
    for entry in entries:
        initial = initial_of(entry.name)
        if initial:
            groups.setdefault(initial, []).append(entry)
    return [
        IndexGroup(initial, sorted(groups[initial], key=_sort_key))
        for initial in sorted(groups)
    ]
