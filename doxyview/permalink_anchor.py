"""Helpers splitting Doxygen ids into owning-compound id and anchor."""

import re

HEX_ANCHOR_RE = re.compile(r"_1[0-9a-fg]*$")
TEXT_ANCHOR_RE = re.compile(r"_1_[0-9a-z]*$")
ANCHOR_PREFIX_RE = re.compile(r"^.*_1")


def strip_permalink_hex_anchor(refid: str) -> str:
    """Return the owning compound id of a member id.

    ``classfoo_1a3f`` -> ``classfoo``. Doxygen occasionally emits ``g`` in
    these anchors, so it is accepted next to hex digits.
    """
    return HEX_ANCHOR_RE.sub("", refid)


def strip_permalink_text_anchor(refid: str) -> str:
    """Return the page id of a text anchor (``todo_1_todo000001`` -> ``todo``)."""
    return TEXT_ANCHOR_RE.sub("", refid)


def get_permalink_anchor(refid: str) -> str:
    """Return the in-page anchor of a member id (``classfoo_1a3f`` -> ``a3f``)."""
    return ANCHOR_PREFIX_RE.sub("", refid)
