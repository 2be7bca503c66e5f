"""Utilities for making hierarchical names safe for use as permalinks."""

import hashlib
import re

# Characters common in C++ signatures are encoded as their hex code so that
# `operator*` and `operator&` do not end up on the same path.
_HEX_ENCODED = {
    "*": "2a",
    "&": "26",
    "<": "3c",
    ">": "3e",
    "(": "28",
    ")": "29",
}

UNSAFE_PATH_RE = re.compile(r"[^a-zA-Z0-9/-]")
ANONYMOUS_NAMESPACE_RE = re.compile(r"anonymous_namespace\{")


def sanitize_hierarchical_path(text: str) -> str:
    """Lowercase a slash separated path and replace unsafe characters.

    Spaces are removed, a few operator characters are hex encoded, and any
    other character outside ``[a-z0-9/-]`` becomes ``-``.
    """
    text = text.lower().replace(" ", "")
    for ch, code in _HEX_ENCODED.items():
        text = text.replace(ch, code)
    return UNSAFE_PATH_RE.sub("-", text)


def flatten_path(text: str) -> str:
    """Turn a hierarchical path into a single token (``a/b`` -> ``a-b``)."""
    return text.replace("/", "-")


def sanitize_anonymous_namespace(text: str) -> str:
    """Shorten Doxygen's ``anonymous_namespace{file}`` to ``anonymous{file}``."""
    return ANONYMOUS_NAMESPACE_RE.sub("anonymous{", text)


def short_hash(text: str, length: int = 8) -> str:
    """Short deterministic hash used to tell template specializations apart."""
    return hashlib.md5(text.encode("utf-8")).hexdigest()[:length]  # noqa: S324
