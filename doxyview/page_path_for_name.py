"""Utility for determining the relative permalink of a compound page."""

import re

from doxyview.path_sanitizer import sanitize_hierarchical_path, short_hash

ANONYMOUS_SEGMENT_RE = re.compile(r"^(@\d+|anonymous_namespace\{.*\})?$")


def page_path_for_name(
    plural_kind: str,
    qualified_name: str,
    template_parameters: str = "",
    *,
    anonymous_placeholder: str = "anonymous",
    hash_length: int = 8,
) -> str:
    """Generate the relative permalink for a qualified name.

    ``ns::Foo`` in ``classes`` -> ``classes/ns/foo``; anonymous segments map
    to the placeholder and a template argument list is appended as a short
    hash so that specializations never share a page.
    """
    # Scope separators: a::b::c -> a/b/c
    segments = qualified_name.split("::") if qualified_name else [""]
    processed = [
        anonymous_placeholder if ANONYMOUS_SEGMENT_RE.match(s) else s for s in segments
    ]
    path = f"{plural_kind}/{sanitize_hierarchical_path('/'.join(processed))}"
    if template_parameters:
        path = f"{path}-{short_hash(template_parameters, hash_length)}"
    return path
