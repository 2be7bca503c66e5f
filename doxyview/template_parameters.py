"""Utilities for splitting template arguments off qualified names."""

import re

from doxyview.compound_def import TemplateParam

TEMPLATE_ARGS_RE = re.compile(r"<.*>")


def template_parameters_of(compound_name: str) -> str:
    """Return the ``<...>`` part of a specialization name, or an empty string."""
    m = TEMPLATE_ARGS_RE.search(compound_name)
    return m.group(0) if m else ""


def strip_template_parameters(compound_name: str) -> str:
    """Drop the ``<...>`` part of a name (``ns::Foo<int>`` -> ``ns::Foo``)."""
    return TEMPLATE_ARGS_RE.sub("", compound_name)


def unqualified_name(qualified_name: str) -> str:
    """Return the last ``::`` segment of a qualified name."""
    return qualified_name.rsplit("::", 1)[-1]


def render_template_params(params: list[TemplateParam]) -> str:
    """Render a template declaration such as ``template <class T, int N = 3>``."""
    if not params:
        return ""
    rendered = []
    for p in params:
        text = p.type
        if p.declname:
            text = f"{text} {p.declname}"
        if p.defval:
            text = f"{text} = {p.defval}"
        rendered.append(text.strip())
    return f"template <{', '.join(rendered)}>"


def render_template_param_names(params: list[TemplateParam]) -> str:
    """Render just the parameter names, e.g. ``<T, N>``.

    A parameter without a declared name (``class``, ``typename...``) is
    listed by its type.
    """
    names = [p.declname or p.type for p in params]
    names = [n for n in names if n]
    return f"<{', '.join(names)}>" if names else ""
