"""Logic for converting description payloads to plain text representation."""


def as_text(v: object) -> str:
    """Convert a value to a string, handling lists, mappings and None.

    Mappings are parsed description nodes; their ``text`` is used when present,
    otherwise their ``children`` are flattened.
    """
    if v is None:
        return ""
    if isinstance(v, str):
        return v.strip()
    if isinstance(v, list):
        return "\n".join(as_text(x) for x in v if as_text(x))
    if isinstance(v, dict):
        if "text" in v:
            return as_text(v["text"])
        return as_text(v.get("children"))
    return str(v).strip()
