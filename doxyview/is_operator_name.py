"""Predicate for checking if a function name is an operator overload."""

OPERATOR_KEYWORD = "operator"
_OPERATOR_FOLLOWERS = frozenset(' =!<>+-*/%&|^~,"([')


def is_operator_name(name: str) -> bool:
    """Check if the name is ``operator`` followed by a non-identifier character."""
    if not name.startswith(OPERATOR_KEYWORD) or len(name) <= len(OPERATOR_KEYWORD):
        return False
    return name[len(OPERATOR_KEYWORD)] in _OPERATOR_FOLLOWERS
