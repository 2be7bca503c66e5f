"""Exceptions raised when the parsed input or the phase sequence is broken."""


class ViewModelError(Exception):
    """Base class for all view model errors."""


class ParseContractError(ViewModelError):
    """Raised when a parsed definition is structurally malformed.

    Individual dangling references are tolerated and only logged; this error
    is reserved for data no later phase can safely work with, such as a
    section with neither a header nor a recognised kind.
    """


class PhaseOrderError(ViewModelError):
    """Raised when a workspace phase runs before its predecessor completed."""
