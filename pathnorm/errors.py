"""Exception hierarchy for pathnorm."""

from __future__ import annotations


class PathnormError(Exception):
    """Base class for pathnorm errors."""


class SegmentTypeError(PathnormError, TypeError):
    """Raised when a segment passed to a normalizer is not a ``str``.

    Parameters
    ----------
    index : int
        Position of the offending segment in the argument list.
    value : object
        The rejected segment.

    Attributes
    ----------
    index : int
        Position of the offending segment in the argument list.
    value : object
        The rejected segment.
    """

    def __init__(self, index: int, value: object) -> None:
        msg = f"segment {index} must be str, not {type(value).__name__}"
        super().__init__(msg)
        self.index = index
        self.value = value


__all__ = ["PathnormError", "SegmentTypeError"]
