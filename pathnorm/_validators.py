"""Shared validation helpers."""

from __future__ import annotations

import typing as t

from .errors import SegmentTypeError

if t.TYPE_CHECKING:
    import collections.abc as cabc


def validate_segments(parts: cabc.Sequence[object]) -> None:
    """Ensure every entry of *parts* is a ``str``.

    ``bytes`` and :class:`os.PathLike` objects are rejected as well; callers
    convert them with :func:`os.fsdecode` or :func:`os.fspath` first.
    """
    for index, part in enumerate(parts):
        if not isinstance(part, str):
            raise SegmentTypeError(index, part)
