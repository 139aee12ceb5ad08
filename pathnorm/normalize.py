"""Windows-aware path and URL normalization.

:func:`normalize_join` understands URL schemes, drive letters, UNC paths and
device-namespace paths. Browser-style or server-side code that never sees
Windows paths can use :mod:`pathnorm.posix` instead.
"""

from __future__ import annotations

from ._join import ANY_SEPARATOR, ANY_SEPARATOR_RUN, assemble
from ._validators import validate_segments
from .prefix import BACKSLASH, FORWARD_SLASH, detect_prefix, select_separator


def normalize_join(*parts: str) -> str:
    """Join *parts* into a single normalized path or URL.

    Parameters
    ----------
    *parts : str
        Path or URL segments in order. Only the first segment is checked for
        a prefix; every other segment is joined as plain text.

    Returns
    -------
    str
        The joined path. Drive-letter paths use backslashes; everything else,
        UNC and device-namespace paths included, uses forward slashes.

    Raises
    ------
    SegmentTypeError
        If any segment is not a ``str``.

    Examples
    --------
    >>> normalize_join("https://abc.def//212/", "dw//we", "23123")
    'https://abc.def/212/dw/we/23123'
    >>> normalize_join("foo//bar", "/baz")
    '/foo/bar/baz'
    >>> normalize_join("C:\\\\foo\\\\\\\\bar", "baz")
    'C:\\\\foo\\\\bar\\\\baz'
    >>> normalize_join("\\\\\\\\server\\\\share\\\\\\\\folder", "file.txt")
    '//server/share/folder/file.txt'
    >>> normalize_join("\\\\\\\\?\\\\C:\\\\foo\\\\\\\\bar", "baz")
    '//?/C:/foo/bar/baz'
    """
    validate_segments(parts)
    if not parts:
        return ""

    first, *tail = parts
    prefix = detect_prefix(first)
    remainder = [prefix.strip(first), *tail] if prefix.present else list(parts)
    separator = select_separator(prefix, first)
    return assemble(
        prefix,
        remainder,
        separator,
        separator_run=ANY_SEPARATOR_RUN,
        separator_chars=ANY_SEPARATOR,
    )


def normalize_join_unix(*parts: str) -> str:
    """Like :func:`normalize_join`, but always return forward slashes.

    Useful when a Windows path has to be handed to a tool that only accepts
    ``/``. Backslashes in the normalized result are replaced after the fact;
    the prefix is not re-detected.

    >>> normalize_join_unix("C:\\\\foo\\\\\\\\bar", "baz")
    'C:/foo/bar/baz'
    """
    return normalize_join(*parts).replace(BACKSLASH, FORWARD_SLASH)


__all__ = ["normalize_join", "normalize_join_unix"]
