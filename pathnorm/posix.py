"""URL and POSIX path normalization without Windows handling.

Lighter alternative to :func:`pathnorm.normalize_join` for code that never
sees backslashes or drive letters. Only ``<scheme>://`` prefixes are
recognised and segments are always joined with ``/``.

>>> normalize_join("https://myapp.com", "/api/proxy//auth")
'https://myapp.com/api/proxy/auth'
"""

from __future__ import annotations

from ._join import FORWARD_SEPARATOR, FORWARD_SEPARATOR_RUN, assemble
from ._validators import validate_segments
from .prefix import FORWARD_SLASH, detect_scheme_prefix


def normalize_join(*parts: str) -> str:
    """Join URL or POSIX *parts* into a single normalized string.

    Backslashes are ordinary characters here and are left untouched.

    >>> normalize_join("exp://", "sdfasdf", "abc.def//212/", "https://")
    'exp://sdfasdf/abc.def/212/https:/'
    """
    validate_segments(parts)
    if not parts:
        return ""

    first, *tail = parts
    prefix = detect_scheme_prefix(first)
    remainder = [prefix.strip(first), *tail] if prefix.present else list(parts)
    return assemble(
        prefix,
        remainder,
        FORWARD_SLASH,
        separator_run=FORWARD_SEPARATOR_RUN,
        separator_chars=FORWARD_SEPARATOR,
    )


normalize_join_posix = normalize_join

__all__ = ["normalize_join", "normalize_join_posix"]
