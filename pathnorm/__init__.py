"""Join path and URL segments into a single normalized string.

Two variants are provided. :func:`normalize_join` recognises URL schemes and
Windows drive-letter, UNC and device-namespace prefixes;
:func:`normalize_join_posix` (also :func:`pathnorm.posix.normalize_join`)
handles URLs and POSIX paths only.
"""

from __future__ import annotations

from .errors import PathnormError, SegmentTypeError
from .normalize import normalize_join, normalize_join_unix
from .posix import normalize_join_posix
from .prefix import Prefix, PrefixKind, detect_prefix, detect_scheme_prefix

__all__ = [
    "PathnormError",
    "Prefix",
    "PrefixKind",
    "SegmentTypeError",
    "detect_prefix",
    "detect_scheme_prefix",
    "normalize_join",
    "normalize_join_posix",
    "normalize_join_unix",
]
