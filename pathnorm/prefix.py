"""Prefix detection and separator selection.

A prefix is recognised only at the start of the first segment. It decides how
many leading characters of that segment are held back from separator
collapsing and which separator the rest of the path is joined with.
"""

from __future__ import annotations

import dataclasses as dc
import enum
import logging
import typing as t

logger = logging.getLogger(__name__)

FORWARD_SLASH: t.Final[str] = "/"
BACKSLASH: t.Final[str] = "\\"
SCHEME_MARKER: t.Final[str] = "://"

# Windows double-backslash lead shared by UNC and device-namespace paths.
_UNC_LEAD: t.Final[str] = BACKSLASH * 2
# Characters allowed between ``\\`` and the closing ``\`` of ``\\?\``/``\\.\``.
_NAMESPACE_MARKERS: t.Final[frozenset[str]] = frozenset({"?", "."})


class PrefixKind(enum.StrEnum):
    """Kinds of prefix recognised at the start of the first segment."""

    NONE = "none"
    SCHEME = "scheme"
    DRIVE_LETTER = "drive-letter"
    UNC = "unc"
    DEVICE_NAMESPACE = "device-namespace"


@dc.dataclass(frozen=True, slots=True)
class Prefix:
    """
    A detected prefix.

    Attributes
    ----------
    kind : PrefixKind
        Which rule matched.
    text : str
        The prefix as emitted in the normalized result. UNC and namespace
        prefixes are rewritten with forward slashes; scheme and drive-letter
        prefixes are copied verbatim.
    consumed : int
        Number of leading characters of the first segment the prefix replaces.
    """

    kind: PrefixKind
    text: str = ""
    consumed: int = 0

    @classmethod
    def none(cls) -> Prefix:
        """Return the empty prefix."""
        return cls(PrefixKind.NONE)

    @property
    def present(self) -> bool:
        """Return ``True`` unless this is the empty prefix."""
        return self.kind is not PrefixKind.NONE

    def strip(self, first: str) -> str:
        """Return *first* without the characters this prefix consumed."""
        return first[self.consumed :]


def is_drive_letter(segment: str) -> bool:
    """Return ``True`` when *segment* starts like ``C:\\``."""
    return len(segment) >= 3 and segment[1] == ":" and segment[2] == BACKSLASH


def detect_scheme_prefix(first: str) -> Prefix:
    """Return the URL scheme prefix of *first*, if it contains ``://``.

    Everything up to and including the first ``://`` becomes the prefix, so
    ``"exp://"`` and ``"https://host"`` both qualify. Later segments are never
    inspected.
    """
    scheme_end = first.find(SCHEME_MARKER)
    if scheme_end == -1:
        return Prefix.none()
    consumed = scheme_end + len(SCHEME_MARKER)
    return Prefix(PrefixKind.SCHEME, first[:consumed], consumed)


def detect_prefix(first: str) -> Prefix:
    """Classify the leading characters of *first*.

    Rules are tried in order and the first match wins: device namespace
    (``\\\\?\\`` or ``\\\\.\\``), UNC (``\\\\``), drive letter (``C:\\``),
    then URL scheme (``<scheme>://``).
    """
    prefix = _detect_windows_prefix(first) or detect_scheme_prefix(first)
    if prefix.present:
        logger.debug("Detected %s prefix %r in %r", prefix.kind, prefix.text, first)
    return prefix


def _detect_windows_prefix(first: str) -> Prefix | None:
    if first.startswith(_UNC_LEAD):
        marker = first[2:3]
        if marker in _NAMESPACE_MARKERS and first[3:4] == BACKSLASH:
            return Prefix(PrefixKind.DEVICE_NAMESPACE, f"//{marker}/", 4)
        return Prefix(PrefixKind.UNC, "//", len(_UNC_LEAD))
    if is_drive_letter(first):
        return Prefix(PrefixKind.DRIVE_LETTER, first[:3], 3)
    return None


def select_separator(prefix: Prefix, first: str) -> str:
    """Return the separator used to join the remainder.

    Backslash applies when the prefix text itself holds one or when *first*
    looks like a drive-letter path; forward slash otherwise.
    """
    if BACKSLASH in prefix.text or is_drive_letter(first):
        return BACKSLASH
    return FORWARD_SLASH


__all__ = [
    "BACKSLASH",
    "FORWARD_SLASH",
    "SCHEME_MARKER",
    "Prefix",
    "PrefixKind",
    "detect_prefix",
    "detect_scheme_prefix",
    "is_drive_letter",
    "select_separator",
]
