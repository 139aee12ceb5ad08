"""Joining, separator collapsing and prefix reattachment shared by both variants."""

from __future__ import annotations

import re
import typing as t

from .prefix import BACKSLASH, FORWARD_SLASH

if t.TYPE_CHECKING:
    import collections.abc as cabc

    from .prefix import Prefix

# Runs of either slash style; used by the Windows-aware normalizer.
ANY_SEPARATOR_RUN: t.Final[re.Pattern[str]] = re.compile(r"[/\\]+")
# Runs of forward slashes only; used by the POSIX normalizer.
FORWARD_SEPARATOR_RUN: t.Final[re.Pattern[str]] = re.compile(r"/+")

ANY_SEPARATOR: t.Final[tuple[str, ...]] = (FORWARD_SLASH, BACKSLASH)
FORWARD_SEPARATOR: t.Final[tuple[str, ...]] = (FORWARD_SLASH,)


def join_collapsed(
    remainder: cabc.Sequence[str], separator: str, separator_run: re.Pattern[str]
) -> str:
    """Join *remainder* with *separator* and squeeze separator runs to one.

    Empty segments still contribute a separator, so ``["foo", ""]`` joins to
    ``"foo/"``.
    """
    joined = separator.join(remainder)
    return separator_run.sub(lambda _match: separator, joined)


def assemble(
    prefix: Prefix,
    remainder: cabc.Sequence[str],
    separator: str,
    *,
    separator_run: re.Pattern[str],
    separator_chars: tuple[str, ...],
) -> str:
    """Build the normalized string from a detected prefix and its remainder.

    With a prefix, one leading separator is dropped from the collapsed body so
    ``https://`` plus ``/foo`` becomes ``https://foo``. Without one, the body
    gains a single leading separator if any segment of *remainder* starts with
    one of *separator_chars*.
    """
    body = join_collapsed(remainder, separator, separator_run)
    if prefix.present:
        return f"{prefix.text}{body.removeprefix(separator)}"

    if any(segment.startswith(separator_chars) for segment in remainder):
        if body.startswith(separator_chars):
            body = body[1:]
        return f"{separator}{body}"
    return body


__all__ = [
    "ANY_SEPARATOR",
    "ANY_SEPARATOR_RUN",
    "FORWARD_SEPARATOR",
    "FORWARD_SEPARATOR_RUN",
    "assemble",
    "join_collapsed",
]
