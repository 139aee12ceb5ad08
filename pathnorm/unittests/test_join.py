"""Unit tests for the shared join and reattachment helpers."""

from __future__ import annotations

import pytest

from pathnorm._join import (
    ANY_SEPARATOR,
    ANY_SEPARATOR_RUN,
    FORWARD_SEPARATOR,
    FORWARD_SEPARATOR_RUN,
    assemble,
    join_collapsed,
)
from pathnorm.prefix import Prefix, PrefixKind


def test_join_collapsed_squeezes_mixed_runs() -> None:
    """Mixed slash runs collapse to the chosen separator."""
    assert join_collapsed(["a//b", "\\\\c", "d"], "\\", ANY_SEPARATOR_RUN) == (
        "a\\b\\c\\d"
    )


def test_join_collapsed_forward_run_keeps_backslashes() -> None:
    """The forward-only pattern leaves backslashes alone."""
    assert join_collapsed(["a\\\\b", "c//"], "/", FORWARD_SEPARATOR_RUN) == (
        "a\\\\b/c/"
    )


def test_join_collapsed_keeps_empty_segments() -> None:
    """Empty segments still contribute a separator."""
    assert join_collapsed(["foo", ""], "/", ANY_SEPARATOR_RUN) == "foo/"


def test_assemble_drops_one_leading_separator_after_prefix() -> None:
    """A prefix is never followed by a doubled separator."""
    prefix = Prefix(PrefixKind.SCHEME, "https://", 8)
    result = assemble(
        prefix,
        ["", "/foo"],
        "/",
        separator_run=ANY_SEPARATOR_RUN,
        separator_chars=ANY_SEPARATOR,
    )
    assert result == "https://foo"


@pytest.mark.parametrize(
    ("remainder", "expected"),
    [
        (["foo", "bar"], "foo/bar"),
        (["foo", "/bar"], "/foo/bar"),
        (["/foo", "bar"], "/foo/bar"),
        (["foo", "\\bar"], "/foo/bar"),
    ],
)
def test_assemble_infers_leading_separator(
    remainder: list[str], expected: str
) -> None:
    """Any segment starting with a separator requests a leading one."""
    result = assemble(
        Prefix.none(),
        remainder,
        "/",
        separator_run=ANY_SEPARATOR_RUN,
        separator_chars=ANY_SEPARATOR,
    )
    assert result == expected


def test_assemble_forward_only_ignores_backslash_leaders() -> None:
    """With forward-only separators a leading backslash is plain text."""
    result = assemble(
        Prefix.none(),
        ["foo", "\\bar"],
        "/",
        separator_run=FORWARD_SEPARATOR_RUN,
        separator_chars=FORWARD_SEPARATOR,
    )
    assert result == "foo/\\bar"
