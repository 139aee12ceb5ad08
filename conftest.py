"""Global test configuration and shared fixtures."""

from __future__ import annotations

import logging
import typing as t

import pytest


@pytest.fixture
def pathnorm_debug_log(
    caplog: pytest.LogCaptureFixture,
) -> t.Generator[pytest.LogCaptureFixture, None, None]:
    """Capture ``DEBUG`` records emitted by any ``pathnorm`` logger."""
    with caplog.at_level(logging.DEBUG, logger="pathnorm"):
        yield caplog
