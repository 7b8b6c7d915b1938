from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def debug_logging(caplog: pytest.LogCaptureFixture) -> Iterator[None]:
    """Run every test with the toolkit's debug logging switched on."""
    caplog.set_level(logging.DEBUG, logger="roguelike_toolkit")
    yield
