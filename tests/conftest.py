"""Shared test fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from wbem_path._path import WbemPath

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def path() -> Iterator[WbemPath]:
    """A fresh path object, released after the test if still alive."""
    p = WbemPath()
    yield p
    if not p.destroyed:
        p.release()
