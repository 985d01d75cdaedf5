"""Root conftest.py for pytest configuration.

Keeps advisories from leaking between tests.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _clear_no_deprecation(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test without an inherited NO_DEPRECATION setting."""
    monkeypatch.delenv("NO_DEPRECATION", raising=False)
    yield
