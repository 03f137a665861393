"""Pytest fixtures shared by fnkit tests."""

from __future__ import annotations

import pytest


@pytest.fixture(params=[0, 1, -7, 42])
def initial(request: pytest.FixtureRequest) -> int:
    """Representative integer initial states."""
    return request.param
