"""Shared test fixtures."""

from __future__ import annotations

import pytest

from ninjagen import NinjaBuilder, ninja_builder


@pytest.fixture
def ninja() -> NinjaBuilder:
    """Provide an empty builder with no version or build directory."""
    return ninja_builder()
