"""Shared fixtures for filter translation tests."""

from __future__ import annotations

import pytest

from gremlin_filters.dialects import build_default_registry
from gremlin_filters.renderer import GremlinFilterRenderer


@pytest.fixture
def registry():
    """Default dialect registry (exact + case-insensitive)."""
    return build_default_registry()


@pytest.fixture
def renderer(registry) -> GremlinFilterRenderer:
    return GremlinFilterRenderer(registry)
