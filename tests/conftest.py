"""
Pickomino Advisor - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import pytest

from src.config.settings import get_settings
from src.engine.base import Tile, UsedFaces
from src.engine.solver import ValueFunction
from src.engine.tiles import build_default_tiles


# =============================================================================
# TILE POOLS
# =============================================================================

@pytest.fixture
def default_tiles() -> tuple[Tile, ...]:
    """The sixteen tiles 21-36 a game starts with."""
    return build_default_tiles()


@pytest.fixture
def exact_match_tiles() -> tuple[Tile, ...]:
    """Small pool mixing exact-match and overshoot tiles."""
    return (
        Tile(threshold=24, points=3, overshoot_allowed=False),
        Tile(threshold=27, points=2, overshoot_allowed=False),
        Tile(threshold=30, points=4),
    )


# =============================================================================
# SOLVER FIXTURES
# =============================================================================

@pytest.fixture
def value_function(default_tiles) -> ValueFunction:
    """Fresh value function bound to the default pool."""
    return ValueFunction(default_tiles)


@pytest.fixture
def worm_only() -> UsedFaces:
    """Only the worm has been banked."""
    return UsedFaces.from_faces([6])


@pytest.fixture
def all_but_worm() -> UsedFaces:
    """Faces 1-5 banked, worm still missing."""
    return UsedFaces.from_faces([1, 2, 3, 4, 5])


# =============================================================================
# SETTINGS
# =============================================================================

@pytest.fixture
def clean_settings(monkeypatch):
    """Clear cached settings and related environment variables."""
    for key in ("DEBUG", "LOG_LEVEL", "TIE_TOLERANCE"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
