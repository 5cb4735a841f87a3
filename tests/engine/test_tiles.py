"""
Pickomino Advisor - Tile Eligibility Tests

Tests for the default grill, eligibility ordering, and the worm gate.
"""

import pytest
from src.engine.base import Tile, UsedFaces
from src.engine.tiles import best_tile, build_default_tiles, can_succeed, eligible_tiles


class TestBuildDefaultTiles:
    """Tests for build_default_tiles()."""

    def test_sixteen_tiles(self, default_tiles):
        assert len(default_tiles) == 16

    def test_thresholds(self, default_tiles):
        assert [tile.threshold for tile in default_tiles] == list(range(21, 37))

    @pytest.mark.parametrize("threshold,points", [
        (21, 1), (24, 1),
        (25, 2), (28, 2),
        (29, 3), (32, 3),
        (33, 4), (36, 4),
    ])
    def test_point_bands(self, default_tiles, threshold, points):
        tile = next(t for t in default_tiles if t.threshold == threshold)
        assert tile.points == points

    def test_all_overshoot(self, default_tiles):
        assert all(tile.overshoot_allowed for tile in default_tiles)

    def test_fresh_each_call(self):
        assert build_default_tiles() == build_default_tiles()


class TestEligibleTiles:
    """Tests for eligible_tiles()."""

    def test_below_lowest(self, default_tiles):
        assert eligible_tiles(20, default_tiles) == ()

    def test_exactly_lowest(self, default_tiles):
        assert eligible_tiles(21, default_tiles) == (Tile(21, 1),)

    def test_descending_order(self, default_tiles):
        thresholds = [tile.threshold for tile in eligible_tiles(27, default_tiles)]
        assert thresholds == [27, 26, 25, 24, 23, 22, 21]

    def test_top_score(self, default_tiles):
        eligible = eligible_tiles(36, default_tiles)
        assert eligible[0] == Tile(36, 4)
        assert len(eligible) == 16

    def test_ties_prefer_more_points(self):
        tiles = (Tile(30, 1), Tile(30, 3))
        assert eligible_tiles(30, tiles)[0].points == 3

    def test_exact_match_tile(self, exact_match_tiles):
        assert [t.threshold for t in eligible_tiles(24, exact_match_tiles)] == [24]
        assert eligible_tiles(25, exact_match_tiles) == ()
        assert [t.threshold for t in eligible_tiles(31, exact_match_tiles)] == [30]

    def test_empty_pool(self):
        assert eligible_tiles(30, ()) == ()

    def test_more_score_never_fewer_tiles(self, default_tiles):
        sizes = [len(eligible_tiles(score, default_tiles)) for score in range(0, 45)]
        assert sizes == sorted(sizes)


class TestBestTile:
    """Tests for best_tile()."""

    def test_highest_reachable(self, default_tiles):
        assert best_tile(30, default_tiles) == Tile(30, 3)

    def test_missing_threshold_falls_back(self):
        tiles = (Tile(21, 1), Tile(25, 2))
        assert best_tile(24, tiles) == Tile(21, 1)

    def test_none(self, default_tiles):
        assert best_tile(10, default_tiles) is None


class TestCanSucceed:
    """Tests for can_succeed()."""

    def test_requires_worm(self, default_tiles, all_but_worm):
        assert can_succeed(30, all_but_worm, default_tiles) is False

    def test_worm_and_score(self, default_tiles, worm_only):
        assert can_succeed(21, worm_only, default_tiles) is True

    def test_worm_without_score(self, default_tiles, worm_only):
        assert can_succeed(5, worm_only, default_tiles) is False

    def test_empty_pool_never_succeeds(self, worm_only):
        assert can_succeed(36, worm_only, ()) is False

    def test_nothing_banked(self, default_tiles):
        assert can_succeed(0, UsedFaces(), default_tiles) is False
