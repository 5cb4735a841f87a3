"""
Pickomino Advisor - Tile Eligibility

Decides which tiles can be claimed at a given score. A claim also needs
at least one worm banked this turn, whatever the score.

Default grill:
    - 21-24: 1 point
    - 25-28: 2 points
    - 29-32: 3 points
    - 33-36: 4 points
"""

from typing import Iterable

from src.engine.base import Tile, UsedFaces


LOWEST_THRESHOLD = 21
HIGHEST_THRESHOLD = 36
POINTS_BAND_WIDTH = 4


def build_default_tiles() -> tuple[Tile, ...]:
    """Build the sixteen tiles a game starts with."""
    return tuple(
        Tile(
            threshold=threshold,
            points=1 + (threshold - LOWEST_THRESHOLD) // POINTS_BAND_WIDTH,
        )
        for threshold in range(LOWEST_THRESHOLD, HIGHEST_THRESHOLD + 1)
    )


def eligible_tiles(score: int, tiles: Iterable[Tile]) -> tuple[Tile, ...]:
    """
    Tiles that could be claimed with `score`, most valuable first.

    Sorted by threshold descending, ties broken by points descending.
    """
    eligible = [tile for tile in tiles if tile.accepts(score)]
    eligible.sort(key=lambda tile: (tile.threshold, tile.points), reverse=True)
    return tuple(eligible)


def best_tile(score: int, tiles: Iterable[Tile]) -> Tile | None:
    """The tile a player would take at `score`, or None."""
    eligible = eligible_tiles(score, tiles)
    return eligible[0] if eligible else None


def can_succeed(score: int, used: UsedFaces, tiles: Iterable[Tile]) -> bool:
    """
    Whether the turn can end with a claim right now.

    Requires the worm to be banked and at least one eligible tile.
    """
    if not used.has_special:
        return False
    return len(eligible_tiles(score, tiles)) > 0
