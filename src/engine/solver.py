"""
Pickomino Advisor - Memoized Value Function

Exact value of a turn state under optimal play:

    value(state) = payoff                         if a claim is possible
                 = 0                              if no dice are left
                 = sum(p(outcome) * max(value(state after pick)))
                                                  over outcomes of the next roll

The maximum runs over legal picks (faces rolled and not yet banked); an
outcome without a legal pick is a bust and counts as 0. Both evaluation
modes share this recursion and differ only in the terminal payoff.

A ValueFunction is bound to one tile pool snapshot. Its memo must not
outlive that pool, so build a new instance whenever the pool changes.
"""

from typing import Callable, Iterable, Mapping, Sequence

from src.engine.base import FACES, EvaluationMode, Tile, UsedFaces, face_points
from src.engine.distribution import distribution
from src.engine.tiles import eligible_tiles


def _claim_probability(eligible: Sequence[Tile]) -> float:
    return 1.0


def _claimed_points(eligible: Sequence[Tile]) -> float:
    return float(eligible[0].points)


TERMINAL_PAYOFFS: Mapping[EvaluationMode, Callable[[Sequence[Tile]], float]] = {
    EvaluationMode.SUCCESS_PROBABILITY: _claim_probability,
    EvaluationMode.EXPECTED_POINTS: _claimed_points,
}


class ValueFunction:
    """
    Recursive expectation over future rolls, cached per state.

    Memo keys are (dice_remaining, score, used mask, mode), so both modes
    can be evaluated from the same instance without interfering.
    """

    def __init__(self, tiles: Iterable[Tile]) -> None:
        self._tiles: tuple[Tile, ...] = tuple(tiles)
        self._memo: dict[tuple[int, int, int, EvaluationMode], float] = {}
        self._eligible: dict[int, tuple[Tile, ...]] = {}
        max_points = max((tile.points for tile in self._tiles), default=0)
        self._ceilings: dict[EvaluationMode, float] = {
            EvaluationMode.SUCCESS_PROBABILITY: 1.0,
            EvaluationMode.EXPECTED_POINTS: float(max_points),
        }

    @property
    def tiles(self) -> tuple[Tile, ...]:
        return self._tiles

    @property
    def state_count(self) -> int:
        """Number of states evaluated so far."""
        return len(self._memo)

    def eligible(self, score: int) -> tuple[Tile, ...]:
        """Eligible tiles at `score` for this pool, cached by score."""
        if score not in self._eligible:
            self._eligible[score] = eligible_tiles(score, self._tiles)
        return self._eligible[score]

    def terminal_payoff(self, score: int, used: UsedFaces, mode: EvaluationMode) -> float | None:
        """
        Payoff of stopping now, or None if no claim is possible yet.
        """
        if not used.has_special:
            return None
        eligible = self.eligible(score)
        if not eligible:
            return None
        return TERMINAL_PAYOFFS[mode](eligible)

    def value(
        self,
        dice_remaining: int,
        score: int,
        used: UsedFaces,
        mode: EvaluationMode,
    ) -> float:
        """
        Value of the state when playing optimally for `mode`.

        Args:
            dice_remaining: Dice still to be rolled (0-8)
            score: Points banked so far this turn
            used: Faces banked so far this turn
            mode: Objective to optimize

        Returns:
            A probability in [0, 1] or an expected number of points
        """
        key = (dice_remaining, score, used.mask, mode)
        cached = self._memo.get(key)
        if cached is not None:
            return cached

        payoff = self.terminal_payoff(score, used, mode)
        if payoff is not None:
            result = payoff
        elif dice_remaining == 0:
            result = 0.0
        else:
            result = self._expected_over_roll(dice_remaining, score, used, mode)

        self._memo[key] = result
        return result

    def _expected_over_roll(
        self,
        dice_remaining: int,
        score: int,
        used: UsedFaces,
        mode: EvaluationMode,
    ) -> float:
        ceiling = self._ceilings[mode]
        total = 0.0

        for outcome in distribution(dice_remaining):
            best = 0.0
            for face in FACES:
                count = outcome.counts[face - 1]
                if count == 0 or used.contains(face):
                    continue
                pick_value = self.value(
                    dice_remaining - count,
                    score + face_points(face) * count,
                    used.with_face(face),
                    mode,
                )
                if pick_value > best:
                    best = pick_value
                    if best >= ceiling:
                        break
            total += outcome.probability * best

        return total
