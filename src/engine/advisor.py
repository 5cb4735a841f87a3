"""
Pickomino Advisor - Recommendation Builder

Entry point of the engine. Takes the dice actually showing, the faces
banked so far and the tiles still on the grill, and scores every legal
pick with the exact value function.

All methods are stateless class methods. Each call builds its own
ValueFunction, so nothing cached for one tile pool leaks into another.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

from src.config.settings import get_settings
from src.engine.base import FACES, EvaluationMode, Tile, TurnState
from src.engine.solver import ValueFunction
from src.engine.validators import validate_dice_total, validate_roll, validate_used_counts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FaceChoice:
    """
    Statistics for banking one face from the current roll.

    Attributes:
        face: Face value banked
        count: Dice showing that face in the roll
        immediate_score: Turn score right after banking
        dice_remaining: Dice left to roll afterwards
        value: Success probability or expected points, depending on mode
    """
    face: int
    count: int
    immediate_score: int
    dice_remaining: int
    value: float

    def describe(self) -> str:
        """One-line trace used for diagnostics."""
        return (
            f"face {self.face}: count={self.count}, score={self.immediate_score}, "
            f"remaining={self.dice_remaining}, value={self.value:.6f}"
        )


@dataclass(frozen=True)
class Recommendation:
    """
    Advice for a single evaluation mode.

    Attributes:
        mode: Objective the values refer to
        per_face: One slot per face (index face - 1), None when illegal
        best_face: Recommended face, None if nothing can be banked
    """
    mode: EvaluationMode
    per_face: tuple[FaceChoice | None, ...]
    best_face: int | None

    def choice(self, face: int) -> FaceChoice | None:
        return self.per_face[face - 1]

    @property
    def choices(self) -> tuple[FaceChoice, ...]:
        """Legal choices in ascending face order."""
        return tuple(choice for choice in self.per_face if choice is not None)

    @property
    def best_value(self) -> float:
        if self.best_face is None:
            return 0.0
        return self.per_face[self.best_face - 1].value

    @property
    def has_legal_pick(self) -> bool:
        return self.best_face is not None

    def tied_faces(self, tolerance: float) -> frozenset[int]:
        """Faces whose value is within `tolerance` of the best one."""
        best = self.best_value
        return frozenset(
            choice.face for choice in self.choices
            if best - choice.value <= tolerance
        )

    def report(self) -> str:
        return "\n".join(choice.describe() for choice in self.choices)

    def __str__(self) -> str:
        if self.best_face is None:
            return "BUST! No face can be banked."
        lines = [f"Best face: {self.best_face} ({self.mode.value})"]
        lines.extend(f"  - {choice.describe()}" for choice in self.choices)
        return "\n".join(lines)


@dataclass(frozen=True)
class DualRecommendation:
    """
    Advice under both evaluation modes for the same roll.

    Attributes:
        probability: Recommendation maximizing the chance of a claim
        expected_points: Recommendation maximizing the claimed points
        tolerance: Slack used when collecting tied faces
    """
    probability: Recommendation
    expected_points: Recommendation
    tolerance: float

    def recommendation(self, mode: EvaluationMode) -> Recommendation:
        if mode is EvaluationMode.SUCCESS_PROBABILITY:
            return self.probability
        return self.expected_points

    def best_faces(self, mode: EvaluationMode) -> frozenset[int]:
        """Faces tied for best under `mode`."""
        return self.recommendation(mode).tied_faces(self.tolerance)

    @property
    def either(self) -> frozenset[int]:
        """Faces optimal under at least one mode."""
        return (
            self.best_faces(EvaluationMode.SUCCESS_PROBABILITY)
            | self.best_faces(EvaluationMode.EXPECTED_POINTS)
        )

    @property
    def both(self) -> frozenset[int]:
        """Faces optimal under both modes."""
        return (
            self.best_faces(EvaluationMode.SUCCESS_PROBABILITY)
            & self.best_faces(EvaluationMode.EXPECTED_POINTS)
        )


class TurnAdvisor:
    """
    Stateless builder of per-face recommendations.

    Inputs are validated here; the solver assumes well-formed states.
    """

    @classmethod
    def recommend(
        cls,
        roll: Sequence[int],
        tiles: Iterable[Tile],
        used_counts: Mapping[int, int] | None = None,
        mode: EvaluationMode = EvaluationMode.SUCCESS_PROBABILITY,
    ) -> Recommendation:
        """
        Score every legal pick from the visible roll.

        Args:
            roll: Dice faces currently showing (up to 8)
            tiles: Tiles still claimable
            used_counts: Face -> dice banked this turn
            mode: Objective to optimize

        Returns:
            Recommendation with per-face statistics and the best face

        Raises:
            InvalidFaceValue: If a roll or banked face is outside 1-6
            InvalidDiceCount: If counts are negative or exceed eight dice
        """
        values, state = cls._prepare(roll, used_counts or {})
        return cls._evaluate(values, state, ValueFunction(tiles), mode)

    @classmethod
    def recommend_dual(
        cls,
        roll: Sequence[int],
        tiles: Iterable[Tile],
        used_counts: Mapping[int, int] | None = None,
        tolerance: float | None = None,
    ) -> DualRecommendation:
        """
        Score every legal pick under both evaluation modes.

        Args:
            roll: Dice faces currently showing (up to 8)
            tiles: Tiles still claimable
            used_counts: Face -> dice banked this turn
            tolerance: Slack for ties (defaults to the configured tie tolerance)

        Returns:
            DualRecommendation holding one Recommendation per mode
        """
        if tolerance is None:
            tolerance = get_settings().tie_tolerance
        values, state = cls._prepare(roll, used_counts or {})
        value_function = ValueFunction(tiles)
        return DualRecommendation(
            probability=cls._evaluate(
                values, state, value_function, EvaluationMode.SUCCESS_PROBABILITY
            ),
            expected_points=cls._evaluate(
                values, state, value_function, EvaluationMode.EXPECTED_POINTS
            ),
            tolerance=tolerance,
        )

    @classmethod
    def _prepare(
        cls,
        roll: Sequence[int],
        used_counts: Mapping[int, int],
    ) -> tuple[tuple[int, ...], TurnState]:
        values = validate_roll(roll)
        banked = validate_used_counts(used_counts)
        validate_dice_total(values, banked)
        return values, TurnState.from_used_counts(banked)

    @classmethod
    def _evaluate(
        cls,
        values: tuple[int, ...],
        state: TurnState,
        value_function: ValueFunction,
        mode: EvaluationMode,
    ) -> Recommendation:
        rolled = Counter(values)
        per_face: list[FaceChoice | None] = []
        best_face: int | None = None
        best_value = -1.0

        for face in FACES:
            count = rolled[face]
            if count == 0 or not state.can_bank(face):
                per_face.append(None)
                continue

            after = state.bank(face, count)
            value = value_function.value(after.dice_remaining, after.score, after.used, mode)
            choice = FaceChoice(
                face=face,
                count=count,
                immediate_score=after.score,
                dice_remaining=after.dice_remaining,
                value=value,
            )
            per_face.append(choice)
            logger.debug(choice.describe())

            # Ties keep the lowest face
            if value > best_value:
                best_value = value
                best_face = face

        logger.debug(
            "Best face %s for %s (%d states evaluated)",
            best_face, mode.value, value_function.state_count,
        )
        return Recommendation(mode=mode, per_face=tuple(per_face), best_face=best_face)
