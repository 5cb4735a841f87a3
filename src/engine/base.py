"""
Pickomino Advisor - Engine Base Classes

This module defines the foundational data structures and enums used throughout
the decision engine. All classes are immutable (frozen dataclasses) so a
single snapshot can be evaluated repeatedly without side effects.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Mapping


FACES: tuple[int, ...] = (1, 2, 3, 4, 5, 6)
SPECIAL_FACE = 6  # The worm
SPECIAL_FACE_POINTS = 5
MAX_DICE = 8


def face_points(face: int) -> int:
    """Points contributed by a single banked die showing `face`."""
    return SPECIAL_FACE_POINTS if face == SPECIAL_FACE else face


class EvaluationMode(Enum):
    """Objective the solver optimizes for."""
    SUCCESS_PROBABILITY = "success_probability"
    EXPECTED_POINTS = "expected_points"


@dataclass(frozen=True)
class Tile:
    """
    A claimable tile from the grill.

    Attributes:
        threshold: Score printed on the tile
        points: Number of worms the tile is worth
        overshoot_allowed: Whether a higher score may still claim it
    """
    threshold: int
    points: int
    overshoot_allowed: bool = True

    def __post_init__(self) -> None:
        if self.threshold < 0:
            raise ValueError(f"Tile threshold cannot be negative, got {self.threshold}.")
        if self.points < 0:
            raise ValueError(f"Tile points cannot be negative, got {self.points}.")

    def accepts(self, score: int) -> bool:
        """Returns True if `score` is enough to claim this tile."""
        if self.overshoot_allowed:
            return score >= self.threshold
        return score == self.threshold


@dataclass(frozen=True)
class UsedFaces:
    """
    Faces already banked this turn, stored as a 6-bit mask.

    Bit `face - 1` is set when that face has been set aside.
    """
    mask: int = 0

    def __post_init__(self) -> None:
        if not (0 <= self.mask < 1 << len(FACES)):
            raise ValueError(f"Used-face mask {self.mask} is out of range.")

    @classmethod
    def from_faces(cls, faces: Iterable[int]) -> "UsedFaces":
        """Create a record from any iterable of face values."""
        mask = 0
        for face in faces:
            mask |= 1 << (face - 1)
        return cls(mask=mask)

    def contains(self, face: int) -> bool:
        return bool(self.mask & (1 << (face - 1)))

    def with_face(self, face: int) -> "UsedFaces":
        """Return a new record with `face` added."""
        return UsedFaces(mask=self.mask | (1 << (face - 1)))

    @property
    def faces(self) -> tuple[int, ...]:
        return tuple(face for face in FACES if self.contains(face))

    @property
    def has_special(self) -> bool:
        """True once the worm has been banked."""
        return self.contains(SPECIAL_FACE)

    def __contains__(self, face: object) -> bool:
        return isinstance(face, int) and face in FACES and self.contains(face)

    def __iter__(self) -> Iterator[int]:
        return iter(self.faces)

    def __len__(self) -> int:
        return bin(self.mask).count("1")


@dataclass(frozen=True)
class TurnState:
    """
    Complete state of a player's turn between rolls.

    Attributes:
        score: Points accumulated from banked dice
        used: Faces already banked this turn
        dice_remaining: Dice still available to roll
    """
    score: int = 0
    used: UsedFaces = field(default_factory=UsedFaces)
    dice_remaining: int = MAX_DICE

    def __post_init__(self) -> None:
        if self.score < 0:
            raise ValueError(f"Turn score cannot be negative, got {self.score}.")
        if not (0 <= self.dice_remaining <= MAX_DICE):
            raise ValueError(
                f"Dice remaining must be between 0 and {MAX_DICE}, got {self.dice_remaining}."
            )

    def can_bank(self, face: int) -> bool:
        """A face may be banked only once per turn."""
        return not self.used.contains(face)

    def bank(self, face: int, count: int) -> "TurnState":
        """
        Set aside `count` dice showing `face`.

        Returns:
            The resulting TurnState (this one is left untouched)

        Raises:
            ValueError: If the face was already banked or too many dice are taken
        """
        if not self.can_bank(face):
            raise ValueError(f"Face {face} has already been banked this turn.")
        if not (1 <= count <= self.dice_remaining):
            raise ValueError(
                f"Cannot bank {count} dice with {self.dice_remaining} remaining."
            )
        return TurnState(
            score=self.score + face_points(face) * count,
            used=self.used.with_face(face),
            dice_remaining=self.dice_remaining - count,
        )

    @classmethod
    def from_used_counts(cls, used_counts: Mapping[int, int]) -> "TurnState":
        """
        Rebuild the turn state from a face -> banked dice count mapping.

        Faces with a zero count are treated as not banked.
        """
        banked = {face: count for face, count in used_counts.items() if count > 0}
        return cls(
            score=sum(face_points(face) * count for face, count in banked.items()),
            used=UsedFaces.from_faces(banked),
            dice_remaining=MAX_DICE - sum(banked.values()),
        )
