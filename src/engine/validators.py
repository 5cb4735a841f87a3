"""
Pickomino Advisor - Input Validation Utilities

Provides validation functions for the advisor's inputs. All validators
either return validated data or raise descriptive ValueError subclasses,
so callers may catch either the specific kind or plain ValueError.
"""

from typing import Mapping, Sequence

from src.engine.base import FACES, MAX_DICE


class InvalidFaceValue(ValueError):
    """A die face outside 1-6 was supplied."""


class InvalidDiceCount(ValueError):
    """A dice count is negative or the turn would use more than eight dice."""


def validate_face(face: object, label: str = "Face") -> int:
    """
    Validate a single face value.

    Raises:
        InvalidFaceValue: If the face is not an integer between 1 and 6
    """
    if not isinstance(face, int) or isinstance(face, bool):
        raise InvalidFaceValue(f"{label} must be an integer, got {type(face).__name__}.")
    if face not in FACES:
        raise InvalidFaceValue(f"{label} is {face}, must be between 1 and {len(FACES)}.")
    return face


def validate_roll(values: Sequence[int], max_count: int = MAX_DICE) -> tuple[int, ...]:
    """
    Validate and normalize the visible roll.

    An empty roll is accepted: it simply offers no legal face.

    Args:
        values: Dice faces currently showing
        max_count: Maximum number of dice allowed

    Returns:
        Validated values as a tuple

    Raises:
        InvalidFaceValue: If any die is outside 1-6
        InvalidDiceCount: If more than `max_count` dice are given
    """
    values_tuple = tuple(values)

    if len(values_tuple) > max_count:
        raise InvalidDiceCount(f"At most {max_count} dice allowed, got {len(values_tuple)}.")

    for i, value in enumerate(values_tuple):
        validate_face(value, label=f"Die value at index {i}")

    return values_tuple


def validate_used_counts(used_counts: Mapping[int, int]) -> dict[int, int]:
    """
    Validate the face -> banked count record.

    Returns:
        A new dict holding only faces with a positive count

    Raises:
        InvalidFaceValue: If a key is not a face value
        InvalidDiceCount: If a count is negative or the total exceeds eight
    """
    banked: dict[int, int] = {}
    for face, count in used_counts.items():
        validate_face(face, label="Used face")
        if not isinstance(count, int) or isinstance(count, bool):
            raise InvalidDiceCount(
                f"Banked count for face {face} must be an integer, got {type(count).__name__}."
            )
        if count < 0:
            raise InvalidDiceCount(f"Banked count for face {face} cannot be negative, got {count}.")
        if count > 0:
            banked[face] = count

    total = sum(banked.values())
    if total > MAX_DICE:
        raise InvalidDiceCount(f"At most {MAX_DICE} dice can be banked, got {total}.")

    return banked


def validate_dice_total(roll: Sequence[int], banked: Mapping[int, int]) -> int:
    """
    Check that the roll and the banked dice fit in one turn.

    Returns:
        Total number of dice referenced

    Raises:
        InvalidDiceCount: If more than eight dice are referenced
    """
    total = len(roll) + sum(banked.values())
    if total > MAX_DICE:
        raise InvalidDiceCount(
            f"Roll of {len(roll)} dice plus {total - len(roll)} banked exceeds {MAX_DICE} dice."
        )
    return total
