"""
Pickomino Advisor - Outcome Distribution

Exact probability law of rolling n fair dice, grouped by how many dice
land on each face. Every composition of n into six parts appears once,
with probability n! / (c1! * ... * c6!) / 6**n.

The tables for 0..8 dice are built once at import time and never
modified afterwards.
"""

import itertools
import math
from dataclasses import dataclass

from src.engine.base import FACES, MAX_DICE
from src.engine.validators import InvalidDiceCount


FACTORIALS: tuple[int, ...] = tuple(math.factorial(i) for i in range(MAX_DICE + 1))


@dataclass(frozen=True)
class Outcome:
    """
    One way the dice can land, ignoring order.

    Attributes:
        counts: Dice showing each face, index `face - 1`
        probability: Chance of this outcome
    """
    counts: tuple[int, ...]
    probability: float

    def count(self, face: int) -> int:
        return self.counts[face - 1]

    @property
    def dice(self) -> int:
        return sum(self.counts)


def multinomial_probability(counts: tuple[int, ...]) -> float:
    """Probability of rolling exactly `counts` (one entry per face)."""
    n = sum(counts)
    ways = FACTORIALS[n]
    for count in counts:
        ways //= FACTORIALS[count]
    return ways / len(FACES) ** n


def _enumerate_outcomes(n: int) -> tuple[Outcome, ...]:
    outcomes = []
    # Each sorted multiset of faces maps to exactly one composition
    for combo in itertools.combinations_with_replacement(FACES, n):
        counts = tuple(combo.count(face) for face in FACES)
        outcomes.append(Outcome(counts=counts, probability=multinomial_probability(counts)))
    return tuple(outcomes)


_DISTRIBUTIONS: tuple[tuple[Outcome, ...], ...] = tuple(
    _enumerate_outcomes(n) for n in range(MAX_DICE + 1)
)


def distribution(n: int) -> tuple[Outcome, ...]:
    """
    All outcomes of rolling `n` dice.

    Args:
        n: Number of dice rolled (0-8)

    Returns:
        C(n + 5, 5) outcomes whose probabilities sum to 1

    Raises:
        InvalidDiceCount: If n is outside 0-8
    """
    if not (0 <= n <= MAX_DICE):
        raise InvalidDiceCount(f"Can only roll between 0 and {MAX_DICE} dice, got {n}.")
    return _DISTRIBUTIONS[n]
