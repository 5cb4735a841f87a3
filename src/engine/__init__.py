"""
Pickomino Advisor Engine.

Pure Python decision logic with zero UI/database dependencies.
Computes exact success probabilities and expected tile points for every
face that can be banked from the current roll.
"""

from src.engine.advisor import DualRecommendation, FaceChoice, Recommendation, TurnAdvisor
from src.engine.base import (
    FACES,
    MAX_DICE,
    SPECIAL_FACE,
    EvaluationMode,
    Tile,
    TurnState,
    UsedFaces,
    face_points,
)
from src.engine.distribution import Outcome, distribution
from src.engine.solver import ValueFunction
from src.engine.tiles import best_tile, build_default_tiles, can_succeed, eligible_tiles
from src.engine.validators import InvalidDiceCount, InvalidFaceValue

__all__ = [
    # Data Classes
    "Tile",
    "UsedFaces",
    "TurnState",
    "Outcome",
    "FaceChoice",
    "Recommendation",
    "DualRecommendation",
    # Enums
    "EvaluationMode",
    # Constants
    "FACES",
    "MAX_DICE",
    "SPECIAL_FACE",
    # Errors
    "InvalidFaceValue",
    "InvalidDiceCount",
    # Engine
    "TurnAdvisor",
    "ValueFunction",
    "best_tile",
    "build_default_tiles",
    "can_succeed",
    "distribution",
    "eligible_tiles",
    "face_points",
]
