# rpgutils/__init__.py
from __future__ import annotations

from .assignment import AssignmentResult, AssignmentStrategy, PositionalAssignment, ScoreAssignment
from .config import AssignmentConfig
from .dice import Dice, DicePool, roll_one
from .methods import STANDARD_ARRAY, DropLowest, FixedArray, GenerationMethod, SumOfDice
from .models import Ability, AbilityScores, Event, Weight, ability_mod
from .validators import AcceptAll, HighScoreValidator, LowScoreValidator, ScoreValidator, validate_all
from .weighted import WeightedAssignment

__all__ = [
    "Ability",
    "AbilityScores",
    "AcceptAll",
    "AssignmentConfig",
    "AssignmentResult",
    "AssignmentStrategy",
    "Dice",
    "DicePool",
    "DropLowest",
    "Event",
    "FixedArray",
    "GenerationMethod",
    "HighScoreValidator",
    "LowScoreValidator",
    "PositionalAssignment",
    "STANDARD_ARRAY",
    "ScoreAssignment",
    "ScoreValidator",
    "SumOfDice",
    "Weight",
    "WeightedAssignment",
    "ability_mod",
    "roll_one",
    "validate_all",
]
