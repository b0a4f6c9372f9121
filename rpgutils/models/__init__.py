# rpgutils/models/__init__.py
from __future__ import annotations

from .core import ABILITY_COUNT, Ability, Weight, ability_mod, mod_display
from .events import Event, EventType
from .scores import AbilityScores

__all__ = [
    "ABILITY_COUNT",
    "Ability",
    "Weight",
    "ability_mod",
    "mod_display",
    "AbilityScores",
    "Event",
    "EventType",
]
