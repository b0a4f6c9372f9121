# rpgutils/models/core.py
from __future__ import annotations

from enum import IntEnum
from typing import Union

ABILITY_COUNT = 6


class Ability(IntEnum):
    """
    The six ability slots. The value is the slot's index in any 6-element
    score sequence, so canonical order is STR, DEX, CON, INT, WIS, CHA.
    """

    STR = 0
    DEX = 1
    CON = 2
    INT = 3
    WIS = 4
    CHA = 5

    @classmethod
    def parse(cls, value: Union["Ability", int, str]) -> "Ability":
        """
        Accepts an Ability, a slot index (0..5) or a name ("str", "STR").
        Raises ValueError for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError as e:
                raise ValueError(f"Unknown ability: {value!r}") from e
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError as e:
                raise ValueError(f"Ability index out of range: {value!r}") from e
        raise ValueError(f"Unknown ability: {value!r}")


class Weight(IntEnum):
    """
    Assignment priority for an ability slot. Higher value = filled first.
    """

    PRIME = 2
    SECONDARY = 1
    NORMAL = 0
    DUMP = -1

    @classmethod
    def parse(cls, value: Union["Weight", int, str]) -> "Weight":
        """
        Accepts a Weight, its integer value or a name ("prime", "DUMP").
        Raises ValueError for an unrecognized label.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError as e:
                raise ValueError(f"Unknown weight: {value!r}") from e
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError as e:
                raise ValueError(f"Unknown weight: {value!r}") from e
        raise ValueError(f"Unknown weight: {value!r}")


def ability_mod(score: int) -> int:
    """
    5e-style ability modifier.
    """
    return (score - 10) // 2


def mod_display(score: int) -> str:
    mod = ability_mod(score)
    return f"+{mod}" if mod > 0 else str(mod)
