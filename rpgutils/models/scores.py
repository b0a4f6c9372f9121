# rpgutils/models/scores.py
from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Union

from .core import ABILITY_COUNT, Ability, ability_mod, mod_display

AbilityKey = Union[Ability, int, str]


class AbilityScores:
    """
    Fixed six-slot score container addressed by Ability.

    The slot list is created once and only ever written in place, so its length
    is always six and its order is always the canonical ability order.
    Modifiers are derived on every read.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[int] = (10,) * ABILITY_COUNT) -> None:
        self._values: List[int] = [10] * ABILITY_COUNT
        self.set_all(values)

    # --- Slot access --------------------------------------------------

    def __getitem__(self, key: AbilityKey) -> int:
        return self._values[Ability.parse(key)]

    def __setitem__(self, key: AbilityKey, score: int) -> None:
        if isinstance(score, bool) or not isinstance(score, int):
            raise TypeError(f"score must be an int, got {type(score).__name__}")
        self._values[Ability.parse(key)] = score

    def __len__(self) -> int:
        return ABILITY_COUNT

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._values))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AbilityScores):
            return self._values == other._values
        return NotImplemented

    def __repr__(self) -> str:
        inner = ", ".join(f"{a.name}={v}" for a, v in zip(Ability, self._values))
        return f"AbilityScores({inner})"

    def set_all(self, values: Iterable[int]) -> None:
        """Overwrite every slot at once, in canonical order."""
        new = list(values)
        if len(new) != ABILITY_COUNT:
            raise ValueError(f"AbilityScores needs exactly {ABILITY_COUNT} values, got {len(new)}")
        for i, score in enumerate(new):
            self[i] = score

    def as_list(self) -> List[int]:
        return list(self._values)

    def as_dict(self) -> Dict[str, int]:
        return {a.name: v for a, v in zip(Ability, self._values)}

    # --- Named accessors ----------------------------------------------

    @property
    def strength(self) -> int:
        return self._values[Ability.STR]

    @strength.setter
    def strength(self, score: int) -> None:
        self[Ability.STR] = score

    @property
    def dexterity(self) -> int:
        return self._values[Ability.DEX]

    @dexterity.setter
    def dexterity(self, score: int) -> None:
        self[Ability.DEX] = score

    @property
    def constitution(self) -> int:
        return self._values[Ability.CON]

    @constitution.setter
    def constitution(self, score: int) -> None:
        self[Ability.CON] = score

    @property
    def intelligence(self) -> int:
        return self._values[Ability.INT]

    @intelligence.setter
    def intelligence(self, score: int) -> None:
        self[Ability.INT] = score

    @property
    def wisdom(self) -> int:
        return self._values[Ability.WIS]

    @wisdom.setter
    def wisdom(self, score: int) -> None:
        self[Ability.WIS] = score

    @property
    def charisma(self) -> int:
        return self._values[Ability.CHA]

    @charisma.setter
    def charisma(self, score: int) -> None:
        self[Ability.CHA] = score

    # --- Derived modifiers --------------------------------------------

    def modifier(self, key: AbilityKey) -> int:
        return ability_mod(self[key])

    def modifier_display(self, key: AbilityKey) -> str:
        return mod_display(self[key])

    def modifiers(self) -> Dict[str, int]:
        return {a.name: ability_mod(v) for a, v in zip(Ability, self._values)}
