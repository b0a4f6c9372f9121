# rpgutils/methods.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence, Tuple

from .dice import DEFAULT_DICE, Dice, DicePool
from .models import ABILITY_COUNT

# "Elite" standard array.
STANDARD_ARRAY: Tuple[int, ...] = (15, 14, 13, 12, 10, 8)


class GenerationMethod(Protocol):
    """
    Produces raw scores: an ordered sequence of six ints, not yet bound to any
    ability.

    Implementations generate once on construction; `scores` always holds the
    latest set and generate_new_scores() replaces it.
    """

    scores: Tuple[int, ...]

    def generate_new_scores(self) -> Tuple[int, ...]: ...


@dataclass
class FixedArray(GenerationMethod):
    """
    Always the same six values. Regenerating is a no-op.
    """
    values: Sequence[int] = STANDARD_ARRAY
    scores: Tuple[int, ...] = field(init=False)

    def __post_init__(self) -> None:
        values = tuple(self.values)
        if len(values) != ABILITY_COUNT:
            raise ValueError(f"FixedArray needs exactly {ABILITY_COUNT} values, got {len(values)}")
        if any(isinstance(v, bool) or not isinstance(v, int) for v in values):
            raise ValueError(f"FixedArray values must be ints: {values!r}")
        self.values = values
        self.generate_new_scores()

    def generate_new_scores(self) -> Tuple[int, ...]:
        self.scores = tuple(self.values)
        return self.scores


@dataclass
class SumOfDice(GenerationMethod):
    """
    For each ability, roll num_dice dice of `sides` and total them (3d6 by default).
    """
    num_dice: int = 3
    sides: int = 6
    dice: Optional[Dice] = field(default=None, repr=False)
    scores: Tuple[int, ...] = field(init=False)
    _pool: DicePool = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.dice is None:
            self.dice = DEFAULT_DICE
        self._pool = DicePool(dice=self.dice).add_dice(self.num_dice, self.sides)
        self.generate_new_scores()

    def generate_new_scores(self) -> Tuple[int, ...]:
        self.scores = tuple(self._pool.roll_sum() for _ in range(ABILITY_COUNT))
        return self.scores


@dataclass
class DropLowest(GenerationMethod):
    """
    For each ability, roll num_dice dice, drop the lowest `drop` of that
    ability's own rolls and total the rest (4d6 drop 1 by default).

    last_rolls keeps every ability's rolls, highest first, for inspection.
    """
    num_dice: int = 4
    sides: int = 6
    drop: int = 1
    dice: Optional[Dice] = field(default=None, repr=False)
    scores: Tuple[int, ...] = field(init=False)
    last_rolls: Tuple[Tuple[int, ...], ...] = field(init=False, default=())
    _pool: DicePool = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.drop, bool) or not isinstance(self.drop, int) or self.drop < 0:
            raise ValueError(f"drop must be an int >= 0, got {self.drop!r}")
        if self.dice is None:
            self.dice = DEFAULT_DICE
        self._pool = DicePool(dice=self.dice).add_dice(self.num_dice, self.sides)
        if self.drop >= self.num_dice:
            raise ValueError(f"drop ({self.drop}) must be less than num_dice ({self.num_dice})")
        self.generate_new_scores()

    def generate_new_scores(self) -> Tuple[int, ...]:
        keep = self.num_dice - self.drop
        rolls = tuple(tuple(self._pool.roll_each_descending()) for _ in range(ABILITY_COUNT))
        self.last_rolls = rolls
        self.scores = tuple(sum(r[:keep]) for r in rolls)
        return self.scores
