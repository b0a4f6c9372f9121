# rpgutils/dice.py
from __future__ import annotations

import random
import re
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional


@dataclass(frozen=True)
class RollResult:
    """
    Standard roll result.
    - total: final value after modifiers
    - rolls: individual die results (empty for constant-only expressions)
    - modifier: flat modifier applied after summing dice
    - notation: the original dice expression, if any (e.g. "4d6")
    """

    total: int
    rolls: List[int]
    modifier: int = 0
    notation: str = ""


@dataclass(frozen=True)
class DiceExpr:
    """
    Parsed dice expression like: 3d6, d20, 4d8-2
    """

    num_dice: int
    sides: int
    modifier: int = 0

    def __post_init__(self) -> None:
        if self.num_dice < 0:
            raise ValueError("num_dice must be >= 0")
        if self.num_dice > 0 and self.sides <= 0:
            raise ValueError("sides must be > 0 when num_dice > 0")


# Matches "d20", "3d6", "2d6+3", "2d6-1". Allows whitespace.
_DICE_RE = re.compile(r"^\s*(?:(\d*)d(\d+))\s*([+-]\s*\d+)?\s*$", re.IGNORECASE)


def parse_dice(notation: str) -> DiceExpr:
    """
    Parse standard dice notation: NdM±K
      - "d20" => 1d20
      - "4d6" => 4d6
      - "2d6+3" => 2d6 + 3

    Raises ValueError for invalid notation.
    """
    m = _DICE_RE.match(notation)
    if not m:
        raise ValueError(f"Invalid dice notation: {notation!r}")

    n_str, sides_str, mod_str = m.groups()
    num_dice = 1 if (n_str is None or n_str.strip() == "") else int(n_str)
    sides = int(sides_str)

    modifier = 0
    if mod_str:
        modifier = int(mod_str.replace(" ", ""))

    return DiceExpr(num_dice=num_dice, sides=sides, modifier=modifier)


def _require_int(name: str, value: object) -> int:
    # bool is an int subclass; True dice are a bug, not a count
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


class Dice:
    """
    Dice roller wrapper so you can:
    - seed for reproducible tests
    - swap RNG later if needed

    random.Random.randint draws from getrandbits with rejection sampling, so
    every face of a die is equally likely whatever the number of sides.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    def roll_die(self, sides: int) -> int:
        """Roll 1..sides."""
        _require_int("sides", sides)
        if sides < 1:
            raise ValueError(f"sides must be >= 1, got {sides}")
        return self._rng.randint(1, sides)

    def roll(self, notation: str) -> RollResult:
        """
        Roll dice from notation like "3d6" or "d20-1".
        """
        expr = parse_dice(notation)
        rolls: List[int] = []
        if expr.num_dice > 0:
            rolls = [self.roll_die(expr.sides) for _ in range(expr.num_dice)]
        total = sum(rolls) + expr.modifier
        return RollResult(total=total, rolls=rolls, modifier=expr.modifier, notation=notation.strip())


# Convenience singleton for code that doesn't carry its own Dice.
DEFAULT_DICE = Dice()


def roll_one(sides: int) -> int:
    """Roll a single die without building a pool."""
    return DEFAULT_DICE.roll_die(sides)


class DicePool:
    """
    A multiset of dice, keyed by number of sides.

    Adding dice only ever accumulates. Rolling never consumes the pool, so the
    same pool can be rolled any number of times.
    """

    def __init__(self, dice: Optional[Dice] = None) -> None:
        self._dice = dice if dice is not None else DEFAULT_DICE
        self._pool: Dict[int, int] = {}

    @classmethod
    def from_notation(cls, notation: str, dice: Optional[Dice] = None) -> "DicePool":
        """
        Build a pool from notation like "4d6". A pool holds dice only, so a
        flat modifier ("2d6+3") is rejected.
        """
        expr = parse_dice(notation)
        if expr.modifier != 0:
            raise ValueError(f"Dice pools do not take modifiers: {notation!r}")
        return cls(dice=dice).add_dice(expr.num_dice, expr.sides)

    def add_dice(self, count: int, sides: int) -> "DicePool":
        _require_int("count", count)
        _require_int("sides", sides)
        if count <= 0:
            raise ValueError(f"count must be > 0, got {count}")
        if sides < 1:
            raise ValueError(f"sides must be >= 1, got {sides}")
        self._pool[sides] = self._pool.get(sides, 0) + count
        return self

    @property
    def composition(self) -> Mapping[int, int]:
        return dict(sorted(self._pool.items()))

    @property
    def dice_count(self) -> int:
        return sum(self._pool.values())

    @property
    def is_empty(self) -> bool:
        return not self._pool

    def roll_each(self) -> List[int]:
        """
        Roll every die once. Results are ordered by die size (ascending), then
        by repetition within that size.
        """
        results: List[int] = []
        for sides, count in sorted(self._pool.items()):
            for _ in range(count):
                results.append(self._dice.roll_die(sides))
        return results

    def roll_each_descending(self) -> List[int]:
        return sorted(self.roll_each(), reverse=True)

    def roll_sum(self) -> int:
        return sum(self.roll_each())

    def __repr__(self) -> str:
        parts = " + ".join(f"{count}d{sides}" for sides, count in sorted(self._pool.items()))
        return f"DicePool({parts or 'empty'})"
