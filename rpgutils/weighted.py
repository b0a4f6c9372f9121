# rpgutils/weighted.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple, Union

from .assignment import AssignmentStrategy, Binding, check_raw_scores
from .dice import DEFAULT_DICE, Dice
from .models import ABILITY_COUNT, Ability, AbilityScores, Weight

WeightLike = Union[Weight, int, str]

# Buckets are filled in this order.
PRIORITY_ORDER: Tuple[Weight, ...] = (Weight.PRIME, Weight.SECONDARY, Weight.NORMAL, Weight.DUMP)


def _parse_weights(weights: Iterable[WeightLike]) -> Tuple[Weight, ...]:
    parsed = tuple(Weight.parse(w) for w in weights)
    if len(parsed) != ABILITY_COUNT:
        raise ValueError(f"Expected exactly {ABILITY_COUNT} weights, got {len(parsed)}")
    return parsed


@dataclass
class WeightedAssignment(AssignmentStrategy):
    """
    Fills abilities by priority bucket: PRIME first, then SECONDARY, NORMAL,
    DUMP. Each pick takes the highest raw score still available (earliest
    index on ties), so every score in a higher bucket is >= every score in a
    lower one. Inside a bucket the order in which slots are filled is random.
    """
    weights: Optional[Sequence[WeightLike]] = None
    dice: Optional[Dice] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.weights is None:
            self.weights = (Weight.NORMAL,) * ABILITY_COUNT
        if self.dice is None:
            self.dice = DEFAULT_DICE
        self.weights = _parse_weights(self.weights)

    def set_weights(self, weights: Iterable[WeightLike]) -> "WeightedAssignment":
        self.weights = _parse_weights(weights)
        return self

    def set_weight(self, ability: Union[Ability, int, str], weight: WeightLike) -> "WeightedAssignment":
        slot = Ability.parse(ability)
        updated = list(self.weights)
        updated[slot] = Weight.parse(weight)
        self.weights = tuple(updated)
        return self

    def buckets(self) -> Dict[Weight, List[Ability]]:
        out: Dict[Weight, List[Ability]] = {w: [] for w in PRIORITY_ORDER}
        for ability, weight in zip(Ability, self.weights):
            out[weight].append(ability)
        return out

    def assign(self, raw: Sequence[int], scores: AbilityScores) -> List[Binding]:
        check_raw_scores(raw)
        available: Set[int] = set(range(len(raw)))
        bindings: List[Binding] = []

        for bucket in self.buckets().values():
            remaining = list(bucket)
            while remaining:
                slot = remaining.pop(self.dice.roll_die(len(remaining)) - 1)
                value = self._take_highest(raw, available)
                scores[slot] = value
                bindings.append((slot, value))

        return bindings

    @staticmethod
    def _take_highest(raw: Sequence[int], available: Set[int]) -> int:
        # min index among the max values keeps ties on the earliest position
        idx = min(available, key=lambda i: (-raw[i], i))
        available.remove(idx)
        return raw[idx]
