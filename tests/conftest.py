from __future__ import annotations

import random
from typing import Iterable, List, Sequence, Tuple

import pytest

from rpgutils.dice import Dice


class ScriptedRandom(random.Random):
    """random.Random whose randint returns pre-set values, recording each call."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(0)
        self._values: List[int] = list(values)
        self.calls: List[Tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        if not self._values:
            raise AssertionError("ScriptedRandom ran out of values")
        value = self._values.pop(0)
        assert a <= value <= b, f"scripted value {value} outside [{a}, {b}]"
        return value


class ScriptedMethod:
    """Generation method that walks through fixed score sets."""

    def __init__(self, *score_sets: Sequence[int]) -> None:
        self._sets = [tuple(s) for s in score_sets]
        self.regenerations = 0
        self.scores = self._sets[0]

    def generate_new_scores(self) -> Tuple[int, ...]:
        self.regenerations += 1
        self.scores = self._sets[min(self.regenerations, len(self._sets) - 1)]
        return self.scores


class RejectAll:
    def __init__(self) -> None:
        self.calls = 0

    def validate(self, scores: Sequence[int]) -> bool:
        self.calls += 1
        return False


@pytest.fixture
def scripted_dice():
    def make(*values: int) -> Dice:
        return Dice(rng=ScriptedRandom(values))

    return make


@pytest.fixture
def seeded_dice() -> Dice:
    return Dice(seed=1234)
