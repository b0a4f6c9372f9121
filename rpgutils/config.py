# rpgutils/config.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .dice import Dice


@dataclass(frozen=True)
class AssignmentConfig:
    """
    Defaults for a score-assignment run. Callers can override any field.

    max_retries: regenerations allowed after the first attempt
    seed: seed for Dice built through dice(); None = unseeded
    """
    max_retries: int = 10
    seed: Optional[int] = None

    def dice(self) -> Dice:
        return Dice(seed=self.seed) if self.seed is not None else Dice()
