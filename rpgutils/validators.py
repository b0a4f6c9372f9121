# rpgutils/validators.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Protocol, Sequence, Tuple


class ScoreValidator(Protocol):
    """
    Accepts or rejects a score sequence. Must be pure: same input, same answer.
    """

    def validate(self, scores: Sequence[int]) -> bool: ...


@dataclass(frozen=True)
class AcceptAll(ScoreValidator):
    def validate(self, scores: Sequence[int]) -> bool:
        return True


def _check_max_allowed(max_allowed: int) -> None:
    if isinstance(max_allowed, bool) or not isinstance(max_allowed, int) or max_allowed < 0:
        raise ValueError(f"max_allowed must be an int >= 0, got {max_allowed!r}")


@dataclass(frozen=True)
class LowScoreValidator(ScoreValidator):
    """
    Rejects a set with more than max_allowed scores strictly below threshold.
    """
    threshold: int
    max_allowed: int

    def __post_init__(self) -> None:
        _check_max_allowed(self.max_allowed)

    def validate(self, scores: Sequence[int]) -> bool:
        found = 0
        for score in scores:
            if score < self.threshold:
                found += 1
                if found > self.max_allowed:
                    return False
        return True


@dataclass(frozen=True)
class HighScoreValidator(ScoreValidator):
    """
    Rejects a set with more than max_allowed scores strictly above threshold.
    """
    threshold: int
    max_allowed: int

    def __post_init__(self) -> None:
        _check_max_allowed(self.max_allowed)

    def validate(self, scores: Sequence[int]) -> bool:
        found = 0
        for score in scores:
            if score > self.threshold:
                found += 1
                if found > self.max_allowed:
                    return False
        return True


def validate_all(
    validators: Iterable[ScoreValidator], scores: Sequence[int]
) -> Tuple[bool, Optional[ScoreValidator]]:
    """
    AND over validators in order, stopping at the first rejection.
    Returns (ok, the validator that rejected or None).
    """
    for v in validators:
        if not v.validate(scores):
            return False, v
    return True, None
