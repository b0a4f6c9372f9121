# rpgutils/models/events.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Mapping

EventType = Literal[
    "attempt",
    "pre_validate",
    "assign",
    "post_validate",
    "regenerate",
    "done",
    "exhausted",
]


@dataclass(frozen=True)
class Event:
    """
    Immutable record of one phase transition inside ScoreAssignment.

    attempt is 1-based. data carries the scores the phase looked at, plus
    phase-specific details (failed validator, bindings, ...).
    """
    type: EventType
    attempt: int
    message: str = ""
    data: Mapping[str, object] = field(default_factory=dict)
