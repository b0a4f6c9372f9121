# rpgutils/assignment.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Literal, Optional, Protocol, Sequence, Tuple

from .config import AssignmentConfig
from .methods import GenerationMethod
from .models import ABILITY_COUNT, Ability, AbilityScores, Event, EventType
from .validators import ScoreValidator, validate_all

logger = logging.getLogger(__name__)

EventSink = Callable[[Event], None]
Binding = Tuple[Ability, int]

Outcome = Literal["done", "exhausted"]
Phase = Literal["generating", "pre_validating", "assigning", "post_validating", "done", "exhausted"]


def check_raw_scores(raw: Sequence[int]) -> None:
    if len(raw) != ABILITY_COUNT:
        raise ValueError(f"Expected {ABILITY_COUNT} raw scores, got {len(raw)}")


class AssignmentStrategy(Protocol):
    """
    Binds six raw scores to ability slots by writing into `scores`.

    Must not mutate `raw`. Returns the (ability, value) bindings in the order
    they were made.
    """

    def assign(self, raw: Sequence[int], scores: AbilityScores) -> List[Binding]: ...


@dataclass(frozen=True)
class PositionalAssignment(AssignmentStrategy):
    """
    Raw score i goes to ability slot i. No randomness.
    """

    def assign(self, raw: Sequence[int], scores: AbilityScores) -> List[Binding]:
        check_raw_scores(raw)
        bindings: List[Binding] = []
        for ability, value in zip(Ability, raw):
            scores[ability] = value
            bindings.append((ability, value))
        return bindings


@dataclass(frozen=True)
class AssignmentResult:
    """
    Outcome of one generate_and_assign() run.

    outcome is "exhausted" when the retry budget ran out; scores then hold the
    last assignment made, which did not pass validation.
    """
    outcome: Outcome
    scores: AbilityScores
    attempts: int
    regenerations: int
    events: Tuple[Event, ...] = ()

    @property
    def accepted(self) -> bool:
        return self.outcome == "done"

    @property
    def exhausted(self) -> bool:
        return self.outcome == "exhausted"


@dataclass
class ScoreAssignment:
    """
    Retry loop around a generation method:

        generating -> pre_validating -> (assigning -> post_validating) -> done | exhausted

    Pre-validators see the raw scores; post-validators see the assigned
    ability scores in canonical order. A rejection in either phase regenerates
    and tries again.

    max_retries counts regenerations after the first attempt, so a run makes at
    most max_retries + 1 attempts: the default of 10 allows 11 validation
    passes, not 10. With max_retries=0 the method's current scores get exactly
    one attempt.

    strategy=None means PositionalAssignment.
    """
    method: GenerationMethod
    strategy: Optional[AssignmentStrategy] = None
    max_retries: int = 10
    on_event: Optional[EventSink] = None

    ability_scores: AbilityScores = field(init=False, default_factory=AbilityScores)
    phase: Phase = field(init=False, default="generating")
    _pre_validators: List[ScoreValidator] = field(init=False, default_factory=list, repr=False)
    _post_validators: List[ScoreValidator] = field(init=False, default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.strategy is None:
            self.strategy = PositionalAssignment()
        if isinstance(self.max_retries, bool) or not isinstance(self.max_retries, int) or self.max_retries < 0:
            raise ValueError(f"max_retries must be an int >= 0, got {self.max_retries!r}")

    @classmethod
    def from_config(
        cls,
        method: GenerationMethod,
        config: AssignmentConfig,
        *,
        strategy: Optional[AssignmentStrategy] = None,
        on_event: Optional[EventSink] = None,
    ) -> "ScoreAssignment":
        return cls(
            method=method,
            strategy=strategy,
            max_retries=config.max_retries,
            on_event=on_event,
        )

    # --- Validator registration -------------------------------------

    def add_pre_validator(self, validator: ScoreValidator) -> "ScoreAssignment":
        self._pre_validators.append(validator)
        return self

    def add_post_validator(self, validator: ScoreValidator) -> "ScoreAssignment":
        self._post_validators.append(validator)
        return self

    @property
    def pre_validators(self) -> Tuple[ScoreValidator, ...]:
        return tuple(self._pre_validators)

    @property
    def post_validators(self) -> Tuple[ScoreValidator, ...]:
        return tuple(self._post_validators)

    # --- Assignment -------------------------------------------------

    def assign_scores(self) -> List[Binding]:
        """Bind the method's current raw scores once, without validating."""
        return self.strategy.assign(tuple(self.method.scores), self.ability_scores)

    def generate_and_assign(self) -> AssignmentResult:
        events: List[Event] = []

        def emit(etype: EventType, attempt: int, message: str, **data: object) -> None:
            event = Event(type=etype, attempt=attempt, message=message, data=data)
            events.append(event)
            logger.debug(message)
            if self.on_event is not None:
                self.on_event(event)

        attempt = 0
        regenerations = 0
        outcome: Outcome

        while True:
            attempt += 1
            self.phase = "generating"
            raw = tuple(self.method.scores)
            check_raw_scores(raw)
            emit("attempt", attempt, f"Attempt {attempt}: raw scores {list(raw)}", raw=raw)

            self.phase = "pre_validating"
            valid, failed = validate_all(self._pre_validators, raw)
            emit(
                "pre_validate",
                attempt,
                "Pre-validation passed." if valid else f"Pre-validation failed: {failed!r}",
                passed=valid,
                failed_validator=failed,
                scores=raw,
            )

            if valid:
                self.phase = "assigning"
                bindings = self.strategy.assign(raw, self.ability_scores)
                emit(
                    "assign",
                    attempt,
                    "Assigned " + ", ".join(f"{a.name}={v}" for a, v in bindings),
                    bindings=tuple(bindings),
                )

                self.phase = "post_validating"
                assigned = tuple(self.ability_scores.as_list())
                valid, failed = validate_all(self._post_validators, assigned)
                emit(
                    "post_validate",
                    attempt,
                    "Post-validation passed." if valid else f"Post-validation failed: {failed!r}",
                    passed=valid,
                    failed_validator=failed,
                    scores=assigned,
                )

            if valid:
                self.phase = outcome = "done"
                emit("done", attempt, f"Scores accepted after {attempt} attempt(s).", scores=self.ability_scores.as_list())
                break

            if regenerations >= self.max_retries:
                self.phase = outcome = "exhausted"
                emit(
                    "exhausted",
                    attempt,
                    f"No valid scores after {attempt} attempt(s); keeping last assignment.",
                    scores=self.ability_scores.as_list(),
                )
                logger.warning(
                    "Retry budget of %d exhausted after %d attempt(s); returning unvalidated scores %s",
                    self.max_retries,
                    attempt,
                    self.ability_scores.as_list(),
                )
                break

            new_raw = tuple(self.method.generate_new_scores())
            regenerations += 1
            emit(
                "regenerate",
                attempt,
                f"Regenerated raw scores ({regenerations}/{self.max_retries}): {list(new_raw)}",
                raw=new_raw,
                regenerations=regenerations,
            )

        return AssignmentResult(
            outcome=outcome,
            scores=AbilityScores(self.ability_scores.as_list()),
            attempts=attempt,
            regenerations=regenerations,
            events=tuple(events),
        )
