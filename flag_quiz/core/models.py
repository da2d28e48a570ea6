"""Domain models for the flag quiz."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


@dataclass(frozen=True, slots=True)
class Country:
    """A country and the flag image that represents it. Equal by name."""

    name: str
    flag_asset_ref: str = field(compare=False)


@dataclass(slots=True)
class ChoiceEntry:
    """One of the names offered for the current flag."""

    name: str
    enabled: bool = True


class SessionState(Enum):
    """Lifecycle of a quiz session."""

    IDLE = auto()
    ROUND_ACTIVE = auto()
    FINISHED = auto()


class GuessKind(Enum):
    CORRECT = auto()
    INCORRECT = auto()


@dataclass(frozen=True, slots=True)
class GuessOutcome:
    """Result of evaluating one guess."""

    kind: GuessKind
    is_session_complete: bool = False

    @property
    def is_correct(self) -> bool:
        return self.kind is GuessKind.CORRECT


@dataclass(frozen=True, slots=True)
class SessionSummary:
    """Final statistics shown when a session ends."""

    total_guesses: int
    correct_guesses: int
    accuracy_percent: float
