"""Service driving one quiz from the first flag to the results."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Sequence
import logging
import random

from flag_quiz.constants.quiz_constants import NEXT_FLAG_DELAY_MS
from flag_quiz.core.errors import InsufficientCatalogError
from flag_quiz.core.models import (
    ChoiceEntry,
    Country,
    GuessKind,
    GuessOutcome,
    SessionState,
)
from flag_quiz.core.scheduler import Scheduler
from flag_quiz.core.services.choice_generator import generate_choices, max_choice_count
from flag_quiz.core.services.results_reporter import format_results
from flag_quiz.core.services.round_selector import select_round

logger = logging.getLogger(__name__)


class QuizSession:
    """State machine for a flag quiz session.

    ``reset`` draws the flags and starts the first round. A wrong guess disables
    the chosen name and the round continues; a correct guess disables every
    name and either schedules the next round or finishes the session.

    Each ``reset`` starts a new generation. A next-round callback scheduled in
    an earlier generation does nothing when it fires.
    """

    def __init__(
        self,
        catalog: Sequence[Country],
        scheduler: Scheduler,
        *,
        next_round_delay_ms: int = NEXT_FLAG_DELAY_MS,
        rng: random.Random | None = None,
        on_round_started: Callable[[], None] | None = None,
    ) -> None:
        self._catalog = catalog
        self._scheduler = scheduler
        self._next_round_delay_ms = next_round_delay_ms
        self._rng = rng
        self._on_round_started = on_round_started

        self._state = SessionState.IDLE
        self._generation: int = 0
        self._round_queue: deque[Country] = deque()
        self._round_count: int = 0
        self._choice_count: int = 0
        self._current_correct: Country | None = None
        self._choices: list[ChoiceEntry] = []
        self._total_guesses: int = 0
        self._correct_guesses: int = 0
        self._rounds_completed: int = 0

    def set_round_started_callback(self, callback: Callable[[], None] | None) -> None:
        self._on_round_started = callback

    # --- Transitions ---

    def reset(self, round_count: int, choice_count: int) -> None:
        """Discard any previous progress and start a new session."""
        if round_count > len(self._catalog):
            raise InsufficientCatalogError(round_count, len(self._catalog), what="flags")
        if choice_count > max_choice_count(len(self._catalog)):
            raise InsufficientCatalogError(
                choice_count, max_choice_count(len(self._catalog)), what="choices"
            )
        if choice_count < 1:
            raise ValueError("At least one choice is required.")

        round_queue = select_round(self._catalog, round_count, rng=self._rng)

        self._generation += 1
        self._state = SessionState.IDLE
        self._round_queue = deque(round_queue)
        self._round_count = round_count
        self._choice_count = choice_count
        self._current_correct = None
        self._choices = []
        self._total_guesses = 0
        self._correct_guesses = 0
        self._rounds_completed = 0
        logger.info(
            "Session %d started: %d flags, %d choices each",
            self._generation,
            round_count,
            choice_count,
        )
        self.advance()

    def advance(self) -> None:
        """Move to the next flag, or finish when none are left."""
        if not self._round_queue:
            self._finish()
            return

        self._current_correct = self._round_queue.popleft()
        choices = generate_choices(
            self._catalog, self._current_correct, self._choice_count, rng=self._rng
        )
        self._choices = [ChoiceEntry(name=country.name) for country in choices]
        self._state = SessionState.ROUND_ACTIVE
        logger.debug(
            "Question %d of %d: %s",
            self.get_question_number(),
            self._round_count,
            self._current_correct.name,
        )
        if self._on_round_started is not None:
            self._on_round_started()

    def guess(self, chosen_name: str) -> GuessOutcome | None:
        """Evaluate a guess. Returns ``None`` when the guess is ignored."""
        if self._state is not SessionState.ROUND_ACTIVE or self._current_correct is None:
            return None

        entry = next((c for c in self._choices if c.name == chosen_name), None)
        if entry is None or not entry.enabled:
            return None

        self._total_guesses += 1
        if chosen_name != self._current_correct.name:
            entry.enabled = False
            return GuessOutcome(kind=GuessKind.INCORRECT)

        self._correct_guesses += 1
        self._rounds_completed += 1
        for choice in self._choices:
            choice.enabled = False

        if self._round_queue:
            generation = self._generation
            self._scheduler.call_later(
                self._next_round_delay_ms,
                lambda: self._advance_for_generation(generation),
            )
            return GuessOutcome(kind=GuessKind.CORRECT)

        self._finish()
        return GuessOutcome(kind=GuessKind.CORRECT, is_session_complete=True)

    def _advance_for_generation(self, generation: int) -> None:
        if generation != self._generation:
            logger.debug("Dropping next-round callback from session %d", generation)
            return
        if self._state is not SessionState.ROUND_ACTIVE:
            return
        self.advance()

    def _finish(self) -> None:
        self._state = SessionState.FINISHED
        if self._total_guesses:
            logger.info(
                "Session %d finished: %s",
                self._generation,
                format_results(self._total_guesses, self._correct_guesses),
            )

    # --- Queries ---

    def get_state(self) -> SessionState:
        return self._state

    def is_finished(self) -> bool:
        return self._state is SessionState.FINISHED

    def get_generation(self) -> int:
        return self._generation

    def get_current_correct(self) -> Country | None:
        return self._current_correct

    def get_choices(self) -> list[ChoiceEntry]:
        return [ChoiceEntry(name=c.name, enabled=c.enabled) for c in self._choices]

    def get_total_guesses(self) -> int:
        return self._total_guesses

    def get_correct_guesses(self) -> int:
        return self._correct_guesses

    def get_rounds_completed(self) -> int:
        return self._rounds_completed

    def get_round_count(self) -> int:
        return self._round_count

    def get_remaining_rounds(self) -> int:
        return len(self._round_queue)

    def get_question_number(self) -> int:
        """1-based number of the flag on screen; 0 before the first round."""
        if self._current_correct is None:
            return 0
        return self._round_count - len(self._round_queue)
