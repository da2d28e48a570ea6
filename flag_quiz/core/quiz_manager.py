"""Facade over the quiz session used by the Qt window."""

from __future__ import annotations

from collections.abc import Callable
import random

from flag_quiz.constants.quiz_constants import NEXT_FLAG_DELAY_MS
from flag_quiz.core.country_catalog import CountryCatalog
from flag_quiz.core.models import ChoiceEntry, GuessOutcome, SessionState, SessionSummary
from flag_quiz.core.scheduler import Scheduler
from flag_quiz.core.services.quiz_session import QuizSession
from flag_quiz.core.services.results_reporter import format_results, summarize


class QuizManager:
    """Entry point for the UI: owns the catalog and the active session."""

    def __init__(
        self,
        catalog: CountryCatalog,
        scheduler: Scheduler,
        *,
        next_round_delay_ms: int = NEXT_FLAG_DELAY_MS,
        rng: random.Random | None = None,
    ) -> None:
        self._catalog = catalog
        self._session = QuizSession(
            catalog.countries,
            scheduler,
            next_round_delay_ms=next_round_delay_ms,
            rng=rng,
        )

    @property
    def catalog(self) -> CountryCatalog:
        return self._catalog

    def set_round_started_callback(self, callback: Callable[[], None] | None) -> None:
        """Register the function called whenever a new flag is ready to display."""
        self._session.set_round_started_callback(callback)

    # --- Session control ---

    def reset_session(self, round_count: int, choice_count: int) -> None:
        self._session.reset(round_count, choice_count)

    def submit_guess(self, choice_index: int) -> GuessOutcome | None:
        choices = self._session.get_choices()
        if not 0 <= choice_index < len(choices):
            raise IndexError(f"Choice index {choice_index} out of range")
        return self._session.guess(choices[choice_index].name)

    # --- Round state ---

    def state(self) -> SessionState:
        return self._session.get_state()

    def current_question_index(self) -> int:
        return self._session.get_question_number()

    def total_rounds(self) -> int:
        return self._session.get_round_count()

    def current_choice_set(self) -> list[ChoiceEntry]:
        return self._session.get_choices()

    def current_flag_asset_ref(self) -> str | None:
        country = self._session.get_current_correct()
        return country.flag_asset_ref if country else None

    def current_correct_name(self) -> str | None:
        country = self._session.get_current_correct()
        return country.name if country else None

    # --- Results ---

    def is_session_complete(self) -> bool:
        return self._session.is_finished()

    def session_summary(self) -> SessionSummary:
        if not self._session.is_finished():
            raise RuntimeError("The quiz is still in progress.")
        return summarize(self._session.get_total_guesses(), self._session.get_correct_guesses())

    def results_message(self) -> str:
        summary = self.session_summary()
        return format_results(summary.total_guesses, summary.correct_guesses)
