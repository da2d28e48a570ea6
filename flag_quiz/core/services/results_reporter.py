"""Final statistics for a finished quiz."""

from __future__ import annotations

from flag_quiz.core.errors import DivisionUndefined
from flag_quiz.core.models import SessionSummary

RESULTS_TEMPLATE = "{total} guesses, {accuracy:.2f}% correct"


def accuracy_percent(total_guesses: int, correct_guesses: int) -> float:
    if total_guesses == 0:
        raise DivisionUndefined("Accuracy is undefined before the first guess.")
    return correct_guesses / total_guesses * 100


def summarize(total_guesses: int, correct_guesses: int) -> SessionSummary:
    return SessionSummary(
        total_guesses=total_guesses,
        correct_guesses=correct_guesses,
        accuracy_percent=accuracy_percent(total_guesses, correct_guesses),
    )


def format_results(total_guesses: int, correct_guesses: int) -> str:
    """Render the summary line shown in the results dialog."""
    return RESULTS_TEMPLATE.format(
        total=total_guesses,
        accuracy=accuracy_percent(total_guesses, correct_guesses),
    )
