import pytest

from flag_quiz.core.models import GuessKind, SessionState
from flag_quiz.core.quiz_manager import QuizManager


@pytest.fixture
def manager(world_catalog, scheduler, rng):
    return QuizManager(world_catalog, scheduler, rng=rng)


def _index_of(manager, name):
    return [c.name for c in manager.current_choice_set()].index(name)


def _play_round(manager, scheduler, wrong_first=False):
    correct = manager.current_correct_name()
    if wrong_first:
        wrong_index = next(
            i for i, c in enumerate(manager.current_choice_set()) if c.name != correct
        )
        manager.submit_guess(wrong_index)
    outcome = manager.submit_guess(_index_of(manager, correct))
    scheduler.run_pending()
    return outcome


def test_reset_session_exposes_first_round(manager):
    manager.reset_session(10, 4)

    assert manager.state() is SessionState.ROUND_ACTIVE
    assert manager.current_question_index() == 1
    assert manager.total_rounds() == 10
    assert len(manager.current_choice_set()) == 4
    assert manager.current_flag_asset_ref().startswith("flags/")


def test_submit_guess_by_index(manager):
    manager.reset_session(10, 4)
    correct = manager.current_correct_name()
    wrong_index = next(i for i, c in enumerate(manager.current_choice_set()) if c.name != correct)

    assert manager.submit_guess(wrong_index).kind is GuessKind.INCORRECT
    assert manager.current_choice_set()[wrong_index].enabled is False
    assert manager.submit_guess(wrong_index) is None
    assert manager.submit_guess(_index_of(manager, correct)).kind is GuessKind.CORRECT


def test_submit_guess_out_of_range(manager):
    manager.reset_session(10, 4)

    with pytest.raises(IndexError):
        manager.submit_guess(4)


def test_round_started_callback_fires_after_delay(manager, scheduler):
    started = []
    manager.set_round_started_callback(lambda: started.append(manager.current_question_index()))
    manager.reset_session(3, 4)

    manager.submit_guess(_index_of(manager, manager.current_correct_name()))
    assert started == [1]

    scheduler.run_pending()
    assert started == [1, 2]


def test_full_session_summary(manager, scheduler):
    manager.reset_session(10, 4)
    for round_number in range(10):
        outcome = _play_round(manager, scheduler, wrong_first=round_number < 4)

    assert outcome.is_session_complete
    assert manager.is_session_complete()
    summary = manager.session_summary()
    assert summary.correct_guesses == 10
    assert summary.total_guesses == 14
    assert summary.accuracy_percent == pytest.approx(10 / 14 * 100)
    assert manager.results_message() == "14 guesses, 71.43% correct"


def test_summary_unavailable_mid_session(manager):
    manager.reset_session(10, 4)

    with pytest.raises(RuntimeError):
        manager.session_summary()


def test_reset_after_finish_starts_clean(manager, scheduler):
    manager.reset_session(2, 4)
    _play_round(manager, scheduler, wrong_first=True)
    _play_round(manager, scheduler)
    assert manager.is_session_complete()

    manager.reset_session(2, 4)

    assert manager.state() is SessionState.ROUND_ACTIVE
    assert manager.current_question_index() == 1
    _play_round(manager, scheduler)
    _play_round(manager, scheduler)
    assert manager.session_summary().total_guesses == 2
