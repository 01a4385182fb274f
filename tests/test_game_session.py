import random

import pytest

from numberle.config.game_settings import ALPHABET, FALLBACK_EQUATION, MAX_ATTEMPTS
from numberle.models.game import Classification, GameStatus, ResultCode
from numberle.services.game_session import GameSession, GameStateError

C, P, A = Classification.CORRECT, Classification.PRESENT, Classification.ABSENT

WRONG_GUESSES = ["3+2+2=7", "2*3+1=7", "9-4-1=4", "6/3*4=8", "8/2+5=9", "2+3+1=6"]


def test_initial_state(session):
    assert session.status is GameStatus.IN_PROGRESS
    assert session.get_remaining_attempts() == MAX_ATTEMPTS
    assert not session.is_game_over()
    assert not session.is_game_won()
    assert session.get_target() == FALLBACK_EQUATION
    assert session.get_position_feedback() == []
    assert session.get_unused_characters() == list(ALPHABET)
    assert session.get_classification_sets() == {"Green": set(), "Orange": set(), "Gray": set()}


def test_not_started():
    game = GameSession()
    assert game.status is GameStatus.NOT_STARTED
    assert game.get_target() is None
    with pytest.raises(GameStateError):
        game.submit_guess("1+2+3=6")


def test_random_target_comes_from_corpus():
    corpus = ["12+7=19", "96/4=24", "13*5=65"]
    game = GameSession(equations=corpus, rng=random.Random(7))
    for _ in range(10):
        game.start_new_game()
        assert game.get_target() in corpus


def test_empty_corpus_falls_back():
    game = GameSession(equations=[], random_target=True)
    game.start_new_game()
    assert game.get_target() == FALLBACK_EQUATION


def test_disabling_random_selection_applies_to_next_game():
    game = GameSession(equations=["12+7=19"])
    game.start_new_game()
    assert game.get_target() == "12+7=19"

    game.set_random_target_selection(False)
    assert game.get_target() == "12+7=19"
    game.start_new_game()
    assert game.get_target() == FALLBACK_EQUATION


@pytest.mark.parametrize("guess,code", [
    (None, ResultCode.INVALID_LENGTH),
    (1234567, ResultCode.INVALID_LENGTH),
    ("", ResultCode.INVALID_LENGTH),
    ("1+2=3", ResultCode.INVALID_LENGTH),
    ("12+34=46", ResultCode.INVALID_LENGTH),
    ("12=12=1", ResultCode.NO_EQUAL_SIGN),
    ("+-*/+-*", ResultCode.NO_EQUAL_SIGN),
    ("*123+5=", ResultCode.MISSING_SYMBOLS),
    ("abcd=fg", ResultCode.MISSING_SYMBOLS),
    ("1+2+3=7", ResultCode.NOT_EQUAL),
    ("١+2+3=6", ResultCode.MISSING_SYMBOLS),
    ("１+2+3=6", ResultCode.MISSING_SYMBOLS),
])
def test_rejected_guess_changes_nothing(session, guess, code):
    assert session.submit_guess(guess) is code

    assert session.get_remaining_attempts() == MAX_ATTEMPTS
    assert session.status is GameStatus.IN_PROGRESS
    assert session.get_position_feedback() == []
    assert session.guesses == []
    assert len(session.get_unused_characters()) == 14


def test_accepted_guess_feedback(session):
    assert session.submit_guess("3+2+2=7") is ResultCode.ACCEPTED

    assert session.get_remaining_attempts() == MAX_ATTEMPTS - 1
    assert session.get_position_feedback() == [P, C, C, C, P, C, A]
    assert session.get_classification_sets() == {"Green": {"+", "2"}, "Orange": {"3"}, "Gray": {"7"}}
    assert session.get_unused_characters() == ["0", "1", "4", "5", "6", "8", "9", "-", "*", "/"]
    assert not session.is_game_over()


def test_feedback_is_replaced_not_accumulated(session):
    session.submit_guess("3+2+2=7")
    session.submit_guess("1+2+3=6")
    assert session.get_position_feedback() == [C] * 7


def test_winning_guess(session):
    assert session.submit_guess("1+2+3=6") is ResultCode.ACCEPTED

    assert session.status is GameStatus.WON
    assert session.is_game_won()
    assert session.is_game_over()
    assert session.get_position_feedback() == [C] * 7
    assert session.get_classification_sets()["Green"] == {"1", "+", "2", "3", "6"}


def test_win_on_last_attempt_is_a_win():
    game = GameSession(random_target=False, max_attempts=1)
    game.start_new_game()
    game.submit_guess("1+2+3=6")
    assert game.status is GameStatus.WON


def test_losing_after_max_attempts(session):
    for guess in WRONG_GUESSES:
        assert session.submit_guess(guess) is ResultCode.ACCEPTED

    assert session.status is GameStatus.LOST
    assert session.is_game_over()
    assert not session.is_game_won()
    assert session.get_remaining_attempts() == 0


def test_guessing_after_game_over_raises(session):
    session.submit_guess("1+2+3=6")
    with pytest.raises(GameStateError):
        session.submit_guess("2+3+1=6")


def test_invariants_hold_after_every_guess(session):
    previous_attempts = session.get_remaining_attempts()
    previous_unused = set(session.get_unused_characters())

    for guess in ["12=12=1", "3+2+2=7", "1+2+3=7", "2*3+1=7", "9-4-1=4", "6/3*4=8"]:
        result = session.submit_guess(guess)

        attempts = session.get_remaining_attempts()
        unused = set(session.get_unused_characters())
        sets = session.get_classification_sets()

        if result is ResultCode.ACCEPTED:
            assert attempts == previous_attempts - 1
        else:
            assert attempts == previous_attempts
        assert unused <= previous_unused
        assert not sets["Green"] & sets["Orange"]
        assert not sets["Green"] & sets["Gray"]

        previous_attempts, previous_unused = attempts, unused


def test_new_game_resets_everything(session):
    for guess in WRONG_GUESSES:
        session.submit_guess(guess)
    assert session.status is GameStatus.LOST

    session.start_new_game()

    assert session.status is GameStatus.IN_PROGRESS
    assert session.get_remaining_attempts() == MAX_ATTEMPTS
    assert session.get_position_feedback() == []
    assert session.guesses == []
    assert session.get_classification_sets() == {"Green": set(), "Orange": set(), "Gray": set()}
    assert len(session.get_unused_characters()) == 14


def test_state_snapshot_hides_answer_until_over(session):
    session.submit_guess("3+2+2=7")
    state = session.to_state("game-1")

    assert state.game_id == "game-1"
    assert state.status == "IN_PROGRESS"
    assert state.remaining_attempts == MAX_ATTEMPTS - 1
    assert state.guesses == ["3+2+2=7"]
    assert state.guess_results[0][0] == ("3", "PRESENT")
    assert state.position_feedback == ["PRESENT", "CORRECT", "CORRECT", "CORRECT", "PRESENT", "CORRECT", "ABSENT"]
    assert state.classification == {"Green": ["+", "2"], "Orange": ["3"], "Gray": ["7"]}
    assert state.answer is None

    session.submit_guess("1+2+3=6")
    assert session.to_state("game-1").answer == FALLBACK_EQUATION


def test_max_attempts_must_be_positive():
    with pytest.raises(ValueError):
        GameSession(max_attempts=0)


def test_invalid_corpus_entries_never_become_the_target():
    game = GameSession(equations=["1+2=3", "hello", "12+34=46", "1+2+3=7", "12+7=19"],
                       rng=random.Random(3))
    assert game.equations == ["12+7=19"]

    for _ in range(5):
        game.start_new_game()
        assert game.get_target() == "12+7=19"


def test_corpus_without_valid_entries_falls_back():
    game = GameSession(equations=["1+2=3", "hello"])
    game.start_new_game()
    assert game.get_target() == FALLBACK_EQUATION
