from __future__ import annotations

import pytest
from statemachine.exceptions import TransitionNotAllowed

from guessing_game.fsm import GuessFSM
from guessing_game.models import GamePhase, GameState


def test_fsm_starts_awaiting_input() -> None:
    game = GameState(secret=5)
    fsm = GuessFSM(game)

    assert fsm.current_state.value == GamePhase.awaiting_input.value
    assert game.phase == GamePhase.awaiting_input


def test_rejected_guess_is_a_self_loop() -> None:
    game = GameState(secret=5)
    fsm = GuessFSM(game)

    fsm.guess_rejected()
    fsm.guess_rejected()

    assert game.phase == GamePhase.awaiting_input


def test_miss_returns_to_awaiting_input_and_match_wins() -> None:
    game = GameState(secret=5)
    fsm = GuessFSM(game)

    fsm.guess_parsed()
    assert game.phase == GamePhase.evaluating

    fsm.missed()
    assert game.phase == GamePhase.awaiting_input

    fsm.guess_parsed()
    fsm.matched()
    assert game.phase == GamePhase.won


def test_fsm_resumes_from_model_phase() -> None:
    game = GameState(secret=5, phase=GamePhase.evaluating)
    fsm = GuessFSM(game)

    assert fsm.current_state.value == GamePhase.evaluating.value


def test_cannot_evaluate_without_a_parsed_guess() -> None:
    fsm = GuessFSM(GameState(secret=5))

    with pytest.raises(TransitionNotAllowed):
        fsm.matched()


def test_won_is_terminal() -> None:
    game = GameState(secret=5, phase=GamePhase.won)
    fsm = GuessFSM(game)

    for event in ("guess_parsed", "guess_rejected", "missed", "matched"):
        with pytest.raises(TransitionNotAllowed):
            fsm.send(event)
    assert game.phase == GamePhase.won
