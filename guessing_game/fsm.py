from __future__ import annotations

from statemachine import State, StateMachine

from guessing_game.models import GamePhase, GameState


class GuessFSM(StateMachine):
    """FSM wrapper around GameState.

    - awaiting input -> awaiting input when a line does not parse
    - awaiting input -> evaluating once a guess parses
    - evaluating -> awaiting input on a miss, -> won on a match
    """

    awaiting_input = State(
        GamePhase.awaiting_input.value,
        value=GamePhase.awaiting_input.value,
        initial=True,
    )
    evaluating = State(GamePhase.evaluating.value, value=GamePhase.evaluating.value)
    won = State(GamePhase.won.value, value=GamePhase.won.value, final=True)

    guess_rejected = awaiting_input.to(awaiting_input)
    guess_parsed = awaiting_input.to(evaluating)
    missed = evaluating.to(awaiting_input)
    matched = evaluating.to(won)

    def __init__(self, game: GameState):
        self.game = game
        super().__init__(start_value=game.phase.value)

    def after_transition(self) -> None:
        self.sync_phase_to_model()

    def sync_phase_to_model(self) -> None:
        self.game.phase = GamePhase(str(self.current_state.value))
