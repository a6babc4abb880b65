from __future__ import annotations

import logging
from typing import Protocol

from guessing_game.fsm import GuessFSM
from guessing_game.guesses import GuessParseError, compare, parse_guess
from guessing_game.models import GamePhase, GameState, Ordering

logger = logging.getLogger(__name__)

FEEDBACK: dict[Ordering, str] = {
    Ordering.less: "Too small!",
    Ordering.greater: "Too big!",
    Ordering.equal: "You win!",
}


class LineReader(Protocol):
    def readline(self) -> str:  # pragma: no cover
        ...


class TextWriter(Protocol):
    def write(self, s: str) -> int:  # pragma: no cover
        ...

    def flush(self) -> None:  # pragma: no cover
        ...


class InputStreamError(RuntimeError):
    pass


class GameLoop:
    """Read-parse-compare-respond cycle for one game.

    `run()` drives the whole game against the streams; `submit()` is a single
    step with no I/O.
    """

    def __init__(
        self,
        *,
        state: GameState,
        stdin: LineReader,
        stdout: TextWriter,
        reveal_secret: bool = True,
    ):
        self.state = state
        self.stdin = stdin
        self.stdout = stdout
        self.reveal_secret = reveal_secret
        self._fsm = GuessFSM(state)

    @property
    def is_won(self) -> bool:
        return self.state.phase == GamePhase.won

    def submit(self, raw: str) -> Ordering | None:
        """Process one raw input line.

        Returns the comparison outcome, or None if the line did not parse (the
        game stays awaiting input).
        """

        if self.is_won:
            raise ValueError("Game is completed")

        try:
            guess = parse_guess(raw)
        except GuessParseError as e:
            logger.debug("Rejected input: %s", e)
            self._fsm.guess_rejected()
            return None

        self._fsm.guess_parsed()
        outcome = compare(guess, self.state.secret)
        logger.debug("Guess %d -> %s", guess, outcome.value)

        if outcome is Ordering.equal:
            self._fsm.matched()
            logger.info("Game won")
        else:
            self._fsm.missed()
        return outcome

    def run(self) -> GameState:
        self._emit("Guess the number!")
        if self.reveal_secret:
            self._emit(f"The secret number is: {self.state.secret}")

        while not self.is_won:
            self._emit("Please input your guess.")
            outcome = self.submit(self._read_line())
            if outcome is None:
                continue
            self._emit(FEEDBACK[outcome])

        return self.state

    def _read_line(self) -> str:
        try:
            line = self.stdin.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise InputStreamError(f"Failed to read line: {e}") from e

        # readline() only returns "" at end of stream; a blank line is still "\n".
        if line == "":
            raise InputStreamError("Failed to read line: end of input")
        return line

    def _emit(self, text: str) -> None:
        self.stdout.write(f"{text}\n")
        self.stdout.flush()
