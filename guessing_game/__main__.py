from __future__ import annotations

import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from guessing_game.config import load_settings
from guessing_game.game_loop import GameLoop, InputStreamError
from guessing_game.game_setup import new_game

logger = logging.getLogger(__name__)


def main() -> int:
    # Values already in the environment win over the .env file.
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    # Log records go to stderr; stdout carries only game text.
    logging.basicConfig(level=settings.log_level, stream=sys.stderr)

    state = new_game(seed=settings.seed)
    loop = GameLoop(
        state=state,
        stdin=sys.stdin,
        stdout=sys.stdout,
        reveal_secret=settings.reveal_secret,
    )

    try:
        loop.run()
    except InputStreamError as e:
        logger.error("Aborting game: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
