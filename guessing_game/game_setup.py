from __future__ import annotations

import logging
import random

from guessing_game.models import SECRET_MAX, SECRET_MIN, GameState

logger = logging.getLogger(__name__)


def draw_secret(*, rng: random.Random) -> int:
    """Draw a secret uniformly from [SECRET_MIN, SECRET_MAX], both ends inclusive."""

    return rng.randint(SECRET_MIN, SECRET_MAX)


def new_game(*, seed: int | None = None, rng: random.Random | None = None) -> GameState:
    """Create a fresh game.

    - With `rng`, the secret is drawn from it and no seed is recorded.
    - Otherwise a `random.Random(seed)` is used; a seed is picked if none is given.
    """

    if rng is None:
        if seed is None:
            seed = random.SystemRandom().randint(1, 2**31 - 1)
        rng = random.Random(seed)
    else:
        seed = None

    state = GameState(secret=draw_secret(rng=rng), seed=seed)
    logger.debug("New game created (seed=%s)", seed)
    return state
