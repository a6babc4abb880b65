from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

SECRET_MIN = 1
SECRET_MAX = 100


class GamePhase(StrEnum):
    awaiting_input = "awaiting_input"
    evaluating = "evaluating"
    won = "won"


class Ordering(StrEnum):
    less = "less"
    greater = "greater"
    equal = "equal"


class GameState(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    # Fixed for the whole game; assignment after construction is rejected.
    secret: int = Field(..., ge=SECRET_MIN, le=SECRET_MAX, frozen=True)

    # For reproducibility/debugging. None when the caller supplied its own rng.
    seed: int | None = None

    phase: GamePhase = GamePhase.awaiting_input
