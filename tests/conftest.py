from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest

_GAME_ENV = ("GUESSING_GAME_LOG_LEVEL", "GUESSING_GAME_SEED", "GUESSING_GAME_REVEAL_SECRET")


@pytest.fixture(autouse=True)
def _hermetic_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """Keep tests independent of the developer's shell and any local `.env`.

    `main()` loads `.env` straight into os.environ, so anything it set is dropped afterwards.
    """

    for name in _GAME_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    for name in _GAME_ENV:
        os.environ.pop(name, None)
