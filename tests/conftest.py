from __future__ import annotations

import pytest

from tictactoe.game import Game


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests independent of the developer's shell and `.env` settings.

    The setenv/delenv pair makes monkeypatch restore each variable at teardown,
    which also undoes anything `load_dotenv` wrote during a test.
    """

    for name in ("TICTACTOE_LOG_LEVEL", "TICTACTOE_COLOR", "NO_COLOR"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture()
def game() -> Game:
    return Game(game_id="test-game")
