from __future__ import annotations

import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from tictactoe.config import settings_from_env
from tictactoe.core.game_state_text import Renderer
from tictactoe.game import Game
from tictactoe.game_loop import run_game
from tictactoe.players import ConsolePlayer

logger = logging.getLogger(__name__)


def configure_logging(level: int) -> None:
    # Logs go to stderr so they never land in the middle of the board.
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> int:
    """Play one game on stdin/stdout. Takes no command-line arguments."""

    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)

    settings = settings_from_env()
    configure_logging(settings.log_level)

    game = Game()
    logger.info("game=%s started", game.game_id)

    try:
        phase = run_game(
            game=game,
            source=ConsolePlayer(stdin=sys.stdin, stdout=sys.stdout),
            renderer=Renderer(stream=sys.stdout, color=settings.color),
        )
    except (EOFError, KeyboardInterrupt):
        logger.warning("game=%s abandoned in phase %s", game.game_id, game.phase.value)
        sys.stdout.write("\nGame abandoned.\n")
        return 1

    logger.info("game=%s ended with %s", game.game_id, phase.value)
    return 0
