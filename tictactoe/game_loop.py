from __future__ import annotations

import logging

from tictactoe.core.game_state_text import Renderer
from tictactoe.errors import InvalidPlacement, OutOfRange
from tictactoe.game import Game
from tictactoe.models import GamePhase
from tictactoe.players import MoveSource

logger = logging.getLogger(__name__)

OCCUPIED_MESSAGE = "Slot must be empty"


def play_turn(*, game: Game, source: MoveSource) -> GamePhase:
    """Ask `source` for moves until the game accepts one.

    Refused moves are reported back to the source and never rendered.
    """

    while True:
        try:
            move = source.next_move(phase=game.phase, size=game.size)
            return game.apply_move(move.row, move.col)
        except OutOfRange as e:
            logger.info("game=%s rejected move: %s", game.game_id, e)
            source.reject(str(e))
        except InvalidPlacement as e:
            logger.info("game=%s rejected move: %s", game.game_id, e)
            source.reject(OCCUPIED_MESSAGE)


def run_game(*, game: Game, source: MoveSource, renderer: Renderer) -> GamePhase:
    """Drive `game` to a terminal phase and return it.

    The board is shown once up front so the first player can see the slot
    numbers, then again after every accepted move.
    """

    renderer.render(game.snapshot())
    while not game.is_over:
        play_turn(game=game, source=source)
        snapshot = game.snapshot()
        renderer.render(snapshot)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("game=%s snapshot %s", game.game_id, snapshot.model_dump_json())
    return game.phase
