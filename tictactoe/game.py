from __future__ import annotations

import logging
from uuid import uuid4

from tictactoe.core.grid import DEFAULT_SIZE, Grid, slot_to_move
from tictactoe.fsm import GameFSM
from tictactoe.models import GamePhase, GameSnapshot, Mark, Move
from tictactoe.turn_processing.turns import mark_for_phase, winner_for_phase
from tictactoe.turn_processing.validators import DEFAULT_MOVE_PIPELINE, ValidationContext

logger = logging.getLogger(__name__)


class Game:
    """One game: a grid plus the phase machine that owns it.

    `apply_move` is the only way the grid changes. Independent instances share
    nothing, so several games can run side by side.
    """

    def __init__(self, size: int = DEFAULT_SIZE, *, game_id: str | None = None) -> None:
        self.game_id = game_id or uuid4().hex
        self.grid = Grid(size)
        self._fsm = GameFSM()
        self.moves_played = 0

    @property
    def size(self) -> int:
        return self.grid.size

    @property
    def phase(self) -> GamePhase:
        return self._fsm.phase

    @property
    def is_over(self) -> bool:
        return self.phase.is_terminal

    @property
    def current_mark(self) -> Mark | None:
        if self.is_over:
            return None
        return mark_for_phase(self.phase)

    @property
    def winner(self) -> Mark | None:
        return winner_for_phase(self.phase)

    def apply_move(self, row: int, col: int) -> GamePhase:
        """Place the current player's mark and advance the phase.

        Raises:
        - `GameAlreadyOver` if the game already ended (nothing changes).
        - `OutOfRange` / `InvalidPlacement` from the grid; the phase is left as is
          and the caller should ask for another move.
        """

        phase = self.phase
        DEFAULT_MOVE_PIPELINE.validate(ctx=ValidationContext(game_id=self.game_id, phase=phase, move=Move(row=row, col=col)))

        mark = mark_for_phase(phase)
        self.grid.place(row, col, mark)
        self.moves_played += 1
        logger.debug("game=%s move=%d %s -> (%d, %d)", self.game_id, self.moves_played, mark.value, row, col)

        # Win is checked before tie: a last move that also completes a line wins.
        if self.grid.has_line(mark):
            self._fsm.win()
        elif self.grid.is_full():
            self._fsm.draw()
        else:
            self._fsm.pass_turn()

        new_phase = self.phase
        if new_phase.is_terminal:
            logger.info("game=%s finished: %s after %d moves", self.game_id, new_phase.value, self.moves_played)
        else:
            logger.debug("game=%s phase %s -> %s", self.game_id, phase.value, new_phase.value)
        return new_phase

    def apply_slot(self, slot: int) -> GamePhase:
        move = slot_to_move(slot, size=self.size)
        return self.apply_move(move.row, move.col)

    def snapshot(self) -> GameSnapshot:
        winner = self.winner
        winning_lines = [list(line.cells) for line in self.grid.winning_lines(winner)] if winner else []
        return GameSnapshot(
            game_id=self.game_id,
            phase=self.phase,
            size=self.size,
            cells=self.grid.rows(),
            winner=winner,
            winning_lines=winning_lines,
            moves_played=self.moves_played,
        )
