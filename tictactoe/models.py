from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Mark(StrEnum):
    empty = "empty"
    x = "x"
    o = "o"


class GamePhase(StrEnum):
    x_turn = "x_turn"
    o_turn = "o_turn"
    x_wins = "x_wins"
    o_wins = "o_wins"
    tie = "tie"

    @property
    def is_terminal(self) -> bool:
        return self not in {GamePhase.x_turn, GamePhase.o_turn}


class Move(BaseModel):
    # Range is a grid rule, not a model constraint: out-of-range moves must
    # reach the grid so it can reject them.
    model_config = ConfigDict(frozen=True)

    row: int
    col: int


class GameSnapshot(BaseModel):
    """Read-only view of a game handed to renderers and debug logging."""

    game_id: str
    phase: GamePhase
    size: int
    cells: list[list[Mark]]
    winner: Mark | None = None

    # Every completed line for the winner, as (row, col) cells.
    winning_lines: list[list[tuple[int, int]]] = Field(default_factory=list)

    moves_played: int = 0
