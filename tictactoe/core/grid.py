from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from tictactoe.errors import InvalidPlacement, OutOfRange
from tictactoe.models import Mark, Move

DEFAULT_SIZE = 3


class LineKind(StrEnum):
    row = "row"
    column = "column"
    diagonal = "diagonal"
    anti_diagonal = "anti_diagonal"


@dataclass(frozen=True, slots=True)
class Line:
    kind: LineKind
    index: int
    cells: tuple[tuple[int, int], ...]


class Grid:
    """An N x N matrix of marks.

    The grid only stores and answers questions about marks; whose turn it is
    and what a completed line means are decided by `tictactoe.game.Game`.
    """

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError(f"Grid size must be at least 1 (got {size})")
        self.size = size
        self._cells: list[list[Mark]] = [[Mark.empty] * size for _ in range(size)]
        self._lines = _build_lines(size)

    def in_range(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def _require_in_range(self, row: int, col: int) -> None:
        if not self.in_range(row, col):
            raise OutOfRange(f"Cell ({row}, {col}) is outside the {self.size}x{self.size} grid")

    def get(self, row: int, col: int) -> Mark:
        self._require_in_range(row, col)
        return self._cells[row][col]

    def place(self, row: int, col: int, mark: Mark) -> None:
        if mark == Mark.empty:
            raise InvalidPlacement("Cannot place an empty mark")
        self._require_in_range(row, col)
        if self._cells[row][col] != Mark.empty:
            raise InvalidPlacement(f"Cell ({row}, {col}) is already taken by {self._cells[row][col].value}")
        self._cells[row][col] = mark

    def is_full(self) -> bool:
        return all(cell != Mark.empty for row in self._cells for cell in row)

    def is_empty(self) -> bool:
        return all(cell == Mark.empty for row in self._cells for cell in row)

    def count(self, mark: Mark) -> int:
        return sum(1 for row in self._cells for cell in row if cell == mark)

    def lines(self) -> tuple[Line, ...]:
        """Every candidate line: rows, then columns, then both diagonals."""

        return self._lines

    def line_of(self, mark: Mark, line: Line) -> bool:
        return all(self._cells[r][c] == mark for r, c in line.cells)

    def winning_lines(self, mark: Mark) -> list[Line]:
        # Each line is tested on its own; a failed row never stops the columns
        # or diagonals from being checked.
        return [line for line in self._lines if self.line_of(mark, line)]

    def has_line(self, mark: Mark) -> bool:
        return len(self.winning_lines(mark)) > 0

    def rows(self) -> list[list[Mark]]:
        return [list(row) for row in self._cells]


def _build_lines(size: int) -> tuple[Line, ...]:
    lines: list[Line] = []
    for i in range(size):
        lines.append(Line(LineKind.row, i, tuple((i, j) for j in range(size))))
    for j in range(size):
        lines.append(Line(LineKind.column, j, tuple((i, j) for i in range(size))))
    lines.append(Line(LineKind.diagonal, 0, tuple((k, k) for k in range(size))))
    lines.append(Line(LineKind.anti_diagonal, 0, tuple((k, size - 1 - k) for k in range(size))))
    return tuple(lines)


def slot_to_move(slot: int, *, size: int = DEFAULT_SIZE) -> Move:
    """Map a 1-based, row-major slot number to a move.

    Slot 1 is the top-left cell, slot `size` the top-right one and slot
    `size + 1` starts the second row.
    """

    if slot <= 0:
        raise OutOfRange("Slot must be greater than 0")
    if slot > size * size:
        raise OutOfRange(f"Slot must be smaller than {size * size + 1}")
    return Move(row=(slot - 1) // size, col=(slot - 1) % size)


def move_to_slot(move: Move, *, size: int = DEFAULT_SIZE) -> int:
    if not (0 <= move.row < size and 0 <= move.col < size):
        raise OutOfRange(f"Cell ({move.row}, {move.col}) is outside the {size}x{size} grid")
    return move.row * size + move.col + 1
