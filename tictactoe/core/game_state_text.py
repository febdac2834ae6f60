from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from tictactoe.models import GamePhase, GameSnapshot, Mark
from tictactoe.turn_processing.turns import mark_for_phase, player_label

# https://man7.org/linux/man-pages/man5/terminal-colors.d.5.html
ANSI_RESET = "\x1b[0m"
ANSI_RED = "\x1b[31m"
ANSI_GREEN = "\x1b[32m"

_MARK_COLORS: dict[Mark, str] = {
    Mark.x: ANSI_RED,
    Mark.o: ANSI_GREEN,
}

_OUTCOME_TEXT: dict[GamePhase, str] = {
    GamePhase.x_wins: "X wins!",
    GamePhase.o_wins: "O wins!",
    GamePhase.tie: "Nobody wins!",
}


def _cell_text(*, mark: Mark, slot: int, color: bool) -> str:
    # Empty cells show the slot number a player would type to fill them.
    if mark == Mark.empty:
        return f" {slot} "
    text = f" {mark.value} "
    if color:
        return f"{_MARK_COLORS[mark]}{text}{ANSI_RESET}"
    return text


def render_board(snapshot: GameSnapshot, *, color: bool = True) -> str:
    size = snapshot.size
    rule = "-" * (size * 4 - 1)

    lines: list[str] = [""]
    for i, row in enumerate(snapshot.cells):
        cells = [_cell_text(mark=mark, slot=i * size + j + 1, color=color) for j, mark in enumerate(row)]
        lines.append("|".join(cells))
        if i < size - 1:
            lines.append(rule)
    lines.append("")
    return "\n".join(lines) + "\n"


def render_status(phase: GamePhase) -> str:
    """One line: the outcome for a finished game, otherwise whose turn it is."""

    outcome = _OUTCOME_TEXT.get(phase)
    if outcome is not None:
        return outcome
    return f"{player_label(mark_for_phase(phase))}'s turn"


def render_game(snapshot: GameSnapshot, *, color: bool = True) -> str:
    text = render_board(snapshot, color=color) + render_status(snapshot.phase) + "\n"
    if snapshot.phase.is_terminal:
        text += "\n"
    return text


@dataclass(slots=True)
class Renderer:
    stream: TextIO
    color: bool = True

    def render(self, snapshot: GameSnapshot) -> None:
        self.stream.write(render_game(snapshot, color=self.color))
        self.stream.flush()
