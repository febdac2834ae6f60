from __future__ import annotations

from tictactoe.models import GamePhase, Mark

_MARK_FOR_TURN: dict[GamePhase, Mark] = {
    GamePhase.x_turn: Mark.x,
    GamePhase.o_turn: Mark.o,
}

_WIN_FOR_MARK: dict[Mark, GamePhase] = {
    Mark.x: GamePhase.x_wins,
    Mark.o: GamePhase.o_wins,
}


def mark_for_phase(phase: GamePhase) -> Mark:
    """Return the mark of the player who moves in `phase`."""

    mark = _MARK_FOR_TURN.get(phase)
    if mark is None:
        raise ValueError(f"No player moves in phase '{phase.value}'")
    return mark


def winner_for_phase(phase: GamePhase) -> Mark | None:
    return next((m for m, p in _WIN_FOR_MARK.items() if p == phase), None)


def player_label(mark: Mark) -> str:
    return mark.value.upper()
