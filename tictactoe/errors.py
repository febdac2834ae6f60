from __future__ import annotations


class GameError(ValueError):
    """A move was refused; the player can try again."""


class InvalidPlacement(GameError):
    """Target cell is occupied, or the placement is otherwise not allowed."""


class OutOfRange(InvalidPlacement):
    """Coordinates (or a slot number) fall outside the grid."""


class GameAlreadyOver(RuntimeError):
    """A move was submitted after the game reached a terminal phase.

    This is a bug in whatever drives the game, not something a player can fix,
    so the driving loop never catches it.
    """
