from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from tictactoe.errors import GameAlreadyOver
from tictactoe.models import GamePhase, Move


@dataclass(frozen=True, slots=True)
class ValidationContext:
    """Inputs available to validators.

    Small and loggable; the grid itself stays out of it.
    """

    game_id: str
    phase: GamePhase
    move: Move


class MoveValidator(ABC):
    """A small, composable validation unit for an incoming move."""

    @abstractmethod
    def validate(self, *, ctx: ValidationContext) -> None:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class PhaseValidator(MoveValidator):
    """Refuse moves unless the game is in one of `allowed_phases`.

    Cell-level rules (range, occupancy) belong to the grid, which raises its
    own errors from `Grid.place`.
    """

    allowed_phases: frozenset[GamePhase]

    def validate(self, *, ctx: ValidationContext) -> None:
        if ctx.phase not in self.allowed_phases:
            allowed = ",".join(sorted(p.value for p in self.allowed_phases))
            raise GameAlreadyOver(
                f"Game {ctx.game_id} is over (phase '{ctx.phase.value}'); moves are allowed only in: {allowed}"
            )


@dataclass(frozen=True, slots=True)
class ValidatorPipeline:
    validators: tuple[MoveValidator, ...]

    def validate(self, *, ctx: ValidationContext) -> None:
        for v in self.validators:
            v.validate(ctx=ctx)


DEFAULT_MOVE_PIPELINE = ValidatorPipeline(
    validators=(PhaseValidator(allowed_phases=frozenset({GamePhase.x_turn, GamePhase.o_turn})),)
)
