from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol, TextIO

from tictactoe.core.grid import slot_to_move
from tictactoe.errors import OutOfRange
from tictactoe.models import GamePhase, Move

SLOT_PROMPT = "Enter slot to place: "


class MoveSource(Protocol):
    """Where moves come from: a person at the console, or a script in tests.

    A source only has to produce a slot that exists on the grid. Whether the
    cell is free is decided by the game, which calls `reject` when it is not.
    """

    def next_move(self, *, phase: GamePhase, size: int) -> Move:  # pragma: no cover
        ...

    def reject(self, message: str) -> None:  # pragma: no cover
        ...


@dataclass(slots=True)
class ConsolePlayer:
    """Reads slot numbers from a text stream, one whitespace-separated token at a time.

    Several tokens on one line are consumed in order. A token that is not a
    number is discarded on its own and the player is asked again.
    """

    stdin: TextIO
    stdout: TextIO
    _pending: deque[str] = field(default_factory=deque, repr=False)

    def _say(self, message: str) -> None:
        self.stdout.write(message + "\n")
        self.stdout.flush()

    def _next_token(self) -> str:
        while not self._pending:
            line = self.stdin.readline()
            if not line:
                raise EOFError("Input closed before the game ended")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def next_move(self, *, phase: GamePhase, size: int) -> Move:
        while True:
            self.stdout.write(SLOT_PROMPT)
            self.stdout.flush()

            token = self._next_token()
            try:
                slot = int(token)
            except ValueError:
                self._say("Slot must be a number")
                continue

            try:
                return slot_to_move(slot, size=size)
            except OutOfRange as e:
                self._say(str(e))

    def reject(self, message: str) -> None:
        self._say(message)


class ScriptedPlayer:
    """Plays a fixed list of slots; handy for tests and demos."""

    def __init__(self, slots: Iterable[int]) -> None:
        self.slots: deque[int] = deque(slots)
        self.rejections: list[str] = []

    def next_move(self, *, phase: GamePhase, size: int) -> Move:
        if not self.slots:
            raise EOFError(f"Script ran out of moves in phase '{phase.value}'")
        return slot_to_move(self.slots.popleft(), size=size)

    def reject(self, message: str) -> None:
        self.rejections.append(message)
