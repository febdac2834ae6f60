from __future__ import annotations

from statemachine import State, StateMachine

from tictactoe.models import GamePhase


class GameFSM(StateMachine):
    """Phase machine for a single game.

    - turns: x_turn <-> o_turn
    - outcomes: x_wins, o_wins, tie (final; no outgoing transitions)

    The FSM only guards transitions. Deciding *which* event to send (a line was
    completed, the grid filled up, or neither) is done by `Game.apply_move`.
    """

    x_turn = State(GamePhase.x_turn.value, value=GamePhase.x_turn.value, initial=True)
    o_turn = State(GamePhase.o_turn.value, value=GamePhase.o_turn.value)
    x_wins = State(GamePhase.x_wins.value, value=GamePhase.x_wins.value, final=True)
    o_wins = State(GamePhase.o_wins.value, value=GamePhase.o_wins.value, final=True)
    tie = State(GamePhase.tie.value, value=GamePhase.tie.value, final=True)

    pass_turn = x_turn.to(o_turn) | o_turn.to(x_turn)
    win = x_turn.to(x_wins) | o_turn.to(o_wins)
    draw = x_turn.to(tie) | o_turn.to(tie)

    def __init__(self, phase: GamePhase = GamePhase.x_turn):
        super().__init__(start_value=phase.value)

    @property
    def phase(self) -> GamePhase:
        return GamePhase(str(self.current_state.value))
