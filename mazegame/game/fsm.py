from __future__ import annotations

from enum import Enum

from statemachine import State, StateMachine


class GamePhase(str, Enum):
    playing = "playing"
    at_exit = "at_exit"


class GameFSM(StateMachine):
    """Session phases of a single maze.

    Reaching the exit does not end the session; the player may keep walking and
    return to the exit. A new game always goes back to ``playing``.
    """

    playing = State(GamePhase.playing.value, value=GamePhase.playing.value, initial=True)
    at_exit = State(GamePhase.at_exit.value, value=GamePhase.at_exit.value)

    reach_exit = playing.to(at_exit) | at_exit.to.itself()
    restart = playing.to.itself() | at_exit.to(playing)

    @property
    def phase(self) -> GamePhase:
        return GamePhase(str(self.current_state.value))
