"""GameState value object."""

from enum import Enum


class GameState(str, Enum):
    """
    Lifecycle of the wheel.

    Allowed transitions: IDLE -> SPINNING, SPINNING -> FINISHED,
    FINISHED -> SPINNING.
    """

    IDLE = "IDLE"
    SPINNING = "SPINNING"
    FINISHED = "FINISHED"

    def can_transition_to(self, target: "GameState") -> bool:
        return target in _TRANSITIONS[self]


_TRANSITIONS = {
    GameState.IDLE: frozenset({GameState.SPINNING}),
    GameState.SPINNING: frozenset({GameState.FINISHED}),
    GameState.FINISHED: frozenset({GameState.SPINNING}),
}
