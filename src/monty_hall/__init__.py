"""
Monty Hall round simulation.

One round: place the prize, take an initial pick, let the host open a blank
door, then resolve both the "stay" and the "switch" decision against the same
setup.
"""

from .errors import InvalidArgument, InvalidState
from .game import (
    DOOR_COUNT,
    Assignment,
    DoorContent,
    MontyHallGame,
    Outcome,
    PlayedRound,
    RoundResult,
    Strategy,
    create_assignment,
    determine_outcome,
    resolve_final_pick,
    reveal_door,
    select_initial_pick,
)

__all__ = [
    "DOOR_COUNT",
    "Assignment",
    "DoorContent",
    "InvalidArgument",
    "InvalidState",
    "MontyHallGame",
    "Outcome",
    "PlayedRound",
    "RoundResult",
    "Strategy",
    "create_assignment",
    "determine_outcome",
    "resolve_final_pick",
    "reveal_door",
    "select_initial_pick",
]
