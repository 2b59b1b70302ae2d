import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .errors import InvalidArgument, InvalidState


# The classic game. Everything below the round runner takes a door_count,
# but switching is only well defined when a single unopened door remains.
DOOR_COUNT = 3

Door = int


class DoorContent(Enum):
    PRIZE = "prize"
    BLANK = "blank"


class Strategy(Enum):
    STAY = "stay"
    SWITCH = "switch"


class Outcome(Enum):
    WIN = "WIN"
    LOSE = "LOSE"


def _check_door(door: Door, door_count: int) -> None:
    if not isinstance(door, int) or isinstance(door, bool):
        raise InvalidArgument(f"door must be an integer, got {door!r}")
    if door < 1 or door > door_count:
        raise InvalidArgument(f"door {door} out of range 1..{door_count}")


@dataclass(frozen=True)
class Assignment:
    """
    What stands behind each door. Doors are numbered from 1, so
    ``assignment[1]`` is the first door.
    """
    contents: Tuple[DoorContent, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "contents", tuple(self.contents))
        for c in self.contents:
            if not isinstance(c, DoorContent):
                raise InvalidState(f"unknown door content {c!r}")
        # raises on a malformed assignment
        self.prize_door

    def __getitem__(self, door: Door) -> DoorContent:
        _check_door(door, self.door_count)
        return self.contents[door - 1]

    @property
    def door_count(self) -> int:
        return len(self.contents)

    @property
    def doors(self) -> List[Door]:
        return list(range(1, self.door_count + 1))

    @property
    def prize_door(self) -> Door:
        prizes = [
            i + 1 for i, c in enumerate(self.contents) if c is DoorContent.PRIZE
        ]
        if len(prizes) != 1:
            raise InvalidState(
                f"assignment must hold exactly one prize, got {len(prizes)}"
            )
        return prizes[0]

    def blank_doors(self) -> List[Door]:
        return [
            i + 1 for i, c in enumerate(self.contents) if c is DoorContent.BLANK
        ]


@dataclass(frozen=True)
class RoundResult:
    strategy: Strategy
    outcome: Outcome


@dataclass(frozen=True)
class PlayedRound:
    """
    Trace of one round. Both strategies are resolved against the same
    assignment, initial pick and revealed door.
    """
    assignment: Assignment
    initial_pick: Door
    revealed_door: Door
    stay_pick: Door
    switch_pick: Door
    stay: RoundResult
    switch: RoundResult

    def results(self) -> List[RoundResult]:
        """Stay result first, then switch."""
        return [self.stay, self.switch]

    def final_pick(self, strategy: Strategy) -> Door:
        return self.stay_pick if strategy is Strategy.STAY else self.switch_pick


# ------------------------------------------------------------
# Round stages
# ------------------------------------------------------------

def create_assignment(
    door_count: int = DOOR_COUNT,
    rng: Optional[random.Random] = None,
) -> Assignment:
    """
    Place one prize and door_count - 1 blanks behind the doors as a uniformly
    random permutation.
    """
    if door_count < 2:
        raise InvalidArgument("door_count must be >= 2")
    if rng is None:
        rng = random

    pool = [DoorContent.PRIZE] + [DoorContent.BLANK] * (door_count - 1)
    return Assignment(tuple(rng.sample(pool, k=door_count)))


def select_initial_pick(
    door_count: int = DOOR_COUNT,
    rng: Optional[random.Random] = None,
) -> Door:
    if door_count < 1:
        raise InvalidArgument("door_count must be >= 1")
    if rng is None:
        rng = random
    return rng.randint(1, door_count)


def reveal_door(
    assignment: Assignment,
    pick: Door,
    rng: Optional[random.Random] = None,
) -> Door:
    """
    The host opens a blank door that is not the contestant's pick.

    If the pick hides the prize every blank door qualifies and one is drawn
    uniformly. Otherwise the blank doors other than the pick qualify; with
    three doors that is exactly one door and no draw is made.
    """
    if rng is None:
        rng = random

    # validates the single prize before branching on it
    assignment.prize_door

    if assignment[pick] is DoorContent.PRIZE:
        return rng.choice(assignment.blank_doors())

    candidates = [d for d in assignment.blank_doors() if d != pick]
    if not candidates:
        raise InvalidState("no blank door left for the host to open")
    if len(candidates) == 1:
        return candidates[0]
    return rng.choice(candidates)


def resolve_final_pick(
    strategy: Strategy,
    initial_pick: Door,
    revealed_door: Door,
    door_count: int = DOOR_COUNT,
) -> Door:
    """
    STAY keeps the initial pick. SWITCH moves to the one door that is neither
    the initial pick nor the revealed door.

    With more than three doors several doors remain after the reveal and the
    switch target is undefined, so that case is rejected instead of guessed.
    """
    _check_door(initial_pick, door_count)
    _check_door(revealed_door, door_count)
    if revealed_door == initial_pick:
        raise InvalidArgument("revealed door cannot be the contestant's pick")

    if strategy is Strategy.STAY:
        return initial_pick
    if strategy is not Strategy.SWITCH:
        raise InvalidArgument(f"unknown strategy {strategy!r}")

    remaining = [
        d for d in range(1, door_count + 1)
        if d != initial_pick and d != revealed_door
    ]
    if len(remaining) != 1:
        raise InvalidArgument(
            f"switch is undefined with {len(remaining)} unopened doors left; "
            f"it requires door_count={DOOR_COUNT}"
        )
    return remaining[0]


def determine_outcome(final_pick: Door, assignment: Assignment) -> Outcome:
    if assignment[final_pick] is DoorContent.PRIZE:
        return Outcome.WIN
    return Outcome.LOSE


class MontyHallGame:
    """
    MontyHallGame

    Plays complete rounds of the classic three-door game:

      1. the prize is placed behind a uniformly random door
      2. the contestant picks a door uniformly at random
      3. the host opens a blank door that is not the pick
      4. the final pick is resolved for BOTH strategies (stay and switch)
      5. each final pick is scored against the same assignment

    Evaluating both strategies on one shared setup makes the comparison
    paired: per round exactly one strategy wins.

    All randomness is drawn from a single random.Random so a seed (or an
    injected generator) makes every round reproducible.
    """

    def __init__(
        self,
        door_count: int = DOOR_COUNT,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        if door_count != DOOR_COUNT:
            raise InvalidArgument(
                f"only the {DOOR_COUNT}-door game is playable; "
                f"switching is undefined for door_count={door_count}"
            )
        if rng is not None and seed is not None:
            raise InvalidArgument("pass either seed or rng, not both")

        self.door_count = door_count
        self._rng = rng if rng is not None else random.Random(seed)

    # ------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------

    def play_round(self) -> PlayedRound:
        assignment = create_assignment(self.door_count, self._rng)
        initial_pick = select_initial_pick(self.door_count, self._rng)
        revealed = reveal_door(assignment, initial_pick, self._rng)

        stay_pick = resolve_final_pick(
            Strategy.STAY, initial_pick, revealed, self.door_count
        )
        switch_pick = resolve_final_pick(
            Strategy.SWITCH, initial_pick, revealed, self.door_count
        )

        return PlayedRound(
            assignment=assignment,
            initial_pick=initial_pick,
            revealed_door=revealed,
            stay_pick=stay_pick,
            switch_pick=switch_pick,
            stay=RoundResult(Strategy.STAY, determine_outcome(stay_pick, assignment)),
            switch=RoundResult(
                Strategy.SWITCH, determine_outcome(switch_pick, assignment)
            ),
        )
