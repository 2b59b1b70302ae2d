"""
Unit tests for the round stages in monty_hall.game.

Tests cover:
1. Prize placement and initial pick ranges
2. Host reveal constraints (never the prize, never the pick)
3. Stay / switch resolution, including the undefined multi-door switch
4. Outcome scoring and out-of-range doors
5. Full rounds: paired outcomes and seeded reproducibility
"""

import random

import pytest

from monty_hall import (
    Assignment,
    DoorContent,
    InvalidArgument,
    InvalidState,
    MontyHallGame,
    Outcome,
    Strategy,
    create_assignment,
    determine_outcome,
    resolve_final_pick,
    reveal_door,
    select_initial_pick,
)

P = DoorContent.PRIZE
B = DoorContent.BLANK


class NoDraw:
    """Random source that fails the test if anything is drawn from it."""

    def choice(self, seq):
        raise AssertionError("unexpected random draw")


class TestAssignment:
    def test_one_prize_two_blanks(self):
        rng = random.Random(0)
        for _ in range(200):
            a = create_assignment(rng=rng)
            assert a.door_count == 3
            assert a.contents.count(P) == 1
            assert a.contents.count(B) == 2

    def test_every_door_gets_the_prize(self):
        rng = random.Random(1)
        seen = {create_assignment(rng=rng).prize_door for _ in range(300)}
        assert seen == {1, 2, 3}

    def test_doors_are_numbered_from_one(self):
        a = Assignment((B, P, B))
        assert a[2] is P
        assert a.prize_door == 2
        assert a.blank_doors() == [1, 3]
        assert a.doors == [1, 2, 3]

    @pytest.mark.parametrize("contents", [(B, B, B), (P, P, B), (P, "x", B), (P, None, B)])
    def test_malformed_assignment_rejected(self, contents):
        with pytest.raises(InvalidState):
            Assignment(contents)

    def test_out_of_range_door(self):
        a = Assignment((P, B, B))
        with pytest.raises(InvalidArgument):
            a[0]
        with pytest.raises(InvalidArgument):
            a[4]

    def test_larger_door_count(self):
        a = create_assignment(door_count=5, rng=random.Random(2))
        assert a.door_count == 5
        assert len(a.blank_doors()) == 4

    def test_too_few_doors(self):
        with pytest.raises(InvalidArgument):
            create_assignment(door_count=1)


class TestSelectInitialPick:
    def test_pick_in_range_and_covers_all_doors(self):
        rng = random.Random(3)
        picks = {select_initial_pick(rng=rng) for _ in range(300)}
        assert picks == {1, 2, 3}


class TestRevealDoor:
    def test_prize_pick_reveals_a_blank(self):
        a = Assignment((P, B, B))
        rng = random.Random(4)
        revealed = {reveal_door(a, 1, rng) for _ in range(100)}
        assert revealed == {2, 3}

    def test_blank_pick_reveal_is_forced(self):
        a = Assignment((P, B, B))
        assert reveal_door(a, 2, NoDraw()) == 3
        assert reveal_door(a, 3, NoDraw()) == 2

    def test_never_prize_never_pick(self):
        rng = random.Random(5)
        for _ in range(500):
            a = create_assignment(rng=rng)
            pick = select_initial_pick(rng=rng)
            door = reveal_door(a, pick, rng)
            assert door != a.prize_door
            assert door != pick

    def test_more_doors_draws_among_other_blanks(self):
        a = Assignment((B, B, P, B, B))
        rng = random.Random(6)
        revealed = {reveal_door(a, 1, rng) for _ in range(200)}
        assert revealed == {2, 4, 5}

    @pytest.mark.parametrize("pick", [4, 0, 2.0, "2", True])
    def test_out_of_range_pick(self, pick):
        with pytest.raises(InvalidArgument):
            reveal_door(Assignment((P, B, B)), pick, random.Random(0))


class TestResolveFinalPick:
    def test_stay_keeps_initial_pick(self):
        for pick, revealed in [(1, 2), (1, 3), (2, 3), (3, 1)]:
            assert resolve_final_pick(Strategy.STAY, pick, revealed) == pick

    @pytest.mark.parametrize(
        "pick,revealed,expected",
        [(1, 2, 3), (1, 3, 2), (2, 1, 3), (2, 3, 1), (3, 1, 2), (3, 2, 1)],
    )
    def test_switch_takes_remaining_door(self, pick, revealed, expected):
        assert resolve_final_pick(Strategy.SWITCH, pick, revealed) == expected

    def test_switch_undefined_with_more_doors(self):
        with pytest.raises(InvalidArgument):
            resolve_final_pick(Strategy.SWITCH, 1, 2, door_count=4)

    def test_stay_with_more_doors(self):
        assert resolve_final_pick(Strategy.STAY, 1, 2, door_count=4) == 1

    def test_revealed_equal_to_pick(self):
        with pytest.raises(InvalidArgument):
            resolve_final_pick(Strategy.STAY, 2, 2)

    def test_out_of_range(self):
        with pytest.raises(InvalidArgument):
            resolve_final_pick(Strategy.SWITCH, 0, 2)
        with pytest.raises(InvalidArgument):
            resolve_final_pick(Strategy.STAY, "1", 2)


class TestDetermineOutcome:
    def test_win_and_lose(self):
        a = Assignment((B, B, P))
        assert determine_outcome(3, a) is Outcome.WIN
        assert determine_outcome(1, a) is Outcome.LOSE
        assert determine_outcome(2, a) is Outcome.LOSE

    @pytest.mark.parametrize("door", [0, 4, -1, 1.5, "2", True, None])
    def test_out_of_range(self, door):
        with pytest.raises(InvalidArgument):
            determine_outcome(door, Assignment((B, B, P)))


class TestMontyHallGame:
    def test_round_invariants(self):
        game = MontyHallGame(seed=11)
        for _ in range(1000):
            r = game.play_round()
            prize = r.assignment.prize_door
            assert r.revealed_door != prize
            assert r.revealed_door != r.initial_pick
            assert r.switch_pick != r.initial_pick
            assert r.switch_pick != r.revealed_door
            assert r.stay_pick == r.initial_pick
            assert r.stay.outcome != r.switch.outcome
            assert (r.stay.outcome is Outcome.WIN) == (r.initial_pick == prize)

    def test_results_are_stay_then_switch(self):
        r = MontyHallGame(seed=0).play_round()
        assert [x.strategy for x in r.results()] == [Strategy.STAY, Strategy.SWITCH]
        assert r.final_pick(Strategy.SWITCH) == r.switch_pick

    def test_seeded_rounds_repeat(self):
        a = MontyHallGame(seed=99)
        b = MontyHallGame(rng=random.Random(99))
        assert [a.play_round() for _ in range(50)] == [b.play_round() for _ in range(50)]

    def test_only_three_doors_playable(self):
        with pytest.raises(InvalidArgument):
            MontyHallGame(door_count=4)

    def test_seed_and_rng_exclusive(self):
        with pytest.raises(InvalidArgument):
            MontyHallGame(seed=1, rng=random.Random(1))
