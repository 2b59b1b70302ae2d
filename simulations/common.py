# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple
import time

from monty_hall import (
    DOOR_COUNT,
    InvalidArgument,
    InvalidState,
    Outcome,
    PlayedRound,
    RoundResult,
    Strategy,
)


DEFAULT_ROUNDS = 100
DEFAULT_PRECISION = 2

# Row / column order of the proportions table.
STRATEGIES = (Strategy.STAY, Strategy.SWITCH)
OUTCOMES = (Outcome.LOSE, Outcome.WIN)

Tallies = Dict[Strategy, Dict[Outcome, int]]
Proportions = Dict[Strategy, Dict[Outcome, float]]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class BatchSpec:
    """
    Parameters shared by every batch simulation.
    """
    rounds: int
    door_count: int = DOOR_COUNT
    workers: int = 1  # number of independent random streams
    precision: int = DEFAULT_PRECISION  # decimals in the proportions table

    def __post_init__(self) -> None:
        if not _is_int(self.rounds) or self.rounds < 1:
            raise InvalidArgument(f"rounds must be an integer >= 1, got {self.rounds!r}")
        if self.door_count != DOOR_COUNT:
            raise InvalidArgument(f"door_count must be {DOOR_COUNT}")
        if not _is_int(self.workers) or self.workers < 1:
            raise InvalidArgument("workers must be >= 1")
        if not _is_int(self.precision) or self.precision < 0:
            raise InvalidArgument("precision must be >= 0")


def empty_tallies() -> Tallies:
    return {s: {o: 0 for o in OUTCOMES} for s in STRATEGIES}


def tally_results(results: Iterable[RoundResult]) -> Tallies:
    tallies = empty_tallies()
    for r in results:
        tallies[r.strategy][r.outcome] += 1
    return tallies


def merge_tallies(parts: Iterable[Tallies]) -> Tallies:
    """
    Sum partial tallies. Addition per cell, so the merge order is irrelevant.
    """
    merged = empty_tallies()
    for part in parts:
        for s, row in part.items():
            for o, c in row.items():
                merged[s][o] += c
    return merged


def proportions_table(tallies: Tallies, rounds: int, precision: int) -> Proportions:
    """
    Row proportions: each strategy was played once per round, so every row
    is divided by the round count.
    """
    return {
        s: {o: round(tallies[s][o] / rounds, precision) for o in OUTCOMES}
        for s in STRATEGIES
    }


@dataclass
class BatchResult:
    """
    Common return type for all batch simulations.

    `results` is round-major: round 1 stay, round 1 switch, round 2 stay, ...
    """
    method: str
    spec: BatchSpec
    results: List[RoundResult]

    tallies: Optional[Tallies] = None
    proportions: Proportions = field(init=False)
    runtime_s: Optional[float] = field(default=None, compare=False)
    meta: Dict[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        expected = 2 * self.spec.rounds
        if len(self.results) != expected:
            raise InvalidState(
                f"result count mismatch: expected {expected}, got {len(self.results)}"
            )

        if self.tallies is None:
            self.tallies = tally_results(self.results)

        # Sanity: every strategy is scored exactly once per round
        for s in STRATEGIES:
            played = sum(self.tallies[s].values())
            if played != self.spec.rounds:
                raise InvalidState(
                    f"{s.value}: expected {self.spec.rounds} results, got {played}"
                )

        self.proportions = proportions_table(
            self.tallies, self.spec.rounds, self.spec.precision
        )

    def win_proportion(self, strategy: Strategy) -> float:
        return self.proportions[strategy][Outcome.WIN]

    def paired(self) -> List[Tuple[RoundResult, RoundResult]]:
        """(stay, switch) per round."""
        return [
            (self.results[i], self.results[i + 1])
            for i in range(0, len(self.results), 2)
        ]


class Timer:
    """
    Tiny timing helper for simulations.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.perf_counter() - self._start


def running_win_proportion(results: List[RoundResult], strategy: Strategy) -> List[float]:
    """
    Win proportion of `strategy` after each round, for convergence plots.
    """
    out: List[float] = []
    wins = 0
    played = 0
    for r in results:
        if r.strategy is not strategy:
            continue
        played += 1
        if r.outcome is Outcome.WIN:
            wins += 1
        out.append(wins / played)
    return out


def format_proportions_table(r: BatchResult) -> str:
    """
    Strategy rows, outcome columns:

                outcome
        strategy LOSE  WIN
          stay   0.67 0.33
          switch 0.33 0.67
    """
    p = r.spec.precision
    width = max(p + 3, 5)
    lines = [
        " " * 9 + "outcome",
        "strategy " + " ".join(f"{o.value:>{width}}" for o in OUTCOMES),
    ]
    for s in STRATEGIES:
        cells = " ".join(f"{r.proportions[s][o]:>{width}.{p}f}" for o in OUTCOMES)
        lines.append(f"  {s.value:<7}{cells}")
    return "\n".join(lines)


def format_stats_line(r: BatchResult) -> str:
    """
    Human-friendly one-liner for printing after a run.
    """
    return (
        f"{r.method}: rounds={r.spec.rounds}, "
        f"stay={r.win_proportion(Strategy.STAY):.3f}, "
        f"switch={r.win_proportion(Strategy.SWITCH):.3f}"
        + (f", runtime={r.runtime_s:.3f}s" if r.runtime_s is not None else "")
    )


def format_round_trace(played: PlayedRound, strategy: Strategy) -> str:
    """
    Walk through a single round as the contestant following `strategy`.
    """
    setup = " ".join(c.value for c in played.assignment.contents)
    result = played.stay if strategy is Strategy.STAY else played.switch
    return "\n".join([
        f"GAME SETUP ({strategy.value})",
        setup,
        f"My initial selection: {played.initial_pick}",
        f"The opened goat door: {played.revealed_door}",
        f"My final selection: {played.final_pick(strategy)}",
        "GAME OUTCOME:",
        result.outcome.value,
    ])
