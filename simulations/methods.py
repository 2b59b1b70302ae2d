# simulations/methods.py

from __future__ import annotations

import logging
import multiprocessing as mp
import random
from typing import Callable, Dict, List, Optional, Tuple

from monty_hall import InvalidArgument, MontyHallGame, RoundResult

from .common import (
    DEFAULT_PRECISION,
    BatchResult,
    BatchSpec,
    Tallies,
    Timer,
    merge_tallies,
    tally_results,
)


logger = logging.getLogger(__name__)

SimFn = Callable[..., BatchResult]


def play_rounds(game: MontyHallGame, rounds: int) -> List[RoundResult]:
    """
    Play `rounds` rounds and return their results in round-major order.
    """
    results: List[RoundResult] = []
    for _ in range(rounds):
        results.extend(game.play_round().results())
    return results


def simulate_sequential(
    spec: BatchSpec,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> BatchResult:
    """
    Every round drawn from one random stream, one after another.

    `rng` replaces the seeded generator when given (for tests that need
    to control the draws).
    """
    game = MontyHallGame(spec.door_count, seed=seed, rng=rng)
    logger.info("simulating %d rounds sequentially (seed=%s)", spec.rounds, seed)

    with Timer() as t:
        results = play_rounds(game, spec.rounds)
    logger.info("finished %d rounds in %.3fs", spec.rounds, t.elapsed_s)

    return BatchResult(
        method="sequential",
        spec=spec,
        results=results,
        runtime_s=t.elapsed_s,
        meta={"seed": seed},
    )


def _chunk_sizes(rounds: int, workers: int) -> List[int]:
    base, extra = divmod(rounds, workers)
    return [base + (1 if i < extra else 0) for i in range(workers)]


def _play_chunk(rounds: int, stream_seed: int) -> Tuple[List[RoundResult], Tallies]:
    # Module level so the process pool can pickle it.
    results = play_rounds(MontyHallGame(seed=stream_seed), rounds)
    return results, tally_results(results)


def simulate_partitioned(
    spec: BatchSpec,
    seed: Optional[int] = None,
    processes: bool = False,
) -> BatchResult:
    """
    Rounds split across `spec.workers` independent random streams.

    We model the batch as `workers` contiguous chunks:
      - chunk i plays with its own generator seeded seed + 1000 * (i + 1)
      - each chunk returns its results and a partial tally
      - partial tallies are summed, results concatenated in chunk order

    Chunks share no state, so with `processes=True` they run in a process
    pool and still produce exactly the same BatchResult as the in-process
    run for the same seed and worker count.
    """
    if seed is None:
        seed = random.SystemRandom().randrange(2 ** 31)

    sizes = _chunk_sizes(spec.rounds, spec.workers)
    stream_seeds = [seed + 1000 * (i + 1) for i in range(spec.workers)]
    logger.info(
        "simulating %d rounds over %d streams (seed=%d, processes=%s)",
        spec.rounds, spec.workers, seed, processes,
    )

    with Timer() as t:
        if processes and spec.workers > 1:
            with mp.Pool(processes=spec.workers) as pool:
                parts = pool.starmap(_play_chunk, zip(sizes, stream_seeds))
        else:
            parts = [_play_chunk(n, s) for n, s in zip(sizes, stream_seeds)]
    logger.info("finished %d rounds in %.3fs", spec.rounds, t.elapsed_s)

    results: List[RoundResult] = []
    for i, (chunk, _) in enumerate(parts):
        logger.debug("stream %d: %d rounds", i, len(chunk) // 2)
        results.extend(chunk)

    return BatchResult(
        method="partitioned",
        spec=spec,
        results=results,
        tallies=merge_tallies(tally for _, tally in parts),
        runtime_s=t.elapsed_s,
        meta={"seed": seed, "workers": spec.workers, "processes": processes},
    )


def simulate(
    n: int,
    seed: Optional[int] = None,
    precision: int = DEFAULT_PRECISION,
    rng: Optional[random.Random] = None,
) -> BatchResult:
    """
    Play `n` rounds and aggregate the win proportion of each strategy.

    Raises InvalidArgument when n < 1.
    """
    return simulate_sequential(BatchSpec(rounds=n, precision=precision), seed, rng=rng)


# --- Registry / dispatch -----------------------------------------------------

def get_method(name: str) -> SimFn:
    name = name.strip().lower()
    if name not in METHODS:
        raise InvalidArgument(f"unknown method '{name}'. Available: {sorted(METHODS.keys())}")
    return METHODS[name]


# METHODS maps method name -> function taking (spec, seed, **kwargs).
METHODS: Dict[str, SimFn] = {
    "sequential": simulate_sequential,
    "partitioned": simulate_partitioned,
}
