# simulations/run.py

from __future__ import annotations

from typing import Any, Dict, List, Optional

from monty_hall import RoundResult

from .common import (
    DEFAULT_PRECISION,
    DEFAULT_ROUNDS,
    BatchResult,
    BatchSpec,
    format_proportions_table,
)
from .methods import get_method


def run_experiment(
    method: str = "sequential",
    rounds: int = DEFAULT_ROUNDS,
    seed: Optional[int] = None,
    workers: int = 1,
    precision: int = DEFAULT_PRECISION,
    method_kwargs: Optional[Dict[str, Any]] = None,
) -> BatchResult:
    """
    Run a single batch simulation and return a BatchResult.

    Parameters
    ----------
    method:
        Name of the method ('sequential' or 'partitioned').
    rounds:
        Number of rounds; both strategies are scored in each one.
    seed:
        Base RNG seed. None draws fresh entropy.
    workers:
        Number of independent random streams (only 'partitioned' uses more
        than one).
    precision:
        Decimal places of the proportions table.
    method_kwargs:
        Optional dict of method-specific kwargs (e.g., {'processes': True}).

    Returns
    -------
    BatchResult
    """
    spec = BatchSpec(rounds=rounds, workers=workers, precision=precision)
    fn = get_method(method)

    kwargs = method_kwargs or {}
    return fn(spec, seed, **kwargs)


def play_n_games(
    n: int = DEFAULT_ROUNDS,
    seed: Optional[int] = None,
    precision: int = DEFAULT_PRECISION,
    workers: int = 1,
) -> List[RoundResult]:
    """
    Play n rounds, print the strategy/outcome proportions table and return
    every RoundResult (round 1 stay, round 1 switch, round 2 stay, ...).
    """
    method = "sequential" if workers == 1 else "partitioned"
    result = run_experiment(
        method=method,
        rounds=n,
        seed=seed,
        workers=workers,
        precision=precision,
    )
    print(format_proportions_table(result))
    return result.results
