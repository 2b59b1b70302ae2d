# simulations/play.py

from __future__ import annotations

import argparse
import logging
import sys

from monty_hall import InvalidArgument, MontyHallGame, Strategy

from .common import (
    DEFAULT_PRECISION,
    DEFAULT_ROUNDS,
    STRATEGIES,
    format_proportions_table,
    format_round_trace,
    format_stats_line,
)
from .plot import plot_batch
from .run import run_experiment


# Unseeded unless --seed is given.
DEFAULT_SEED = None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Estimate stay vs switch win rates of the Monty Hall game via Monte Carlo."
    )
    parser.add_argument("n", nargs="?", type=int, default=DEFAULT_ROUNDS, help="number of rounds")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="base RNG seed")
    parser.add_argument("--workers", type=int, default=1, help="number of independent random streams")
    parser.add_argument("--processes", action="store_true", help="run the streams in a process pool")
    parser.add_argument("--precision", type=int, default=DEFAULT_PRECISION, help="decimals in the table")
    parser.add_argument("--trace", action="store_true", help="walk through one example round first")
    parser.add_argument("--plot", action="store_true", help="show convergence plots")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: list[str]) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    method = "sequential" if args.workers == 1 and not args.processes else "partitioned"
    try:
        result = run_experiment(
            method=method,
            rounds=args.n,
            seed=args.seed,
            workers=args.workers,
            precision=args.precision,
            method_kwargs={"processes": True} if args.processes else None,
        )
    except InvalidArgument as e:
        parser.error(str(e))

    if args.trace:
        played = MontyHallGame(seed=args.seed).play_round()
        for s in STRATEGIES:
            print(format_round_trace(played, s))
            print()

    print(format_proportions_table(result))
    print(format_stats_line(result))

    if args.plot:
        plot_batch(result)

    return 0


def cli() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
