# simulations/plot.py

from __future__ import annotations

import matplotlib.pyplot as plt

from monty_hall import Strategy

from .common import STRATEGIES, BatchResult, running_win_proportion


# Analytical win probabilities of the classic game.
EXPECTED_WIN = {Strategy.STAY: 1 / 3, Strategy.SWITCH: 2 / 3}


def plot_batch(result: BatchResult, show: bool = True):
    """
    Left: running win proportion per strategy against the round number.
    Right: final win proportion per strategy.
    Both panels share the [0, 1] y-axis.
    """
    fig = plt.figure(figsize=(12, 4))

    plt.subplot(1, 2, 1)
    for s in STRATEGIES:
        series = running_win_proportion(result.results, s)
        line, = plt.plot(range(1, len(series) + 1), series, label=s.value)
        plt.axhline(EXPECTED_WIN[s], color=line.get_color(), linestyle="--", linewidth=0.8)
    plt.xlabel("Round")
    plt.ylabel("Win proportion")
    plt.ylim(0, 1)
    plt.legend()
    plt.title("Convergence")

    plt.subplot(1, 2, 2)
    labels = [s.value for s in STRATEGIES]
    plt.bar(labels, [result.win_proportion(s) for s in STRATEGIES])
    plt.ylim(0, 1)
    plt.title("Final win proportion")

    plt.suptitle(f"Monty Hall: {result.method} (rounds={result.spec.rounds})")
    plt.tight_layout(rect=[0, 0.02, 1, 0.92])
    if show:
        plt.show()

    return fig
