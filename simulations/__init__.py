# simulations/__init__.py
"""
Monte Carlo batch simulations of the Monty Hall game.

Run a batch via:
    python -m simulations.play 10000 --seed 42 [--workers 4 --processes] [--trace] [--plot]
"""
