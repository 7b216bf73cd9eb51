#!/usr/bin/env python3
"""
Pokemon Battle Arena

Entry point: a hot-seat, two-player battle in the terminal. Both players draft
three Pokemon from the catalog, then take turns attacking, switching or using
a Potion until one side has no Pokemon left standing.

To run: python main.py [--seed N] [--debug]
"""

from arena.cli import run

if __name__ == "__main__":
    run()
