"""Solvers for daily programming puzzles from the 2018 and 2019 sets, with an Intcode machine."""

__version__ = "0.1.0"