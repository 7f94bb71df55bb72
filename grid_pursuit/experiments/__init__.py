"""Experiment orchestration and the ``grid-pursuit`` command line."""

from grid_pursuit.experiments.search import main

__all__ = ["main"]
