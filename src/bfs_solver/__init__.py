"""
BFS solver for the snake cherry puzzle.

Finds the shortest slide sequence that lets the snake eat every cherry.
"""

from .config import SolverConfig
from .observer import (CompositeObserver, LoggingObserver, ProgressObserver,
                       SearchObserver)
from .path import RootStart, reconstruct_path, replay, replay_states
from .solver import BFSResult, BFSSolver

__all__ = [
    "BFSSolver",
    "BFSResult",
    "SolverConfig",
    "SearchObserver",
    "LoggingObserver",
    "ProgressObserver",
    "CompositeObserver",
    "RootStart",
    "reconstruct_path",
    "replay",
    "replay_states",
]
