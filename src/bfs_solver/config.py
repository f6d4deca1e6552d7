"""
Configuration for the BFS solver.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SolverConfig:
    """Search limits and mode for the BFS solver."""

    # Budgets (None means unlimited)
    max_nodes: Optional[int] = None  # Dequeued boards across all start positions
    timeout_ms: Optional[float] = None  # Wall clock for one solve() call
    depth_cap: Optional[int] = None  # Boards at this many moves are not expanded

    # Run every start position and keep the shortest solution
    exhaustive: bool = False
