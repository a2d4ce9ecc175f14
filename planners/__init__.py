# -*- coding: utf-8 -*-
"""
Planners on grid maps with a unified API:
planner.plan(grid: np.ndarray[bool], start: (x,y), goal: (x,y))
  -> {'success': bool, 'path': List[Point] or None, 'explored': int, ...}

solve_grid_path(...) is the functional entry point for greedy best-first search.
"""

from __future__ import annotations
from typing import Any, Dict, Type

from .a_star import AStarPlanner
from .greedy_best_first import GreedyBestFirstPlanner, GridPathResult, solve_grid_path

# Mapping used by factories/CLIs
PLANNERS: Dict[str, Type] = {
    "greedy": GreedyBestFirstPlanner,
    "a_star": AStarPlanner,
}


def get_planner(name: str, **kwargs) -> Any:
    """
    Factory: instantiate a planner by name.

    Parameters
    ----------
    name : str
        One of: 'greedy', 'a_star'
    kwargs : dict
        Passed to the planner constructor (e.g., on_explore=callback)
    """
    name = name.strip().lower()
    if name not in PLANNERS:
        raise ValueError(f"Unknown planner '{name}'. Available: {sorted(PLANNERS)}")
    return PLANNERS[name](**kwargs)


__all__ = [
    "AStarPlanner",
    "GreedyBestFirstPlanner",
    "GridPathResult",
    "solve_grid_path",
    "get_planner",
    "PLANNERS",
]
