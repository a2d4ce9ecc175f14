#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
treasure_hunt.py
----------------
Collect every treasure on a grid and finish at the goal, in three phases:

1. preprocessing - grid path and cost between every pair of
   [start, *treasures, goal] with the selected planner
2. optimizing    - backtracking over the leg-cost matrix for the best order
3. executing     - stitch the leg paths into one start -> goal walk

With the default A* planner the leg costs are exact, so the route is optimal.
With the greedy planner leg costs are the (possibly longer) greedy path lengths.

Unreachable treasures are a result (found=False), not an exception.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

from envs.grid import InvalidInputError, Point, PointLike, as_grid, check_cell
from planners import get_planner
from .backtracking import RouteCallback, find_best_order

logger = logging.getLogger(__name__)

PHASE_PREPROCESSING = "preprocessing"
PHASE_OPTIMIZING = "optimizing"
PHASE_EXECUTING = "executing"
PHASE_COMPLETE = "complete"


@dataclass
class TreasureHuntResult:
    order: List[int] = field(default_factory=list)          # treasure indices, visiting order
    total_distance: float = math.inf                         # moves along complete_path
    complete_path: List[Point] = field(default_factory=list)
    permutations_evaluated: int = 0
    cells_explored: int = 0                                  # summed over all leg searches
    found: bool = False


def _leg_table(grid: np.ndarray,
               points: List[Point],
               planner) -> Tuple[np.ndarray, Dict[Tuple[int, int], List[Point]], int]:
    n = len(points)
    cost = np.zeros((n, n), dtype=float)
    paths: Dict[Tuple[int, int], List[Point]] = {}
    explored = 0
    for i in range(n):
        for j in range(n):
            if i == j:
                paths[i, j] = [points[i]]
                continue
            res = planner.plan(grid, points[i], points[j])
            explored += res.get('explored', 0)
            if res['success']:
                cost[i, j] = len(res['path']) - 1
                paths[i, j] = res['path']
            else:
                cost[i, j] = math.inf
                paths[i, j] = []
    return cost, paths, explored


def solve_treasure_hunt(grid,
                        start: PointLike,
                        goal: PointLike,
                        treasures: Sequence[PointLike],
                        planner: str = "a_star",
                        on_phase: Optional[Callable[[str], None]] = None,
                        on_explore: Optional[Callable[[Point, int], None]] = None,
                        on_route: Optional[RouteCallback] = None,
                        prune: bool = False) -> TreasureHuntResult:
    """
    Shortest walk start -> every treasure -> goal on a 4-connected grid.

    Parameters
    ----------
    grid : array-like (True = blocked) or list of ASCII rows
    start, goal : (x, y), must be free
    treasures : non-empty sequence of (x, y), each must be free
    planner : 'a_star' (exact legs) or 'greedy'
    on_phase, on_explore, on_route : optional observers
    prune : passed on to the backtracking search
    """
    grid = as_grid(grid)
    start = check_cell(grid, start, "start")
    goal = check_cell(grid, goal, "goal")
    if len(treasures) == 0:
        raise InvalidInputError("treasure hunt needs at least one treasure")
    treasure_pts = [check_cell(grid, t, f"treasure {i}") for i, t in enumerate(treasures)]

    def phase(name: str) -> None:
        logger.info("treasure hunt: %s", name)
        if on_phase is not None:
            on_phase(name)

    points = [start, *treasure_pts, goal]
    leg_planner = get_planner(planner, on_explore=on_explore)

    phase(PHASE_PREPROCESSING)
    cost, paths, explored = _leg_table(grid, points, leg_planner)
    result = TreasureHuntResult(cells_explored=explored)

    unreachable = [i for i in range(1, len(points)) if math.isinf(cost[0, i])]
    if unreachable:
        logger.info("treasure hunt: %d stop(s) unreachable from start", len(unreachable))
        return result

    phase(PHASE_OPTIMIZING)
    tour = find_best_order(len(treasure_pts),
                           lambda a, b: float(cost[a, b]),
                           on_route=on_route,
                           prune=prune)
    result.permutations_evaluated = tour.permutations_evaluated
    if math.isinf(tour.total_distance):
        return result

    phase(PHASE_EXECUTING)
    nodes = [0, *(i + 1 for i in tour.order), len(points) - 1]
    walk: List[Point] = [start]
    for a, b in zip(nodes[:-1], nodes[1:]):
        walk.extend(paths[a, b][1:])  # leg starts where the previous one ended

    result.order = tour.order
    result.total_distance = int(tour.total_distance)
    result.complete_path = walk
    result.found = True
    phase(PHASE_COMPLETE)
    return result
