#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Greedy best-first planner for 4-connected grid maps.
- Obstacles are True in `grid`; free space is False.
- Frontier is ranked by the Manhattan heuristic ONLY (no path cost), so the
  path found is not necessarily the shortest one. That is what makes it greedy.
- Stale frontier duplicates are discarded when popped (lazy deletion).

solve_grid_path(...) -> GridPathResult(path, cells_explored, found)
GreedyBestFirstPlanner().plan(...) -> {'success': bool, 'path': list or None, 'explored': int}
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from envs.grid import Point, as_grid, check_cell, manhattan, neighbors4

logger = logging.getLogger(__name__)

ExploreCallback = Callable[[Point, int], None]


@dataclass
class GridPathResult:
    path: List[Point] = field(default_factory=list)
    cells_explored: int = 0
    found: bool = False


def _reconstruct(came_from: Dict[Point, Optional[Point]], goal: Point) -> List[Point]:
    path: List[Point] = []
    curr: Optional[Point] = goal
    while curr is not None:
        path.append(curr)
        curr = came_from[curr]
    path.reverse()
    return path


def greedy_search(grid: np.ndarray,
                  start: Point,
                  goal: Point,
                  on_explore: Optional[ExploreCallback] = None) -> GridPathResult:
    """Core loop on an already-validated grid/start/goal."""
    tie = itertools.count()  # first-encountered wins among equal heuristics
    open_set: List[Tuple[int, int, Point, Optional[Point]]] = []
    heapq.heappush(open_set, (manhattan(start, goal), next(tie), start, None))

    visited = np.zeros(grid.shape, dtype=bool)
    came_from: Dict[Point, Optional[Point]] = {}
    explored = 0

    while open_set:
        h, _, current, parent = heapq.heappop(open_set)
        if visited[current.y, current.x]:
            continue

        visited[current.y, current.x] = True
        came_from[current] = parent
        explored += 1
        if on_explore is not None:
            on_explore(current, h)

        if current == goal:
            path = _reconstruct(came_from, goal)
            logger.debug("greedy: goal %s reached, path=%d explored=%d", goal, len(path), explored)
            return GridPathResult(path=path, cells_explored=explored, found=True)

        for n in neighbors4(grid, current):
            if not visited[n.y, n.x]:
                heapq.heappush(open_set, (manhattan(n, goal), next(tie), n, current))

    logger.debug("greedy: no path from %s to %s, explored=%d", start, goal, explored)
    return GridPathResult(path=[], cells_explored=explored, found=False)


def solve_grid_path(grid,
                    start,
                    goal,
                    on_explore: Optional[ExploreCallback] = None) -> GridPathResult:
    """
    Greedy best-first search from start to goal.

    Parameters
    ----------
    grid : array-like
        (H, W) bool-like array (True = blocked) or list of ASCII rows.
    start, goal : (x, y)
        Must be in bounds and free, otherwise InvalidInputError is raised.
    on_explore : callable, optional
        Called as on_explore(position, heuristic) for every cell dequeued and
        marked visited, in exploration order.

    Returns
    -------
    GridPathResult. found=False with an empty path when the goal is unreachable.
    """
    grid = as_grid(grid)
    start = check_cell(grid, start, "start")
    goal = check_cell(grid, goal, "goal")
    return greedy_search(grid, start, goal, on_explore)


class GreedyBestFirstPlanner:
    """Registry-style wrapper: plan(grid, start, goal) -> dict."""

    name = "greedy"

    def __init__(self, on_explore: Optional[ExploreCallback] = None):
        self.on_explore = on_explore

    def plan(self, grid: np.ndarray, start: Point, goal: Point) -> Dict:
        res = solve_grid_path(grid, start, goal, self.on_explore)
        return {
            'success': res.found,
            'path': res.path if res.found else None,
            'explored': res.cells_explored,
        }
