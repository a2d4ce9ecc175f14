#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A* path planner for 4-connected grid maps.
- Obstacles are True in `grid`; free space is False.
- Heuristic: Manhattan (admissible for unit 4-connected moves).
- Edge costs: 1 per step, so `cost` is the optimal number of moves.

Used by the treasure-hunt solver to get exact leg costs between stops.
on_explore(position, heuristic) gets the Manhattan distance to goal, not f = g + h.

Returns {'success': bool, 'path': list[Point] or None, 'cost': int or inf, 'explored': int}.
"""

from __future__ import annotations

import heapq
import itertools
import math
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from envs.grid import Point, as_grid, check_cell, manhattan, neighbors4


class AStarPlanner:
    name = "a_star"

    def __init__(self, on_explore: Optional[Callable[[Point, int], None]] = None):
        self.on_explore = on_explore

    @staticmethod
    def _reconstruct(came_from: Dict[Point, Point], start: Point, goal: Point) -> List[Point]:
        path = [goal]
        curr = goal
        while curr != start:
            curr = came_from[curr]
            path.append(curr)
        path.reverse()
        return path

    def plan(self, grid: np.ndarray, start: Point, goal: Point) -> Dict:
        grid = as_grid(grid)
        start = check_cell(grid, start, "start")
        goal = check_cell(grid, goal, "goal")

        g = np.full(grid.shape, np.iinfo(np.int64).max, dtype=np.int64)
        closed = np.zeros(grid.shape, dtype=bool)
        came_from: Dict[Point, Point] = {}
        explored = 0

        tie = itertools.count()
        g[start.y, start.x] = 0
        pq: List[Tuple[int, int, Point]] = []
        heapq.heappush(pq, (manhattan(start, goal), next(tie), start))

        while pq:
            _, _, current = heapq.heappop(pq)

            # Skip if already processed
            if closed[current.y, current.x]:
                continue
            closed[current.y, current.x] = True
            explored += 1
            if self.on_explore is not None:
                self.on_explore(current, manhattan(current, goal))

            if current == goal:
                return {
                    'success': True,
                    'path': self._reconstruct(came_from, start, goal),
                    'cost': int(g[goal.y, goal.x]),
                    'explored': explored,
                }

            for n in neighbors4(grid, current):
                if closed[n.y, n.x]:
                    continue
                tentative_g = g[current.y, current.x] + 1
                if tentative_g < g[n.y, n.x]:
                    g[n.y, n.x] = tentative_g
                    came_from[n] = current
                    heapq.heappush(pq, (int(tentative_g) + manhattan(n, goal), next(tie), n))

        return {'success': False, 'path': None, 'cost': math.inf, 'explored': explored}
