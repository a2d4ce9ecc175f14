#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
backtracking.py
---------------
Exhaustive visiting-order search: start -> every stop exactly once -> goal.

Depth-first enumeration over the unvisited stops with a visited mask, the
order chosen so far, the accumulated distance and the current position.
At full depth the leg to the goal is added and the route is compared with the
best one using strict '<', so ties keep the earliest order found.

Without pruning every one of the N! orders is evaluated (0! = 1: the direct
start -> goal route). With prune=True partial routes that already cost at least
the best complete route are cut; the best distance is the same, only the
number of evaluated routes drops.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from envs.grid import Point, PointLike, as_point, manhattan

logger = logging.getLogger(__name__)

RouteCallback = Callable[[List[int], float, bool], None]
DistanceFn = Callable[[int, int], float]


@dataclass
class TourResult:
    order: List[int] = field(default_factory=list)   # permutation of stop indices
    total_distance: float = math.inf
    permutations_evaluated: int = 0


def find_best_order(n_stops: int,
                    distance: DistanceFn,
                    on_route: Optional[RouteCallback] = None,
                    prune: bool = False) -> TourResult:
    """
    Backtracking over an abstract leg-distance function.

    Nodes are numbered 0 = start, 1..n_stops = stops, n_stops + 1 = goal, and
    distance(a, b) gives the leg cost between two nodes. Legs of cost inf are
    treated as impassable and their branches are skipped, so the result can
    keep total_distance == inf when no complete route exists.

    The returned order holds 0-based stop indices (node - 1).
    """
    goal = n_stops + 1
    visited = [False] * n_stops
    order: List[int] = []
    best = TourResult()

    def backtrack(current: int, dist_so_far: float) -> None:
        if len(order) == n_stops:
            leg = distance(current, goal)
            if math.isinf(leg):
                return
            total = dist_so_far + leg
            best.permutations_evaluated += 1
            is_best = total < best.total_distance
            if is_best:
                best.total_distance = total
                best.order = list(order)
            if on_route is not None:
                on_route(list(order), total, is_best)
            return

        for i in range(n_stops):
            if visited[i]:
                continue
            leg = distance(current, i + 1)
            if math.isinf(leg):
                continue
            if prune and dist_so_far + leg >= best.total_distance:
                continue

            visited[i] = True
            order.append(i)
            backtrack(i + 1, dist_so_far + leg)
            order.pop()
            visited[i] = False

    backtrack(0, 0)
    logger.debug("backtracking: %d stops, %d routes evaluated, best=%s",
                 n_stops, best.permutations_evaluated, best.total_distance)
    return best


def solve_tsp(start: PointLike,
              goal: PointLike,
              waypoints: Sequence[PointLike],
              on_route: Optional[RouteCallback] = None,
              prune: bool = False) -> TourResult:
    """
    Shortest Manhattan route start -> all waypoints (any order) -> goal.

    Parameters
    ----------
    start, goal : (x, y)
    waypoints : sequence of (x, y)
        Duplicate coordinates are allowed; each entry is its own index.
    on_route : callable, optional
        on_route(order, distance, is_best) for every complete route evaluated.
    prune : bool
        Enable the branch-and-bound cut (see module docstring).

    Returns
    -------
    TourResult(order, total_distance, permutations_evaluated); total_distance
    is an int for point inputs.
    """
    nodes: List[Point] = [as_point(start, "start")]
    nodes += [as_point(w, f"waypoint {i}") for i, w in enumerate(waypoints)]
    nodes.append(as_point(goal, "goal"))

    res = find_best_order(len(nodes) - 2,
                          lambda a, b: manhattan(nodes[a], nodes[b]),
                          on_route=on_route,
                          prune=prune)
    res.total_distance = int(res.total_distance)
    return res


def route_distance(start: PointLike, goal: PointLike,
                   waypoints: Sequence[PointLike], order: Sequence[int]) -> int:
    """Sum of Manhattan legs along start -> waypoints[order...] -> goal."""
    stops = [start, *(waypoints[i] for i in order), goal]
    return sum(manhattan(a, b) for a, b in zip(stops[:-1], stops[1:]))
