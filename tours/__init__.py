# -*- coding: utf-8 -*-
"""
Visiting-order search.
- solve_tsp: Manhattan start -> waypoints -> goal, exhaustive backtracking
- solve_treasure_hunt: the same search over grid leg costs
"""

from __future__ import annotations

from .backtracking import TourResult, find_best_order, route_distance, solve_tsp
from .treasure_hunt import TreasureHuntResult, solve_treasure_hunt

__all__ = [
    "TourResult",
    "find_best_order",
    "route_distance",
    "solve_tsp",
    "TreasureHuntResult",
    "solve_treasure_hunt",
]
