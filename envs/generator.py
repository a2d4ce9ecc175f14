#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
generator.py
------------
Random treasure-hunt maps.

- Start in the top-left corner, goal in the bottom-right corner.
- Walls are only placed in the interior, so the border ring is always free
  and start and goal are always connected.
- 2-3 treasures (unless n_treasures is given) on free interior cells.
- Reproducibility: explicit np.random.Generator.

Usage (quick smoke test):
    python3 -m envs.generator
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from .grid import InvalidInputError, Point, has_path

logger = logging.getLogger(__name__)

MAX_PLACEMENT_ATTEMPTS = 100


@dataclass
class RandomMap:
    grid: np.ndarray            # (H, W) bool array: True = blocked
    start: Point
    goal: Point
    treasures: List[Point]
    settings: Dict = field(default_factory=dict)   # generator settings (for provenance)

    @property
    def shape(self):
        return self.grid.shape


def generate_map(rows: int,
                 cols: int,
                 wall_prob: float = 0.4,
                 n_treasures: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None) -> RandomMap:
    """
    Build a random rows x cols map.

    Parameters
    ----------
    rows, cols : int
        Grid height and width; both must be >= 3 so there is an interior.
    wall_prob : float
        Probability that an interior cell becomes a wall.
    n_treasures : int, optional
        Number of treasures to place; defaults to a random 2 or 3. Fewer may be
        placed if the interior runs out of free cells.
    rng : np.random.Generator, optional
    """
    if rows < 3 or cols < 3:
        raise InvalidInputError(f"map must be at least 3x3, got {rows}x{cols}")
    if not 0.0 <= wall_prob <= 1.0:
        raise InvalidInputError(f"wall_prob must be in [0, 1], got {wall_prob}")
    rng = rng if rng is not None else np.random.default_rng()

    grid = np.zeros((rows, cols), dtype=bool)
    grid[1:-1, 1:-1] = rng.random((rows - 2, cols - 2)) < wall_prob

    start = Point(0, 0)
    goal = Point(cols - 1, rows - 1)

    if n_treasures is None:
        n_treasures = 2 + int(rng.integers(0, 2))

    treasures: List[Point] = []
    for _ in range(MAX_PLACEMENT_ATTEMPTS):
        if len(treasures) >= n_treasures:
            break
        p = Point(int(rng.integers(1, cols - 1)), int(rng.integers(1, rows - 1)))
        if not grid[p.y, p.x] and p not in treasures:
            treasures.append(p)

    if len(treasures) < n_treasures:
        logger.debug("placed %d of %d treasures", len(treasures), n_treasures)

    # The border is wall-free, so this only fails if the code above changes.
    assert has_path(grid, start, goal)

    return RandomMap(
        grid=grid,
        start=start,
        goal=goal,
        treasures=treasures,
        settings={"rows": rows, "cols": cols, "wall_prob": wall_prob,
                  "n_treasures": n_treasures},
    )


if __name__ == "__main__":
    from .render import render_ascii

    m = generate_map(10, 10, rng=np.random.default_rng(0))
    print(render_ascii(m.grid, start=m.start, goal=m.goal, treasures=m.treasures))
