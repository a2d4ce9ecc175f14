#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Console and matplotlib rendering of grids, paths and routes.
"""

from __future__ import annotations

import os
from typing import Iterable, Optional, Sequence

import numpy as np

from .grid import Point


def render_ascii(grid: np.ndarray,
                 path: Optional[Sequence[Point]] = None,
                 start: Optional[Point] = None,
                 goal: Optional[Point] = None,
                 treasures: Iterable[Point] = ()) -> str:
    """
    Text rendering, one row per line, cells separated by a space:
      S start, G goal, T treasure, * path, # blocked, . free
    """
    H, W = grid.shape
    cells = [["#" if grid[y, x] else "." for x in range(W)] for y in range(H)]
    for p in path or ():
        cells[p[1]][p[0]] = "*"
    for p in treasures:
        cells[p[1]][p[0]] = "T"
    if start is not None:
        cells[start[1]][start[0]] = "S"
    if goal is not None:
        cells[goal[1]][goal[0]] = "G"
    return "\n".join(" ".join(row) for row in cells)


def format_route(order: Sequence[int], labels: Optional[Sequence[str]] = None) -> str:
    """'Start -> T2 -> T1 -> Goal' for a permutation of waypoint indices."""
    names = [labels[i] if labels else f"T{i + 1}" for i in order]
    return " -> ".join(["Start", *names, "Goal"])


def plot_grid(grid: np.ndarray,
              out_path: str,
              path: Optional[Sequence[Point]] = None,
              start: Optional[Point] = None,
              goal: Optional[Point] = None,
              treasures: Iterable[Point] = (),
              explored: Iterable[Point] = (),
              title: Optional[str] = None) -> str:
    """Save a PNG of the grid with explored cells, path and markers. Returns out_path."""
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    H, W = grid.shape
    rgb = np.ones((H, W, 3), dtype=float)
    for p in explored:
        rgb[p[1], p[0]] = (0.80, 0.88, 1.0)
    rgb[grid] = 0.2

    fig, ax = plt.subplots(figsize=(max(3, W / 2), max(3, H / 2)), dpi=120)
    ax.imshow(rgb, interpolation="nearest", origin="upper")
    ax.set_xticks([]); ax.set_yticks([])

    if path:
        xs, ys = zip(*path)
        ax.plot(xs, ys, color="lime", lw=2, alpha=0.9)
    for t in treasures:
        ax.plot(t[0], t[1], marker="D", markersize=7, markeredgecolor="k", markerfacecolor="gold", lw=0)
    if start is not None:
        ax.plot(start[0], start[1], marker="*", markersize=12, markeredgecolor="k", markerfacecolor="lime", lw=0)
    if goal is not None:
        ax.plot(goal[0], goal[1], marker="*", markersize=12, markeredgecolor="k", markerfacecolor="red", lw=0)
    if title:
        ax.set_title(title, fontsize=10)

    fig.tight_layout()
    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    fig.savefig(out_path, bbox_inches="tight")
    plt.close(fig)
    return out_path
