#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
grid.py
-------
Points, occupancy grids and boundary validation shared by the planners and
the tour solvers.

Grid convention: grid[y, x] == True means blocked, False means free.
Points are (x, y) so that x is the column and y the row.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, NamedTuple, Optional, Sequence, Union

import numpy as np


class InvalidInputError(ValueError):
    """Raised when a problem instance is malformed (bad grid, bad start/goal...)."""


class Point(NamedTuple):
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


PointLike = Union[Point, Sequence[int]]

# Up, down, left, right
DELTAS_4 = ((0, -1), (0, 1), (-1, 0), (1, 0))

BLOCKED_CHARS = "#"
FREE_CHARS = ".SGT*"


def manhattan(a: PointLike, b: PointLike) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def as_point(p: PointLike, role: str = "point") -> Point:
    """Coerce an (x, y) pair into a Point; bools and floats are rejected."""
    try:
        x, y = p
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{role} must be an (x, y) pair, got {p!r}") from e
    for v in (x, y):
        if isinstance(v, (bool, np.bool_)) or not isinstance(v, (int, np.integer)):
            raise InvalidInputError(f"{role} coordinates must be integers, got {p!r}")
    return Point(int(x), int(y))


def as_grid(grid) -> np.ndarray:
    """
    Normalise a grid description into a (H, W) bool array.

    Accepts a numpy array, nested lists of 0/1/bool, or a list of ASCII rows
    ('#' blocked, anything in '.SGT*' free).
    """
    if isinstance(grid, np.ndarray):
        arr = grid
    else:
        if isinstance(grid, str):
            raise InvalidInputError("grid must be a list of rows, not a single string")
        try:
            rows = list(grid)
        except TypeError as e:
            raise InvalidInputError(f"grid must be a list of rows, got {type(grid).__name__}") from e
        if rows and all(isinstance(r, str) for r in rows):
            return parse_ascii(rows).grid
        try:
            arr = np.array(rows)
        except (TypeError, ValueError) as e:  # ragged nested lists
            raise InvalidInputError("grid rows must all have the same length") from e

    # 0/1, bool or numeric cells only; strings or objects would all cast to True
    if arr.dtype.kind not in "biuf":
        raise InvalidInputError(f"grid cells must be numeric or bool, got dtype {arr.dtype}")
    if arr.ndim != 2:
        raise InvalidInputError(f"grid must be 2-D, got shape {arr.shape}")
    H, W = arr.shape
    if H <= 0 or W <= 0:
        raise InvalidInputError(f"grid must be non-empty, got shape {arr.shape}")
    return arr.astype(bool, copy=False)


def in_bounds(grid: np.ndarray, p: PointLike) -> bool:
    H, W = grid.shape
    return 0 <= p[0] < W and 0 <= p[1] < H


def is_free(grid: np.ndarray, p: PointLike) -> bool:
    return in_bounds(grid, p) and not grid[p[1], p[0]]


def check_cell(grid: np.ndarray, p: PointLike, role: str = "cell") -> Point:
    p = as_point(p, role)
    if not in_bounds(grid, p):
        H, W = grid.shape
        raise InvalidInputError(f"{role} {p} is outside the {W}x{H} grid")
    if grid[p.y, p.x]:
        raise InvalidInputError(f"{role} {p} is blocked")
    return p


def neighbors4(grid: np.ndarray, p: Point) -> List[Point]:
    """In-bounds, unblocked 4-neighbours of p (up, down, left, right)."""
    out = []
    for dx, dy in DELTAS_4:
        q = Point(p.x + dx, p.y + dy)
        if is_free(grid, q):
            out.append(q)
    return out


def has_path(grid: np.ndarray, start: PointLike, goal: PointLike) -> bool:
    """
    Breadth-first flood fill over free cells; True if goal is 4-connected to start.
    Used as a reachability oracle independent of the planners.
    """
    start, goal = Point(*start), Point(*goal)
    if not (is_free(grid, start) and is_free(grid, goal)):
        return False

    visited = np.zeros_like(grid, dtype=bool)
    visited[start.y, start.x] = True
    q = [start]
    head = 0  # manual queue
    while head < len(q):
        p = q[head]
        head += 1
        if p == goal:
            return True
        for n in neighbors4(grid, p):
            if not visited[n.y, n.x]:
                visited[n.y, n.x] = True
                q.append(n)
    return False


@dataclass
class AsciiMap:
    """A grid parsed from text, with the S/G/T markers it contained."""
    grid: np.ndarray
    start: Optional[Point] = None
    goal: Optional[Point] = None
    treasures: List[Point] = field(default_factory=list)


def parse_ascii(rows: Iterable[str]) -> AsciiMap:
    """
    Parse rows like "..#.S" into an AsciiMap. Whitespace between cells is
    ignored, so both "..#" and ". . #" work.
    """
    cleaned = ["".join(r.split()) for r in rows]
    cleaned = [r for r in cleaned if r]
    if not cleaned:
        raise InvalidInputError("grid must be non-empty")
    W = len(cleaned[0])
    if any(len(r) != W for r in cleaned):
        raise InvalidInputError("grid rows must all have the same length")

    grid = np.zeros((len(cleaned), W), dtype=bool)
    out = AsciiMap(grid=grid)
    for y, row in enumerate(cleaned):
        for x, ch in enumerate(row):
            if ch in BLOCKED_CHARS:
                grid[y, x] = True
            elif ch not in FREE_CHARS:
                raise InvalidInputError(f"unknown grid character {ch!r} at ({x},{y})")
            elif ch == "S":
                out.start = Point(x, y)
            elif ch == "G":
                out.goal = Point(x, y)
            elif ch == "T":
                out.treasures.append(Point(x, y))
    return out
