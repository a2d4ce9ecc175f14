# -*- coding: utf-8 -*-
"""
Grid primitives, random maps and rendering.
Exposes:
- Point, manhattan, InvalidInputError
- as_point / as_grid / check_cell validation helpers
- parse_ascii, has_path (reachability oracle)
- generate_map (random treasure-hunt maps)
- render_ascii / format_route / plot_grid
"""

from __future__ import annotations

from .grid import (
    AsciiMap,
    InvalidInputError,
    Point,
    as_grid,
    as_point,
    check_cell,
    has_path,
    manhattan,
    neighbors4,
    parse_ascii,
)
from .generator import RandomMap, generate_map
from .render import format_route, plot_grid, render_ascii

__all__ = [
    "AsciiMap",
    "InvalidInputError",
    "Point",
    "as_grid",
    "as_point",
    "check_cell",
    "has_path",
    "manhattan",
    "neighbors4",
    "parse_ascii",
    "RandomMap",
    "generate_map",
    "format_route",
    "plot_grid",
    "render_ascii",
]
