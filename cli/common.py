# -*- coding: utf-8 -*-
"""
Shared argparse helpers: point parsing, JSON instances, logging setup.
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Dict, List, Tuple

from envs.grid import InvalidInputError


def parse_point(s: str) -> Tuple[int, int]:
    """'3,4' -> (3, 4)"""
    try:
        x, y = s.strip().strip("()").split(",")
        return int(x), int(y)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected 'x,y', got {s!r}")


def parse_points(s: str) -> List[Tuple[int, int]]:
    """'2,3;7,2' -> [(2, 3), (7, 2)]; empty string -> []"""
    return [parse_point(tok) for tok in s.split(";") if tok.strip()]


def load_instance(path: str) -> Dict:
    """
    Load a JSON problem instance. Recognised keys:
      start, goal: [x, y]
      waypoints / treasures: [[x, y], ...]
      grid: ["..#.", ...] or [[0, 1, ...], ...]
    """
    with open(path, "r") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise InvalidInputError(f"{path}: expected a JSON object")
    try:
        for key in ("start", "goal"):
            if key in data:
                data[key] = tuple(data[key])
        for key in ("waypoints", "treasures"):
            if key in data:
                data[key] = [tuple(p) for p in data[key]]
    except TypeError as e:
        raise InvalidInputError(f"{path}: points must be [x, y] lists ({e})") from e
    if "grid" in data and not isinstance(data["grid"], list):
        raise InvalidInputError(f"{path}: grid must be a list of rows")
    return data


def add_common_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--instance", type=str, default=None,
                    help="JSON file with the problem instance (overrides the demo)")
    ap.add_argument("--quiet", action="store_true", help="Only print the final result")
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
