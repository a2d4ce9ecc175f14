#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_grid.py
-----------
Greedy best-first search on a grid. Prints every cell as it is explored and
the final grid with the path marked (S start, G goal, * path).

Example:
  python -m cli.run_grid
  python -m cli.run_grid --random --size 15x15 --seed 3 --plot results/greedy.png
  python -m cli.run_grid --instance grid.json --planner a_star
"""

from __future__ import annotations

import argparse
import sys
from typing import Tuple

import numpy as np

import config
from cli.common import add_common_args, load_instance, parse_point, setup_logging
from envs.generator import generate_map
from envs.grid import InvalidInputError, as_grid, parse_ascii
from envs.render import plot_grid, render_ascii
from planners import PLANNERS, get_planner


def _parse_size(s: str) -> Tuple[int, int]:
    token = s.strip().lower()
    h, w = token.split("x")
    return int(h), int(w)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Greedy best-first grid pathfinding")
    ap.add_argument("--start", type=parse_point, default=None)
    ap.add_argument("--goal", type=parse_point, default=None)
    ap.add_argument("--planner", type=str, default="greedy", choices=sorted(PLANNERS))
    ap.add_argument("--random", action="store_true", help="Use a random map instead of the demo grid")
    ap.add_argument("--size", type=_parse_size, default=(config.MAP_ROWS, config.MAP_COLS),
                    help="Random map size HxW")
    ap.add_argument("--wall-prob", type=float, default=config.WALL_PROB)
    ap.add_argument("--seed", type=int, default=config.DEFAULT_SEED)
    ap.add_argument("--plot", type=str, default=None, help="Save a PNG of the result here")
    add_common_args(ap)
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        if args.instance:
            data = load_instance(args.instance)
            rows = data["grid"]
            if rows and all(isinstance(r, str) for r in rows):
                m = parse_ascii(rows)
                grid, start, goal = m.grid, data.get("start", m.start), data.get("goal", m.goal)
            else:
                grid = as_grid(rows)
                start, goal = data.get("start"), data.get("goal")
        elif args.random:
            H, W = args.size
            m = generate_map(H, W, wall_prob=args.wall_prob, rng=np.random.default_rng(args.seed))
            grid, start, goal = m.grid, m.start, m.goal
        else:
            grid = as_grid(config.GRID_ROWS)
            start, goal = config.GRID_START, config.GRID_GOAL
    except (OSError, KeyError, ValueError) as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    start = args.start or start
    goal = args.goal or goal
    if start is None or goal is None:
        print("Invalid input: start and goal are required", file=sys.stderr)
        return 2

    print(f"Grid search ({args.planner})")
    print(f"Start: {tuple(start)}, Goal: {tuple(goal)}\n")

    explored = []

    def on_explore(pos, h):
        explored.append(pos)
        if not args.quiet:
            print(f"Exploring {pos} -> h={h}")

    try:
        res = get_planner(args.planner, on_explore=on_explore).plan(grid, start, goal)
    except InvalidInputError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    if res['success']:
        path = res['path']
        print("\nGoal found! Reconstructing path...")
        print("\nFinal Path (S=start, G=goal, * = path):")
        print(render_ascii(grid, path=path, start=start, goal=goal))
        print(f"\nPath length = {len(path)}")
    else:
        path = None
        print("No path found!")
    print(f"Cells explored = {res['explored']}")

    if args.plot:
        title = f"{args.planner}: {'success' if res['success'] else 'fail'}"
        out = plot_grid(grid, args.plot, path=path, start=start, goal=goal,
                        explored=explored, title=title)
        print(f"Saved: {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
