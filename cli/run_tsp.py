#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_tsp.py
----------
Best visiting order for a handful of waypoints between a start and a goal,
by exhaustive backtracking. Prints every route tested and the best one.

Example:
  python -m cli.run_tsp
  python -m cli.run_tsp --start 0,0 --goal 10,10 --waypoints "2,3;7,2;5,8;9,5"
  python -m cli.run_tsp --instance tsp.json --prune --quiet
"""

from __future__ import annotations

import argparse
import sys

import config
from cli.common import add_common_args, load_instance, parse_point, parse_points, setup_logging
from envs.grid import InvalidInputError
from envs.render import format_route
from tours.backtracking import solve_tsp


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Waypoint ordering by backtracking (Manhattan distance)")
    ap.add_argument("--start", type=parse_point, default=config.TSP_START)
    ap.add_argument("--goal", type=parse_point, default=config.TSP_GOAL)
    ap.add_argument("--waypoints", type=parse_points, default=config.TSP_WAYPOINTS,
                    help="Semicolon-separated 'x,y' list, e.g. '2,3;7,2'")
    ap.add_argument("--prune", action="store_true",
                    help="Cut partial routes that cannot beat the best one. The per-route "
                         "trace then only lists the complete routes that were evaluated, "
                         "not all N! orderings")
    add_common_args(ap)
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    start, goal, waypoints = args.start, args.goal, args.waypoints
    if args.instance:
        try:
            data = load_instance(args.instance)
        except (OSError, ValueError) as e:
            print(f"Invalid input: {e}", file=sys.stderr)
            return 2
        start = data.get("start", start)
        goal = data.get("goal", goal)
        waypoints = data.get("waypoints", waypoints)

    print("=== Traveling Salesman Problem (Backtracking) ===")
    print(f"Start: {tuple(start)}, Goal: {tuple(goal)}\n")
    print("Waypoints:")
    for i, w in enumerate(waypoints):
        print(f"T{i + 1} -> {tuple(w)}")
    print()

    count = [0]

    def on_route(order, distance, is_best):
        count[0] += 1
        print(f"Route #{count[0]}: {format_route(order)} (Distance = {distance})")
        if is_best:
            print("  New best route found!")

    try:
        res = solve_tsp(start, goal, waypoints, on_route=None if args.quiet else on_route,
                        prune=args.prune)
    except InvalidInputError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    print("\n=== BEST ROUTE FOUND ===")
    print(format_route(res.order))
    print(f"Total Distance = {res.total_distance}")
    print(f"Routes Tested = {res.permutations_evaluated}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
