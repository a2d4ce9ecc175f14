#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_benchmark.py
----------------
Greedy best-first vs. A* on random maps:
- Generates maps across (sizes x seeds)
- Runs both planners start -> goal
- Records success, time, path length and cells explored
- Writes rows to CSV and prints a summary

Example:
  python -m cli.run_benchmark --sizes 10x10,20x20 --num-maps 50 --outdir results/csv
"""

from __future__ import annotations

import argparse
import csv
import os
import sys
import time
from typing import Dict, List

import numpy as np
from tqdm import tqdm

import config
from cli.common import setup_logging
from cli.run_grid import _parse_size
from envs.generator import generate_map
from planners import PLANNERS, get_planner

FIELDS = ["planner", "H", "W", "wall_prob", "seed", "success",
          "time_s", "path_len", "explored"]


def run_case(name: str, m, seed: int) -> Dict:
    planner = get_planner(name)
    t0 = time.perf_counter()
    out = planner.plan(m.grid, m.start, m.goal)
    t1 = time.perf_counter()
    H, W = m.shape
    return {
        "planner": name,
        "H": H, "W": W,
        "wall_prob": m.settings["wall_prob"],
        "seed": seed,
        "success": int(out["success"]),
        "time_s": t1 - t0,
        "path_len": len(out["path"]) if out["success"] else 0,
        "explored": out["explored"],
    }


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Benchmark greedy best-first against A*")
    ap.add_argument("--sizes", type=str, default="10x10,20x20")
    ap.add_argument("--wall-prob", type=float, default=config.WALL_PROB)
    ap.add_argument("--num-maps", type=int, default=20)
    ap.add_argument("--seed", type=int, default=config.DEFAULT_SEED)
    ap.add_argument("--outdir", type=str, default=os.path.join(config.OUT_DIR, "csv"))
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    sizes = [_parse_size(s) for s in args.sizes.split(",") if s.strip()]
    names = sorted(PLANNERS)
    rows: List[Dict] = []

    total = len(sizes) * args.num_maps
    with tqdm(total=total, desc="Maps") as pbar:
        for H, W in sizes:
            for k in range(args.num_maps):
                seed = args.seed + k
                m = generate_map(H, W, wall_prob=args.wall_prob, rng=np.random.default_rng(seed))
                for name in names:
                    rows.append(run_case(name, m, seed))
                pbar.update(1)

    os.makedirs(args.outdir, exist_ok=True)
    csv_path = os.path.join(args.outdir, "planner_benchmark.csv")
    with open(csv_path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        w.writerows(rows)
    print(f"Saved: {csv_path}")

    print(f"{'planner':8} {'size':>7} {'succ':>5} {'len':>7} {'explored':>9} {'time[ms]':>9}")
    for H, W in sizes:
        for name in names:
            sel = [r for r in rows if r["planner"] == name and r["H"] == H and r["W"] == W]
            ok = [r for r in sel if r["success"]]
            mean_len = np.mean([r["path_len"] for r in ok]) if ok else 0.0
            print(f"{name:8} {f'{H}x{W}':>7} {len(ok):5d} {mean_len:7.2f} "
                  f"{np.mean([r['explored'] for r in sel]):9.1f} "
                  f"{1000 * np.mean([r['time_s'] for r in sel]):9.3f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
