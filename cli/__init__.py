# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m cli.<name>`):
- run_tsp            backtracking waypoint ordering
- run_grid           greedy best-first grid search
- run_treasure_hunt  grid legs + backtracking order
- run_benchmark      greedy vs. A* on random maps
"""
