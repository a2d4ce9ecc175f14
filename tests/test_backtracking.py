#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import itertools
import math

import numpy as np
import pytest

import config
from envs.grid import InvalidInputError, manhattan
from tours.backtracking import find_best_order, route_distance, solve_tsp


def _oracle(start, goal, waypoints):
    best = None
    for perm in itertools.permutations(range(len(waypoints))):
        d = route_distance(start, goal, waypoints, perm)
        if best is None or d < best:
            best = d
    return best


def test_demo_instance_matches_brute_force():
    res = solve_tsp(config.TSP_START, config.TSP_GOAL, config.TSP_WAYPOINTS)
    assert res.permutations_evaluated == 24
    assert sorted(res.order) == [0, 1, 2, 3]
    assert res.total_distance == _oracle(config.TSP_START, config.TSP_GOAL, config.TSP_WAYPOINTS)
    assert res.total_distance == route_distance(config.TSP_START, config.TSP_GOAL,
                                                config.TSP_WAYPOINTS, res.order)


@pytest.mark.parametrize("n", range(0, 7))
def test_evaluates_n_factorial_orders(n):
    rng = np.random.default_rng(n)
    wps = [tuple(int(v) for v in rng.integers(0, 20, size=2)) for _ in range(n)]
    res = solve_tsp((0, 0), (19, 19), wps)
    assert res.permutations_evaluated == math.factorial(n)
    assert res.total_distance == route_distance((0, 0), (19, 19), wps, res.order)
    assert res.total_distance == _oracle((0, 0), (19, 19), wps)


def test_no_waypoints_goes_direct():
    res = solve_tsp((1, 2), (4, 8), [])
    assert res.order == []
    assert res.total_distance == manhattan((1, 2), (4, 8))
    assert res.permutations_evaluated == 1


def test_ties_keep_first_order():
    # both orders cost 4; the first one enumerated wins
    res = solve_tsp((0, 0), (0, 0), [(1, 0), (2, 0)])
    assert res.total_distance == 4
    assert res.order == [0, 1]


def test_duplicate_waypoints_are_distinct_stops():
    res = solve_tsp((0, 0), (3, 3), [(1, 1), (1, 1)])
    assert res.permutations_evaluated == 2
    assert sorted(res.order) == [0, 1]
    assert res.total_distance == 6


def test_observer_is_called_for_every_route():
    calls = []
    res = solve_tsp(config.TSP_START, config.TSP_GOAL, config.TSP_WAYPOINTS,
                    on_route=lambda order, d, is_best: calls.append((tuple(order), d, is_best)))
    assert len(calls) == 24
    assert len({c[0] for c in calls}) == 24
    assert calls[0][2] is True
    assert calls[0][0] == (0, 1, 2, 3)
    best_calls = [c for c in calls if c[2]]
    assert best_calls[-1][0] == tuple(res.order)
    assert min(c[1] for c in calls) == res.total_distance


def test_prune_keeps_best_distance():
    rng = np.random.default_rng(9)
    wps = [tuple(int(v) for v in rng.integers(0, 30, size=2)) for _ in range(7)]
    full = solve_tsp((0, 0), (29, 29), wps)
    pruned = solve_tsp((0, 0), (29, 29), wps, prune=True)
    assert pruned.total_distance == full.total_distance
    assert 1 <= pruned.permutations_evaluated <= full.permutations_evaluated


def test_rejects_bad_points():
    with pytest.raises(InvalidInputError):
        solve_tsp((0, 0), (1, 1), [(0.5, 1)])
    with pytest.raises(InvalidInputError):
        solve_tsp("start", (1, 1), [])


def test_find_best_order_skips_impassable_legs():
    inf = math.inf
    # nodes: 0 start, 1..2 stops, 3 goal; stop 1 -> stop 2 is impassable
    cost = [[0, 1, 5, inf],
            [1, 0, inf, 9],
            [5, 2, 0, 1],
            [inf, 9, 1, 0]]
    res = find_best_order(2, lambda a, b: cost[a][b])
    assert res.order == [1, 0]
    assert res.total_distance == 5 + 2 + 9
    assert res.permutations_evaluated == 1


def test_find_best_order_with_no_route():
    res = find_best_order(1, lambda a, b: math.inf)
    assert res.order == []
    assert math.isinf(res.total_distance)
    assert res.permutations_evaluated == 0


def test_find_best_order_keyword_call_uses_stop_indices():
    xs = [0, 3, 1, 2, 4]  # start, three stops, goal along one row
    routes = []
    res = find_best_order(n_stops=3, distance=lambda a, b: abs(xs[a] - xs[b]),
                          on_route=lambda order, d, is_best: routes.append(order), prune=False)
    assert res.order == [1, 2, 0]
    assert res.total_distance == 4
    assert res.permutations_evaluated == len(routes) == 6
    assert sorted(map(sorted, routes)) == [[0, 1, 2]] * 6
