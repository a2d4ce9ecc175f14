#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import csv
import json

import config
from cli import run_benchmark, run_grid, run_treasure_hunt, run_tsp
from tours.backtracking import solve_tsp


def test_run_tsp_demo(capsys):
    assert run_tsp.main([]) == 0
    out = capsys.readouterr().out
    best = solve_tsp(config.TSP_START, config.TSP_GOAL, config.TSP_WAYPOINTS)
    assert "Route #24:" in out
    assert f"Total Distance = {best.total_distance}" in out
    assert "Routes Tested = 24" in out


def test_run_tsp_from_instance(tmp_path, capsys):
    inst = tmp_path / "tsp.json"
    inst.write_text(json.dumps({"start": [0, 0], "goal": [4, 0], "waypoints": [[1, 0], [3, 0], [2, 0]]}))
    assert run_tsp.main(["--instance", str(inst), "--quiet"]) == 0
    out = capsys.readouterr().out
    assert "Route #" not in out
    assert "Start -> T1 -> T3 -> T2 -> Goal" in out
    assert "Total Distance = 4" in out
    assert "Routes Tested = 6" in out


def test_run_tsp_bad_instance(tmp_path, capsys):
    inst = tmp_path / "bad.json"
    inst.write_text(json.dumps({"start": [0, 0.5]}))
    assert run_tsp.main(["--instance", str(inst)]) == 2
    assert "Invalid input" in capsys.readouterr().err


def test_run_grid_demo(capsys):
    assert run_grid.main([]) == 0
    out = capsys.readouterr().out
    assert "Exploring (0,0) -> h=14" in out
    assert "Goal found!" in out
    assert "Cells explored = " in out


def test_run_grid_no_path_and_plot(tmp_path, capsys):
    inst = tmp_path / "grid.json"
    inst.write_text(json.dumps({"grid": ["..#..", "..#.."], "start": [0, 0], "goal": [4, 1]}))
    png = tmp_path / "out" / "grid.png"
    assert run_grid.main(["--instance", str(inst), "--quiet", "--plot", str(png)]) == 0
    out = capsys.readouterr().out
    assert "No path found!" in out
    assert "Cells explored = 4" in out
    assert png.exists()


def test_run_grid_blocked_start(capsys):
    assert run_grid.main(["--start", "2,1"]) == 2
    assert "blocked" in capsys.readouterr().err


def test_run_treasure_hunt_from_ascii_instance(tmp_path, capsys):
    inst = tmp_path / "hunt.json"
    inst.write_text(json.dumps({"grid": ["S..T",
                                         "###.",
                                         "T...",
                                         ".###",
                                         "...G"]}))
    assert run_treasure_hunt.main(["--instance", str(inst), "--quiet"]) == 0
    out = capsys.readouterr().out
    assert "Start -> T1 -> T2 -> Goal" in out
    assert "Total Distance = 13" in out
    assert "Routes Tested = 2" in out


def test_run_treasure_hunt_random(capsys):
    assert run_treasure_hunt.main(["--size", "8x8", "--seed", "2", "--planner", "greedy"]) == 0
    out = capsys.readouterr().out
    assert "--- preprocessing ---" in out


def test_run_benchmark_writes_csv(tmp_path, capsys):
    assert run_benchmark.main(["--sizes", "6x6", "--num-maps", "3", "--outdir", str(tmp_path)]) == 0
    with open(tmp_path / "planner_benchmark.csv") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 6
    assert {r["planner"] for r in rows} == {"a_star", "greedy"}
    assert all(r["success"] == "1" for r in rows)


def _write(tmp_path, name, data):
    inst = tmp_path / name
    inst.write_text(json.dumps(data))
    return str(inst)


def test_run_treasure_hunt_out_of_bounds_treasure(tmp_path, capsys):
    for treasure in ([9, 9], [-1, 0]):
        inst = _write(tmp_path, "hunt.json", {"grid": ["S...", "...G"], "treasures": [treasure]})
        assert run_treasure_hunt.main(["--instance", inst, "--quiet"]) == 2
        captured = capsys.readouterr()
        assert "outside" in captured.err
        assert captured.out == ""


def test_run_treasure_hunt_malformed_treasures(tmp_path, capsys):
    inst = _write(tmp_path, "hunt.json", {"grid": ["S...", "...G"], "treasures": 5})
    assert run_treasure_hunt.main(["--instance", inst]) == 2
    assert "Invalid input" in capsys.readouterr().err


def test_run_tsp_non_list_point(tmp_path, capsys):
    inst = _write(tmp_path, "tsp.json", {"start": 5})
    assert run_tsp.main(["--instance", inst]) == 2
    assert "Invalid input" in capsys.readouterr().err


def test_run_grid_non_list_grid(tmp_path, capsys):
    inst = _write(tmp_path, "grid.json", {"grid": 5, "start": [0, 0], "goal": [0, 0]})
    assert run_grid.main(["--instance", inst]) == 2
    assert "Invalid input" in capsys.readouterr().err


def test_run_grid_string_cells(tmp_path, capsys):
    inst = _write(tmp_path, "grid.json", {"grid": [["#", "."], [".", "."]], "start": [1, 0], "goal": [0, 1]})
    assert run_grid.main(["--instance", inst]) == 2
    assert "Invalid input" in capsys.readouterr().err


def test_run_grid_astar_trace_shows_heuristic(capsys):
    assert run_grid.main(["--planner", "a_star"]) == 0
    out = capsys.readouterr().out
    assert "Exploring (0,0) -> h=14" in out
    assert "Exploring (7,7) -> h=0" in out


def test_run_tsp_prune_help_mentions_partial_trace():
    help_text = " ".join(run_tsp.build_parser().format_help().split())
    assert "only lists the complete routes that were evaluated" in help_text
