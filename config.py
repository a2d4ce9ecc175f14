"""
Route-planning demos - Configuration
Demo instances and defaults shared by the CLIs.
"""

# ==================== Permutation search demo ====================
TSP_START = (0, 0)
TSP_GOAL = (10, 10)
TSP_WAYPOINTS = [(2, 3), (7, 2), (5, 8), (9, 5)]  # T1..T4

# ==================== Greedy grid search demo ====================
# '#' = blocked, '.' = free; start top-left, goal bottom-right
GRID_ROWS = [
    "........",
    "..###...",
    "..#.....",
    "..#..##.",
    ".....##.",
    "###.....",
    "........",
    "........",
]
GRID_START = (0, 0)
GRID_GOAL = (7, 7)

# ==================== Random maps ====================
MAP_ROWS = 12
MAP_COLS = 12
WALL_PROB = 0.4
DEFAULT_SEED = 0

# ==================== Output ====================
OUT_DIR = "results"
