# IN THIS FILE: ALL CONSTANTS (DEFAULT SANDBOX LAYOUT)

# -----------------------------------------------------------------------------
# 1. GRID DIMENSIONS
# -----------------------------------------------------------------------------
MAP_WIDTH = 64          # cells
MAP_HEIGHT = 64         # cells
ALLOW_DIAGONALS = False # 4-connected by default

# -----------------------------------------------------------------------------
# 2. CELL COSTS
# -----------------------------------------------------------------------------
# Cost of entering a cell. An unset cell is stored as UNSET_COST and is
# traversed as if it cost UNSET_TRAVERSAL_COST.
DEFAULT_COST = 1
MIN_COST = 1
UNSET_COST = 0
UNSET_TRAVERSAL_COST = 1

# -----------------------------------------------------------------------------
# 3. DEFAULT MARKERS
# -----------------------------------------------------------------------------
DEFAULT_START = (16, 32)
DEFAULT_GOAL = (48, 32)

# -----------------------------------------------------------------------------
# 4. NEIGHBOURHOOD
# -----------------------------------------------------------------------------
# Row-major scan of the 3x3 neighbourhood (dy outer, dx inner).
# BFS tie-breaking depends on this order.
NEIGHBOR_OFFSETS = [
    (dx, dy)
    for dy in (-1, 0, 1)
    for dx in (-1, 0, 1)
    if not (dx == 0 and dy == 0)
]

# -----------------------------------------------------------------------------
# 5. SERVER
# -----------------------------------------------------------------------------
SERVER_HOST = "0.0.0.0"
SERVER_PORT = 5000
ENV_PREFIX = "SANDBOX_"
