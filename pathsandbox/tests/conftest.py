import pytest

from pathsandbox.entities.grid import Grid
from pathsandbox.sandbox import Sandbox
from pathsandbox.utils.config import SandboxConfig
from pathsandbox.utils.types import Position

# 5x5, row y=2 is a corridor between walls at (1,1), (1,3), (3,1), (3,3):
#
#   y=0  . . . . .
#   y=1  . # . # .
#   y=2  S . . . G
#   y=3  . # . # .
#   y=4  . . . . .
CORRIDOR_WALLS = [(1, 1), (1, 3), (3, 1), (3, 3)]


def build_corridor(allow_diagonals: bool = False) -> Grid:
    grid = Grid(5, 5, allow_diagonals=allow_diagonals)
    for x, y in CORRIDOR_WALLS:
        grid.set_blocked(Position(x, y), True)
    return grid


@pytest.fixture
def corridor():
    return build_corridor()


@pytest.fixture
def small_config():
    return SandboxConfig(width=5, height=5, start=(0, 2), goal=(4, 2))


@pytest.fixture
def sandbox(small_config):
    return Sandbox(small_config)
