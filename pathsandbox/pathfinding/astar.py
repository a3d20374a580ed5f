from typing import Optional

from pathsandbox.entities.grid import Grid
from pathsandbox.pathfinding.frontier import best_first_search
from pathsandbox.utils.types import Position, SearchResult


class AStar:
    """
    A* over the grid's successor function.

    Heuristic is Manhattan distance on 4-connected grids. On 8-connected
    grids a diagonal move covers a Manhattan distance of 2 for a cost of at
    least 1, so Manhattan would overestimate; Chebyshev distance is used
    there instead and stays admissible because every cell costs >= 1.
    """

    name = "A*"

    def __init__(self, grid: Grid):
        self.grid = grid

    def heuristic(self, current: Position, goal: Position) -> int:
        if self.grid.allow_diagonals:
            return current.chebyshev(goal)
        return current.distance(goal)

    def search(self, start: Position, goal: Position) -> Optional[SearchResult]:
        return best_first_search(
            self.grid, start, goal, lambda p: self.heuristic(p, goal)
        )
