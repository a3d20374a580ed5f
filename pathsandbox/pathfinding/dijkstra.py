from typing import Optional

from pathsandbox.entities.grid import Grid
from pathsandbox.pathfinding.frontier import best_first_search
from pathsandbox.utils.types import Position, SearchResult


class Dijkstra:
    """Minimum total entered-cost path. Equal costs pop in discovery order."""

    name = "Dijkstra"

    def __init__(self, grid: Grid):
        self.grid = grid

    def search(self, start: Position, goal: Position) -> Optional[SearchResult]:
        return best_first_search(self.grid, start, goal, lambda _p: 0)
