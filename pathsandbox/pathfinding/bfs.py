from collections import deque
from typing import Dict, List, Optional

from pathsandbox.entities.grid import Grid
from pathsandbox.pathfinding.frontier import reconstruct_path
from pathsandbox.utils.types import Position, SearchResult


class BreadthFirstSearch:
    """
    Fewest-edges path. Cell costs do not influence the search.

    FIFO frontier with a visited set; a cell's parent is fixed the first time
    it is discovered, so ties between equally short paths follow the grid's
    successor emission order. The reported cost is the true entered cost of
    the returned path.
    """

    name = "BFS"

    def __init__(self, grid: Grid):
        self.grid = grid

    def search(self, start: Position, goal: Position) -> Optional[SearchResult]:
        if start == goal:
            return SearchResult([start], 0)
        if self.grid.is_blocked(start):
            return None

        frontier = deque([start])
        visited = {start}
        parents: Dict[Position, Position] = {}
        entered: Dict[Position, int] = {}

        while frontier:
            curr = frontier.popleft()
            for successor in self.grid.get_successors(curr):
                nxt = successor.position
                if nxt in visited:
                    continue
                visited.add(nxt)
                parents[nxt] = curr
                entered[nxt] = successor.cost
                if nxt == goal:
                    path = reconstruct_path(parents, start, goal)
                    return SearchResult(path, self._path_cost(path, entered))
                frontier.append(nxt)

        return None

    @staticmethod
    def _path_cost(path: List[Position], entered: Dict[Position, int]) -> int:
        return sum(entered[p] for p in path[1:])
