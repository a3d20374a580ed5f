import logging
from typing import Dict, Optional, Type, Union

from pathsandbox.entities.grid import Grid
from pathsandbox.pathfinding.astar import AStar
from pathsandbox.pathfinding.bfs import BreadthFirstSearch
from pathsandbox.pathfinding.dijkstra import Dijkstra
from pathsandbox.utils.enums import Strategy
from pathsandbox.utils.types import Position, SearchResult

logger = logging.getLogger(__name__)

PathFinder = Union[BreadthFirstSearch, Dijkstra, AStar]

STRATEGIES: Dict[Strategy, Type[PathFinder]] = {
    Strategy.BFS: BreadthFirstSearch,
    Strategy.DIJKSTRA: Dijkstra,
    Strategy.ASTAR: AStar,
}


def find_path(strategy: Strategy, grid: Grid, start: Position, goal: Position) -> Optional[SearchResult]:
    """
    Run `strategy` from start to goal over the grid's current state.
    Returns None when the goal is unreachable.
    """
    finder = STRATEGIES[strategy](grid)
    result = finder.search(start, goal)
    if result is None:
        logger.info("%s: no path from %r to %r", finder.name, start, goal)
    else:
        logger.info(
            "%s: path of %d cells, cost %d", finder.name, len(result.path), result.cost
        )
    return result

