import heapq
import itertools
from typing import Callable, Dict, List, Optional

from pathsandbox.entities.grid import Grid
from pathsandbox.utils.types import Position, SearchResult


class SearchNode:
    """
    Heap entry for the priority frontier.
    Ordered by f_cost, then by discovery sequence so that equal priorities
    pop in insertion order.
    """

    __slots__ = ("position", "g_cost", "h_cost", "f_cost", "seq")

    def __init__(self, position: Position, g_cost: int, h_cost: int, seq: int):
        self.position = position
        self.g_cost = g_cost
        self.h_cost = h_cost
        self.f_cost = g_cost + h_cost
        self.seq = seq

    def __lt__(self, other: "SearchNode") -> bool:
        return (self.f_cost, self.seq) < (other.f_cost, other.seq)

    def __repr__(self) -> str:
        return f"SearchNode({self.position!r}, g={self.g_cost}, h={self.h_cost})"


def reconstruct_path(parents: Dict[Position, Position], start: Position, goal: Position) -> List[Position]:
    path = [goal]
    while path[-1] != start:
        path.append(parents[path[-1]])
    return path[::-1]


def best_first_search(
    grid: Grid,
    start: Position,
    goal: Position,
    heuristic: Callable[[Position], int],
) -> Optional[SearchResult]:
    """
    Uniform-cost search ranked by g + heuristic(position).
    With a zero heuristic this is Dijkstra; with an admissible one it is A*.
    The goal is accepted when popped, not when first pushed.
    """
    if start == goal:
        return SearchResult([start], 0)
    # A blocked start has no moves out of it
    if grid.is_blocked(start):
        return None

    counter = itertools.count()
    open_set = [SearchNode(start, 0, heuristic(start), next(counter))]
    g_scores: Dict[Position, int] = {start: 0}
    parents: Dict[Position, Position] = {}
    closed_set = set()

    while open_set:
        node = heapq.heappop(open_set)
        curr = node.position

        if curr in closed_set:
            continue
        # Stale entry: a cheaper route to curr was pushed after this one
        if node.g_cost != g_scores[curr]:
            continue

        if curr == goal:
            return SearchResult(reconstruct_path(parents, start, goal), node.g_cost)

        closed_set.add(curr)

        for successor in grid.get_successors(curr):
            nxt = successor.position
            if nxt in closed_set:
                continue
            tentative_g = node.g_cost + successor.cost
            if nxt not in g_scores or tentative_g < g_scores[nxt]:
                g_scores[nxt] = tentative_g
                parents[nxt] = curr
                heapq.heappush(open_set, SearchNode(nxt, tentative_g, heuristic(nxt), next(counter)))

    return None
