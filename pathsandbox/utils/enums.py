# IN THIS FILE: PLACEMENT MODES, STRATEGIES, SESSION STATES, CELL VISUALS
from enum import Enum


class PlacementMode(str, Enum):
    """
    What a click on the grid does.
    Value is the wire name used by the command protocol.
    """
    EDIT_PATH = "edit_path"
    EDIT_OBSTACLE = "edit_obstacle"
    EDIT_START = "edit_start"
    EDIT_GOAL = "edit_goal"
    INCREASE_COST = "increase_cost"
    DECREASE_COST = "decrease_cost"

    @property
    def is_edit(self) -> bool:
        return self in (
            PlacementMode.EDIT_PATH,
            PlacementMode.EDIT_OBSTACLE,
            PlacementMode.EDIT_START,
            PlacementMode.EDIT_GOAL,
        )

    @property
    def is_cost(self) -> bool:
        return self in (PlacementMode.INCREASE_COST, PlacementMode.DECREASE_COST)

    @property
    def cost_delta(self) -> int:
        """+1 for IncreaseCost, -1 for DecreaseCost, 0 for the edit modes."""
        if self == PlacementMode.INCREASE_COST:
            return 1
        if self == PlacementMode.DECREASE_COST:
            return -1
        return 0


class Strategy(str, Enum):
    """
    Shortest-path algorithm selected by the session.
    Declaration order is the cycle order of the strategy selector.
    """
    ASTAR = "astar"
    BFS = "bfs"
    DIJKSTRA = "dijkstra"

    @property
    def weighted(self) -> bool:
        """BFS ignores cell costs, so cost overlays are hidden for it."""
        return self != Strategy.BFS

    def cycle(self, offset: int) -> "Strategy":
        """
        Step `offset` places through the selector, wrapping at both ends.

        Examples:
            BFS.cycle(1)    -> DIJKSTRA
            DIJKSTRA.cycle(1) -> ASTAR
            ASTAR.cycle(-1) -> DIJKSTRA
        """
        members = list(Strategy)
        return members[(members.index(self) + offset) % len(members)]


class SessionState(str, Enum):
    DIRTY = "dirty"
    SOLVED = "solved"


class CellVisual(str, Enum):
    """Visual state of one cell, in increasing precedence."""
    OPEN = "open"
    BLOCKED = "blocked"
    PATH = "path"
    START = "start"
    GOAL = "goal"
