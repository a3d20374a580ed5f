# IN THIS FILE: TRACKING EDIT MODE, MARKERS, SOLVED PATH & STEP CURSOR

from typing import List, Optional

from pathsandbox.utils.enums import PlacementMode, SessionState, Strategy
from pathsandbox.utils.types import Position, SearchResult


class Session:
    """
    Mutable state of one editing session.

    Dirty: no path (initial, and after any edit).
    Solved: the last solve succeeded; step indexes into path.
    """

    def __init__(
        self,
        start: Position,
        goal: Position,
        placement_mode: PlacementMode = PlacementMode.EDIT_OBSTACLE,
        strategy: Strategy = Strategy.BFS,
    ):
        """
        Args:
            start, goal: default markers, restored by clear_markers()
            placement_mode: initial edit mode
            strategy: initial search algorithm
        """
        self.default_start = start
        self.default_goal = goal
        self.start = start
        self.goal = goal
        self.placement_mode = placement_mode
        self.strategy = strategy
        self.path: List[Position] = []
        self.total_cost: Optional[int] = None
        self.step = 0

    @property
    def state(self) -> SessionState:
        return SessionState.SOLVED if self.path else SessionState.DIRTY

    @property
    def current_position(self) -> Optional[Position]:
        """Cell under the step cursor, None when Dirty."""
        return self.path[self.step] if self.path else None

    def is_marker(self, position: Position) -> bool:
        return position == self.start or position == self.goal

    def invalidate_path(self) -> None:
        self.path = []
        self.total_cost = None
        self.step = 0

    def store_result(self, result: SearchResult) -> None:
        self.path = list(result.path)
        self.total_cost = result.cost
        self.step = 0

    def advance_step(self) -> int:
        """Move the cursor forward, wrapping from the last cell back to 0."""
        if self.step < len(self.path) - 1:
            self.step += 1
        else:
            self.step = 0
        return self.step

    def clear_markers(self) -> None:
        self.start = self.default_start
        self.goal = self.default_goal

    def __repr__(self) -> str:
        return (
            f"Session(state={self.state.value}, mode={self.placement_mode.value}, "
            f"strategy={self.strategy.value}, start={self.start!r}, goal={self.goal!r}, "
            f"step={self.step}/{len(self.path)})"
        )
