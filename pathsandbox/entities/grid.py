# pathsandbox/entities/grid.py

from typing import Iterator, List, Optional

import numpy as np

from pathsandbox.utils.consts import (
    DEFAULT_COST,
    MIN_COST,
    NEIGHBOR_OFFSETS,
    UNSET_COST,
    UNSET_TRAVERSAL_COST,
)
from pathsandbox.utils.errors import OutOfBounds
from pathsandbox.utils.types import Position, Successor


class Grid:
    """
    Represents the editable arena.
    Owns the per-cell traversal cost and blocked flag and computes valid moves.

    Both attributes live in dense numpy arrays indexed [y, x]. A cost of
    UNSET_COST (0) means "unset": traversed as cost 1 but reported as None.
    """

    def __init__(
        self,
        width: int,
        height: int,
        allow_diagonals: bool = False,
        default_cost: Optional[int] = DEFAULT_COST,
    ):
        if width < 1 or height < 1:
            raise ValueError(f"Grid must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        self._allow_diagonals = allow_diagonals
        self.default_cost = default_cost
        self.costs = np.zeros((height, width), dtype=np.int64)
        self.blocked = np.zeros((height, width), dtype=bool)
        self.reset(default_cost)

    @property
    def allow_diagonals(self) -> bool:
        return self._allow_diagonals

    def reset(self, default_cost: Optional[int] = DEFAULT_COST) -> None:
        """Open every cell and give it `default_cost` (None = unset)."""
        fill = UNSET_COST if default_cost is None else max(MIN_COST, int(default_cost))
        self.costs.fill(fill)
        self.blocked.fill(False)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def in_bounds(self, position: Position) -> bool:
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def check_bounds(self, position: Position) -> None:
        if not self.in_bounds(position):
            raise OutOfBounds(position, self.width, self.height)

    def is_blocked(self, position: Position) -> bool:
        self.check_bounds(position)
        return bool(self.blocked[position.y, position.x])

    def cost_at(self, position: Position) -> Optional[int]:
        """Stored cost, or None if the cell is unset."""
        self.check_bounds(position)
        value = int(self.costs[position.y, position.x])
        return None if value == UNSET_COST else value

    def traversal_cost(self, position: Position) -> int:
        """Cost of entering the cell; unset cells cost 1."""
        value = self.cost_at(position)
        return UNSET_TRAVERSAL_COST if value is None else value

    def positions(self) -> Iterator[Position]:
        for y in range(self.height):
            for x in range(self.width):
                yield Position(x, y)

    def get_successors(self, position: Position) -> List[Successor]:
        """
        Open neighbours of `position` with the cost of entering each.

        Scans dy = -1..1 (outer) and dx = -1..1 (inner). The emission order is
        what BFS uses to break ties, so it must stay fixed.
        """
        successors = []
        for dx, dy in NEIGHBOR_OFFSETS:
            if not self._allow_diagonals and dx != 0 and dy != 0:
                continue
            x, y = position.x + dx, position.y + dy
            if x < 0 or x >= self.width or y < 0 or y >= self.height:
                continue
            if self.blocked[y, x]:
                continue
            cost = int(self.costs[y, x])
            successors.append(Successor(
                Position(x, y),
                UNSET_TRAVERSAL_COST if cost == UNSET_COST else cost,
            ))
        return successors

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def set_blocked(self, position: Position, blocked: bool) -> bool:
        """Returns True if the cell changed."""
        self.check_bounds(position)
        changed = bool(self.blocked[position.y, position.x]) != blocked
        self.blocked[position.y, position.x] = blocked
        return changed

    def set_cost(self, position: Position, delta: int) -> int:
        """
        Add `delta` to the cell's cost, never going below MIN_COST.
        An unset cell is treated as cost 1 and becomes set.
        Returns the new cost.
        """
        current = self.traversal_cost(position)
        new_cost = max(MIN_COST, current + delta)
        self.costs[position.y, position.x] = new_cost
        return new_cost

    def set_cost_value(self, position: Position, cost: Optional[int]) -> None:
        """Overwrite the cell's cost (None = unset)."""
        self.check_bounds(position)
        if cost is not None and cost < MIN_COST:
            raise ValueError(f"Cost must be >= {MIN_COST}, got {cost}")
        self.costs[position.y, position.x] = UNSET_COST if cost is None else cost

    # -------------------------------------------------------------------------
    # Snapshot helpers (row-major)
    # -------------------------------------------------------------------------

    def flat_blocked(self) -> List[bool]:
        return self.blocked.ravel().tolist()

    def flat_costs(self) -> List[Optional[int]]:
        return [None if c == UNSET_COST else c for c in self.costs.ravel().tolist()]

    def __repr__(self) -> str:
        return (
            f"Grid({self.width}x{self.height}, diagonals={self._allow_diagonals}, "
            f"blocked={int(self.blocked.sum())})"
        )
