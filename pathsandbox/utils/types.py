# IN THIS FILE: POSITION, SUCCESSOR, SEARCHRESULT

from functools import total_ordering
from typing import Iterator, List, NamedTuple, Tuple


@total_ordering
class Position:
    """
    An integer cell coordinate on the grid.
    Immutable, hashable and ordered lexicographically by (x, y), so it can be
    used as a dictionary key, in sets and as a heap tie-breaker.
    """

    __slots__ = ("_x", "_y")

    def __init__(self, x: int, y: int):
        object.__setattr__(self, "_x", int(x))
        object.__setattr__(self, "_y", int(y))

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    def __setattr__(self, name, value):
        raise AttributeError("Position is immutable")

    def __iter__(self) -> Iterator[int]:
        yield self._x
        yield self._y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __lt__(self, other: "Position") -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (self._x, self._y) < (other._x, other._y)

    def __hash__(self) -> int:
        return hash((self._x, self._y))

    def __repr__(self) -> str:
        return f"Position(x={self._x}, y={self._y})"

    def distance(self, other: "Position") -> int:
        """Manhattan distance."""
        return abs(self._x - other._x) + abs(self._y - other._y)

    def chebyshev(self, other: "Position") -> int:
        """Number of king moves between the two cells."""
        return max(abs(self._x - other._x), abs(self._y - other._y))

    def to_tuple(self) -> Tuple[int, int]:
        return (self._x, self._y)


class Successor(NamedTuple):
    """A reachable neighbour and the cost of entering it."""
    position: Position
    cost: int


class SearchResult(NamedTuple):
    """Path from start to goal (both inclusive) and its total entered cost."""
    path: List[Position]
    cost: int
