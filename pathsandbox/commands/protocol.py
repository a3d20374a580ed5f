# IN THIS FILE: COMMANDS ACCEPTED BY THE SESSION & THE GRIDCHANGED EVENT

from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from pathsandbox.entities.grid import Grid
from pathsandbox.entities.session import Session
from pathsandbox.utils.enums import CellVisual, PlacementMode, SessionState, Strategy
from pathsandbox.utils.types import Position


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# =============================================================================
# COMMANDS (tagged by `kind`)
# =============================================================================

class _CellCommand(_Frozen):
    x: int
    y: int

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)


class EditCommand(_CellCommand):
    """Open/block a cell or move a marker, depending on the placement mode."""
    kind: Literal["edit"] = "edit"


class AdjustCostCommand(_CellCommand):
    # None: +1 in IncreaseCost mode, -1 in DecreaseCost mode
    kind: Literal["adjust_cost"] = "adjust_cost"
    delta: Optional[Literal[-1, 1]] = None


class SetPlacementModeCommand(_Frozen):
    kind: Literal["set_placement_mode"] = "set_placement_mode"
    mode: PlacementMode


class SelectStrategyCommand(_Frozen):
    kind: Literal["select_strategy"] = "select_strategy"
    strategy: Strategy


class CycleStrategyCommand(_Frozen):
    """The strategy selector's left (-1) / right (+1) arrows."""
    kind: Literal["cycle_strategy"] = "cycle_strategy"
    offset: int = 1


class SolveCommand(_Frozen):
    kind: Literal["solve"] = "solve"


class StepCommand(_Frozen):
    kind: Literal["step"] = "step"


class ResetCommand(_Frozen):
    kind: Literal["reset"] = "reset"


class ClearCommand(_Frozen):
    kind: Literal["clear"] = "clear"


Command = Annotated[
    Union[
        EditCommand,
        AdjustCostCommand,
        SetPlacementModeCommand,
        SelectStrategyCommand,
        CycleStrategyCommand,
        SolveCommand,
        StepCommand,
        ResetCommand,
        ClearCommand,
    ],
    Field(discriminator="kind"),
]

_command_adapter = TypeAdapter(Command)


def parse_command(data: dict) -> Command:
    """Build a command from its JSON form, e.g. {"kind": "edit", "x": 1, "y": 2}."""
    return _command_adapter.validate_python(data)


# =============================================================================
# SNAPSHOT (read-only view handed to renderers)
# =============================================================================

class PathPoint(_Frozen):
    x: int
    y: int

    @classmethod
    def of(cls, position: Position) -> "PathPoint":
        return cls(x=position.x, y=position.y)

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)


class GridSnapshot(_Frozen):
    width: int
    height: int
    allow_diagonals: bool
    # Row-major, index = y * width + x
    blocked: Tuple[bool, ...]
    cost: Tuple[Optional[int], ...]

    def index(self, point: PathPoint) -> int:
        return point.y * self.width + point.x


class SessionSnapshot(_Frozen):
    start: PathPoint
    goal: PathPoint
    path: Tuple[PathPoint, ...]
    step: int
    total_cost: Optional[int]
    placement_mode: PlacementMode
    strategy: Strategy
    state: SessionState


class Snapshot(_Frozen):
    grid: GridSnapshot
    session: SessionSnapshot

    @classmethod
    def capture(cls, grid: Grid, session: Session) -> "Snapshot":
        return cls(
            grid=GridSnapshot(
                width=grid.width,
                height=grid.height,
                allow_diagonals=grid.allow_diagonals,
                blocked=tuple(grid.flat_blocked()),
                cost=tuple(grid.flat_costs()),
            ),
            session=SessionSnapshot(
                start=PathPoint.of(session.start),
                goal=PathPoint.of(session.goal),
                path=tuple(PathPoint.of(p) for p in session.path),
                step=session.step,
                total_cost=session.total_cost,
                placement_mode=session.placement_mode,
                strategy=session.strategy,
                state=session.state,
            ),
        )

    @property
    def show_costs(self) -> bool:
        """Cost overlays only make sense for the weighted strategies."""
        return self.session.strategy.weighted

    def cell_states(self) -> List[CellVisual]:
        """
        Visual state of every cell, row-major.
        Precedence (highest wins): goal > start > path > blocked > open.
        """
        grid = self.grid
        states = [CellVisual.BLOCKED if b else CellVisual.OPEN for b in grid.blocked]
        for point in self.session.path:
            states[grid.index(point)] = CellVisual.PATH
        states[grid.index(self.session.start)] = CellVisual.START
        states[grid.index(self.session.goal)] = CellVisual.GOAL
        return states


# =============================================================================
# EVENT
# =============================================================================

class GridChanged(_Frozen):
    """
    Emitted once per processed command.

    accepted=False means the command was ignored and the snapshot is the
    unchanged state. A solve that finds no path is accepted with
    error="no_path_found" and an empty path.
    """
    command: str
    accepted: bool
    error: Optional[str] = None
    message: Optional[str] = None
    snapshot: Snapshot
