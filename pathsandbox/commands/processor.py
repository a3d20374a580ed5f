# pathsandbox/commands/processor.py
import logging
from collections import deque
from typing import Callable, Deque, Dict, List

from pathsandbox.commands.protocol import (
    AdjustCostCommand,
    ClearCommand,
    Command,
    CycleStrategyCommand,
    EditCommand,
    GridChanged,
    SelectStrategyCommand,
    SetPlacementModeCommand,
    Snapshot,
    SolveCommand,
    StepCommand,
)
from pathsandbox.entities.grid import Grid
from pathsandbox.entities.session import Session
from pathsandbox.pathfinding.search import find_path
from pathsandbox.utils.enums import PlacementMode
from pathsandbox.utils.errors import (
    InvalidCommand,
    InvalidTarget,
    NoPathFound,
    SandboxError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# HANDLERS (raise SandboxError to reject; rejections leave state untouched,
# NoPathFound is reported as accepted and may clear the stale path first)
# =============================================================================

def _edit(grid: Grid, session: Session, command: EditCommand) -> None:
    mode = session.placement_mode
    if not mode.is_edit:
        raise InvalidCommand(f"edit is not available in {mode.value} mode")

    position = command.position
    grid.check_bounds(position)

    if mode == PlacementMode.EDIT_START:
        if position == session.goal:
            raise InvalidTarget(f"start cannot be placed on the goal {position!r}")
        session.start = position
    elif mode == PlacementMode.EDIT_GOAL:
        if position == session.start:
            raise InvalidTarget(f"goal cannot be placed on the start {position!r}")
        session.goal = position
    else:
        if session.is_marker(position):
            raise InvalidTarget(f"{position!r} holds the start or goal marker")
        grid.set_blocked(position, mode == PlacementMode.EDIT_OBSTACLE)

    session.invalidate_path()


def _adjust_cost(grid: Grid, session: Session, command: AdjustCostCommand) -> None:
    mode = session.placement_mode
    if not mode.is_cost:
        raise InvalidCommand(f"cost adjustment is not available in {mode.value} mode")

    position = command.position
    grid.check_bounds(position)
    if session.is_marker(position):
        raise InvalidTarget(f"{position!r} holds the start or goal marker")
    if grid.cost_at(position) is None:
        raise InvalidTarget(f"{position!r} has no cost set")

    delta = mode.cost_delta if command.delta is None else command.delta
    grid.set_cost(position, delta)
    session.invalidate_path()


def _set_placement_mode(grid: Grid, session: Session, command: SetPlacementModeCommand) -> None:
    session.placement_mode = command.mode


def _select_strategy(grid: Grid, session: Session, command: SelectStrategyCommand) -> None:
    session.strategy = command.strategy
    _reset(grid, session, command)


def _cycle_strategy(grid: Grid, session: Session, command: CycleStrategyCommand) -> None:
    session.strategy = session.strategy.cycle(command.offset)
    _reset(grid, session, command)


def _solve(grid: Grid, session: Session, command: SolveCommand) -> None:
    result = find_path(session.strategy, grid, session.start, session.goal)
    if result is None:
        session.invalidate_path()
        raise NoPathFound(f"goal {session.goal!r} is unreachable from {session.start!r}")
    session.store_result(result)


def _step(grid: Grid, session: Session, command: StepCommand) -> None:
    if not session.path:
        raise InvalidCommand("nothing to step through, solve first")
    session.advance_step()


def _reset(grid: Grid, session: Session, command) -> None:
    session.invalidate_path()


def _clear(grid: Grid, session: Session, command: ClearCommand) -> None:
    session.invalidate_path()
    session.clear_markers()
    grid.reset(grid.default_cost)


_HANDLERS: Dict[str, Callable[[Grid, Session, Command], None]] = {
    "edit": _edit,
    "adjust_cost": _adjust_cost,
    "set_placement_mode": _set_placement_mode,
    "select_strategy": _select_strategy,
    "cycle_strategy": _cycle_strategy,
    "solve": _solve,
    "step": _step,
    "reset": _reset,
    "clear": _clear,
}


def apply_command(grid: Grid, session: Session, command: Command) -> GridChanged:
    """
    Validate and apply one command to the grid/session pair.

    Never raises for engine-level problems: every SandboxError becomes a
    GridChanged with accepted=False and the untouched snapshot.
    """
    handler = _HANDLERS[command.kind]
    try:
        handler(grid, session, command)
    except NoPathFound as e:
        return GridChanged(
            command=command.kind,
            accepted=True,
            error=e.kind,
            message=str(e),
            snapshot=Snapshot.capture(grid, session),
        )
    except SandboxError as e:
        logger.debug("Rejected %s: %s (%s)", command.kind, e, e.kind)
        return GridChanged(
            command=command.kind,
            accepted=False,
            error=e.kind,
            message=str(e),
            snapshot=Snapshot.capture(grid, session),
        )

    logger.debug("Applied %s -> %r", command.kind, session)
    return GridChanged(
        command=command.kind,
        accepted=True,
        snapshot=Snapshot.capture(grid, session),
    )


class CommandQueue:
    """
    FIFO buffer of pending commands.
    tick() processes everything queued so far, one command at a time.
    """

    def __init__(self, grid: Grid, session: Session):
        self.grid = grid
        self.session = session
        self._pending: Deque[Command] = deque()

    def __len__(self) -> int:
        return len(self._pending)

    def submit(self, command: Command) -> None:
        self._pending.append(command)

    def tick(self) -> List[GridChanged]:
        events = []
        while self._pending:
            events.append(apply_command(self.grid, self.session, self._pending.popleft()))
        return events
