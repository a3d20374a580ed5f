# IN THIS FILE: GRID + SESSION + QUEUE, SERIALIZED FOR MULTI-THREADED HOSTS

import logging
import threading
from typing import Callable, Iterable, List, Optional

from pathsandbox.commands.processor import CommandQueue
from pathsandbox.commands.protocol import Command, GridChanged, Snapshot
from pathsandbox.entities.grid import Grid
from pathsandbox.entities.session import Session
from pathsandbox.utils.config import SandboxConfig

logger = logging.getLogger(__name__)

Listener = Callable[[GridChanged], None]


class Sandbox:
    """
    Owns one Grid and one Session and is the single writer to both.

    Hosts that receive commands on several threads (the HTTP server) go
    through submit(), which holds a lock while the queue is drained, so
    commands never interleave. Readers get immutable snapshots.
    """

    def __init__(self, config: Optional[SandboxConfig] = None):
        self.config = config or SandboxConfig()
        self.grid = Grid(
            self.config.width,
            self.config.height,
            allow_diagonals=self.config.allow_diagonals,
            default_cost=self.config.default_cost,
        )
        self.session = Session(self.config.start_position, self.config.goal_position)
        self.queue = CommandQueue(self.grid, self.session)
        self._lock = threading.Lock()
        self._listeners: List[Listener] = []
        logger.info(
            "Sandbox ready: %dx%d, diagonals=%s, start=%r, goal=%r",
            self.config.width, self.config.height, self.config.allow_diagonals,
            self.session.start, self.session.goal,
        )

    def subscribe(self, listener: Listener) -> None:
        """Call `listener` with every GridChanged, in processing order."""
        self._listeners.append(listener)

    def snapshot(self) -> Snapshot:
        with self._lock:
            return Snapshot.capture(self.grid, self.session)

    def submit(self, commands: Iterable[Command]) -> List[GridChanged]:
        with self._lock:
            for command in commands:
                self.queue.submit(command)
            events = self.queue.tick()
            for event in events:
                self._notify(event)
        return events

    def _notify(self, event: GridChanged) -> None:
        # Called under the lock; the command is already committed
        for listener in self._listeners:
            try:
                listener(event)
            except Exception:
                logger.exception("Listener %r failed on %s", listener, event.command)

    def apply(self, command: Command) -> GridChanged:
        return self.submit([command])[0]
