# IN THIS FILE: ERROR TAXONOMY
#
# Grid and session code raise these; the command processor catches every
# SandboxError and turns it into a rejected GridChanged event. None of them
# escapes apply_command().


class SandboxError(ValueError):
    """Base class. `kind` is the wire name reported in GridChanged.error."""
    kind = "sandbox_error"


class OutOfBounds(SandboxError):
    """A command referenced a cell outside [0, width) x [0, height)."""
    kind = "out_of_bounds"

    def __init__(self, position, width: int, height: int):
        super().__init__(f"{position!r} is outside the {width}x{height} grid")
        self.position = position


class InvalidTarget(SandboxError):
    """An edit targeted the start/goal cell or a cell it cannot change."""
    kind = "invalid_target"


class InvalidCommand(SandboxError):
    """The command does not apply in the current placement mode or state."""
    kind = "invalid_command"


class NoPathFound(SandboxError):
    """Solve could not connect start to goal. Reported, never raised out."""
    kind = "no_path_found"


class ConfigError(SandboxError):
    """Construction-time configuration is invalid."""
    kind = "config_error"
