# IN THIS FILE: CONSTRUCTION-TIME CONFIGURATION

import os
from typing import Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from pathsandbox.utils.consts import (
    ALLOW_DIAGONALS,
    DEFAULT_COST,
    DEFAULT_GOAL,
    DEFAULT_START,
    ENV_PREFIX,
    MAP_HEIGHT,
    MAP_WIDTH,
)
from pathsandbox.utils.errors import ConfigError
from pathsandbox.utils.types import Position


class SandboxConfig(BaseModel):
    """
    Everything needed to build a Grid and a Session.

    default_cost=None starts every cell as "unset" (traversed as cost 1,
    shown without a cost label).
    """
    model_config = ConfigDict(frozen=True)

    width: int = Field(MAP_WIDTH, ge=1)
    height: int = Field(MAP_HEIGHT, ge=1)
    allow_diagonals: bool = ALLOW_DIAGONALS
    default_cost: Optional[int] = Field(DEFAULT_COST, ge=1)
    start: Tuple[int, int] = DEFAULT_START
    goal: Tuple[int, int] = DEFAULT_GOAL

    @model_validator(mode="after")
    def _markers_inside_grid(self) -> "SandboxConfig":
        for name, (x, y) in (("start", self.start), ("goal", self.goal)):
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise ValueError(
                    f"{name} {(x, y)} is outside the {self.width}x{self.height} grid"
                )
        return self

    @property
    def start_position(self) -> Position:
        return Position(*self.start)

    @property
    def goal_position(self) -> Position:
        return Position(*self.goal)

    @classmethod
    def build(cls, **values) -> "SandboxConfig":
        """Validate and wrap pydantic failures in ConfigError."""
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigError(str(e)) from e

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SandboxConfig":
        """
        Read overrides from SANDBOX_* variables:
            SANDBOX_WIDTH, SANDBOX_HEIGHT, SANDBOX_ALLOW_DIAGONALS,
            SANDBOX_DEFAULT_COST ("unset" for no cost),
            SANDBOX_START / SANDBOX_GOAL as "x,y".
        Unset variables keep the defaults from consts.py.
        """
        env = os.environ if environ is None else environ
        values = {}

        def read(name):
            return env.get(f"{ENV_PREFIX}{name}")

        for key in ("width", "height"):
            raw = read(key.upper())
            if raw is not None:
                values[key] = raw
        raw = read("ALLOW_DIAGONALS")
        if raw is not None:
            values["allow_diagonals"] = raw
        raw = read("DEFAULT_COST")
        if raw is not None:
            values["default_cost"] = None if raw.strip().lower() in ("", "unset", "none") else raw
        for key in ("start", "goal"):
            raw = read(key.upper())
            if raw is not None:
                values[key] = tuple(part.strip() for part in raw.split(","))

        return cls.build(**values)
