"""
Shared constants and enumerations for the turtle_sim package.

Holds the motor-mode and motion enumerations used by the kinematics
engine, the default platform parameters of the reference turtle, and the
rendering defaults used by the simulation environment.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Tuple


class MotorMode(Enum):
    """Commanded direction of a single drive motor."""

    STOPPED = "stopped"
    RUNNING = "running"
    REVERSED = "reversed"


class Motion(Enum):
    """What a single ``Turtle.run_for`` call did to the turtle.

    ``UNSPECIFIED`` covers one motor stopped while the other turns; the
    turtle is left where it is.
    """

    IDLE = "idle"
    DRIVE = "drive"
    ROTATE = "rotate"
    UNSPECIFIED = "unspecified"


# Index order used by discrete action spaces
MOTOR_MODES: Tuple[MotorMode, ...] = (
    MotorMode.STOPPED,
    MotorMode.RUNNING,
    MotorMode.REVERSED,
)

# Smallest positive float; durations must be strictly above it
DURATION_EPSILON: float = math.ulp(0.0)

# ---------------------------------------------------------------------------
# Reference turtle platform
# ---------------------------------------------------------------------------
DEFAULT_PLATFORM_WIDTH: float = 0.0
DEFAULT_PLATFORM_HEIGHT: float = 10.0
DEFAULT_MOTOR_SPEED: float = 5.0

# Platform width used by the simulation environment so rotation works
SIM_PLATFORM_WIDTH: float = 10.0

# ---------------------------------------------------------------------------
# Simulation defaults
# ---------------------------------------------------------------------------
OBS_STATE: str = "observation.state"
OBS_IMAGE: str = "observation.image"
OBS_ENV_STATE: str = "observation.environment_state"
ACTION: str = "action"

DEFAULT_RENDER_WIDTH: int = 256
DEFAULT_RENDER_HEIGHT: int = 256
DEFAULT_FPS: int = 10
DEFAULT_WORLD_EXTENT: float = 50.0
DEFAULT_GOAL_TOLERANCE: float = 3.0

# ---------------------------------------------------------------------------
# Color palette (RGB 0-255) used by the 2-D renderer
# ---------------------------------------------------------------------------
COLOR_BACKGROUND: Tuple[int, int, int] = (240, 240, 240)
COLOR_ROBOT: Tuple[int, int, int] = (66, 133, 244)
COLOR_HEADING: Tuple[int, int, int] = (50, 50, 50)
COLOR_TARGET: Tuple[int, int, int] = (219, 68, 55)
COLOR_SUCCESS: Tuple[int, int, int] = (15, 157, 88)
