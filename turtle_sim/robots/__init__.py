"""
Differential-drive turtle kinematics and its error types.

Provides a two-motor turtle that drives straight or spins in place
depending on its motor modes, with read-only pose and all-or-nothing
updates.
"""

from turtle_sim.robots.errors import (
    InvalidDurationError,
    PlatformNotConfiguredError,
    TurtleError,
    TurtleMalfunctionError,
)
from turtle_sim.robots.turtle import Position, Turtle, TurtleConfig, classify_motion

__all__ = [
    "InvalidDurationError",
    "PlatformNotConfiguredError",
    "Position",
    "Turtle",
    "TurtleConfig",
    "TurtleError",
    "TurtleMalfunctionError",
    "classify_motion",
]
