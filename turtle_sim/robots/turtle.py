"""
Two-motor differential-drive turtle with a closed-form kinematics update.

The turtle carries one motor on each side of its platform.  Each motor is
independently stopped, running, or reversed, and both run at the same
configured speed.  Running the turtle for a duration therefore either
drives it straight along its heading (both motors turning the same way)
or spins it in place about the platform centre (motors turning opposite
ways).

Heading 0 faces +Y and increasing angles turn toward +X, so a drive of
length ``d`` moves the turtle by ``(d * sin(theta), d * cos(theta))``.
Headings are not wrapped and accumulate across turns.

Classes:
    Position: Immutable 2-D point.
    TurtleConfig: Fixed platform and motor parameters.
    Turtle: The kinematics engine.

Functions:
    classify_motion: Decide what a pair of motor modes does.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Tuple

from turtle_sim.robots.errors import (
    InvalidDurationError,
    PlatformNotConfiguredError,
    TurtleMalfunctionError,
)
from turtle_sim.utils.constants import (
    DEFAULT_MOTOR_SPEED,
    DEFAULT_PLATFORM_HEIGHT,
    DEFAULT_PLATFORM_WIDTH,
    DURATION_EPSILON,
    Motion,
    MotorMode,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Position:
    """A point on the plane.

    Attributes:
        x: X coordinate.
        y: Y coordinate.
    """

    x: float = 0.0
    y: float = 0.0

    def translated(self, dx: float, dy: float) -> Position:
        """Return a new position offset by (*dx*, *dy*)."""
        return Position(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class TurtleConfig:
    """Platform and motor parameters fixed when a turtle is built.

    No value is checked here.  A non-positive ``platform_width`` is only
    rejected when the turtle is asked to rotate, and a negative
    ``motor_speed`` simply runs every motion the other way.

    Attributes:
        platform_width: Distance between the two drive wheels.
        platform_height: Platform length; carried but unused by kinematics.
        motor_speed: Linear speed of each running motor (units / second).
    """

    platform_width: float = DEFAULT_PLATFORM_WIDTH
    platform_height: float = DEFAULT_PLATFORM_HEIGHT
    motor_speed: float = DEFAULT_MOTOR_SPEED


def classify_motion(left: MotorMode, right: MotorMode) -> Motion:
    """Return the motion produced by the given pair of motor modes.

    Args:
        left: Mode of the left motor.
        right: Mode of the right motor.

    Returns:
        ``IDLE`` when both are stopped, ``DRIVE`` when both turn the same
        way, ``ROTATE`` when one runs and the other is reversed, and
        ``UNSPECIFIED`` when exactly one motor is stopped.
    """
    if left is MotorMode.STOPPED and right is MotorMode.STOPPED:
        return Motion.IDLE
    if left is right:
        return Motion.DRIVE
    if MotorMode.STOPPED in (left, right):
        return Motion.UNSPECIFIED
    return Motion.ROTATE


class Turtle:
    """A differential-drive turtle on a 2-D plane.

    Motor modes are set directly through ``left_motor`` and
    ``right_motor``.  Position and orientation are read-only and change
    only through ``run_for``.

    Attributes:
        left_motor: Current mode of the left motor.
        right_motor: Current mode of the right motor.
    """

    def __init__(
        self,
        config: TurtleConfig | None = None,
        position: Position | None = None,
        orientation: float = 0.0,
    ) -> None:
        """Build a turtle with both motors stopped.

        Args:
            config: Platform parameters; the reference turtle when *None*.
            position: Starting position; the origin when *None*.
            orientation: Starting heading in radians.
        """
        self._config = config or TurtleConfig()
        self._position = position or Position()
        self._orientation = float(orientation)
        self.left_motor = MotorMode.STOPPED
        self.right_motor = MotorMode.STOPPED

    def __repr__(self) -> str:
        return (
            f"Turtle(position=({self._position.x}, {self._position.y}), "
            f"orientation={self._orientation}, left={self.left_motor.name}, "
            f"right={self.right_motor.name})"
        )

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def config(self) -> TurtleConfig:
        return self._config

    @property
    def position(self) -> Position:
        return self._position

    @property
    def orientation(self) -> float:
        return self._orientation

    @property
    def pose(self) -> Tuple[float, float, float]:
        """Return ``(x, y, orientation)``."""
        return self._position.x, self._position.y, self._orientation

    def set_motors(self, left: MotorMode, right: MotorMode) -> None:
        """Set both motor modes at once."""
        self.left_motor = left
        self.right_motor = right

    # ------------------------------------------------------------------
    # Kinematics
    # ------------------------------------------------------------------

    def run_for(self, duration: float) -> Motion:
        """Run the motors in their current modes for *duration* seconds.

        The update is all-or-nothing: if any step fails the turtle keeps
        the position and orientation it had before the call.

        Args:
            duration: Run time in seconds; must be strictly positive.

        Returns:
            The ``Motion`` that was applied.

        Raises:
            InvalidDurationError: If *duration* is not strictly positive.
            TurtleMalfunctionError: If a rotation is requested while the
                platform width is not positive.  The original
                ``PlatformNotConfiguredError`` is the ``__cause__``.
        """
        if not duration > DURATION_EPSILON:
            raise InvalidDurationError(duration)
        motion = classify_motion(self.left_motor, self.right_motor)
        try:
            if motion is Motion.DRIVE:
                self._position = self._drive(duration)
            elif motion is Motion.ROTATE:
                self._orientation = self._rotate(duration)
            logger.debug(
                "%s for %.4fs -> (%.4f, %.4f, %.4f)", motion.value, duration, *self.pose
            )
            return motion
        except PlatformNotConfiguredError as exc:
            raise TurtleMalfunctionError() from exc
        except Exception as exc:
            logger.error("Log message: %s", exc)
            raise
        finally:
            logger.debug("In the turtle finally block.")

    def _drive(self, duration: float) -> Position:
        """Return the position reached by driving along the heading.

        Args:
            duration: Run time in seconds.

        Returns:
            The new position; orientation is unaffected.
        """
        distance = duration * self._config.motor_speed
        if MotorMode.REVERSED in (self.left_motor, self.right_motor):
            distance = -distance
        dx = distance * math.sin(self._orientation)
        dy = distance * math.cos(self._orientation)
        return self._position.translated(dx, dy)

    def _rotate(self, duration: float) -> float:
        """Return the heading reached by spinning about the platform centre.

        The turning direction follows the left motor only: a reversed left
        motor turns the turtle toward negative angles.

        Args:
            duration: Run time in seconds.

        Returns:
            The new orientation in radians; position is unaffected.

        Raises:
            PlatformNotConfiguredError: If ``platform_width <= 0``.
        """
        width = self._config.platform_width
        if width <= 0:
            raise PlatformNotConfiguredError(width)
        circumference = math.pi * width
        distance = duration * self._config.motor_speed
        if self.left_motor is MotorMode.REVERSED:
            distance = -distance
        return self._orientation + 2.0 * math.pi * (distance / circumference)
