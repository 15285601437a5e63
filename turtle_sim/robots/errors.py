"""
Exception types raised by the turtle kinematics engine.

Classes:
    TurtleError: Base class for every turtle failure.
    InvalidDurationError: A non-positive run duration was requested.
    PlatformNotConfiguredError: Rotation attempted without a platform width.
    TurtleMalfunctionError: Higher-level failure wrapping an engine error.
"""

from __future__ import annotations


class TurtleError(Exception):
    """Base class for errors raised by the turtle."""


class InvalidDurationError(TurtleError, ValueError):
    """Raised when ``run_for`` is given a duration that is not positive.

    Attributes:
        parameter: Name of the offending argument.
        value: The rejected value.
    """

    def __init__(self, value: float, parameter: str = "duration") -> None:
        super().__init__("Must provide a duration greater than 0.")
        self.parameter = parameter
        self.value = value

    def __str__(self) -> str:
        return f"{self.args[0]} (Parameter '{self.parameter}')"

    def __reduce__(self):
        return type(self), (self.value, self.parameter)


class PlatformNotConfiguredError(TurtleError, RuntimeError):
    """Raised when a rotation needs a platform width that is not > 0."""

    def __init__(self, platform_width: float) -> None:
        super().__init__("The PlatformWidth must be initialized to a value > 0.0.")
        self.platform_width = platform_width

    def __reduce__(self):
        return type(self), (self.platform_width,)


class TurtleMalfunctionError(TurtleError):
    """Raised by ``run_for`` when the turtle cannot carry out a motion.

    The underlying error is attached as ``__cause__``.
    """

    def __init__(self, message: str = "Some problem with the turtle has occurred.") -> None:
        super().__init__(message)
