"""
Turtle Simulation Environment.

A two-motor differential-drive robot ("turtle") moving on a 2-D plane.
Each motor is independently stopped, running, or reversed; running the
turtle for a duration either drives it along its heading or spins it in
place about the centre of its platform.

Modules:
    robots: The turtle kinematics engine and its error types.
    envs: Gymnasium-compatible environment wrapping the turtle.
    utils: Shared constants, enumerations, and helper utilities.
"""

__version__ = "0.1.0"
