"""
Gymnasium-compatible simulation environment for the turtle.

Provides the 2-D turtle driving task with observations and actions in the
LeRobot-standard format.
"""

from turtle_sim.envs.configs import TurtleSimConfig
from turtle_sim.envs.factory import make_sim_env
from turtle_sim.envs.turtle_drive import TurtleDriveSimEnv

__all__ = [
    "TurtleDriveSimEnv",
    "TurtleSimConfig",
    "make_sim_env",
]
