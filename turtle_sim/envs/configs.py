"""
Dataclass configuration for the turtle simulation environment.

Follows the LeRobot ``EnvConfig`` pattern so that tools built for LeRobot
can read the feature layout and Gymnasium kwargs without modification.

Classes:
    TurtleSimConfig: Configuration for the 2-D turtle driving task.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from turtle_sim.robots.turtle import TurtleConfig
from turtle_sim.utils.constants import (
    ACTION,
    DEFAULT_FPS,
    DEFAULT_GOAL_TOLERANCE,
    DEFAULT_RENDER_HEIGHT,
    DEFAULT_RENDER_WIDTH,
    DEFAULT_WORLD_EXTENT,
    OBS_ENV_STATE,
    OBS_IMAGE,
    OBS_STATE,
    SIM_PLATFORM_WIDTH,
)


@dataclass
class TurtleSimConfig:
    """Configuration for the 2-D turtle driving environment.

    The agent picks a mode for each motor every step and must bring the
    turtle within ``goal_tolerance`` of a goal point inside a square arena.

    Attributes:
        task: Fixed to ``'TurtleDrive-Sim-v0'``.
        fps: Steps per simulated second; each step runs for ``1 / fps``.
        episode_length: Maximum steps per episode.
        obs_type: ``'state'`` or ``'pixels_agent_pos'``.
        render_mode: Gymnasium render mode.
        observation_height: Pixel height of rendered observations.
        observation_width: Pixel width of rendered observations.
        seed: Random seed for goal sampling.
        world_extent: Half side of the square arena in world units.
        goal_tolerance: Distance to the goal that counts as success.
        turtle: Platform parameters of the simulated turtle.
        action_dim: One discrete mode index per motor.
        state_dim: (x, y, orientation).
        features: Mapping of feature key to (type, shape) metadata.
        features_map: Mapping of raw env keys to LeRobot-standard keys.
    """

    task: str = "TurtleDrive-Sim-v0"
    fps: int = DEFAULT_FPS
    episode_length: int = 300
    obs_type: str = "state"
    render_mode: str = "rgb_array"
    observation_height: int = DEFAULT_RENDER_HEIGHT
    observation_width: int = DEFAULT_RENDER_WIDTH
    seed: int = 42
    world_extent: float = DEFAULT_WORLD_EXTENT
    goal_tolerance: float = DEFAULT_GOAL_TOLERANCE
    turtle: TurtleConfig = field(
        default_factory=lambda: TurtleConfig(platform_width=SIM_PLATFORM_WIDTH)
    )
    action_dim: int = 2
    state_dim: int = 3
    features: Dict[str, Tuple[str, Tuple[int, ...]]] = field(default_factory=dict)
    features_map: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate timing and populate the feature tables."""
        if self.fps < 1:
            raise ValueError("`fps` must be at least 1")
        if self.world_extent <= 0.0:
            raise ValueError("`world_extent` must be positive")
        self.features[ACTION] = ("action", (self.action_dim,))
        self.features_map[ACTION] = ACTION
        self.features["agent_pos"] = ("state", (self.state_dim,))
        self.features_map["agent_pos"] = OBS_STATE
        self.features["goal_pos"] = ("env", (2,))
        self.features_map["goal_pos"] = OBS_ENV_STATE
        if "pixels" in self.obs_type:
            self.features["pixels"] = (
                "visual",
                (self.observation_height, self.observation_width, 3),
            )
            self.features_map["pixels"] = OBS_IMAGE

    @property
    def env_type(self) -> str:
        """Return the ``task`` field value."""
        return self.task

    @property
    def step_duration(self) -> float:
        """Seconds of motor run time per environment step."""
        return 1.0 / self.fps

    @property
    def gym_kwargs(self) -> dict:
        """Return turtle-specific Gymnasium kwargs.

        Returns:
            Dictionary with ``obs_type``, ``render_mode``, and ``max_episode_steps``.
        """
        return {
            "obs_type": self.obs_type,
            "render_mode": self.render_mode,
            "max_episode_steps": self.episode_length,
        }
