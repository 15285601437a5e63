"""
2-D turtle driving environment (Gymnasium-compatible).

The agent chooses a mode for each of the turtle's two motors every step.
Matching modes drive the turtle along its heading, opposite modes spin it
in place.  The episode succeeds once the turtle reaches a goal point
sampled inside a square arena.

Classes:
    TurtleDriveSimEnv: Gymnasium environment for the turtle driving task.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from turtle_sim.envs.configs import TurtleSimConfig
from turtle_sim.robots.turtle import Turtle
from turtle_sim.utils.constants import (
    COLOR_BACKGROUND,
    COLOR_HEADING,
    COLOR_ROBOT,
    COLOR_SUCCESS,
    COLOR_TARGET,
    MOTOR_MODES,
)
from turtle_sim.utils.helpers import world_to_pixel


class TurtleDriveSimEnv(gym.Env):
    """Gymnasium environment for the 2-D turtle driving task.

    Actions are pairs of indices into ``MOTOR_MODES`` (left, right).  Each
    step runs the turtle for ``1 / fps`` seconds.  Errors raised by the
    turtle, such as a rotation on a platform without a width, propagate
    out of ``step``.

    Attributes:
        metadata: Gymnasium metadata with supported render modes.
        cfg: ``TurtleSimConfig`` controlling arena size, timing, etc.
    """

    metadata: Dict[str, Any] = {"render_modes": ["rgb_array"]}

    def __init__(self, cfg: TurtleSimConfig | None = None) -> None:
        """Initialise the turtle environment.

        Args:
            cfg: Optional configuration; a default ``TurtleSimConfig`` is
                used when *None*.
        """
        super().__init__()
        self.cfg = cfg or TurtleSimConfig()
        self._rng = np.random.default_rng(self.cfg.seed)
        self._step_count = 0
        self._turtle = Turtle(self.cfg.turtle)
        self._goal_pos = np.zeros(2, dtype=np.float32)
        self._init_spaces()

    def _init_spaces(self) -> None:
        """Define action and observation Gymnasium spaces."""
        self.action_space = spaces.MultiDiscrete([len(MOTOR_MODES), len(MOTOR_MODES)])
        extent = self.cfg.world_extent
        obs_dict: Dict[str, spaces.Space] = {
            "agent_pos": spaces.Box(
                low=-np.inf, high=np.inf, shape=(self.cfg.state_dim,), dtype=np.float32
            ),
            "goal_pos": spaces.Box(low=-extent, high=extent, shape=(2,), dtype=np.float32),
        }
        if "pixels" in self.cfg.obs_type:
            h, w = self.cfg.observation_height, self.cfg.observation_width
            obs_dict["pixels"] = spaces.Box(
                low=0, high=255, shape=(h, w, 3), dtype=np.uint8
            )
        self.observation_space = spaces.Dict(obs_dict)

    @property
    def turtle(self) -> Turtle:
        """The turtle driven by this environment."""
        return self._turtle

    # ------------------------------------------------------------------
    # Gymnasium API
    # ------------------------------------------------------------------

    def _sample_goal_position(self) -> None:
        """Place the goal uniformly inside the inner 80% of the arena."""
        bound = 0.8 * self.cfg.world_extent
        self._goal_pos = self._rng.uniform(-bound, bound, size=2).astype(np.float32)

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None
    ) -> Tuple[Dict[str, np.ndarray], Dict[str, Any]]:
        """Put the turtle back at the origin facing +Y and sample a new goal.

        Args:
            seed: Optional seed for the random number generator.
            options: Unused; reserved for Gymnasium compatibility.

        Returns:
            Tuple of (observation dict, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self._rng = np.random.default_rng(seed)
        self._step_count = 0
        self._turtle = Turtle(self.cfg.turtle)
        self._sample_goal_position()
        return self._build_observation(), {}

    def _goal_distance(self) -> float:
        """Return the Euclidean distance from the turtle to the goal."""
        x, y, _ = self._turtle.pose
        return math.hypot(x - float(self._goal_pos[0]), y - float(self._goal_pos[1]))

    def _out_of_bounds(self) -> bool:
        """Return whether the turtle has left the arena."""
        x, y, _ = self._turtle.pose
        return max(abs(x), abs(y)) > self.cfg.world_extent

    def step(
        self, action: np.ndarray
    ) -> Tuple[Dict[str, np.ndarray], float, bool, bool, Dict[str, Any]]:
        """Set both motor modes and run the turtle for one step.

        Args:
            action: Two indices into ``MOTOR_MODES`` (left, right).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        left, right = (int(a) for a in np.asarray(action).reshape(-1)[:2])
        self._turtle.set_motors(MOTOR_MODES[left], MOTOR_MODES[right])
        motion = self._turtle.run_for(self.cfg.step_duration)
        self._step_count += 1
        distance = self._goal_distance()
        success = distance <= self.cfg.goal_tolerance
        truncated = self._step_count >= self.cfg.episode_length or self._out_of_bounds()
        return (
            self._build_observation(),
            -distance,
            success,
            truncated,
            {"is_success": success, "motion": motion.value},
        )

    # ------------------------------------------------------------------
    # Observation builder
    # ------------------------------------------------------------------

    def _build_observation(self) -> Dict[str, np.ndarray]:
        """Assemble the observation dictionary.

        Returns:
            Dictionary with ``'agent_pos'`` (x, y, orientation),
            ``'goal_pos'``, and optionally ``'pixels'``.
        """
        obs: Dict[str, np.ndarray] = {
            "agent_pos": np.array(self._turtle.pose, dtype=np.float32),
            "goal_pos": self._goal_pos.copy(),
        }
        if "pixels" in self.cfg.obs_type:
            obs["pixels"] = self.render()
        return obs

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _to_pixel(self, x: float, y: float) -> Tuple[int, int]:
        return world_to_pixel(
            x,
            y,
            self.cfg.world_extent,
            self.cfg.observation_height,
            self.cfg.observation_width,
        )

    def _draw_disc(
        self, canvas: np.ndarray, row: int, col: int, radius: float, color: Tuple[int, int, int]
    ) -> None:
        """Fill a disc of *radius* pixels centred on (*row*, *col*)."""
        h, w = canvas.shape[:2]
        rr, cc = np.ogrid[:h, :w]
        mask = (rr - row) ** 2 + (cc - col) ** 2 <= radius**2
        canvas[mask] = color

    def _draw_goal(self, canvas: np.ndarray) -> None:
        """Draw the goal tolerance region on *canvas*."""
        row, col = self._to_pixel(float(self._goal_pos[0]), float(self._goal_pos[1]))
        scale = canvas.shape[1] / (2.0 * self.cfg.world_extent)
        color = COLOR_SUCCESS if self._goal_distance() <= self.cfg.goal_tolerance else COLOR_TARGET
        self._draw_disc(canvas, row, col, max(self.cfg.goal_tolerance * scale, 2.0), color)

    def _draw_turtle(self, canvas: np.ndarray) -> None:
        """Draw the turtle body and a heading marker on *canvas*."""
        x, y, theta = self._turtle.pose
        scale = canvas.shape[1] / (2.0 * self.cfg.world_extent)
        radius = max(0.5 * self.cfg.turtle.platform_width * scale, 3.0)
        row, col = self._to_pixel(x, y)
        self._draw_disc(canvas, row, col, radius, COLOR_ROBOT)
        reach = radius / scale
        hrow, hcol = self._to_pixel(x + reach * math.sin(theta), y + reach * math.cos(theta))
        self._draw_disc(canvas, hrow, hcol, max(radius / 3.0, 1.0), COLOR_HEADING)

    def render(self) -> np.ndarray:
        """Render the arena as an RGB image.

        Returns:
            (H, W, 3) uint8 NumPy array.
        """
        h, w = self.cfg.observation_height, self.cfg.observation_width
        canvas = np.zeros((h, w, 3), dtype=np.uint8)
        canvas[:] = COLOR_BACKGROUND
        self._draw_goal(canvas)
        self._draw_turtle(canvas)
        return canvas
