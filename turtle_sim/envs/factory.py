"""
Vectorised construction of turtle driving environments.

Every sub-environment receives its own copy of the configuration with the
seed offset by its index, so parallel turtles chase different goals while
the whole vector stays reproducible from one base seed.  The result keeps
the LeRobot ``{suite_name: {task_id: VectorEnv}}`` layout.

Functions:
    env_configs: Per-environment configurations for a vector of envs.
    make_sim_env: Create a vector of turtle environments.
"""

from __future__ import annotations

from dataclasses import replace
from functools import partial
from typing import Any, Dict, List

import gymnasium as gym

from turtle_sim.envs.configs import TurtleSimConfig
from turtle_sim.envs.turtle_drive import TurtleDriveSimEnv
from turtle_sim.robots.turtle import TurtleConfig


def _copy_config(cfg: TurtleSimConfig, **changes: Any) -> TurtleSimConfig:
    # Feature tables are rebuilt by __post_init__, never shared between copies
    return replace(cfg, features={}, features_map={}, **changes)


def _resolve_config(
    cfg: TurtleSimConfig | TurtleConfig | None, overrides: Dict[str, Any]
) -> TurtleSimConfig:
    """Build the base environment config from what the caller passed.

    Args:
        cfg: A full ``TurtleSimConfig``, a bare ``TurtleConfig`` to drop
            into the default arena, or *None* for the defaults.
        overrides: ``TurtleSimConfig`` field values applied on top.

    Returns:
        The resolved ``TurtleSimConfig``.

    Raises:
        TypeError: If an override names an unknown field.
    """
    if cfg is None:
        cfg = TurtleSimConfig()
    elif isinstance(cfg, TurtleConfig):
        cfg = TurtleSimConfig(turtle=cfg)
    if overrides:
        cfg = _copy_config(cfg, **overrides)
    return cfg


def env_configs(cfg: TurtleSimConfig, n_envs: int) -> List[TurtleSimConfig]:
    """Return one config per sub-environment, seeded ``cfg.seed + index``.

    Raises:
        ValueError: When ``n_envs < 1``.
    """
    if n_envs < 1:
        raise ValueError("`n_envs` must be at least 1")
    return [_copy_config(cfg, seed=cfg.seed + i) for i in range(n_envs)]


def make_sim_env(
    cfg: TurtleSimConfig | TurtleConfig | None = None,
    n_envs: int = 1,
    use_async_envs: bool = False,
    **overrides: Any,
) -> Dict[str, Dict[int, gym.vector.VectorEnv]]:
    """Create *n_envs* turtle driving environments behind one vector env.

    Example::

        envs = make_sim_env(TurtleConfig(platform_width=8.0), n_envs=4, fps=20)

    Args:
        cfg: Environment config, a bare ``TurtleConfig``, or *None*.
        n_envs: Number of parallel environments (default 1).
        use_async_envs: Run each environment in its own worker process.
        **overrides: ``TurtleSimConfig`` fields to change, such as ``fps``
            or ``goal_tolerance``.

    Returns:
        ``{task_name: {0: VectorEnv}}`` mapping.
    """
    resolved = _resolve_config(cfg, overrides)
    fns = [partial(TurtleDriveSimEnv, c) for c in env_configs(resolved, n_envs)]
    wrapper_cls = gym.vector.AsyncVectorEnv if use_async_envs else gym.vector.SyncVectorEnv
    return {resolved.env_type: {0: wrapper_cls(fns)}}
