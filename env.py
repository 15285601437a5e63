"""
EnvHub entry point for loading turtle_sim via the HF Hub.

This file follows the LeRobot EnvHub convention so that this project
can be loaded remotely with::

    from lerobot.envs.factory import make_env
    envs = make_env("your-user/turtle-sim", trust_remote_code=True)

Functions:
    make_env: Create vectorised simulation environments.
"""

from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym

from turtle_sim.envs.configs import TurtleSimConfig
from turtle_sim.envs.factory import make_sim_env


def make_env(
    n_envs: int = 1,
    use_async_envs: bool = False,
    cfg: Optional[TurtleSimConfig] = None,
) -> Dict[str, Dict[int, gym.vector.VectorEnv]]:
    """Create vectorised turtle environments (EnvHub API).

    Args:
        n_envs: Number of parallel environments.
        use_async_envs: Use ``AsyncVectorEnv`` if True.
        cfg: Optional ``TurtleSimConfig``; defaults to the standard arena.

    Returns:
        ``{suite_name: {0: VectorEnv}}`` matching LeRobot convention.
    """
    resolved = cfg if cfg is not None else TurtleSimConfig()
    return make_sim_env(resolved, n_envs=n_envs, use_async_envs=use_async_envs)
