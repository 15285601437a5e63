#!/usr/bin/env python3
"""
Main entry point for the turtle simulation.

Runs either the scripted demonstration of the turtle kinematics (drive,
rotate, reverse, and the failure paths) or a random-action rollout of the
Gymnasium environment, printing the turtle's pose after every step.

Usage examples::

    # Scripted demo on the reference turtle (no platform width)
    python run_turtle.py --mode demo

    # Scripted demo with a working platform, stopping at the first error
    python run_turtle.py --mode demo --platform-width 10 --stop-on-error

    # Random rollout of the driving environment
    python run_turtle.py --mode rollout --steps 50 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import List, Optional, Sequence, Tuple

from turtle_sim.envs.configs import TurtleSimConfig
from turtle_sim.envs.turtle_drive import TurtleDriveSimEnv
from turtle_sim.robots.errors import TurtleError
from turtle_sim.robots.turtle import Turtle, TurtleConfig
from turtle_sim.utils.constants import (
    DEFAULT_MOTOR_SPEED,
    DEFAULT_PLATFORM_HEIGHT,
    DEFAULT_PLATFORM_WIDTH,
    SIM_PLATFORM_WIDTH,
    MotorMode,
)
from turtle_sim.utils.helpers import error_chain_messages, format_pose

# (label, left mode or None to keep, right mode or None to keep, duration)
DemoStep = Tuple[str, Optional[MotorMode], Optional[MotorMode], float]

DEMO_SCRIPT: Tuple[DemoStep, ...] = (
    ("Zero duration", None, None, 0.0),
    ("Test forward", MotorMode.RUNNING, MotorMode.RUNNING, 2.0),
    ("Test rotate", None, MotorMode.REVERSED, math.pi / 2.0),
    ("Test reverse", MotorMode.REVERSED, MotorMode.REVERSED, 5.0),
    ("Rotate back the other way", None, MotorMode.RUNNING, math.pi / 4.0),
    ("Drive backwards", MotorMode.REVERSED, MotorMode.REVERSED, math.pi / 4.0),
)


# ======================================================================
# Console output
# ======================================================================


def _show_position(name: str, turtle: Turtle) -> None:
    """Print the turtle's pose with two decimals."""
    print(format_pose(name, *turtle.pose))


def _show_error(exc: BaseException) -> None:
    """Print *exc* and every cause below it, outermost first."""
    print("Error running turtle:")
    for message in error_chain_messages(exc):
        print(f"  {message}")


# ======================================================================
# Mode runners
# ======================================================================


def _apply_step(turtle: Turtle, step: DemoStep) -> None:
    """Update the motor modes named by *step* and run for its duration.

    Args:
        turtle: The turtle to drive.
        step: One entry of ``DEMO_SCRIPT``.
    """
    _, left, right, duration = step
    if left is not None:
        turtle.left_motor = left
    if right is not None:
        turtle.right_motor = right
    turtle.run_for(duration)


def run_demo(
    turtle: Turtle,
    name: str = "Arthur",
    stop_on_error: bool = False,
    script: Sequence[DemoStep] = DEMO_SCRIPT,
) -> int:
    """Run the scripted demonstration and print the pose after each step.

    Args:
        turtle: The turtle to drive.
        name: Display name used in the pose lines.
        stop_on_error: Stop at the first failing step instead of continuing.
        script: Steps to run; ``DEMO_SCRIPT`` by default.

    Returns:
        Process exit status: 1 if the script was stopped by an error,
        otherwise 0.
    """
    _show_position(name, turtle)
    for step in script:
        print(f"-- {step[0]}")
        try:
            _apply_step(turtle, step)
        except Exception as exc:
            _show_error(exc)
            if stop_on_error:
                return 1
        _show_position(name, turtle)
    return 0


def run_rollout(cfg: TurtleSimConfig, steps: int, seed: int, name: str = "Arthur") -> int:
    """Step the driving environment with uniformly random motor modes.

    Args:
        cfg: Environment configuration.
        steps: Maximum number of steps.
        seed: Seed for the environment and the action sampler.
        name: Display name used in the pose lines.

    Returns:
        Process exit status: 1 if the turtle failed during a step,
        otherwise 0.
    """
    env = TurtleDriveSimEnv(cfg)
    env.reset(seed=seed)
    env.action_space.seed(seed)
    total_reward = 0.0
    for step in range(steps):
        action = env.action_space.sample()
        try:
            _, reward, terminated, truncated, info = env.step(action)
        except TurtleError as exc:
            _show_error(exc)
            _show_position(name, env.turtle)
            return 1
        total_reward += reward
        print(f"[{step:4d}] {info['motion']:<11} {format_pose(name, *env.turtle.pose)}")
        if terminated or truncated:
            print(f"Episode done after {step + 1} steps (success={info['is_success']})")
            break
    print(f"Total reward: {total_reward:.2f}")
    return 0


# ======================================================================
# CLI
# ======================================================================


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed ``argparse.Namespace``.
    """
    parser = argparse.ArgumentParser(description="Turtle Simulation")
    parser.add_argument("--mode", choices=["demo", "rollout"], default="demo")
    parser.add_argument("--name", default="Arthur")
    parser.add_argument(
        "--platform-width",
        type=float,
        default=None,
        help=f"defaults to {DEFAULT_PLATFORM_WIDTH} for demo, {SIM_PLATFORM_WIDTH} for rollout",
    )
    parser.add_argument("--platform-height", type=float, default=DEFAULT_PLATFORM_HEIGHT)
    parser.add_argument("--motor-speed", type=float, default=DEFAULT_MOTOR_SPEED)
    parser.add_argument("--stop-on-error", action="store_true")
    parser.add_argument("--steps", type=int, default=100)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the selected mode and return the process exit status."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )
    width = args.platform_width
    if width is None:
        width = DEFAULT_PLATFORM_WIDTH if args.mode == "demo" else SIM_PLATFORM_WIDTH
    turtle_cfg = TurtleConfig(
        platform_width=width,
        platform_height=args.platform_height,
        motor_speed=args.motor_speed,
    )
    print(f"Mode: {args.mode} | Turtle: {turtle_cfg}")
    print("-" * 60)

    if args.mode == "demo":
        return run_demo(Turtle(turtle_cfg), name=args.name, stop_on_error=args.stop_on_error)
    return run_rollout(TurtleSimConfig(turtle=turtle_cfg), args.steps, args.seed, args.name)


if __name__ == "__main__":
    sys.exit(main())
