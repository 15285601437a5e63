import logging
import math
import pickle

import pytest

from turtle_sim.robots.errors import (
    InvalidDurationError,
    PlatformNotConfiguredError,
    TurtleMalfunctionError,
)
from turtle_sim.robots.turtle import Position, Turtle, TurtleConfig, classify_motion
from turtle_sim.utils.constants import DURATION_EPSILON, Motion, MotorMode

STOPPED = MotorMode.STOPPED
RUNNING = MotorMode.RUNNING
REVERSED = MotorMode.REVERSED


@pytest.fixture
def turtle():
    return Turtle(TurtleConfig(platform_width=10.0, platform_height=10.0, motor_speed=5.0))


@pytest.fixture
def flat_turtle():
    """The reference turtle: no platform width configured."""
    return Turtle(TurtleConfig(platform_width=0.0, platform_height=10.0, motor_speed=5.0))


def test_new_turtle_starts_at_origin_with_motors_stopped():
    t = Turtle()
    assert t.position == Position(0.0, 0.0)
    assert t.orientation == 0.0
    assert t.left_motor is STOPPED
    assert t.right_motor is STOPPED
    assert t.config == TurtleConfig(platform_width=0.0, platform_height=10.0, motor_speed=5.0)


def test_pose_is_read_only(turtle):
    with pytest.raises(AttributeError):
        turtle.position = Position(1.0, 1.0)
    with pytest.raises(AttributeError):
        turtle.orientation = 1.0


def test_position_is_immutable():
    p = Position(1.0, 2.0)
    with pytest.raises(AttributeError):
        p.x = 3.0
    assert p.translated(1.0, -1.0) == Position(2.0, 1.0)


def test_negative_speed_drives_the_other_way():
    t = Turtle(TurtleConfig(platform_width=10.0, platform_height=-1.0, motor_speed=-5.0))
    t.set_motors(RUNNING, RUNNING)
    assert t.run_for(2.0) is Motion.DRIVE
    assert t.pose == (0.0, -10.0, 0.0)
    t.set_motors(REVERSED, REVERSED)
    t.run_for(2.0)
    assert t.pose == (0.0, 0.0, 0.0)


def test_negative_speed_turns_the_other_way():
    t = Turtle(TurtleConfig(platform_width=10.0, motor_speed=-5.0))
    t.set_motors(RUNNING, REVERSED)
    t.run_for(math.pi / 2.0)
    assert t.orientation == pytest.approx(-math.pi / 2.0)


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (STOPPED, STOPPED, Motion.IDLE),
        (RUNNING, RUNNING, Motion.DRIVE),
        (REVERSED, REVERSED, Motion.DRIVE),
        (RUNNING, REVERSED, Motion.ROTATE),
        (REVERSED, RUNNING, Motion.ROTATE),
        (STOPPED, RUNNING, Motion.UNSPECIFIED),
        (RUNNING, STOPPED, Motion.UNSPECIFIED),
        (STOPPED, REVERSED, Motion.UNSPECIFIED),
        (REVERSED, STOPPED, Motion.UNSPECIFIED),
    ],
)
def test_classify_motion(left, right, expected):
    assert classify_motion(left, right) is expected


@pytest.mark.parametrize("duration", [0.0, -1.0, -1e-9, DURATION_EPSILON, float("nan")])
def test_rejects_non_positive_duration(turtle, duration):
    turtle.set_motors(RUNNING, RUNNING)
    with pytest.raises(InvalidDurationError) as info:
        turtle.run_for(duration)
    assert info.value.parameter == "duration"
    assert isinstance(info.value, ValueError)
    assert "duration greater than 0" in str(info.value)
    assert turtle.pose == (0.0, 0.0, 0.0)


def test_zero_duration_rejected_even_when_stopped(turtle):
    with pytest.raises(InvalidDurationError):
        turtle.run_for(0.0)


def test_both_stopped_is_a_no_op():
    t = Turtle(TurtleConfig(platform_width=4.0), Position(1.25, -3.5), orientation=0.3)
    before = t.pose
    assert t.run_for(7.0) is Motion.IDLE
    assert t.pose == before


def test_drive_forward_along_y(turtle):
    turtle.set_motors(RUNNING, RUNNING)
    assert turtle.run_for(2.0) is Motion.DRIVE
    assert turtle.position == Position(0.0, 10.0)
    assert turtle.orientation == 0.0


def test_drive_backward_along_y(turtle):
    turtle.set_motors(REVERSED, REVERSED)
    turtle.run_for(3.0)
    assert turtle.position == Position(0.0, -15.0)
    assert turtle.orientation == 0.0


def test_drive_uses_sin_for_x_and_cos_for_y():
    t = Turtle(TurtleConfig(motor_speed=2.0), orientation=math.pi / 2)
    t.set_motors(RUNNING, RUNNING)
    t.run_for(1.5)
    assert t.position.x == pytest.approx(3.0)
    assert t.position.y == pytest.approx(0.0, abs=1e-12)
    assert t.orientation == math.pi / 2


def test_drive_diagonal_heading():
    t = Turtle(TurtleConfig(motor_speed=1.0), Position(1.0, 1.0), orientation=math.pi / 4)
    t.set_motors(RUNNING, RUNNING)
    t.run_for(math.sqrt(2.0))
    assert t.position.x == pytest.approx(2.0)
    assert t.position.y == pytest.approx(2.0)


@pytest.mark.parametrize(
    "left, right, sign",
    [(RUNNING, REVERSED, 1.0), (REVERSED, RUNNING, -1.0)],
)
def test_rotation_sign_follows_left_motor(turtle, left, right, sign):
    turtle.set_motors(left, right)
    assert turtle.run_for(2.0) is Motion.ROTATE
    expected = 2.0 * math.pi * sign * (5.0 * 2.0) / (math.pi * 10.0)
    assert turtle.orientation == pytest.approx(expected)
    assert turtle.position == Position(0.0, 0.0)


def test_quarter_turn(turtle):
    turtle.set_motors(RUNNING, REVERSED)
    turtle.run_for(math.pi / 2.0)
    assert turtle.orientation == pytest.approx(math.pi / 2.0)


def test_orientation_accumulates_without_wrapping(turtle):
    turtle.set_motors(RUNNING, REVERSED)
    # One full turn takes pi * width / speed seconds
    full_turn = math.pi * 10.0 / 5.0
    for _ in range(3):
        turtle.run_for(full_turn)
    assert turtle.orientation == pytest.approx(6.0 * math.pi)


@pytest.mark.parametrize("width", [0.0, -2.0])
def test_rotation_without_platform_width_malfunctions(width):
    t = Turtle(TurtleConfig(platform_width=width), Position(2.0, 3.0), orientation=0.5)
    t.set_motors(RUNNING, REVERSED)
    with pytest.raises(TurtleMalfunctionError) as info:
        t.run_for(1.0)
    assert str(info.value) == "Some problem with the turtle has occurred."
    cause = info.value.__cause__
    assert isinstance(cause, PlatformNotConfiguredError)
    assert cause.platform_width == width
    assert "PlatformWidth" in str(cause)
    assert t.pose == (2.0, 3.0, 0.5)


@pytest.mark.parametrize(
    "left, right",
    [(STOPPED, RUNNING), (RUNNING, STOPPED), (STOPPED, REVERSED), (REVERSED, STOPPED)],
)
def test_one_motor_stopped_leaves_state_unchanged(flat_turtle, left, right):
    flat_turtle.set_motors(left, right)
    assert flat_turtle.run_for(4.0) is Motion.UNSPECIFIED
    assert flat_turtle.pose == (0.0, 0.0, 0.0)


def test_unexpected_error_is_logged_and_propagated(turtle, monkeypatch, caplog):
    def explode(duration):
        raise ArithmeticError("boom")

    monkeypatch.setattr(turtle, "_drive", explode)
    turtle.set_motors(RUNNING, RUNNING)
    with caplog.at_level(logging.DEBUG, logger="turtle_sim.robots.turtle"):
        with pytest.raises(ArithmeticError, match="boom"):
            turtle.run_for(1.0)
    messages = [r.getMessage() for r in caplog.records]
    assert "Log message: boom" in messages
    assert messages[-1] == "In the turtle finally block."
    assert turtle.pose == (0.0, 0.0, 0.0)


def test_cleanup_line_logged_on_success_and_malfunction(turtle, flat_turtle, caplog):
    turtle.set_motors(RUNNING, RUNNING)
    flat_turtle.set_motors(REVERSED, RUNNING)
    with caplog.at_level(logging.DEBUG, logger="turtle_sim.robots.turtle"):
        turtle.run_for(1.0)
        with pytest.raises(TurtleMalfunctionError):
            flat_turtle.run_for(1.0)
    finally_lines = [
        r for r in caplog.records if r.getMessage() == "In the turtle finally block."
    ]
    assert len(finally_lines) == 2
    # The malfunction is wrapped, not logged as an unexpected error
    assert not any(r.levelno >= logging.ERROR for r in caplog.records)


def test_invalid_duration_skips_cleanup_line(turtle, caplog):
    with caplog.at_level(logging.DEBUG, logger="turtle_sim.robots.turtle"):
        with pytest.raises(InvalidDurationError):
            turtle.run_for(-1.0)
    assert caplog.records == []


def test_reference_trace(flat_turtle):
    with pytest.raises(InvalidDurationError):
        flat_turtle.run_for(0.0)

    flat_turtle.set_motors(RUNNING, RUNNING)
    flat_turtle.run_for(2.0)
    assert flat_turtle.pose == (0.0, 10.0, 0.0)

    flat_turtle.right_motor = REVERSED
    with pytest.raises(TurtleMalfunctionError) as info:
        flat_turtle.run_for(math.pi / 2.0)
    assert isinstance(info.value.__cause__, PlatformNotConfiguredError)
    assert flat_turtle.pose == (0.0, 10.0, 0.0)


def test_reference_trace_with_platform(turtle):
    turtle.set_motors(RUNNING, RUNNING)
    turtle.run_for(2.0)
    turtle.right_motor = REVERSED
    turtle.run_for(math.pi / 2.0)
    assert turtle.orientation == pytest.approx(2.0 * math.pi * (5.0 * math.pi / 2.0) / (math.pi * 10.0))

    turtle.set_motors(REVERSED, REVERSED)
    turtle.run_for(5.0)
    assert turtle.position.x == pytest.approx(-25.0)
    assert turtle.position.y == pytest.approx(10.0)

    turtle.right_motor = RUNNING
    turtle.run_for(math.pi / 4.0)
    assert turtle.orientation == pytest.approx(math.pi / 4.0)


@pytest.mark.parametrize(
    "error",
    [
        InvalidDurationError(-2.5),
        PlatformNotConfiguredError(0.0),
        TurtleMalfunctionError(),
    ],
)
def test_errors_survive_pickling(error):
    restored = pickle.loads(pickle.dumps(error))
    assert type(restored) is type(error)
    assert str(restored) == str(error)
    assert vars(restored) == vars(error)


def test_unpickled_errors_keep_their_fields():
    duration_error = pickle.loads(pickle.dumps(InvalidDurationError(-2.5)))
    assert duration_error.value == -2.5
    assert duration_error.parameter == "duration"
    width_error = pickle.loads(pickle.dumps(PlatformNotConfiguredError(-1.0)))
    assert width_error.platform_width == -1.0
