import pytest

from turtle_sim.utils.helpers import (
    clamp,
    error_chain_messages,
    format_pose,
    iter_error_chain,
    world_to_pixel,
)


def test_clamp():
    assert clamp(5.0, 0.0, 1.0) == 1.0
    assert clamp(-5.0, 0.0, 1.0) == 0.0
    assert clamp(0.25, 0.0, 1.0) == 0.25


def test_format_pose_uses_two_decimals():
    assert format_pose("Arthur", 0.0, 10.0, 0.0) == (
        "Arthur is at (0.00, 10.00) and is pointing at angle 0.00 radians."
    )
    assert format_pose("Bea", -27.7768, 7.2232, 0.785398) == (
        "Bea is at (-27.78, 7.22) and is pointing at angle 0.79 radians."
    )


def _raise_chained():
    try:
        try:
            raise KeyError("inner")
        except KeyError as exc:
            raise RuntimeError("middle") from exc
    except RuntimeError as exc:
        raise ValueError("outer") from exc


def test_error_chain_follows_causes():
    with pytest.raises(ValueError) as info:
        _raise_chained()
    chain = list(iter_error_chain(info.value))
    assert [type(e) for e in chain] == [ValueError, RuntimeError, KeyError]
    assert error_chain_messages(info.value) == ["outer", "middle", "'inner'"]


def test_error_chain_of_single_exception():
    assert error_chain_messages(ValueError("only")) == ["only"]


def test_world_to_pixel_maps_corners_and_centre():
    assert world_to_pixel(0.0, 0.0, 10.0, 100, 100) == (50, 50)
    assert world_to_pixel(-10.0, 10.0, 10.0, 100, 100) == (0, 0)
    # +Y is up the image
    row_high, _ = world_to_pixel(0.0, 5.0, 10.0, 100, 100)
    row_low, _ = world_to_pixel(0.0, -5.0, 10.0, 100, 100)
    assert row_high < row_low


def test_world_to_pixel_clips_outside_points():
    assert world_to_pixel(100.0, -100.0, 10.0, 64, 32) == (63, 31)


def test_error_chain_follows_implicit_context():
    with pytest.raises(RuntimeError) as info:
        try:
            raise KeyError("first")
        except KeyError:
            raise RuntimeError("second")
    assert error_chain_messages(info.value) == ["second", "'first'"]


def test_error_chain_stops_at_suppressed_context():
    with pytest.raises(RuntimeError) as info:
        try:
            raise KeyError("hidden")
        except KeyError:
            raise RuntimeError("shown") from None
    assert error_chain_messages(info.value) == ["shown"]
