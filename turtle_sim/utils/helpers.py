"""
Small stateless helpers used across the turtle_sim package.

Provides pose formatting for console output, exception-chain walking,
numerical clamping, and world-to-pixel coordinate conversion.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple


def clamp(value: float, lo: float, hi: float) -> float:
    """Return *value* clamped to the closed interval [*lo*, *hi*].

    Args:
        value: The scalar to clamp.
        lo: Lower bound (inclusive).
        hi: Upper bound (inclusive).

    Returns:
        The clamped scalar.
    """
    return max(lo, min(hi, value))


def format_pose(name: str, x: float, y: float, orientation: float) -> str:
    """Render a pose as a one-line, two-decimal description.

    Args:
        name: Display name of the turtle.
        x: X coordinate.
        y: Y coordinate.
        orientation: Heading in radians.

    Returns:
        A sentence such as ``"Arthur is at (0.00, 10.00) and is pointing
        at angle 0.00 radians."``.
    """
    return (
        f"{name} is at ({x:.2f}, {y:.2f}) "
        f"and is pointing at angle {orientation:.2f} radians."
    )


def iter_error_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield *exc* followed by each exception it was raised from.

    Follows ``__cause__`` links first and falls back to ``__context__``
    for implicitly chained exceptions, unless the context was suppressed
    with ``raise ... from None``.

    Args:
        exc: The outermost exception.

    Yields:
        Each exception in the chain, outermost first.
    """
    seen = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        if current.__cause__ is not None:
            current = current.__cause__
        elif current.__suppress_context__:
            current = None
        else:
            current = current.__context__


def error_chain_messages(exc: BaseException) -> List[str]:
    """Return the message of every exception in the chain of *exc*.

    Args:
        exc: The outermost exception.

    Returns:
        List of ``str(e)`` values, outermost first.
    """
    return [str(e) for e in iter_error_chain(exc)]


def world_to_pixel(
    x: float, y: float, extent: float, height: int, width: int
) -> Tuple[int, int]:
    """Map a world point in [-extent, extent]^2 to a (row, col) pixel.

    World +Y points up the image, so rows grow as *y* decreases.

    Args:
        x: World X coordinate.
        y: World Y coordinate.
        extent: Half side of the square arena.
        height: Image height in pixels.
        width: Image width in pixels.

    Returns:
        Tuple ``(row, col)`` clipped to the image bounds.
    """
    u = (x + extent) / (2.0 * extent)
    v = (extent - y) / (2.0 * extent)
    col = int(clamp(u * width, 0, width - 1))
    row = int(clamp(v * height, 0, height - 1))
    return row, col
