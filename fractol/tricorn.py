"""Escape-time iteration and rendering of the tricorn fractal."""

from __future__ import annotations

from fractol.view import MAX_ITER, View

_ESCAPE_RADIUS_SQUARED = 4


def escape_count(cx: float, cy: float, max_iter: int = MAX_ITER) -> int:
    """Iteration count at which the orbit of ``(cx, cy)`` leaves radius 2.

    The orbit starts at 0 and is advanced by
    ``(zx, zy) -> (zy*zy - zx*zx + cx, 2*zx*zy + cy)``. The result is the
    number of steps taken minus one when the orbit escapes, and
    ``max_iter`` when it stays bounded.
    """
    if max_iter < 0:
        raise ValueError(f"max_iter must not be negative, got {max_iter}")
    zx = zy = 0.0
    count = -1
    while zx * zx + zy * zy < _ESCAPE_RADIUS_SQUARED:
        count += 1
        if count >= max_iter:
            break
        zx, zy = zy * zy - zx * zx + cx, 2 * zy * zx + cy
    return count


def render_tricorn(view: View) -> list[list[int]]:
    """Escape counts for every pixel of ``view``, as rows indexed ``[y][x]``."""
    return [
        [escape_count(*view.plane_point(x, y)) for x in range(view.width)]
        for y in range(view.height)
    ]