"""The visible region of the complex plane and the state that changes it."""

from __future__ import annotations

from dataclasses import dataclass

WIDTH = 500
HEIGHT = 500
MAX_ITER = 60
DEFAULT_BASE_COLOR = 0x000000FF
DEFAULT_JULIA_CX = -0.7
DEFAULT_JULIA_CY = 0.27015

# The plane spans this many units across the window at zoom 1.
_SPAN = 4.0


def _wrap_int32(value: int) -> int:
    """Wrap ``value`` into the signed 32-bit range."""
    return (value + 2**31) % 2**32 - 2**31


@dataclass
class View:
    """Zoom, offset, colour and Julia parameters of a fractal window."""

    zoom: float = 1.0
    x_move: float = 0.0
    y_move: float = 0.0
    x_mouse: int = WIDTH // 2
    y_mouse: int = HEIGHT // 2
    base_color: int = DEFAULT_BASE_COLOR
    julia_cx: float = DEFAULT_JULIA_CX
    julia_cy: float = DEFAULT_JULIA_CY
    width: int = WIDTH
    height: int = HEIGHT

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be positive")
        if self.zoom == 0:
            raise ValueError("zoom must not be zero")

    def zoom_by(self, factor: float) -> None:
        """Multiply the zoom by ``factor``."""
        if factor == 0:
            raise ValueError("zoom factor must not be zero")
        self.zoom *= factor

    def zoom_at(self, factor: float, x: int, y: int) -> None:
        """Zoom by ``factor`` towards (or away from) the pixel ``(x, y)``.

        Zooming in (``factor > 1``) shifts the centre towards the pointer by
        its offset measured at the new zoom; zooming out shifts it away by
        the offset measured at the current zoom.
        """
        if factor == 0:
            raise ValueError("zoom factor must not be zero")
        self.x_mouse = x
        self.y_mouse = y
        dx = x - self.width // 2 - 0.5
        dy = y - self.height // 2 - 0.5
        if factor > 1:
            self.x_move += dx * (_SPAN / (self.width * self.zoom * factor))
            self.y_move += dy * (_SPAN / (self.height * self.zoom * factor))
        else:
            self.x_move -= dx * (_SPAN / (self.width * self.zoom))
            self.y_move -= dy * (_SPAN / (self.height * self.zoom))
        self.zoom_by(factor)

    def pan(self, dx: float, dy: float) -> None:
        """Shift the centre by ``(dx, dy)`` scaled down by the current zoom."""
        self.x_move += dx / self.zoom
        self.y_move += dy / self.zoom

    def shift_color(self, delta: int) -> None:
        """Add ``delta`` to the base colour, wrapping as a signed 32-bit value."""
        self.base_color = _wrap_int32(self.base_color + delta)

    def plane_point(self, px: int, py: int) -> tuple[float, float]:
        """The point of the complex plane shown at pixel ``(px, py)``."""
        cx = (px - self.width // 2) * _SPAN / (self.width * self.zoom) + self.x_move
        cy = (py - self.height // 2) * _SPAN / (self.height * self.zoom) + self.y_move
        return cx, cy