"""Key and mouse codes, and the effect each input has on a view."""

from __future__ import annotations

from enum import Enum, IntEnum

from fractol.view import View

PAN_STEP = 0.1
COLOR_STEP = 0x0000FF00
ZOOM_IN_FACTOR = 2.0
ZOOM_OUT_FACTOR = 0.5


class WindowEvent(IntEnum):
    """Window-system event numbers."""

    KEYDOWN = 2
    KEYUP = 3
    MOUSEDOWN = 4
    MOUSEUP = 5
    MOUSEMOVE = 6
    EXPOSE = 12
    DESTROY = 17


class MouseButton(IntEnum):
    """Mouse button numbers, including the scroll wheel."""

    LEFT_CLICK = 1
    RIGHT_CLICK = 2
    MIDDLE_CLICK = 3
    SCROLL_UP = 4
    SCROLL_DOWN = 5


class Key(IntEnum):
    """Keyboard symbols the program reacts to."""

    ESC = 0xFF1B
    UP = 0xFF52
    DOWN = 0xFF54
    RIGHT = 0xFF51
    LEFT = 0xFF53
    S = 0x73
    D = 0x64
    Z = 0x7A
    E = 0x65


class Action(Enum):
    """What the window should do after an input was handled."""

    NONE = "none"
    REDRAW = "redraw"
    CLOSE = "close"


def handle_key(view: View, keycode: int) -> Action:
    """Apply a key press to ``view`` and report what the window must do."""
    if keycode == Key.ESC:
        return Action.CLOSE
    if keycode == Key.Z:
        view.shift_color(COLOR_STEP)
    elif keycode == Key.E:
        view.shift_color(-COLOR_STEP)
    elif keycode == Key.DOWN:
        view.pan(0.0, PAN_STEP)
    elif keycode == Key.UP:
        view.pan(0.0, -PAN_STEP)
    elif keycode == Key.LEFT:
        view.pan(PAN_STEP, 0.0)
    elif keycode == Key.RIGHT:
        view.pan(-PAN_STEP, 0.0)
    else:
        return Action.NONE
    return Action.REDRAW


def handle_mouse(view: View, button: int, x: int, y: int) -> Action:
    """Apply a mouse button event at ``(x, y)`` to ``view``."""
    if button == MouseButton.SCROLL_UP:
        view.zoom_at(ZOOM_IN_FACTOR, x, y)
        return Action.REDRAW
    if button == MouseButton.SCROLL_DOWN:
        view.zoom_at(ZOOM_OUT_FACTOR, x, y)
        return Action.REDRAW
    return Action.NONE