"""Command-line arguments: the fractal to draw and the Julia constant."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from fractol.numparse import atof, is_double
from fractol.view import DEFAULT_JULIA_CX, DEFAULT_JULIA_CY

_INVALID_LINE = "You need to add a valid option\n"
_USAGE_LINES = (
    "How to use fract-ol: ./fract-ol FRACTAL_TYPE [cx] [cy]\n",
    "FRACTAL_TYPE: mandelbrot, julia\n",
    "cx/cy: have to be floats or ints\n",
)


class FractalType(Enum):
    """The fractals that can be drawn."""

    MANDELBROT = 0
    JULIA = 1
    TRICORN = 2


_NAMES = {
    "mandelbrot": FractalType.MANDELBROT,
    "julia": FractalType.JULIA,
    "tricorn": FractalType.TRICORN,
}


@dataclass(frozen=True)
class Options:
    """Parsed command-line options."""

    fractal: FractalType
    julia_cx: float = DEFAULT_JULIA_CX
    julia_cy: float = DEFAULT_JULIA_CY


def usage_text(invalid: Optional[str] = None) -> str:
    """The help text, preceded by an error line when ``invalid`` is given."""
    head = _INVALID_LINE if invalid else ""
    return head + "".join(_USAGE_LINES)


class UsageError(Exception):
    """Raised when the arguments cannot be used; carries the help text."""

    def __init__(self, invalid: Optional[str] = None) -> None:
        self.invalid = invalid
        self.usage = usage_text(invalid)
        super().__init__(self.usage)


def parse_args(argv: Sequence[str]) -> Options:
    """Parse the arguments that follow the program name.

    The first names the fractal exactly; the optional second and third give
    the real and imaginary parts of the Julia constant. Further arguments
    are ignored.
    """
    if not argv:
        raise UsageError(None)
    fractal = _NAMES.get(argv[0])
    if fractal is None:
        raise UsageError(argv[0])
    cx, cy = DEFAULT_JULIA_CX, DEFAULT_JULIA_CY
    if len(argv) >= 2:
        if not is_double(argv[1]):
            raise UsageError(argv[1])
        cx = atof(argv[1])
    if len(argv) >= 3:
        if not is_double(argv[2]):
            raise UsageError(argv[2])
        cy = atof(argv[2])
    return Options(fractal, cx, cy)