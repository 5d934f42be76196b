"""Fractal explorer model (options, view, controls, tricorn) and its helper library."""

__version__ = "1.0.0"

__all__ = [
    "chars",
    "controls",
    "linereader",
    "linkedlist",
    "memory",
    "numparse",
    "options",
    "output",
    "strings",
    "tricorn",
    "view",
]