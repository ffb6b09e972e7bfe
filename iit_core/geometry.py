"""
Geometry helpers for mapping normalized coordinates onto drawing surfaces.

Network positions are stored resolution-independent in [0, 1] x [0, 1]
(origin top-left, x right, y down). These helpers turn them into absolute
surface coordinates.
"""

from __future__ import annotations

from typing import Tuple, Union

Point = Tuple[float, float]
Size = Union[float, Tuple[float, float]]


def scale(point: Point, size: Size) -> Point:
    """
    Scale a normalized point to absolute coordinates.

    Args:
        point: (x, y) in normalized units
        size: a scalar side length, or a (width, height) pair for
            rectangular surfaces where each axis scales independently

    Returns:
        (x * width, y * height). Out-of-range inputs are not clamped.
    """
    if isinstance(size, (tuple, list)):
        width, height = size
    else:
        width = height = size
    return (float(point[0]) * float(width), float(point[1]) * float(height))


def fit_square(surface: Size) -> float:
    """Return the side of the square region that fits inside `surface`."""
    if isinstance(surface, (tuple, list)):
        width, height = surface
        return float(min(width, height))
    return float(surface)


def surface_dimensions(surface: Size) -> Tuple[float, float]:
    if isinstance(surface, (tuple, list)):
        return float(surface[0]), float(surface[1])
    return float(surface), float(surface)
