"""Area, perimeter, volume and distance formulas for simple shapes."""

from __future__ import annotations

import math

from math_util.algorithms.statistics import sum_of_squares
from math_util.errors import DomainError


def rectangle_area(length: float, width: float) -> float:
    return length * width


def circle_area(radius: float) -> float:
    """π r²."""
    return math.pi * radius**2


def circle_perimeter(radius: float) -> float:
    """2 π r."""
    return 2 * math.pi * radius


def triangle_area(base: float, height: float) -> float:
    return 0.5 * base * height


def triangle_area_heron(a: float, b: float, c: float) -> float:
    """Triangle area from its three side lengths (Heron's formula).

    Mathematical Construction:
        s = (a + b + c) / 2
        area = √(s (s - a) (s - b) (s - c))

    Raises:
        DomainError: If the sides cannot form a triangle.

    Example:
        >>> triangle_area_heron(3, 4, 5)
        6.0
    """
    s = (a + b + c) / 2
    radicand = s * (s - a) * (s - b) * (s - c)

    if min(a, b, c) < 0 or radicand < 0:
        msg = f"Sides {a}, {b}, {c} do not form a triangle"
        raise DomainError(msg)

    return math.sqrt(radicand)


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between (x1, y1) and (x2, y2).

    Example:
        >>> distance(0, 0, 3, 4)
        5.0
    """
    return math.sqrt(sum_of_squares([x2 - x1, y2 - y1]))


def sphere_volume(radius: float) -> float:
    """4/3 π r³."""
    return (4 / 3) * math.pi * radius**3


def box_volume(length: float, width: float, height: float) -> float:
    return length * width * height


__all__ = [
    "rectangle_area",
    "circle_area",
    "circle_perimeter",
    "triangle_area",
    "triangle_area_heron",
    "distance",
    "sphere_volume",
    "box_volume",
]
