"""Finding the closest match for a color within a palette."""

from __future__ import annotations

import math
from collections.abc import Iterable

from termcells.color import COLOR_DEFAULT, Color

__all__ = ["find_color"]

_WHITE_D65 = (0.95047, 1.00000, 1.08883)
_LAB_EPSILON = 6.0 / 29.0 * 6.0 / 29.0 * 6.0 / 29.0


def _linearize(v: float) -> float:
    if v <= 0.04045:
        return v / 12.92
    return math.pow((v + 0.055) / 1.055, 2.4)


def _lab_f(t: float) -> float:
    if t > _LAB_EPSILON:
        return math.pow(t, 1.0 / 3.0)
    return t / 3.0 * 29.0 / 6.0 * 29.0 / 6.0 + 4.0 / 29.0


def _lab(color: Color) -> tuple[float, float, float]:
    r, g, b = (_linearize(component / 255.0) for component in color.rgb())
    x = 0.41239079926595948 * r + 0.35758433938387796 * g + 0.18048078840183429 * b
    y = 0.21263900587151036 * r + 0.71516867876775593 * g + 0.072192315360733715 * b
    z = 0.019330818715591851 * r + 0.11919477979462599 * g + 0.95053215224966058 * b
    fy = _lab_f(y / _WHITE_D65[1])
    return (
        1.16 * fy - 0.16,
        5.0 * (_lab_f(x / _WHITE_D65[0]) - fy),
        2.0 * (fy - _lab_f(z / _WHITE_D65[2])),
    )


def _distance_cie76(lab1: tuple[float, float, float], lab2: tuple[float, float, float]) -> float:
    distance = math.dist(lab1, lab2)
    return math.inf if math.isnan(distance) else distance


def find_color(c: Color, palette: Iterable[Color]) -> Color:
    """Return the palette entry closest to ``c`` by CIE76 distance.

    The first of equally close entries wins; an empty palette gives the
    default color.  This is costly, so callers should cache results.
    """
    target = _lab(c)
    match = COLOR_DEFAULT
    best = 0.0
    for candidate in palette:
        distance = _distance_cie76(target, _lab(candidate))
        if match == COLOR_DEFAULT or distance < best:
            match = candidate
            best = distance
    return match