"""
Geometric and value transforms on surfaces

Every transform takes a surface (any point -> real callable) plus
parameters and returns a new Surface. Geometric transforms map the sample
point before evaluating the wrapped surface, so chains read inside-out:

    rotate(translate(f, v), deg)(p) == f(rotate_point(p) - v)

Value transforms (mul, add) post-process the wrapped surface's output.
"""

import numpy as np

from ..core.point import Point, Real
from ..core.surface import Surface, SurfaceFunc, as_surface, warn_degenerate


def rotate(f: SurfaceFunc, deg: Real) -> Surface:
    """
    Rotate a surface counter-clockwise by deg degrees

    The sample point is rotated by -deg before evaluating f.

    Parameters
    ----------
    f : SurfaceFunc
        Surface to rotate
    deg : float
        Angle in degrees

    Examples
    --------
    >>> rotate(slope(), 90)(Point(0, 1))  # x' = y
    1.0
    """
    f = as_surface(f)
    deg = float(deg)
    radians = (deg / 180.0) * np.pi
    cos_r = float(np.cos(radians))
    sin_r = float(np.sin(radians))

    def rotate_op(p: Point) -> Real:
        return f(Point(p.x * cos_r + p.y * sin_r, p.y * cos_r - p.x * sin_r))

    return Surface(rotate_op, name='rotate', params={'deg': deg}, children=(f,))


def translate(f: SurfaceFunc, v) -> Surface:
    """
    Move a surface by offset v

    Parameters
    ----------
    f : SurfaceFunc
        Surface to move
    v : Point or (x, y)
        Offset; f is evaluated at p - v
    """
    f = as_surface(f)
    v = Point.from_tuple(v)

    def translate_op(p: Point) -> Real:
        return f(p - v)

    return Surface(translate_op, name='translate', params={'v': v}, children=(f,))


def scale(f: SurfaceFunc, s) -> Surface:
    """
    Stretch a surface by factors (s.x, s.y)

    A zero factor in either direction gives a surface that is +inf
    everywhere.

    Parameters
    ----------
    f : SurfaceFunc
        Surface to stretch
    s : Point or (x, y)
        Scale factors; f is evaluated at (p.x / s.x, p.y / s.y)

    Examples
    --------
    >>> scale(slope(), Point(2, 1))(Point(5, 0))
    2.5
    """
    f = as_surface(f)
    s = Point.from_tuple(s)

    if s.x == 0 or s.y == 0:
        warn_degenerate('scale', float('inf'), s=s)
        return Surface(lambda p: float('inf'), name='scale', params={'s': s}, children=(f,))

    def scale_op(p: Point) -> Real:
        return f(Point(p.x / s.x, p.y / s.y))

    return Surface(scale_op, name='scale', params={'s': s}, children=(f,))


def invert(f: SurfaceFunc) -> Surface:
    """Swap the axes: f(y, x)"""
    f = as_surface(f)
    return Surface(lambda p: f(Point(p.y, p.x)), name='invert', children=(f,))


def flip(f: SurfaceFunc) -> Surface:
    """Mirror across the y axis: f(-x, y)"""
    f = as_surface(f)
    return Surface(lambda p: f(Point(-p.x, p.y)), name='flip', children=(f,))


def mul(f: SurfaceFunc, c: Real) -> Surface:
    """Multiply the output of f by c"""
    f = as_surface(f)
    c = float(c)
    return Surface(lambda p: f(p) * c, name='mul', params={'c': c}, children=(f,))


def add(f: SurfaceFunc, c: Real) -> Surface:
    """Add c to the output of f"""
    f = as_surface(f)
    c = float(c)
    return Surface(lambda p: f(p) + c, name='add', params={'c': c}, children=(f,))
