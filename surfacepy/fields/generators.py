"""
Primitive surface generators

Each generator is a factory returning a Surface. All generators are total:
degenerate parameters (non-positive periods or extents) give the constant
zero surface instead of failing, and non-finite coordinates propagate
through the numpy ufuncs as NaN or infinity.

Generators
----------
plain, slope, sqr, sin_wave, cos_wave : parameterless
steps, stripes, checker, rings : periodic, period ``s``
ellipse, rectangle : shapes centred on the origin
"""

import numpy as np

from ..core.point import Point, Real
from ..core.surface import Surface, warn_degenerate


DEFAULT_PERIOD = 1.0
DEFAULT_EXTENT = 1.0


# ============================================================================
# Helpers
# ============================================================================

def _fmod2(v: Real) -> Real:
    # fmod(inf, 2) is NaN; keep the invalid-value warning out of evaluation
    with np.errstate(invalid='ignore'):
        return float(np.fmod(v, 2.0))


def _band(x: Real, s: Real) -> Real:
    """
    Stripe value of coordinate x for period s > 0

    Band index for x > 0 is floor(x/s), bumped by one unless x/s is an
    exact integer; for x <= 0 it is floor(-x/s). The band left of an
    exact multiple owns the boundary on the positive side only.
    """
    if x > 0:
        q = x / s
        index = np.floor(q) if np.trunc(q) == q else np.floor(q) + 1.0
    else:
        index = np.floor(-x / s)
    return _fmod2(index + 1.0)


def _zero(name: str, **params) -> Surface:
    warn_degenerate(name, 0.0, stacklevel=4, **params)
    return Surface(lambda p: 0.0, name=name, params=params)


# ============================================================================
# Parameterless generators
# ============================================================================

def plain() -> Surface:
    """Constant zero surface"""
    return Surface(lambda p: 0.0, name='plain')


def slope() -> Surface:
    """
    Linear ramp along x

    Examples
    --------
    >>> slope()(Point(3, 7))
    3.0
    """
    return Surface(lambda p: p.x, name='slope')


def sqr() -> Surface:
    """Parabola along x: x^2"""
    return Surface(lambda p: p.x * p.x, name='sqr')


def sin_wave() -> Surface:
    """sin(x)"""
    def sin_op(p: Point) -> Real:
        with np.errstate(invalid='ignore'):
            return float(np.sin(p.x))

    return Surface(sin_op, name='sin_wave')


def cos_wave() -> Surface:
    """cos(x)"""
    def cos_op(p: Point) -> Real:
        with np.errstate(invalid='ignore'):
            return float(np.cos(p.x))

    return Surface(cos_op, name='cos_wave')


# ============================================================================
# Periodic generators
# ============================================================================

def steps(s: Real = DEFAULT_PERIOD) -> Surface:
    """
    Staircase along x: floor(x / s)

    Parameters
    ----------
    s : float
        Step width; s <= 0 gives the zero surface

    Examples
    --------
    >>> steps(2)(Point(5, 0))
    2.0
    >>> steps(2)(Point(-0.5, 0))
    -1.0
    """
    s = float(s)
    if s <= 0.0:
        return _zero('steps', s=s)

    return Surface(lambda p: float(np.floor(p.x / s)), name='steps', params={'s': s})


def stripes(s: Real = DEFAULT_PERIOD) -> Surface:
    """
    Vertical 0/1 bands of width s along x

    Bands are half-open: (k*s, (k+1)*s] on the positive side and
    (-(k+1)*s, -k*s] on the negative side, so x = 0 belongs to the first
    negative band.

    Parameters
    ----------
    s : float
        Band width; s <= 0 gives the zero surface

    Examples
    --------
    >>> stripes(1)(Point(0.5, 0))
    0.0
    >>> stripes(1)(Point(1.5, 0))
    1.0
    """
    s = float(s)
    if s <= 0.0:
        return _zero('stripes', s=s)

    return Surface(lambda p: _band(p.x, s), name='stripes', params={'s': s})


def checker(s: Real = DEFAULT_PERIOD) -> Surface:
    """
    Checkerboard of s by s squares

    Sum of the stripe values of -x and -y, plus one, mod 2.

    Parameters
    ----------
    s : float
        Square size; s <= 0 gives the zero surface
    """
    s = float(s)
    if s <= 0.0:
        return _zero('checker', s=s)

    def checker_op(p: Point) -> Real:
        return _fmod2(_band(-p.x, s) + _band(-p.y, s) + 1.0)

    return Surface(checker_op, name='checker', params={'s': s})


def rings(s: Real = DEFAULT_PERIOD) -> Surface:
    """
    Concentric 0/1 rings of width s around the origin

    The origin itself is 1; elsewhere the stripe value of the radius.

    Parameters
    ----------
    s : float
        Ring width; s <= 0 gives the zero surface
    """
    s = float(s)
    if s <= 0.0:
        return _zero('rings', s=s)

    def rings_op(p: Point) -> Real:
        if p.x == 0 and p.y == 0:
            return 1.0
        return _band(float(np.sqrt(p.x * p.x + p.y * p.y)), s)

    return Surface(rings_op, name='rings', params={'s': s})


# ============================================================================
# Shapes
# ============================================================================

def ellipse(a: Real = DEFAULT_EXTENT, b: Real = DEFAULT_EXTENT) -> Surface:
    """
    Filled axis-aligned ellipse

    1 inside or on (x/a)^2 + (y/b)^2 = 1, 0 outside.

    Parameters
    ----------
    a, b : float
        Semi-axes along x and y; either <= 0 gives the zero surface

    Examples
    --------
    >>> ellipse(2, 1)(Point(2, 0))
    1.0
    >>> ellipse(2, 1)(Point(2.1, 0))
    0.0
    """
    a, b = float(a), float(b)
    if a <= 0.0 or b <= 0.0:
        return _zero('ellipse', a=a, b=b)

    def ellipse_op(p: Point) -> Real:
        r = (p.x * p.x) / (a * a) + (p.y * p.y) / (b * b)
        return 1.0 if r <= 1.0 else 0.0

    return Surface(ellipse_op, name='ellipse', params={'a': a, 'b': b})


def rectangle(a: Real = DEFAULT_EXTENT, b: Real = DEFAULT_EXTENT) -> Surface:
    """
    Filled axis-aligned box [-a, a] x [-b, b], edges included

    Parameters
    ----------
    a, b : float
        Half-extents along x and y; either <= 0 gives the zero surface
    """
    a, b = float(a), float(b)
    if a <= 0.0 or b <= 0.0:
        return _zero('rectangle', a=a, b=b)

    def rectangle_op(p: Point) -> Real:
        inside = -a <= p.x <= a and -b <= p.y <= b
        return 1.0 if inside else 0.0

    return Surface(rectangle_op, name='rectangle', params={'a': a, 'b': b})
