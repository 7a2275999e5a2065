"""
surfacepy: combinators for scalar fields over the plane

A surface is a pure function from a 2D point to a real value. Patterns
(stripes, checkers, rings, shapes) come from generators; transforms
(rotate, translate, scale, invert, flip, mul, add) wrap surfaces into new
ones; compose and evaluate glue arbitrary functions together.

Examples
--------
>>> from surfacepy import Point, stripes, ellipse, rotate, evaluate
>>>
>>> band = rotate(stripes(0.5), 30)
>>> badge = evaluate(lambda a, b: a * b, band, ellipse(2, 1))
>>> badge(Point(0.1, 0.2))
0.0
>>> print(badge.explain())
evaluate[<lambda>]()
  rotate(deg=30.0)
    stripes(s=0.5)
  ellipse(a=2.0, b=1.0)
"""

from .core import (
    Real,
    Point,
    ORIGIN,
    SurfaceFunc,
    Surface,
    as_surface,
    DegenerateParameterWarning,
)

from .fields import (
    DEFAULT_PERIOD,
    DEFAULT_EXTENT,
    plain,
    slope,
    sqr,
    sin_wave,
    cos_wave,
    steps,
    stripes,
    checker,
    rings,
    ellipse,
    rectangle,
)

from .combinators import (
    rotate,
    translate,
    scale,
    invert,
    flip,
    mul,
    add,
    compose,
    evaluate,
)


__version__ = '0.1.0'


__all__ = [
    # Core types
    'Real',
    'Point',
    'ORIGIN',
    'SurfaceFunc',
    'Surface',
    'as_surface',
    'DegenerateParameterWarning',

    # Generators
    'DEFAULT_PERIOD',
    'DEFAULT_EXTENT',
    'plain',
    'slope',
    'sqr',
    'sin_wave',
    'cos_wave',
    'steps',
    'stripes',
    'checker',
    'rings',
    'ellipse',
    'rectangle',

    # Transforms
    'rotate',
    'translate',
    'scale',
    'invert',
    'flip',
    'mul',
    'add',

    # Composition
    'compose',
    'evaluate',
]


# Quick reference documentation
QUICK_REFERENCE = """
surfacepy Quick Reference
=========================

BASIC USAGE:
    from surfacepy import Point, checker, rotate

    pattern = rotate(checker(2), 45)
    value = pattern(Point(1.0, 0.5))

GENERATORS:
    plain()            - Constant 0
    slope()            - x
    sqr()              - x^2
    sin_wave()         - sin(x)
    cos_wave()         - cos(x)
    steps(s)           - floor(x / s)
    stripes(s)         - 0/1 bands along x
    checker(s)         - 0/1 checkerboard
    rings(s)           - 0/1 concentric rings
    ellipse(a, b)      - Filled ellipse
    rectangle(a, b)    - Filled box [-a, a] x [-b, b]

TRANSFORMS:
    rotate(f, deg)     - Rotate counter-clockwise
    translate(f, v)    - Move by v
    scale(f, s)        - Stretch by (s.x, s.y)
    invert(f)          - Swap axes
    flip(f)            - Mirror across the y axis
    mul(f, c)          - Multiply output
    add(f, c)          - Offset output

COMPOSITION:
    compose(f, g, h)   - h(g(f(x)))
    evaluate(h, f, g)  - p -> h(f(p), g(p))

FLUENT / OPERATORS:
    checker(2).rotate(45).translate((1, 0))
    2 * rings(1) + ellipse(3, 3)

INTROSPECTION:
    repr(surface)      - Construction tree in call syntax
    surface.explain()  - Indented plan
"""


def help():
    """Print quick reference"""
    print(QUICK_REFERENCE)
