"""
Primitive surface generators

Examples
--------
>>> from surfacepy.fields import stripes, checker, ellipse
>>> pattern = checker(0.5)
>>> pattern(Point(0.25, 0.75))
0.0
"""

from .generators import (
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

__all__ = [
    # Defaults
    'DEFAULT_PERIOD',
    'DEFAULT_EXTENT',

    # Parameterless
    'plain',
    'slope',
    'sqr',
    'sin_wave',
    'cos_wave',

    # Periodic
    'steps',
    'stripes',
    'checker',
    'rings',

    # Shapes
    'ellipse',
    'rectangle',
]
