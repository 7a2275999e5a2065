"""
Surface combinators

Key Components
--------------
Geometric Transforms : rotate, translate, scale, invert, flip
Value Transforms : mul, add
Composition : compose, evaluate

Examples
--------
>>> from surfacepy.combinators import rotate, translate, evaluate
>>>
>>> tilted = rotate(translate(stripes(2), Point(1, 0)), 30)
>>> masked = evaluate(lambda a, b: a * b, tilted, ellipse(4, 2))
"""

from .transforms import (
    rotate,
    translate,
    scale,
    invert,
    flip,
    mul,
    add,
)

from .composition import (
    compose,
    evaluate,
)

__all__ = [
    # Geometric transforms
    'rotate',
    'translate',
    'scale',
    'invert',
    'flip',

    # Value transforms
    'mul',
    'add',

    # Composition
    'compose',
    'evaluate',
]
