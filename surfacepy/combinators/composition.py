"""
Generic composition utilities

- compose: Left-to-right function pipeline, any arity
- evaluate: Combine the outputs of several surfaces sampled at one point
"""

from typing import Callable

from ..core.point import Point, Real
from ..core.surface import Surface, as_surface


def compose(*functions: Callable) -> Callable:
    """
    Chain functions left-to-right (pipeline style)

    compose(f, g, h)(x) = h(g(f(x)))

    Signatures are not checked; each stage must accept what the previous
    one returns.

    Parameters
    ----------
    *functions : Callable
        Stages, applied first to last

    Returns
    -------
    composed : Callable
        Identity for no stages, the stage itself for one

    Examples
    --------
    >>> to_polar_radius = compose(lambda p: p.x * p.x + p.y * p.y, math.sqrt)
    >>> to_polar_radius(Point(3, 4))
    5.0
    >>> compose()(42)
    42
    """
    if not functions:
        return lambda x: x
    if len(functions) == 1:
        return functions[0]

    def composed(x):
        result = x
        for function in functions:
            result = function(result)
        return result

    names = [getattr(function, '__name__', 'op') for function in functions]
    composed.__name__ = ' → '.join(names)

    return composed


def evaluate(h: Callable[..., Real], *surfaces) -> Surface:
    """
    Lift an n-ary function into a surface

    evaluate(h, f1, ..., fn)(p) = h(f1(p), ..., fn(p))

    With no surfaces the point is ignored and h() is returned.

    Parameters
    ----------
    h : Callable
        Combining function taking one positional argument per surface
    *surfaces : SurfaceFunc
        Surfaces sampled at the same point

    Examples
    --------
    >>> blend = evaluate(max, checker(2), rings(3))
    >>> blend(Point(0, 0))
    1.0
    >>> evaluate(lambda: 0.5)(Point(9, 9))
    0.5
    """
    if not callable(h):
        raise TypeError(f"Expected a callable combiner, got {type(h)}")
    name = f"evaluate[{getattr(h, '__name__', type(h).__name__)}]"

    if not surfaces:
        return Surface(lambda p: h(), name=name)

    children = tuple(as_surface(f) for f in surfaces)

    def evaluate_op(p: Point) -> Real:
        return h(*(f(p) for f in children))

    return Surface(evaluate_op, name=name, children=children)
