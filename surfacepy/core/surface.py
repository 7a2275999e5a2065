"""
Surface representation

A surface is any pure callable mapping a Point to a real value. Every
generator and combinator in surfacepy returns a Surface: a thin immutable
wrapper around the evaluation closure that also remembers how it was built
(name, parameters, child surfaces). The extra bookkeeping is only used for
repr() and explain(); evaluation is exactly the wrapped closure.

Plain functions and lambdas are accepted anywhere a surface is expected.
"""

from typing import Callable, Dict, Any, Optional, Tuple
import numbers
import operator
import warnings

from .point import Point, Real


SurfaceFunc = Callable[[Point], Real]


class DegenerateParameterWarning(UserWarning):
    """Surface built with parameters that collapse it to a constant"""


def warn_degenerate(name: str, fallback: Real, stacklevel: int = 3, **params) -> None:
    """
    Report a degenerate construction

    The surface is still built and stays total; it just evaluates to
    ``fallback`` everywhere.
    """
    params_str = ', '.join(f"{k}={v!r}" for k, v in params.items())
    warnings.warn(
        f"{name}({params_str}) is degenerate; surface evaluates to {fallback}",
        DegenerateParameterWarning,
        stacklevel=stacklevel
    )


class Surface:
    """
    Callable scalar field over the plane

    Parameters
    ----------
    func : Callable[[Point], float]
        Evaluation closure
    name : str
        Generator or combinator name (for repr/explain)
    params : Dict[str, Any], optional
        Parameters captured at construction
    children : Tuple[Surface, ...]
        Sub-surfaces this surface was built from

    Examples
    --------
    >>> from surfacepy import stripes, Point
    >>> s = stripes(2.0).rotate(45).add(1)
    >>> s
    add(rotate(stripes(s=2.0), deg=45.0), c=1.0)
    >>> s(Point(0.5, 0.5))
    1.0
    >>> s.at(0.5, 0.5)
    1.0
    """

    __slots__ = ('_func', '_name', '_params', '_children')

    def __init__(
        self,
        func: SurfaceFunc,
        name: str = 'surface',
        params: Optional[Dict[str, Any]] = None,
        children: Tuple['Surface', ...] = ()
    ):
        if not callable(func):
            raise TypeError(f"Surface requires a callable, got {type(func)}")
        object.__setattr__(self, '_func', func)
        object.__setattr__(self, '_name', name)
        object.__setattr__(self, '_params', dict(params or {}))
        object.__setattr__(self, '_children', tuple(children))

    @property
    def func(self) -> SurfaceFunc:
        return self._func

    @property
    def name(self) -> str:
        return self._name

    @property
    def params(self) -> Dict[str, Any]:
        """Copy of the captured parameters"""
        return dict(self._params)

    @property
    def children(self) -> Tuple['Surface', ...]:
        return self._children

    def __setattr__(self, name, value):
        """Prevent modification (immutable)"""
        raise AttributeError("Surface objects are immutable")

    def __delattr__(self, name):
        """Prevent deletion"""
        raise AttributeError("Surface objects are immutable")

    def __call__(self, p: Point) -> Real:
        return self._func(p)

    def at(self, x: Real, y: Real) -> Real:
        """Evaluate at (x, y)"""
        return self._func(Point(x, y))

    def __repr__(self) -> str:
        args = [repr(child) for child in self._children]
        args += [f"{k}={v!r}" for k, v in self._params.items()]
        return f"{self._name}({', '.join(args)})"

    def explain(self) -> str:
        """
        Explain the composition tree

        Returns
        -------
        explanation : str
            One line per node, children indented under their parent

        Examples
        --------
        >>> print(translate(rings(2), (1, 1)).explain())
        translate(v=Point(x=1.0, y=1.0))
          rings(s=2.0)
        """
        lines = []

        def walk(surface: 'Surface', depth: int):
            params_str = ', '.join(
                f"{k}={v!r}" for k, v in surface._params.items()
            )
            lines.append(f"{'  ' * depth}{surface._name}({params_str})")
            for child in surface._children:
                walk(child, depth + 1)

        walk(self, 0)
        return "\n".join(lines)

    # ========================================================================
    # Fluent transforms
    # ========================================================================

    def rotate(self, deg: Real) -> 'Surface':
        from ..combinators.transforms import rotate
        return rotate(self, deg)

    def translate(self, v) -> 'Surface':
        from ..combinators.transforms import translate
        return translate(self, v)

    def scale(self, s) -> 'Surface':
        from ..combinators.transforms import scale
        return scale(self, s)

    def invert(self) -> 'Surface':
        from ..combinators.transforms import invert
        return invert(self)

    def flip(self) -> 'Surface':
        from ..combinators.transforms import flip
        return flip(self)

    def mul(self, c: Real) -> 'Surface':
        from ..combinators.transforms import mul
        return mul(self, c)

    def add(self, c: Real) -> 'Surface':
        from ..combinators.transforms import add
        return add(self, c)

    # ========================================================================
    # Arithmetic
    # ========================================================================

    def _combine(self, other, op: Callable, scalar_op: Callable) -> 'Surface':
        from ..combinators.composition import evaluate
        if isinstance(other, numbers.Real):
            return scalar_op(other)
        if callable(other):
            return evaluate(op, self, other)
        return NotImplemented

    def __add__(self, other):
        return self._combine(other, operator.add, self.add)

    def __radd__(self, other):
        if isinstance(other, numbers.Real):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        return self._combine(other, operator.sub, lambda c: self.add(-c))

    def __rsub__(self, other):
        if isinstance(other, numbers.Real):
            return self.mul(-1.0).add(other)
        return NotImplemented

    def __mul__(self, other):
        return self._combine(other, operator.mul, self.mul)

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self.mul(other)
        return NotImplemented

    def __neg__(self) -> 'Surface':
        return self.mul(-1.0)


def as_surface(f: SurfaceFunc) -> Surface:
    """
    Wrap any point -> real callable as a Surface

    Surfaces are returned unchanged.

    Raises
    ------
    TypeError
        If f is not callable
    """
    if isinstance(f, Surface):
        return f
    if not callable(f):
        raise TypeError(f"Expected a callable surface, got {type(f)}")
    return Surface(f, name=getattr(f, '__name__', type(f).__name__))
