"""
Plane coordinates

A Point is an immutable (x, y) pair of reals. Surfaces are sampled at
points; combinators build new points from old ones but never modify them.
"""

from typing import Tuple


Real = float


class Point:
    """
    Immutable 2D coordinate

    Any real values are accepted, including NaN and infinities, which
    simply propagate through whatever surface samples the point.

    Parameters
    ----------
    x : float
        Horizontal coordinate
    y : float
        Vertical coordinate

    Examples
    --------
    >>> p = Point(3, 7)
    >>> p.x
    3.0
    >>> print(p)
    3 7
    >>> p - Point(1, 1)
    Point(x=2.0, y=6.0)
    """

    __slots__ = ('_x', '_y')

    def __init__(self, x: Real, y: Real):
        object.__setattr__(self, '_x', float(x))
        object.__setattr__(self, '_y', float(y))

    @property
    def x(self) -> Real:
        """Horizontal coordinate"""
        return self._x

    @property
    def y(self) -> Real:
        """Vertical coordinate"""
        return self._y

    def __setattr__(self, name, value):
        """Prevent modification (immutable)"""
        raise AttributeError("Point objects are immutable")

    def __delattr__(self, name):
        """Prevent deletion"""
        raise AttributeError("Point objects are immutable")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self) -> int:
        return hash((self._x, self._y))

    def __repr__(self) -> str:
        return f"Point(x={self._x!r}, y={self._y!r})"

    def __str__(self) -> str:
        """Space separated coordinates, e.g. ``3 7``"""
        return f"{self._x:g} {self._y:g}"

    def __add__(self, other: 'Point') -> 'Point':
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self._x + other._x, self._y + other._y)

    def __sub__(self, other: 'Point') -> 'Point':
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self._x - other._x, self._y - other._y)

    def __neg__(self) -> 'Point':
        return Point(-self._x, -self._y)

    def to_tuple(self) -> Tuple[Real, Real]:
        """
        Return as (x, y) tuple

        Returns
        -------
        coords : Tuple[float, float]
        """
        return (self._x, self._y)

    @classmethod
    def from_tuple(cls, coords) -> 'Point':
        """
        Create point from any (x, y) pair

        Points are returned unchanged.

        Examples
        --------
        >>> Point.from_tuple((1, 2))
        Point(x=1.0, y=2.0)
        """
        if isinstance(coords, Point):
            return coords
        x, y = coords
        return cls(x, y)


ORIGIN = Point(0.0, 0.0)
