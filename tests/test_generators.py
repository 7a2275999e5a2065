"""
Tests for primitive surface generators

These tests verify:
    - Output of each generator at known points
    - Stripe boundary ownership on both sides of zero
    - Degenerate parameters give the zero surface and warn
    - Non-finite coordinates propagate without raising
"""

import math
import warnings

import numpy as np
import pytest

from surfacepy import (
    Point,
    ORIGIN,
    DegenerateParameterWarning,
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


SAMPLE_POINTS = [
    Point(0, 0),
    Point(0.5, -0.5),
    Point(-3.25, 7),
    Point(12, 1e6),
    Point(-1e-9, 2.5),
]

GRID = np.linspace(-5.0, 5.0, 81)


class TestParameterlessGenerators:
    """Test plain, slope, sqr and the waves."""

    def test_plain_is_zero(self):
        for p in SAMPLE_POINTS:
            assert plain()(p) == 0.0

    def test_slope_returns_x(self):
        assert slope()(Point(3, 7)) == 3.0

    def test_sqr(self):
        assert sqr()(Point(-3, 1)) == 9.0

    def test_sin_wave(self):
        assert sin_wave()(Point(math.pi / 2, 0)) == pytest.approx(1.0)
        assert sin_wave()(ORIGIN) == 0.0

    def test_cos_wave(self):
        assert cos_wave()(ORIGIN) == 1.0
        assert cos_wave()(Point(math.pi, 5)) == pytest.approx(-1.0)

    def test_results_are_floats(self):
        assert type(sin_wave()(Point(1, 0))) is float
        assert type(stripes(1)(Point(1, 0))) is float


class TestSteps:
    """Test the staircase generator."""

    def test_floor_of_ratio(self):
        assert steps(1)(Point(2.5, 0)) == 2.0
        assert steps(2)(Point(5, 0)) == 2.0

    def test_negative_side(self):
        assert steps(0.5)(Point(-0.25, 0)) == -1.0

    def test_default_period(self):
        assert steps().params == {'s': 1.0}
        assert steps()(Point(3.9, 0)) == 3.0


class TestStripes:
    """Test vertical banding and its boundary rule."""

    def test_first_bands(self):
        assert stripes(1)(Point(0.5, 0)) == 0.0
        assert stripes(1)(Point(1.5, 0)) == 1.0

    def test_positive_boundary_belongs_to_lower_band(self):
        s = stripes(1)
        assert s(Point(1.0, 0)) == s(Point(0.5, 0))
        assert s(Point(2.0, 0)) == s(Point(1.5, 0))

    def test_negative_boundary_belongs_to_outer_band(self):
        s = stripes(1)
        assert s(Point(-1.0, 0)) == s(Point(-1.5, 0))
        assert s(Point(-1.0, 0)) != s(Point(-0.5, 0))

    def test_zero_belongs_to_negative_band(self):
        s = stripes(1)
        assert s(ORIGIN) == s(Point(-0.5, 0))
        assert s(ORIGIN) != s(Point(0.5, 0))

    def test_ignores_y(self):
        s = stripes(2)
        assert s(Point(0.7, -40)) == s(Point(0.7, 3))

    def test_period(self):
        s = stripes(2)
        assert s(Point(1.0, 0)) == 0.0
        assert s(Point(3.0, 0)) == 1.0

    def test_binary_output(self):
        s = stripes(0.75)
        values = {s(Point(x, 0)) for x in GRID}
        assert values == {0.0, 1.0}


class TestChecker:
    """Test the checkerboard."""

    def test_adjacent_squares_differ(self):
        c = checker(1)
        assert c(Point(0.5, 0.5)) != c(Point(1.5, 0.5))
        assert c(Point(0.5, 0.5)) != c(Point(0.5, 1.5))
        assert c(Point(0.5, 0.5)) == c(Point(1.5, 1.5))

    def test_known_values(self):
        c = checker(1)
        assert c(Point(0.5, 0.5)) == 1.0
        assert c(Point(1.5, 0.5)) == 0.0
        assert c(ORIGIN) == 1.0

    def test_binary_output(self):
        c = checker(0.6)
        values = {c(Point(x, y)) for x in GRID[::4] for y in GRID[::4]}
        assert values == {0.0, 1.0}


class TestRings:
    """Test concentric rings."""

    def test_origin_is_one(self):
        assert rings(1)(ORIGIN) == 1.0
        assert rings(3)(ORIGIN) == 1.0

    def test_radius_banding(self):
        r = rings(1)
        assert r(Point(0.5, 0)) == 0.0
        assert r(Point(0, 1.5)) == 1.0
        assert r(Point(3, 4)) == 0.0

    def test_rotationally_symmetric(self):
        r = rings(0.5)
        assert r(Point(1.2, 0)) == r(Point(0, -1.2))


class TestShapes:
    """Test ellipse and rectangle."""

    def test_ellipse_boundary(self):
        assert ellipse(2, 1)(Point(2, 0)) == 1.0
        assert ellipse(2, 1)(Point(2.1, 0)) == 0.0

    def test_ellipse_inside(self):
        assert ellipse(2, 1)(Point(1, 0.5)) == 1.0
        assert ellipse(2, 1)(Point(0, 1.01)) == 0.0

    def test_rectangle_boundary(self):
        assert rectangle(1, 1)(Point(1, 1)) == 1.0
        assert rectangle(1, 1)(Point(1.1, 1)) == 0.0

    def test_rectangle_extents(self):
        box = rectangle(3, 0.5)
        assert box(Point(-3, -0.5)) == 1.0
        assert box(Point(0, 0.6)) == 0.0

    def test_default_extents(self):
        assert ellipse().params == {'a': 1.0, 'b': 1.0}
        assert rectangle().params == {'a': 1.0, 'b': 1.0}


class TestDegenerateParameters:
    """Non-positive parameters collapse to the zero surface."""

    @pytest.mark.parametrize('generator', [steps, stripes, checker, rings])
    @pytest.mark.parametrize('s', [0, -1, -0.25])
    def test_periodic_zero(self, generator, s):
        with pytest.warns(DegenerateParameterWarning):
            surface = generator(s)
        for p in SAMPLE_POINTS:
            assert surface(p) == 0.0

    @pytest.mark.parametrize('generator', [ellipse, rectangle])
    @pytest.mark.parametrize('a, b', [(0, 1), (1, 0), (-2, 3), (2, -3), (-1, -1)])
    def test_shape_zero(self, generator, a, b):
        with pytest.warns(DegenerateParameterWarning):
            surface = generator(a, b)
        for p in SAMPLE_POINTS:
            assert surface(p) == 0.0

    def test_positive_parameters_do_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            stripes(1)
            checker(2)
            ellipse(1, 2)

    def test_warning_names_generator(self):
        with pytest.warns(DegenerateParameterWarning, match=r"stripes\(s=-1\.0\)"):
            stripes(-1)


class TestNonFiniteInput:
    """NaN and infinities propagate instead of raising."""

    def test_nan_propagates(self):
        nan_point = Point(float('nan'), 0)
        assert math.isnan(slope()(nan_point))
        assert math.isnan(steps(1)(nan_point))
        assert math.isnan(stripes(1)(nan_point))

    def test_infinity_does_not_raise_or_warn(self):
        inf_point = Point(float('inf'), float('inf'))
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            assert math.isnan(sin_wave()(inf_point))
            assert math.isnan(stripes(1)(inf_point))
            assert math.isinf(steps(1)(inf_point))
            assert ellipse(1, 1)(inf_point) == 0.0

    def test_nan_shape_is_outside(self):
        assert ellipse(1, 1)(Point(float('nan'), 0)) == 0.0
        assert rectangle(1, 1)(Point(float('nan'), 0)) == 0.0
