"""
surfacepy Core Module

Fundamental types for surface algebra.

This module provides:
- Point: Immutable plane coordinates
- Surface: Introspectable point -> real callable
- as_surface: Wrap plain callables
- DegenerateParameterWarning: Issued for constant-collapsing parameters
"""

from .point import (
    Real,
    Point,
    ORIGIN,
)

from .surface import (
    SurfaceFunc,
    Surface,
    as_surface,
    warn_degenerate,
    DegenerateParameterWarning,
)

__all__ = [
    # Coordinates
    'Real',
    'Point',
    'ORIGIN',

    # Surfaces
    'SurfaceFunc',
    'Surface',
    'as_surface',
    'warn_degenerate',
    'DegenerateParameterWarning',
]
