"""
Control package for Fancurve

This package provides the fan curve model: control points, the curve
itself and the errors raised while building it.
"""

from .curve import Curve
from .errors import (
    FanCurveError,
    ParseError,
    ConstructionError,
    ConfigError,
    InternalConsistencyFault,
)
from .point import Point, MIN_VALUE, MAX_VALUE

__all__ = [
    'Curve',
    'Point',
    'MIN_VALUE',
    'MAX_VALUE',
    'FanCurveError',
    'ParseError',
    'ConstructionError',
    'ConfigError',
    'InternalConsistencyFault',
]
