"""
Fancurve - piecewise-linear fan curves

Maps a measured temperature to a fan speed by interpolating between
(temperature, speed) control points.

Example Usage:
    >>> from fancurve import build_curve
    >>> curve = build_curve(["50:50", "100:100"])
    >>> curve.evaluate(25)
    25
"""

from .config import DEFAULT_ANCHOR, build_curve, load_config
from .control import (
    Curve,
    Point,
    FanCurveError,
    ParseError,
    ConstructionError,
    ConfigError,
    InternalConsistencyFault,
)

__version__ = "0.1.0"

__all__ = [
    'Curve',
    'Point',
    'FanCurveError',
    'ParseError',
    'ConstructionError',
    'ConfigError',
    'InternalConsistencyFault',
    'DEFAULT_ANCHOR',
    'build_curve',
    'load_config',
]
