"""
Configuration Module

This module loads fan curve configuration from YAML files and turns raw
point definitions into a Curve, adding the default anchor point.
"""

import logging
from typing import Any, Dict, Iterable, Optional, Set, Union
import yaml

from .control.curve import Curve
from .control.errors import ConfigError, ParseError
from .control.point import Point

logger = logging.getLogger(__name__)

# Floor of every curve unless the caller already has a point at 0 degrees
DEFAULT_ANCHOR = Point(0, 0)

DEFAULT_CONFIG: Dict[str, Any] = {
    "anchor": str(DEFAULT_ANCHOR),
    "curve": [],
}

PointSpec = Union[str, Iterable[int], Point]


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from a YAML file

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Configuration dictionary with defaults filled in

    Raises:
        ConfigError: If the file cannot be read or has the wrong shape
    """
    try:
        with open(config_path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config {config_path}: {e}") from e

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"Config {config_path} must contain a mapping")

    config = dict(DEFAULT_CONFIG)
    config.update(loaded)

    if config["curve"] is None:
        config["curve"] = []
    if not isinstance(config["curve"], list):
        raise ConfigError(f"'curve' in {config_path} must be a list of points")

    logger.debug(f"Loaded config from {config_path}: {config}")
    return config


def parse_point(item: PointSpec) -> Point:
    """Parse a single point definition

    Accepts a "T:S" literal, a [temperature, speed] pair as written in YAML,
    or a Point.
    """
    if isinstance(item, Point):
        return item
    if isinstance(item, str):
        return Point.parse(item)
    if isinstance(item, (list, tuple)) and len(item) == 2:
        return Point(item[0], item[1])
    raise ParseError(f"Invalid point {item!r}, the correct format is <temperature>:<speed>")


def parse_points(items: Iterable[PointSpec]) -> Set[Point]:
    """Parse point definitions into a set, failing on the first bad one"""
    return {parse_point(item) for item in items}


def anchor_from_config(config: Dict[str, Any]) -> Optional[Point]:
    """Get the anchor point from configuration, None when disabled"""
    anchor = config.get("anchor", str(DEFAULT_ANCHOR))
    if anchor is None:
        return None
    return parse_point(anchor)


def build_curve(items: Iterable[PointSpec], anchor: Optional[Point] = DEFAULT_ANCHOR) -> Curve:
    """Build a curve from raw point definitions

    The anchor is added unless a point already sits at its temperature.

    Args:
        items: Point literals, pairs or points
        anchor: Implicit lowest point, None to disable

    Returns:
        Normalized curve

    Raises:
        ParseError: If any point definition is malformed
        ConstructionError: If the points cannot form a curve
    """
    points = parse_points(items)

    if anchor is not None and all(p.temperature != anchor.temperature for p in points):
        logger.debug(f"Adding anchor point {anchor}")
        points.add(anchor)

    return Curve.from_points(points)
