"""Fan curve implementation."""

from fractions import Fraction
from typing import Iterable, Iterator, Tuple
import logging

from .errors import ConstructionError, InternalConsistencyFault
from .point import Point

logger = logging.getLogger(__name__)


class Curve:
    """Linear interpolation between temperature/speed points.

    A curve is built once from a set of points and is never mutated, so a
    single instance can be evaluated from several threads.
    """

    def __init__(self, points: Tuple[Point, ...]):
        """Initialize with already normalized points.

        No validation is done here: the points are trusted to be sorted by
        temperature and at least two. Use from_points() to build a curve
        from arbitrary input.

        Args:
            points: Points sorted by temperature, at least two
        """
        self._points = tuple(points)

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "Curve":
        """Build a curve from points in any order.

        Identical points are collapsed to one before sorting.

        Args:
            points: Control points

        Returns:
            Curve sorted by temperature

        Raises:
            ConstructionError: If fewer than two distinct points remain, or two
                points share a temperature with different speeds
        """
        ordered = sorted(set(points))

        for lower, upper in zip(ordered, ordered[1:]):
            if lower.temperature == upper.temperature:
                raise ConstructionError(
                    f"Conflicting speeds {lower.speed} and {upper.speed} "
                    f"for temperature {lower.temperature}"
                )

        if len(ordered) < 2:
            raise ConstructionError(
                f"A fan curve needs at least two points, got {len(ordered)}"
            )

        logger.debug(f"Built curve from points: {', '.join(str(p) for p in ordered)}")
        return cls(tuple(ordered))

    @property
    def points(self) -> Tuple[Point, ...]:
        return self._points

    @property
    def min_temperature(self) -> int:
        return self._points[0].temperature

    @property
    def max_temperature(self) -> int:
        return self._points[-1].temperature

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Curve):
            return NotImplemented
        return self._points == other._points

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:
        return f"Curve({', '.join(str(p) for p in self._points)})"

    def bounds(self, temperature: float) -> Tuple[Point, Point]:
        """Find the points enclosing a temperature.

        Pairs are scanned from the lowest temperature upward and the first
        adjacent pair with lower < temperature < upper wins. At or outside
        either end, and on an exact hit, both bounds are the same point.

        Args:
            temperature: Measured temperature

        Returns:
            (lower, upper) tuple of points

        Raises:
            InternalConsistencyFault: If the curve holds no points
        """
        if not self._points:
            raise InternalConsistencyFault("Bounds search on a curve without points")

        for lower, upper in zip(self._points, self._points[1:]):
            if temperature <= lower.temperature:
                return lower, lower
            if temperature < upper.temperature:
                return lower, upper

        # At or above the last point, or not comparable at all (NaN)
        last = self._points[-1]
        return last, last

    def evaluate(self, temperature: float) -> int:
        """Get interpolated fan speed for a temperature.

        Args:
            temperature: Measured temperature

        Returns:
            Fan speed, truncated toward zero (0-255)
        """
        lower, upper = self.bounds(temperature)

        if lower.temperature == upper.temperature:
            speed = lower.speed
        else:
            # Exact arithmetic, a float ratio can land just below a whole speed
            ratio = ((Fraction(temperature) - lower.temperature)
                     / (upper.temperature - lower.temperature))
            speed = int(lower.speed + ratio * (upper.speed - lower.speed))

        logger.debug(f"Temperature {temperature} between {lower} and {upper} -> speed {speed}")
        return speed
