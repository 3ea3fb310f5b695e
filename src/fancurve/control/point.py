"""
Control Point Module

This module provides the Point value type, a single (temperature, speed)
calibration sample of a fan curve, and its textual "T:S" form.
"""

from dataclasses import dataclass

from .errors import ParseError

# Both fields are stored as unsigned bytes
MIN_VALUE = 0
MAX_VALUE = 255

SEPARATOR = ":"


def _parse_field(name: str, text: str, literal: str) -> int:
    # int() would also accept signs, whitespace and underscores
    if not text.isascii() or not text.isdigit():
        raise ParseError(f"Invalid {name} '{text}' in point '{literal}', "
                         f"the correct format is <temperature>:<speed>")
    return int(text)


@dataclass(frozen=True, order=True)
class Point:
    """A point in the fan curve.

    Points compare by temperature first, then by speed, which gives curves a
    deterministic order even when two samples share a temperature.

    Attributes:
        temperature: Temperature in degrees (0-255)
        speed: Fan speed as a PWM duty value (0-255)

    Examples:
        >>> Point.parse("45:128")
        Point(temperature=45, speed=128)
        >>> str(Point(45, 128))
        '45:128'
    """
    temperature: int
    speed: int

    def __post_init__(self):
        for name in ("temperature", "speed"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ParseError(f"Invalid {name} {value!r}, must be an integer")
            if not MIN_VALUE <= value <= MAX_VALUE:
                raise ParseError(f"Invalid {name} {value}, must be {MIN_VALUE}-{MAX_VALUE}")

    @classmethod
    def parse(cls, text: str) -> "Point":
        """Parse a point from its "<temperature>:<speed>" literal.

        Only the first separator splits the literal, so anything after it
        must be a single integer.

        Args:
            text: Point literal, e.g. "45:128"

        Returns:
            Parsed point

        Raises:
            ParseError: If the separator is missing, a field is not an
                integer, or a field is out of range
        """
        if not isinstance(text, str):
            raise ParseError(f"Invalid point {text!r}, must be a string")
        temperature, sep, speed = text.partition(SEPARATOR)
        if not sep:
            raise ParseError(f"Malformed point '{text}', "
                             f"the correct format is <temperature>:<speed>")
        return cls(_parse_field("temperature", temperature, text),
                   _parse_field("speed", speed, text))

    def __str__(self) -> str:
        return f"{self.temperature}{SEPARATOR}{self.speed}"
