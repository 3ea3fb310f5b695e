"""Exceptions raised while building and querying fan curves."""


class FanCurveError(Exception):
    """Base exception for fan curve configuration errors"""
    pass

class ParseError(FanCurveError):
    """Raised when a point literal is malformed or out of range"""
    pass

class ConstructionError(FanCurveError):
    """Raised when a set of points cannot form a curve"""
    pass

class ConfigError(FanCurveError):
    """Raised when a configuration file cannot be loaded"""
    pass

class InternalConsistencyFault(RuntimeError):
    """Raised when a curve invariant has been broken.

    Not a FanCurveError: this is a programming fault, not bad input.
    """
    pass
