"""
CLI package for Fancurve

This package provides the command-line interface for
computing fan speeds from a fan curve.
"""

from .interface import main

__all__ = ['main']
