# Path: rosetta_verify/core/__init__.py
"""
rosetta_verify Core Package

Core utilities shared by every layer.

Submodules:
    - logger: IPO-aware logging system
    - errors: ParserError and AsserterError
"""

from .errors import ParserError, AsserterError

__all__ = [
    'ParserError',
    'AsserterError',
]
