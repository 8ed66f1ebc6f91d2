# Path: rosetta_verify/core/errors.py
"""
Error Types

The verification core has a single domain error, ParserError. Every
failed check raises it with a human-readable message; callers decide
whether to retry or reject. Lower-level messages are wrapped with
context as they propagate, for example:

    "Match index 4 out of range: index 4 not valid: operation amounts
     are not equal: group descriptions not met"

AsserterError is raised by the operation asserter collaborator only.
"""


class ParserError(ValueError):
    """Raised when operations do not satisfy an expected shape or intent."""


class AsserterError(ValueError):
    """Raised when the asserter cannot evaluate an operation or list."""


__all__ = ['ParserError', 'AsserterError']
