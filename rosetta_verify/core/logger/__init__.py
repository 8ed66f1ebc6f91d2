# Path: rosetta_verify/core/logger/__init__.py
"""
rosetta_verify Logger Package

IPO-aware logging for the operation verification core.

Provides separate log streams for:
- INPUT layer (payload loading)
- PROCESS layer (grouping, matching, reconciliation)
- OUTPUT layer (result emission)
"""

from .ipo_logging import (
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
