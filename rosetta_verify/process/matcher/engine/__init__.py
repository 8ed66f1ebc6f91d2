# Path: rosetta_verify/process/matcher/engine/__init__.py
"""
Matching Engine

Main entry point for description matching, and the loader for
Descriptions kept as YAML files.
"""

from .descriptor_matcher import DescriptorMatcher
from .description_loader import DescriptionLoader

__all__ = ['DescriptorMatcher', 'DescriptionLoader']
