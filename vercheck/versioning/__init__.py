"""Version Detection Module.

Extracts version candidates from scraped text and resolves them across sources.

Architecture:
- patterns.py: Precompiled patterns and constant tables
- extractor.py: Candidate extraction
- validator.py: Version parsing and comparison
- version.py: Version value and derivations
- interpolator.py: Template interpolation
- groups.py: Per-source groups and cross-source weighting
"""

from .extractor import extract_all
from .groups import Group, Groups
from .interpolator import INTERPOLATION_METHODS, interpolate_into_string
from .patterns import IGNORED_VERSIONS
from .version import Version

__all__ = [
    'Group',
    'Groups',
    'IGNORED_VERSIONS',
    'INTERPOLATION_METHODS',
    'Version',
    'extract_all',
    'interpolate_into_string',
]
