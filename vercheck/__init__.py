"""vercheck: resolve the latest version of a package from scraped sources."""

from .exceptions import (
    ConfigurationError,
    EmptyInputError,
    ExtractionError,
    VercheckException,
    VersionParseError,
)
from .logging_utils import configure_logging
from .versioning import Group, Groups, Version, extract_all, interpolate_into_string

__all__ = [
    'ConfigurationError',
    'EmptyInputError',
    'ExtractionError',
    'Group',
    'Groups',
    'VercheckException',
    'Version',
    'VersionParseError',
    'configure_logging',
    'extract_all',
    'interpolate_into_string',
]
