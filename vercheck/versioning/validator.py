"""Version validation utilities.

Parses candidate values as semantic versions for comparison. Candidate strings
scraped from pages are frequently not valid versions, so parsing failures
surface as ``VersionParseError`` for the caller to skip.
"""

import semver

from ..exceptions import VersionParseError


def parse_version(value: str) -> semver.Version:
    """Parse ``value`` into a comparable semantic version.

    A leading ``v`` is ignored and missing minor/patch parts default to 0, so
    ``1.0``, ``v2.3.4`` and ``1.2.3-SNAPSHOT`` are all accepted.

    Raises:
        VersionParseError: if ``value`` is empty or not a semantic version.
    """
    if not value:
        raise VersionParseError(value, 'Empty version')
    try:
        return semver.Version.parse(value.lstrip('vV'), optional_minor_and_patch=True)
    except ValueError as exc:
        raise VersionParseError(value, 'Malformed version') from exc


def compare_versions(v1: str, v2: str) -> int:
    """Compare two version strings using semantic version precedence.

    Returns:
        -1 if v1 < v2
         0 if v1 == v2
         1 if v1 > v2

    Raises:
        VersionParseError: if either value cannot be parsed.
    """
    p1 = parse_version(v1)
    p2 = parse_version(v2)
    return p1.compare(p2)
