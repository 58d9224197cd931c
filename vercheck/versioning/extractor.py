"""Candidate version extraction from free-form text."""

import logging
from typing import List

from .patterns import IGNORED_VERSIONS, VERSION_RE

logger = logging.getLogger('vercheck.versioning')


def extract_all(content: str) -> List[str]:
    """Extract from ``content`` everything that looks like a version.

    Matches are returned in the order found, duplicates included. Architecture
    tokens such as ``86_64`` are dropped.
    """
    versions: List[str] = []
    if not content:
        return versions

    for match in VERSION_RE.finditer(content):
        candidate = match.group(0)
        if candidate in IGNORED_VERSIONS:
            continue
        versions.append(candidate)

    logger.debug('extracted %d version candidates from %d chars', len(versions), len(content))
    return versions
