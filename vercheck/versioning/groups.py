"""Per-source version groups and the cross-source weighting algorithms.

A ``Group`` holds the candidates scraped from one source plus the URLs that
produced them. ``Groups`` holds every source of one checking run and narrows
them down in three passes:

1. ``weighten()``: weight each candidate by how often it was seen across all groups
2. ``group_versions()``: merge groups that prefer the same version
3. ``clean_by_weights()``: drop groups below the average weight (unless backed by a URL)

Each pass builds a new list of groups and swaps it into ``self.groups``.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Any, Optional

from ..exceptions import EmptyInputError, VersionParseError
from .extractor import extract_all
from .validator import parse_version
from .version import Version

logger = logging.getLogger('vercheck.groups')


@dataclass
class Group:
    """One source's candidate versions and URLs."""
    versions: List[Version] = field(default_factory=list)
    preferred_version: Version = field(default_factory=Version)
    urls: List[str] = field(default_factory=list)

    def __post_init__(self):
        self.versions = list(self.versions)
        self.urls = list(self.urls)
        if not self.preferred_version and self.versions:
            self.preferred_version = self.versions[0]

    def add_version(self, value: str, weight: int = 0, prerelease: bool = False) -> Version:
        """Append a version. The first version added becomes the preferred one."""
        version = Version(value, weight, prerelease)
        self.versions.append(version)
        if not self.preferred_version:
            self.preferred_version = version
        return version

    def add_url(self, url: str) -> None:
        self.urls.append(url)

    def extract_all(self, content: str) -> List[str]:
        """Extract version candidates from ``content`` and add them with weight 0."""
        candidates = extract_all(content)
        for candidate in candidates:
            self.add_version(candidate, 0)
        return candidates

    def to_dict(self) -> Dict[str, Any]:
        return {
            'versions': [v.to_dict() for v in self.versions],
            'preferred_version': self.preferred_version.to_dict(),
            'urls': list(self.urls),
        }


class Groups:
    """All groups of one checking run."""

    def __init__(self, groups: Optional[List[Group]] = None):
        self.groups: List[Group] = list(groups or [])

    def __len__(self) -> int:
        return len(self.groups)

    def __iter__(self) -> Iterator[Group]:
        return iter(self.groups)

    def add_group(self, group: Group) -> None:
        self.groups.append(group)

    def weighten(self) -> None:
        """Weight each version by how often the same value appears in all groups.

        A version's weight is identical in every group. The preferred version of
        a group becomes its heaviest version; on ties the earliest one wins.
        """
        weights = Counter(v.value for group in self.groups for v in group.versions)

        groups: List[Group] = []
        for group in self.groups:
            g = Group(urls=group.urls)
            preferred = Version()
            for v in group.versions:
                weight = weights[v.value]
                if not preferred or preferred.weight < weight:
                    preferred = Version(v.value, weight, v.prerelease)
                g.add_version(v.value, weight, v.prerelease)
            g.preferred_version = preferred
            groups.append(g)

        logger.debug('weighted %d groups over %d distinct versions', len(groups), len(weights))
        self.groups = groups

    def group_versions(self) -> None:
        """Merge groups by their preferred version, collecting their first URLs.

        Groups without a preferred version fall back to their first version;
        groups with no versions at all are dropped.
        """
        merged: Dict[str, Group] = {}

        for group in self.groups:
            if group.preferred_version:
                source = group.preferred_version
            elif group.versions and group.versions[0]:
                source = group.versions[0]
            else:
                continue

            key = source.value
            g = merged.get(key)
            if g is None:
                g = Group()
                g.add_version(source.value, source.weight, source.prerelease)
                merged[key] = g
            if group.urls:
                g.add_url(group.urls[0])

        logger.debug('grouped %d groups into %d versions', len(self.groups), len(merged))
        self.groups = list(merged.values())

    def clean_by_weights(self) -> None:
        """Drop groups whose preferred weight is below the average.

        A group backed by at least one URL is always kept.

        Raises:
            EmptyInputError: if there are no groups to average over.
        """
        if not self.groups:
            raise EmptyInputError('clean_by_weights')

        total = sum(group.preferred_version.weight for group in self.groups)
        average_weight = total // len(self.groups)

        groups = [
            group for group in self.groups
            if group.preferred_version.weight >= average_weight or len(group.urls) > 0
        ]

        logger.debug(
            'cleaned groups by weight average=%d kept=%d dropped=%d',
            average_weight, len(groups), len(self.groups) - len(groups))
        self.groups = groups

    def resolve(self) -> None:
        """Run ``weighten``, ``group_versions`` and ``clean_by_weights`` in order.

        Raises:
            EmptyInputError: if no groups are left to clean.
        """
        self.weighten()
        self.group_versions()
        self.clean_by_weights()
        logger.info(
            'resolved versions: %s',
            ', '.join(f'{g.preferred_version.value}({g.preferred_version.weight})' for g in self.groups))

    def suggest_latest(self) -> Optional[Version]:
        """Return the highest preferred version across all groups.

        Candidates that are not valid versions are skipped.
        """
        latest: Optional[Version] = None
        for group in self.groups:
            candidate = group.preferred_version
            if not candidate:
                continue
            try:
                parse_version(candidate.value)
            except VersionParseError as exc:
                logger.debug('skipping non-semver candidate %r: %s', candidate.value, exc.message)
                continue
            if latest is None or latest.less_than(candidate):
                latest = candidate
        return latest

    def to_dict(self) -> Dict[str, Any]:
        return {'groups': [g.to_dict() for g in self.groups]}
