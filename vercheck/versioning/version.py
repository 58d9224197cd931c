"""Version candidate value and its derivations."""

import re
from dataclasses import dataclass
from typing import Dict, Any

from ..exceptions import ExtractionError
from . import patterns
from .validator import compare_versions


@dataclass
class Version:
    """One candidate version string.

    ``value`` is the literal matched text. ``weight`` is only comparable within
    one ``Groups.weighten()`` pass. The zero Version (``Version('')``) marks an
    unset preferred version.
    """
    value: str = ''
    weight: int = 0
    prerelease: bool = False

    @property
    def is_set(self) -> bool:
        return self.value != ''

    def __bool__(self) -> bool:
        return self.is_set

    def to_dict(self) -> Dict[str, Any]:
        return {
            'value': self.value,
            'weight': self.weight,
            'prerelease': self.prerelease,
        }

    def _match(self, regex: re.Pattern, method: str, group: int = 0) -> str:
        match = regex.search(self.value)
        if not match:
            raise ExtractionError(method, self.value)
        return match.group(group)

    def less_than(self, other: 'Version') -> bool:
        """Return whether this version orders strictly before ``other``.

        Raises:
            VersionParseError: if either value is not a valid version.
        """
        return compare_versions(self.value, other.value) < 0

    def major(self) -> str:
        """Major semantic version part."""
        return self._match(patterns.MAJOR_RE, 'major')

    def minor(self) -> str:
        """Minor semantic version part."""
        return self._match(patterns.MINOR_RE, 'minor', 1)

    def patch(self) -> str:
        """Patch semantic version part."""
        return self._match(patterns.PATCH_RE, 'patch', 1)

    def major_minor(self) -> str:
        return self._match(patterns.MAJOR_MINOR_RE, 'major_minor')

    def major_minor_patch(self) -> str:
        return self._match(patterns.MAJOR_MINOR_PATCH_RE, 'major_minor_patch')

    def before_comma(self) -> str:
        """Part before the first comma."""
        return self._match(patterns.BEFORE_COMMA_RE, 'before_comma', 1)

    def after_comma(self) -> str:
        """Part after the first comma."""
        return self._match(patterns.AFTER_COMMA_RE, 'after_comma', 1)

    def before_colon(self) -> str:
        return self._match(patterns.BEFORE_COLON_RE, 'before_colon', 1)

    def after_colon(self) -> str:
        return self._match(patterns.AFTER_COLON_RE, 'after_colon', 1)

    def no_dots(self) -> str:
        return self.value.replace('.', '')

    def dots_to_underscores(self) -> str:
        return self.value.replace('.', '_')

    def dots_to_hyphens(self) -> str:
        return self.value.replace('.', '-')

    def interpolate_into_string(self, content: str) -> str:
        """Render this version into ``content``; see ``interpolator``."""
        from .interpolator import interpolate_into_string
        return interpolate_into_string(self, content)
