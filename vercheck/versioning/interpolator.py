"""Version interpolation into template strings.

Templates use Ruby interpolation syntax: ``#{version}`` is replaced with the
version value, ``#{version.major.no_dots}`` applies each named method in order.
An unknown method leaves the whole template untouched.
"""

import logging
from types import MappingProxyType
from typing import Callable, Mapping

from .patterns import INTERPOLATION_METHODS_RE, INTERPOLATION_RE
from .version import Version

logger = logging.getLogger('vercheck.interpolator')

INTERPOLATION_METHODS: Mapping[str, Callable[[Version], str]] = MappingProxyType({
    'major': Version.major,
    'minor': Version.minor,
    'patch': Version.patch,
    'major_minor': Version.major_minor,
    'major_minor_patch': Version.major_minor_patch,
    'before_comma': Version.before_comma,
    'after_comma': Version.after_comma,
    'before_colon': Version.before_colon,
    'after_colon': Version.after_colon,
    'no_dots': Version.no_dots,
    'dots_to_underscores': Version.dots_to_underscores,
    'dots_to_hyphens': Version.dots_to_hyphens,
})


def interpolate_into_string(version: Version, content: str) -> str:
    """Interpolate ``version`` into ``content``.

    Tokens are evaluated in the order they appear in ``content``; each token's
    literal text is replaced everywhere in the accumulated result.

    Raises:
        ExtractionError: if a method in a chain cannot derive its component.
    """
    result = content

    for match in INTERPOLATION_RE.finditer(content):
        token = match.group(0)

        methods_match = INTERPOLATION_METHODS_RE.search(token)
        if not methods_match:
            result = result.replace(token, version.value)
            continue

        part = version.value
        for method in methods_match.group(1).split('.'):
            func = INTERPOLATION_METHODS.get(method)
            if func is None:
                logger.debug('unknown interpolation method %r in %r, leaving template as is', method, token)
                return content
            part = func(Version(part))

        result = result.replace(token, part)

    return result
