import sys
import pathlib

import pytest

# Ensure project root is on sys.path so 'import vercheck' works when pytest runs from
# different working directories or when running individual tests.
_ROOT = pathlib.Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from vercheck.versioning import Group, Groups


@pytest.fixture
def scraped_groups():
    """Four sources: three mention 1.0, one only mentions 2.0."""
    groups = Groups()
    pages = [
        ('https://example.com/releases', 'Latest release 1.0 for x86_64'),
        ('https://mirror.example.org/files', 'app-1.0.dmg (64 bit)'),
        ('https://example.com/feed.xml', '<item>Version 1.0 build 412</item>'),
        ('https://beta.example.com', 'Preview 2.0 available'),
    ]
    for url, text in pages:
        g = Group()
        g.extract_all(text)
        g.add_url(url)
        groups.add_group(g)
    return groups
