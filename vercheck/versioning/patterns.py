"""Precompiled version patterns and fixed lookup tables.

Everything here is compiled once at import time and never mutated:
- VERSION_RE: candidate extraction pattern
- IGNORED_VERSIONS: architecture tokens that look like versions
- derivation patterns used by ``Version`` (major/minor/patch, comma/colon slicing)
- interpolation token patterns (``#{version}`` and ``#{version.method...}``)
"""

import re
from typing import FrozenSet

# digits, then one or more of: separator + digits, or a single word character
VERSION_RE = re.compile(r'(?:\d+)(?:[._-]\d+|\w)+', re.ASCII)

# Architecture tokens, matched against the whole candidate
IGNORED_VERSIONS: FrozenSet[str] = frozenset({'86_64', '386', '64', '32'})

# ============================================================================
# DERIVATION PATTERNS
# ============================================================================

MAJOR_RE = re.compile(r'^\d', re.ASCII)
MINOR_RE = re.compile(r'^\d\.(\d)', re.ASCII)
PATCH_RE = re.compile(r'^\d\.\d\.(\d)', re.ASCII)
MAJOR_MINOR_RE = re.compile(r'^\d\.\d', re.ASCII)
MAJOR_MINOR_PATCH_RE = re.compile(r'^\d\.\d\.\d', re.ASCII)

BEFORE_COMMA_RE = re.compile(r'^([^,]*),')
AFTER_COMMA_RE = re.compile(r',(.*)\Z', re.DOTALL)
BEFORE_COLON_RE = re.compile(r'^([^:]*):')
AFTER_COLON_RE = re.compile(r':(.*)\Z', re.DOTALL)

# ============================================================================
# INTERPOLATION PATTERNS
# ============================================================================

# Bare ``#{version}`` or ``#{version.<methods>}``
INTERPOLATION_RE = re.compile(r'(#\{version\})|(#\{version\.[^}]*.[^{]*\})')

# Method chain inside a ``#{version.<methods>}`` token
INTERPOLATION_METHODS_RE = re.compile(r'^#\{version\.(.*)\}')
