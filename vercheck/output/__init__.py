"""Reporting records consumed by output collaborators."""

from .outdated import Appcast, Latest, Outdated, VersionCheck, new_outdated

__all__ = ['Appcast', 'Latest', 'Outdated', 'VersionCheck', 'new_outdated']
