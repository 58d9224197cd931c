"""Outdated-package status record for reporting collaborators."""

from dataclasses import dataclass, asdict, field
from http import HTTPStatus
from typing import Dict, Any


@dataclass
class Appcast:
    """Feed the versions were checked against and its HTTP response status."""
    url: str
    status_code: int | HTTPStatus = HTTPStatus.OK


@dataclass
class Latest:
    """Latest version found in the feed, its build and the suggested upgrade."""
    version: str = ''
    build: str = ''
    suggested: str = ''


@dataclass
class VersionCheck:
    """Outcome of checking one package against its appcast."""
    appcast: Appcast
    current: str = ''
    latest: Latest = field(default_factory=Latest)


@dataclass
class Outdated:
    """Flat status row handed to reporting collaborators."""
    name: str
    appcast: str
    status_code: str
    current_version: str
    status: str
    latest_version: str
    latest_build: str
    suggested_latest_version: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def status_code_text(code: int | HTTPStatus) -> str:
    """Render a status code as ``"200 OK"``; unknown codes render as the bare number."""
    try:
        status = HTTPStatus(int(code))
    except ValueError:
        return str(int(code))
    return f'{status.value} {status.phrase}'


def new_outdated(name: str, status: str, check: VersionCheck) -> Outdated:
    return Outdated(
        name=name,
        appcast=check.appcast.url,
        status_code=status_code_text(check.appcast.status_code),
        current_version=check.current,
        status=status,
        latest_version=check.latest.version,
        latest_build=check.latest.build,
        suggested_latest_version=check.latest.suggested,
    )
