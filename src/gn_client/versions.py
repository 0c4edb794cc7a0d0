"""Supported GeoNetwork versions and their protocol descriptors.

Each version maps to a fixed ``VersionDescriptor`` holding the string
fragments that differ between server families (the service language code
and the health check path). The set is closed: supporting a new version
means adding a ``GNVersion`` member and a descriptor below.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict

from gn_client.exceptions import UnsupportedVersionError

HEALTH_CHECK_PATH_TEMPLATE = "/srv/{lang}/test.csw"
SERVICE_PATH_TEMPLATE = "/srv/{lang}/{service}"


class GNVersion(StrEnum):
    """GeoNetwork server versions."""

    V26 = "2.6"
    V28 = "2.8"
    V210 = "2.10"
    V3 = "3"

    @classmethod
    def parse(cls, tag: str | GNVersion) -> GNVersion:
        """Accept a member, its name ("V28") or its value ("2.8")."""
        if isinstance(tag, GNVersion):
            return tag
        text = str(tag).strip()
        if text in cls.__members__:
            return cls[text]
        try:
            return cls(text)
        except ValueError:
            raise UnsupportedVersionError(tag) from None


class VersionDescriptor(BaseModel):
    """Immutable per-version protocol details."""

    model_config = ConfigDict(frozen=True)

    version: GNVersion
    lang: str
    health_check_path_template: str = HEALTH_CHECK_PATH_TEMPLATE

    @property
    def health_check_path(self) -> str:
        return self.health_check_path_template.format(lang=self.lang)

    def service_path(self, service: str) -> str:
        """Path of an xml service for this version, e.g. ``/srv/eng/xml.search``."""
        return SERVICE_PATH_TEMPLATE.format(lang=self.lang, service=service)


_DESCRIPTORS = MappingProxyType(
    {
        GNVersion.V26: VersionDescriptor(version=GNVersion.V26, lang="en"),
        GNVersion.V28: VersionDescriptor(version=GNVersion.V28, lang="eng"),
        GNVersion.V210: VersionDescriptor(version=GNVersion.V210, lang="eng"),
        GNVersion.V3: VersionDescriptor(version=GNVersion.V3, lang="eng"),
    }
)


def resolve(version: str | GNVersion) -> VersionDescriptor:
    """Return the descriptor for ``version``.

    Raises:
        UnsupportedVersionError: If the version is not a known GeoNetwork version
    """
    parsed = GNVersion.parse(version)
    try:
        return _DESCRIPTORS[parsed]
    except KeyError:
        raise UnsupportedVersionError(version) from None


def supported_versions() -> tuple[GNVersion, ...]:
    return tuple(_DESCRIPTORS)
