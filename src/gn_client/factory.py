"""Client construction with an immediate connection check."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gn_client.client import CLIENT_CLASSES, GNClient
from gn_client.exceptions import GNConnectionError, UnsupportedVersionError
from gn_client.versions import GNVersion

if TYPE_CHECKING:
    from gn_client.settings import GeoNetworkSettings

logger = logging.getLogger(__name__)


def create_client(
    version: str | GNVersion,
    service_url: str,
    username: str | None = None,
    password: str | None = None,
    *,
    timeout: float = 30.0,
) -> GNClient:
    """Create the client variant for ``version`` and ping it once.

    A returned client answered the health check at construction time.

    Raises:
        UnsupportedVersionError: If ``version`` is not a known GeoNetwork version
        GNConnectionError: If the health check fails
    """
    parsed = GNVersion.parse(version)
    client_class = CLIENT_CLASSES.get(parsed)
    if client_class is None:
        raise UnsupportedVersionError(version)

    client = client_class(service_url, username, password, timeout=timeout)
    if not client.ping():
        client.close()
        raise GNConnectionError(f"Error pinging GN {parsed} at {service_url}")

    logger.info("Connected to GeoNetwork %s at %s", parsed, service_url)
    return client


def create_client_from_settings(settings: GeoNetworkSettings) -> GNClient:
    return create_client(
        settings.version,
        settings.service_url,
        settings.username,
        settings.password,
        timeout=settings.timeout,
    )
