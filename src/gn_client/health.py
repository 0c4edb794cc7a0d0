"""Liveness/authentication probe."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from gn_client.exceptions import MalformedURLError

if TYPE_CHECKING:
    from gn_client.connection import GNConnection
    from gn_client.versions import VersionDescriptor

logger = logging.getLogger(__name__)


def probe(connection: GNConnection, service_url: str, descriptor: VersionDescriptor) -> bool:
    """Check that GeoNetwork answers on the version's health check service.

    ``test.csw`` is a side-effect-free service returning 200 both in
    authenticated and anonymous mode. Only the status is inspected, so the
    response body is discarded. No retries are performed.

    Returns:
        True if the service answered 200, False otherwise
    """
    logger.debug("PING")

    connection.ignore_response_content_on_success = True
    url = service_url + descriptor.health_check_path

    try:
        connection.get(url)
    except MalformedURLError as e:
        logger.error(str(e))
        return False

    if connection.last_http_status != httpx.codes.OK:
        logger.info("PING failed")
        return False

    return True
