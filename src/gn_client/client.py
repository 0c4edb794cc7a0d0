"""GeoNetwork catalog clients, one variant per server version."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, ClassVar

from lxml import etree

from gn_client import health
from gn_client.exceptions import GNServerError
from gn_client.connection import GNConnection
from gn_client.search import SearchRequest, SearchResponse
from gn_client.versions import GNVersion, VersionDescriptor, resolve

logger = logging.getLogger(__name__)


class GNClient:
    """GeoNetwork catalog client.

    Subclasses only pin ``VERSION``; the protocol differences between
    versions live in the ``VersionDescriptor`` resolved for it.

    Example:
        >>> with GN28Client("http://localhost:8080/geonetwork", "admin", "admin") as client:
        ...     client.ping()
        ...     for md in client.search(SearchRequest()):
        ...         client.delete_metadata(md.id)

    Args:
        service_url: GeoNetwork base URL, e.g. "http://localhost:8080/geonetwork"
        username: GeoNetwork user
        password: GeoNetwork password
        timeout: Request timeout in seconds (default: 30)
    """

    VERSION: ClassVar[GNVersion]

    def __init__(
        self,
        service_url: str,
        username: str | None = None,
        password: str | None = None,
        *,
        timeout: float = 30.0,
    ):
        self.service_url = service_url.rstrip("/")
        self.descriptor: VersionDescriptor = resolve(self.VERSION)
        self.connection = GNConnection(username, password, timeout=timeout)

    def __enter__(self) -> GNClient:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.service_url!r})"

    @property
    def version(self) -> GNVersion:
        return self.descriptor.version

    def close(self) -> None:
        self.connection.close()

    def ping(self) -> bool:
        """Check that GeoNetwork is reachable with the configured credentials."""
        return health.probe(self.connection, self.service_url, self.descriptor)

    def search(self, request: SearchRequest | Path | bytes) -> SearchResponse:
        """Run a search.

        Args:
            request: A structured ``SearchRequest``, or a raw request document
                given as a file path or as bytes

        Raises:
            GNServerError: If GeoNetwork does not answer 200
            GNLibError: If the response cannot be parsed
        """
        if isinstance(request, SearchRequest):
            body = request.to_xml()
        elif isinstance(request, Path):
            body = request.read_bytes()
        else:
            body = request

        response = self._post("xml.search", body)
        result = SearchResponse.from_xml(response)
        logger.debug("Search returned %d records", result.count)
        return result

    def delete_metadata(self, metadata_id: int) -> None:
        """Delete a metadata record by its internal id.

        Raises:
            GNServerError: If GeoNetwork does not answer 200
        """
        root = etree.Element("request")
        etree.SubElement(root, "id").text = str(metadata_id)
        self._post("xml.metadata.delete", etree.tostring(root, xml_declaration=True, encoding="UTF-8"))
        logger.debug("Deleted metadata %d", metadata_id)

    def _post(self, service: str, body: bytes) -> str:
        url = self.service_url + self.descriptor.service_path(service)
        self.connection.ignore_response_content_on_success = False
        response = self.connection.post_xml(url, body)
        if response is None:
            status = self.connection.last_http_status
            raise GNServerError(f"Error calling {service}: HTTP {status}", status)
        return response


class GN26Client(GNClient):
    VERSION = GNVersion.V26


class GN28Client(GNClient):
    VERSION = GNVersion.V28


class GN210Client(GNClient):
    VERSION = GNVersion.V210


class GN3Client(GNClient):
    VERSION = GNVersion.V3


CLIENT_CLASSES: dict[GNVersion, type[GNClient]] = {
    GNVersion.V26: GN26Client,
    GNVersion.V28: GN28Client,
    GNVersion.V210: GN210Client,
    GNVersion.V3: GN3Client,
}
