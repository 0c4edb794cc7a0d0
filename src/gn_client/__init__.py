"""GeoNetwork Python client.

Version-aware client for the GeoNetwork metadata catalog.
"""

from __future__ import annotations

from gn_client.client import GN26Client, GN28Client, GN210Client, GN3Client, GNClient
from gn_client.exceptions import (
    ConsistencyTimeoutError,
    GNConfigurationError,
    GNConnectionError,
    GNError,
    GNLibError,
    GNServerError,
    MalformedURLError,
    MissingFieldError,
    SearchExpectationError,
    UnsupportedVersionError,
)
from gn_client.factory import create_client, create_client_from_settings
from gn_client.search import GNMetadata, SearchRequest, SearchResponse
from gn_client.settings import GeoNetworkSettings
from gn_client.versions import GNVersion, VersionDescriptor, resolve

__version__ = "0.1.0"

__all__ = [
    "ConsistencyTimeoutError",
    "GN26Client",
    "GN28Client",
    "GN210Client",
    "GN3Client",
    "GNClient",
    "GNConfigurationError",
    "GNConnectionError",
    "GNError",
    "GNLibError",
    "GNMetadata",
    "GNServerError",
    "GNVersion",
    "GeoNetworkSettings",
    "MalformedURLError",
    "MissingFieldError",
    "SearchExpectationError",
    "SearchRequest",
    "SearchResponse",
    "UnsupportedVersionError",
    "VersionDescriptor",
    "create_client",
    "create_client_from_settings",
    "resolve",
]
