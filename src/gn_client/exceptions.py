"""GeoNetwork client exceptions."""

from __future__ import annotations


class GNError(Exception):
    """Base exception for all GeoNetwork client errors."""


class GNConfigurationError(GNError):
    """The client or harness was configured incorrectly."""


class UnsupportedVersionError(GNConfigurationError):
    """Requested GeoNetwork version is not one of the known versions."""

    def __init__(self, version: object):
        super().__init__(f"Unknown GN version {version!r}")
        self.version = version


class SearchExpectationError(GNConfigurationError):
    """A search expectation must carry exactly one query form."""


class GNConnectionError(GNError):
    """Cannot connect to or authenticate against GeoNetwork."""


class MalformedURLError(GNError):
    """A service URL could not be built or parsed."""


class GNServerError(GNError):
    """GeoNetwork answered with an unexpected HTTP status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class GNLibError(GNError):
    """GeoNetwork answered with a document the client cannot interpret."""


class MissingFieldError(GNError):
    """A required element is missing from a metadata document."""

    def __init__(self, local_name: str, namespace: str | None, parent: str):
        ns = f"{{{namespace}}}" if namespace else ""
        super().__init__(f"Missing element {ns}{local_name} under {parent}")
        self.local_name = local_name
        self.namespace = namespace


class ConsistencyTimeoutError(GNError, AssertionError):
    """Search count never reached the expected value within the retry budget."""

    def __init__(self, expected: int, actual: int | None, retries: int, waited_ms: int):
        super().__init__(f"Expected value {expected} not found after {retries} retries. Found {actual}")
        self.expected = expected
        self.actual = actual
        self.retries = retries
        self.waited_ms = waited_ms
