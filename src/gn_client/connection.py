"""HTTP connection used by the GeoNetwork clients."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from gn_client.exceptions import MalformedURLError

logger = logging.getLogger(__name__)

XML_CONTENT_TYPE = "application/xml; charset=UTF-8"


class GNConnection:
    """Thin stateful wrapper around ``httpx.Client``.

    Mirrors the way the GeoNetwork services are consumed: every call records
    the status of the last response in ``last_http_status`` and returns the
    response body, or ``None`` when the request failed at the transport level
    or the server answered with an error status.

    Not safe for concurrent use: ``last_http_status`` is overwritten by each call.

    Args:
        username: Optional username for HTTP basic auth
        password: Password for HTTP basic auth
        timeout: Request timeout in seconds (default: 30)
    """

    def __init__(
        self,
        username: str | None = None,
        password: str | None = None,
        timeout: float = 30.0,
    ):
        self.username = username
        self.timeout = timeout
        self.last_http_status: int | None = None
        self.ignore_response_content_on_success = False

        auth = httpx.BasicAuth(username, password or "") if username else None
        self._client = httpx.Client(
            auth=auth,
            timeout=timeout,
            headers={"User-Agent": "gn-client/0.1.0"},
        )

    def __enter__(self) -> GNConnection:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def get(self, url: str) -> str | None:
        """GET ``url``.

        Raises:
            MalformedURLError: If ``url`` is not an absolute http(s) URL
        """
        return self._send("GET", url)

    def post_xml(self, url: str, body: bytes | str) -> str | None:
        """POST an XML document to ``url``.

        Raises:
            MalformedURLError: If ``url`` is not an absolute http(s) URL
        """
        content = body.encode("utf-8") if isinstance(body, str) else body
        return self._send("POST", url, content=content, headers={"Content-Type": XML_CONTENT_TYPE})

    def _send(self, method: str, url: str, **kwargs: Any) -> str | None:
        target = parse_url(url)
        self.last_http_status = None

        try:
            response = self._client.request(method, target, **kwargs)
        except httpx.TransportError as e:
            logger.error("%s %s failed: %s", method, url, e)
            return None

        self.last_http_status = response.status_code
        if response.status_code != httpx.codes.OK:
            logger.info("%s %s returned HTTP %d", method, url, response.status_code)
            logger.debug("Response body: %s", response.text)
            return None

        if self.ignore_response_content_on_success:
            return ""
        return response.text


def parse_url(url: str) -> httpx.URL:
    """Parse an absolute http(s) URL.

    Raises:
        MalformedURLError: If the URL cannot be parsed or has no http(s) scheme and host
    """
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as e:
        raise MalformedURLError(f"Malformed URL {url!r}: {e}") from e

    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise MalformedURLError(f"Malformed URL {url!r}: absolute http(s) URL required")
    return parsed
