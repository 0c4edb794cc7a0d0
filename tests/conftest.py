"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, create_autospec

import pytest

from gn_client.client import GNClient
from gn_client.search import GNMetadata, SearchResponse

pytest_plugins = ["pytester"]

RESOURCES = Path(__file__).parent / "resources"
SERVICE_URL = "http://gn.test/geonetwork"


def make_response(count: int, ids: list[int] | None = None) -> SearchResponse:
    ids = ids if ids is not None else []
    return SearchResponse(count=count, metadata=[GNMetadata(id=i, uuid=f"uuid-{i}") for i in ids])


@pytest.fixture()
def resources() -> Path:
    return RESOURCES


@pytest.fixture()
def search_response_xml() -> str:
    return (RESOURCES / "search_response.xml").read_text()


@pytest.fixture()
def fake_client() -> MagicMock:
    """Autospecced GNClient; tests set ``search.side_effect``."""
    return create_autospec(GNClient, instance=True)


@pytest.fixture()
def sleeps() -> list[float]:
    return []
