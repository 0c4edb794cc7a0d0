"""Tests for the delayed search assertions."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING
from unittest.mock import MagicMock

import pytest
from conftest import make_response

from gn_client import ConsistencyTimeoutError, SearchExpectationError, SearchRequest
from gn_client.testing import (
    EventualConsistencyVerifier,
    SearchExpectation,
    delayed_search_assert_equals,
    remove_all_metadata,
)

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def verifier(sleeps: list[float]) -> EventualConsistencyVerifier:
    return EventualConsistencyVerifier(sleep=sleeps.append)


class TestSearchExpectation:
    """Tests for SearchExpectation."""

    def test_request_only(self) -> None:
        expectation = SearchExpectation(request=SearchRequest())
        assert expectation.document is None

    def test_document_only(self, resources: Path) -> None:
        expectation = SearchExpectation(document=resources / "search_request.xml")
        assert expectation.request is None

    def test_both_forms_rejected(self, resources: Path) -> None:
        with pytest.raises(SearchExpectationError):
            SearchExpectation(request=SearchRequest(), document=resources / "search_request.xml")

    def test_no_form_rejected(self) -> None:
        with pytest.raises(SearchExpectationError):
            SearchExpectation()


class TestVerifyCount:
    """Tests for EventualConsistencyVerifier.verify_count."""

    def test_first_attempt_matches(
        self, fake_client: MagicMock, verifier: EventualConsistencyVerifier, sleeps: list[float]
    ) -> None:
        fake_client.search.side_effect = [make_response(0)]

        state = verifier.verify_count(fake_client, SearchExpectation(request=SearchRequest()), 0)

        assert sleeps == []
        assert state.attempt == 0
        assert state.waited_ms == 0
        assert fake_client.search.call_count == 1

    def test_second_attempt_matches(
        self, fake_client: MagicMock, verifier: EventualConsistencyVerifier, sleeps: list[float], caplog
    ) -> None:
        fake_client.search.side_effect = [make_response(3), make_response(0)]

        with caplog.at_level("INFO", logger="gn_client.testing.verifier"):
            state = verifier.verify_count(fake_client, SearchExpectation(request=SearchRequest()), 0)

        assert sleeps == [1.0]
        assert state.attempt == 1
        assert state.waited_ms == 1000
        assert "Search count passed after 1000 ms" in caplog.text

    def test_linear_backoff_until_exhausted(
        self, fake_client: MagicMock, verifier: EventualConsistencyVerifier, sleeps: list[float]
    ) -> None:
        fake_client.search.side_effect = [make_response(n) for n in (5, 4, 3, 2, 1)]

        with pytest.raises(ConsistencyTimeoutError) as exc_info:
            verifier.verify_count(fake_client, SearchExpectation(request=SearchRequest()), 0)

        error = exc_info.value
        assert sleeps == [1.0, 2.0, 3.0, 4.0, 5.0]
        assert fake_client.search.call_count == 5
        assert error.expected == 0
        assert error.actual == 1
        assert error.retries == 5
        assert error.waited_ms == 15000
        assert str(error) == "Expected value 0 not found after 5 retries. Found 1"

    def test_timeout_is_assertion_error(self, fake_client: MagicMock, verifier: EventualConsistencyVerifier) -> None:
        fake_client.search.return_value = make_response(1)

        with pytest.raises(AssertionError):
            verifier.verify_count(fake_client, SearchExpectation(request=SearchRequest()), 2)

    def test_raw_document_is_searched(
        self, fake_client: MagicMock, verifier: EventualConsistencyVerifier, resources: Path
    ) -> None:
        document = resources / "search_request.xml"
        fake_client.search.return_value = make_response(1)

        verifier.verify_count(fake_client, SearchExpectation(document=document), 1)

        fake_client.search.assert_called_once_with(document)

    def test_custom_budget(self, fake_client: MagicMock, sleeps: list[float]) -> None:
        fake_client.search.return_value = make_response(1)
        verifier = EventualConsistencyVerifier(max_retries=2, initial_wait_ms=100, wait_increment_ms=50, sleep=sleeps.append)

        with pytest.raises(ConsistencyTimeoutError) as exc_info:
            verifier.verify_count(fake_client, SearchExpectation(request=SearchRequest()), 0)

        assert sleeps == [0.1, 0.15]
        assert exc_info.value.waited_ms == 250

    def test_interrupted_wait_moves_on(self, fake_client: MagicMock) -> None:
        interrupt = threading.Event()
        interrupt.set()
        fake_client.search.return_value = make_response(1)
        verifier = EventualConsistencyVerifier(max_retries=2, initial_wait_ms=10, interrupt=interrupt)

        with pytest.raises(ConsistencyTimeoutError) as exc_info:
            verifier.verify_count(fake_client, SearchExpectation(request=SearchRequest()), 0)

        assert not interrupt.is_set()
        assert fake_client.search.call_count == 2
        # only the second, uninterrupted wait counts
        assert exc_info.value.waited_ms == 10


class TestDelayedSearchAssertEquals:
    """Tests for delayed_search_assert_equals."""

    def test_both_forms_fail_fast(self, fake_client: MagicMock, resources: Path) -> None:
        with pytest.raises(SearchExpectationError):
            delayed_search_assert_equals(0, fake_client, SearchRequest(), resources / "search_request.xml")
        fake_client.search.assert_not_called()

    def test_default_verifier(self, fake_client: MagicMock) -> None:
        fake_client.search.return_value = make_response(2)

        state = delayed_search_assert_equals(2, fake_client, SearchRequest())

        assert state.attempt == 0


class TestRemoveAllMetadata:
    """Tests for remove_all_metadata."""

    def test_empty_catalog(
        self, fake_client: MagicMock, verifier: EventualConsistencyVerifier, sleeps: list[float]
    ) -> None:
        fake_client.search.side_effect = [make_response(0), make_response(0)]

        assert remove_all_metadata(fake_client, verifier=verifier) == 0

        fake_client.delete_metadata.assert_not_called()
        assert fake_client.search.call_count == 2
        assert sleeps == []

    def test_deletes_every_record(
        self, fake_client: MagicMock, verifier: EventualConsistencyVerifier, sleeps: list[float]
    ) -> None:
        fake_client.search.side_effect = [
            make_response(3, [7, 8, 9]),
            make_response(3, [7, 8, 9]),
            make_response(0),
        ]

        assert remove_all_metadata(fake_client, verifier=verifier) == 3

        assert sorted(c.args[0] for c in fake_client.delete_metadata.call_args_list) == [7, 8, 9]
        assert sleeps == [1.0]

    def test_deletion_never_indexed(
        self, fake_client: MagicMock, verifier: EventualConsistencyVerifier, sleeps: list[float]
    ) -> None:
        fake_client.search.return_value = make_response(1, [7])

        with pytest.raises(ConsistencyTimeoutError):
            remove_all_metadata(fake_client, verifier=verifier)

        assert len(sleeps) == 5


def test_fake_client_rejects_unknown_methods(fake_client: MagicMock) -> None:
    with pytest.raises(AttributeError):
        fake_client.delete_metadta  # noqa: B018
