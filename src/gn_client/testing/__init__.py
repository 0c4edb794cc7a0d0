"""Test helpers for code talking to GeoNetwork."""

from __future__ import annotations

from gn_client.testing.verifier import (
    EventualConsistencyVerifier,
    RetryState,
    SearchExpectation,
    delayed_search_assert_equals,
    remove_all_metadata,
)
from gn_client.testing.fields import NS_GCO, NS_GMD, get_title_element, load_resource, locate

__all__ = [
    "NS_GCO",
    "NS_GMD",
    "EventualConsistencyVerifier",
    "RetryState",
    "SearchExpectation",
    "delayed_search_assert_equals",
    "get_title_element",
    "load_resource",
    "locate",
    "remove_all_metadata",
]
