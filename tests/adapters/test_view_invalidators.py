"""Tests for the view invalidators."""

from __future__ import annotations

import json
import logging
from unittest.mock import Mock

import httpx
import pytest

from autolot.adapters.view_invalidators import (
    DeferredViewInvalidator,
    LoggingViewInvalidator,
    WebhookViewInvalidator,
)
from autolot.ports.view_invalidator import ViewInvalidator

WEBHOOK_URL = "https://frontend.example/api/revalidate"


def make_client(handler) -> tuple[httpx.Client, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    return httpx.Client(transport=httpx.MockTransport(record)), seen


# ==============================================================================
# WebhookViewInvalidator
# ==============================================================================


def test_webhook_posts_paths_with_token() -> None:
    client, seen = make_client(lambda request: httpx.Response(200, json={"revalidated": True}))
    invalidator = WebhookViewInvalidator(WEBHOOK_URL, token="s3cret", client=client)

    invalidator.invalidate("/saved-cars", "/cars/abc")

    assert len(seen) == 1
    assert seen[0].method == "POST"
    assert str(seen[0].url) == WEBHOOK_URL
    assert seen[0].headers["Authorization"] == "Bearer s3cret"
    assert json.loads(seen[0].content) == {"paths": ["/saved-cars", "/cars/abc"]}


def test_webhook_without_token_sends_no_auth_header() -> None:
    client, seen = make_client(lambda request: httpx.Response(204))

    WebhookViewInvalidator(WEBHOOK_URL, client=client).invalidate("/admin/test-drive")

    assert "Authorization" not in seen[0].headers


def test_webhook_without_paths_sends_nothing() -> None:
    client, seen = make_client(lambda request: httpx.Response(200))

    WebhookViewInvalidator(WEBHOOK_URL, client=client).invalidate()

    assert seen == []


def test_webhook_rejection_is_logged_not_raised(caplog: pytest.LogCaptureFixture) -> None:
    client, _ = make_client(lambda request: httpx.Response(500))
    invalidator = WebhookViewInvalidator(WEBHOOK_URL, client=client)

    with caplog.at_level(logging.WARNING):
        invalidator.invalidate("/saved-cars")

    assert "Revalidation webhook rejected request" in caplog.text
    rejected = [r for r in caplog.records if r.getMessage() == "Revalidation webhook rejected request"]
    assert rejected[0].status_code == 500


def test_webhook_connection_failure_is_logged_not_raised(caplog: pytest.LogCaptureFixture) -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client, _ = make_client(refuse)
    invalidator = WebhookViewInvalidator(WEBHOOK_URL, client=client)

    with caplog.at_level(logging.WARNING):
        invalidator.invalidate("/saved-cars")

    assert "Revalidation webhook unavailable" in caplog.text


# ==============================================================================
# LoggingViewInvalidator
# ==============================================================================


def test_logging_invalidator_records_paths(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO):
        LoggingViewInvalidator().invalidate("/saved-cars")

    assert caplog.records[-1].paths == ["/saved-cars"]


# ==============================================================================
# DeferredViewInvalidator
# ==============================================================================


class DeferredViewInvalidatorTests:
    def test_buffers_until_flush(self) -> None:
        target = Mock(spec=ViewInvalidator)
        deferred = DeferredViewInvalidator(target)

        deferred.invalidate("/saved-cars", "/cars/1")

        target.invalidate.assert_not_called()
        assert deferred.pending == ["/saved-cars", "/cars/1"]

    def test_flush_dedupes_in_first_seen_order(self) -> None:
        target = Mock(spec=ViewInvalidator)
        deferred = DeferredViewInvalidator(target)

        deferred.invalidate("/admin/test-drive", "/reservations")
        deferred.invalidate("/reservations", "/saved-cars")
        deferred.flush()

        target.invalidate.assert_called_once_with(
            "/admin/test-drive", "/reservations", "/saved-cars"
        )
        assert deferred.pending == []

    def test_empty_flush_is_a_no_op(self) -> None:
        target = Mock(spec=ViewInvalidator)

        DeferredViewInvalidator(target).flush()

        target.invalidate.assert_not_called()

    def test_second_flush_sends_nothing_new(self) -> None:
        target = Mock(spec=ViewInvalidator)
        deferred = DeferredViewInvalidator(target)
        deferred.invalidate("/saved-cars")

        deferred.flush()
        deferred.flush()

        assert target.invalidate.call_count == 1
