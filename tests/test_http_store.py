"""
Tests for the httpx-backed feedback store.

The REST API is faked with httpx.MockTransport, so these tests pin the exact
request shapes and the mapping of failures onto the error taxonomy.
"""
import asyncio
import json
from datetime import datetime, timezone

import httpx
import pytest

from feedback_tracker.domain import (
    FeedbackDraft,
    Sentiment,
    ServerError,
    TransportError,
)
from feedback_tracker.infrastructure import HttpFeedbackStore, Settings


BASE_URL = "http://api.test"

WIRE_ITEM = {
    "id": 11,
    "employee_id": 1,
    "strengths": "Great reviews",
    "areasToImprove": "Speak up in planning",
    "sentiment": "POSITIVE",
    "acknowledged": False,
    "createdAt": "2024-05-01T10:00:00Z",
}


def call(handler, method_name, *args):
    """Run one store method against a fake API and return (result, requests)."""
    seen = []

    def recording_handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    async def scenario():
        client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler), base_url=BASE_URL)
        store = HttpFeedbackStore(Settings(api_base_url=BASE_URL), client=client)
        try:
            return await getattr(store, method_name)(*args)
        finally:
            await client.aclose()

    return asyncio.run(scenario()), seen


@pytest.fixture
def draft():
    return FeedbackDraft(
        employee_id=1,
        strengths="Great reviews",
        areas_to_improve="Speak up in planning",
        sentiment=Sentiment.POSITIVE,
    )


class TestHttpFeedbackStoreReads:

    def test_fetch_roster_parses_team(self):
        body = {"team": [{
            "employee": {"id": 1, "name": "A", "email": "a@x.com"},
            "feedback_count": 2,
            "sentiments": {"POSITIVE": 1, "NEUTRAL": 1, "NEGATIVE": 0},
        }]}

        roster, requests = call(lambda r: httpx.Response(200, json=body), "fetch_roster")

        assert requests[0].method == "GET"
        assert requests[0].url.path == "/dashboard"
        assert roster[0].employee.email == "a@x.com"
        assert roster[0].feedback_count == 2
        assert roster[0].sentiments.neutral == 1

    def test_fetch_feedback_parses_camel_case_items(self):
        items, requests = call(lambda r: httpx.Response(200, json=[WIRE_ITEM]), "fetch_feedback", 1)

        assert requests[0].url.path == "/feedback/1"
        item = items[0]
        assert item.id == 11
        assert item.areas_to_improve == "Speak up in planning"
        assert item.sentiment is Sentiment.POSITIVE
        assert item.created_at == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)

    def test_fetch_timeline_accepts_employee_id_alias(self):
        wire = dict(WIRE_ITEM, sentiment="negative")
        wire["employeeId"] = wire.pop("employee_id")

        timeline, requests = call(
            lambda r: httpx.Response(200, json={"timeline": [wire]}),
            "fetch_employee_timeline",
        )

        assert requests[0].url.path == "/employee-dashboard"
        assert timeline[0].employee_id == 1
        assert timeline[0].sentiment is Sentiment.NEGATIVE

    def test_malformed_roster_is_a_server_error(self):
        with pytest.raises(ServerError):
            call(lambda r: httpx.Response(200, json={"people": []}), "fetch_roster")

    def test_unknown_sentiment_is_a_server_error(self):
        wire = dict(WIRE_ITEM, sentiment="ECSTATIC")

        with pytest.raises(ServerError):
            call(lambda r: httpx.Response(200, json=[wire]), "fetch_feedback", 1)


class TestHttpFeedbackStoreMutations:

    def test_create_posts_exact_payload(self, draft):
        item, requests = call(lambda r: httpx.Response(201, json=WIRE_ITEM), "create_feedback", draft)

        request = requests[0]
        assert request.method == "POST"
        assert request.url.path == "/feedback"
        assert json.loads(request.content) == {
            "employee_id": 1,
            "strengths": "Great reviews",
            "areasToImprove": "Speak up in planning",
            "sentiment": "POSITIVE",
        }
        assert item.id == 11

    def test_update_puts_to_item(self, draft):
        _, requests = call(lambda r: httpx.Response(200, json=WIRE_ITEM), "update_feedback", 11, draft)

        assert requests[0].method == "PUT"
        assert requests[0].url.path == "/feedback/11"

    def test_mutation_without_echo_still_succeeds(self, draft):
        item, _ = call(lambda r: httpx.Response(200, json={"status": "ok"}), "update_feedback", 11, draft)

        assert item is None

    def test_delete_with_empty_body(self):
        result, requests = call(lambda r: httpx.Response(204), "delete_feedback", 11)

        assert requests[0].method == "DELETE"
        assert requests[0].url.path == "/feedback/11"
        assert result is None

    def test_acknowledge_posts_without_body(self):
        _, requests = call(lambda r: httpx.Response(200, json={"ok": True}), "acknowledge", 5)

        assert requests[0].method == "POST"
        assert requests[0].url.path == "/acknowledge/5"
        assert requests[0].content == b""


class TestHttpFeedbackStoreErrors:

    def test_server_message_is_kept(self, draft):
        with pytest.raises(ServerError) as exc:
            call(
                lambda r: httpx.Response(400, json={"message": "Sentiment is invalid"}),
                "create_feedback",
                draft,
            )

        assert exc.value.status_code == 400
        assert exc.value.message == "Sentiment is invalid"

    def test_error_without_body_has_no_message(self):
        with pytest.raises(ServerError) as exc:
            call(lambda r: httpx.Response(500), "delete_feedback", 3)

        assert exc.value.status_code == 500
        assert exc.value.message is None

    def test_network_failure_is_a_transport_error(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TransportError):
            call(refuse, "fetch_roster")


class TestHttpFeedbackStoreClient:

    def test_bearer_token_when_configured(self):
        headers = HttpFeedbackStore._auth_headers(Settings(api_token="secret"))

        assert headers == {"Authorization": "Bearer secret"}

    def test_no_auth_header_without_token(self):
        assert HttpFeedbackStore._auth_headers(Settings(api_token="")) == {}

    def test_owned_client_uses_settings(self):
        store = HttpFeedbackStore(Settings(api_base_url=BASE_URL, api_token="t", request_timeout_seconds=3.0))
        try:
            assert str(store._client.base_url).rstrip("/") == BASE_URL
            assert store._client.headers["Authorization"] == "Bearer t"
            assert store._client.timeout.read == 3.0
        finally:
            asyncio.run(store.aclose())
