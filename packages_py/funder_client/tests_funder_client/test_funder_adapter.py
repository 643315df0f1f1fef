"""
Tests for funder_adapter.py
Logic testing: Decision/Branch, Scenario, State Transition coverage
"""
from unittest.mock import MagicMock

import httpx
import pytest

from funder_client.adapters.funder_adapter import AsyncFunder, Funder
from funder_client.config import FunderConfig
from funder_client.core.base_client import AsyncFunderClient, SyncFunderClient
from funder_client.types import Resource

from conftest import BASE_URL, RecordingHandler, corrupt_gzip, decode_form, json_response, refused


def _sync_funder(handler, config=None) -> Funder:
    client = SyncFunderClient(
        config or FunderConfig(base_url=BASE_URL),
        httpx_client=httpx.Client(transport=httpx.MockTransport(handler)),
    )
    return Funder(client)


def _async_funder(handler, config=None) -> AsyncFunder:
    client = AsyncFunderClient(
        config or FunderConfig(base_url=BASE_URL),
        httpx_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    return AsyncFunder(client)


CAMPAIGN = {
    "name": "alpha",
    "goal": 1000,
    "amtRaised": 250,
    "numBackers": 5,
    "startDate": "2016-01-01",
    "endDate": "2016-12-31",
}


class TestFunderOperations:
    """Method and resource selection for each named operation."""

    @pytest.mark.parametrize(
        "operation,method,path",
        [
            ("get_campaign", "GET", "/campaigns"),
            ("get_project", "GET", "/projects"),
            ("get_perks", "GET", "/perks"),
            ("make_payment", "POST", "/payments"),
            ("get_payment", "GET", "/payments"),
            ("get_advertisements", "GET", "/advertisements"),
            ("make_pledge", "POST", "/pledges"),
        ],
    )
    def test_operation_routes(self, operation, method, path):
        handler = RecordingHandler(json_response(200, {}))
        funder = _sync_funder(handler)

        getattr(funder, operation)({"campaign_name": "alpha"})

        assert handler.last.method == method
        assert handler.last.url.path == path

    def test_update_payment_routes(self):
        handler = RecordingHandler(json_response(200, {}))
        funder = _sync_funder(handler)

        funder.update_payment({"id": "abc"})

        assert handler.last.method == "PUT"
        assert handler.last.url.path == "/payments"

    # Error Path: update_payment without id never hits the wire
    def test_update_payment_requires_id(self):
        handler = RecordingHandler(json_response(200, {}))
        funder = _sync_funder(handler)

        with pytest.raises(ValueError, match="requires an 'id'"):
            funder.update_payment({"perkId": "1"})
        assert handler.requests == []

    # Property: identical update_payment calls produce identical bodies
    def test_update_payment_idempotent_body(self):
        handler = RecordingHandler(json_response(200, {}))
        funder = _sync_funder(handler)
        params = {"id": "abc", "paypalPayerId": "badpayerid", "paypalToken": "badtoken"}

        funder.update_payment(params)
        funder.update_payment(params)

        first, second = handler.requests
        assert first.content == second.content
        assert first.url == second.url

    # Path: pledges can be pointed at the payments endpoint
    def test_make_pledge_reusing_payments_path(self):
        handler = RecordingHandler(json_response(201, {}))
        funder = _sync_funder(handler)
        funder.set_pledges_path(funder.get_payments_path())

        funder.make_pledge({"perkId": "1"})

        assert handler.last.url.path == "/payments"


class TestFunderSync:
    """Blocking behaviour."""

    # Scenario 1: sync get_campaign returns the parsed object unchanged
    def test_get_campaign_returns_body(self):
        handler = RecordingHandler(json_response(200, CAMPAIGN))
        funder = _sync_funder(handler)

        result = funder.get_campaign({"name": "alpha"})

        assert result.body == CAMPAIGN
        assert decode_form(handler.last.url.query.decode()) == {"name": "alpha"}

    # Decision: no success/error branching on the returned value
    def test_error_status_returned_as_body(self):
        body = {"Code": 400, "Message": "Missing required field(s): perkId"}
        funder = _sync_funder(RecordingHandler(json_response(400, body)))

        result = funder.make_payment({})

        assert result.body == body
        assert result.status == 400

    # Scenario 4: network unreachable returns (does not raise) the envelope
    def test_get_perks_unreachable(self):
        funder = _sync_funder(refused)

        result = funder.get_perks({"campaign_name": "alpha"})

        assert result.body == {
            "code": 503,
            "code_message": "Service unavailable",
            "message": "Connection refused",
        }

    # Error Path: undecodable body returns (does not raise) the envelope
    def test_get_perks_undecodable_body(self):
        funder = _sync_funder(corrupt_gzip)

        result = funder.get_perks({"campaign_name": "alpha"})

        assert result.kind == "unavailable"
        assert result.body["code"] == 503
        assert result.body["code_message"] == "Service unavailable"

    # Scenario 5: query string round-trips reserved characters
    def test_query_round_trip(self):
        handler = RecordingHandler(json_response(200, []))
        funder = _sync_funder(handler)

        funder.get_perks({"a": "1 2", "b": "x&y"})

        assert decode_form(handler.last.url.query.decode()) == {"a": "1 2", "b": "x&y"}

    # State: ad-hoc field visible on every later call
    def test_adhoc_field_on_later_calls(self):
        handler = RecordingHandler(json_response(200, {}))
        funder = _sync_funder(handler)
        funder.add_adhoc_field("currency", "USD")

        funder.get_advertisements({"campaign_name": "alpha"})
        funder.make_payment({"perkId": "1"})

        get_request, post_request = handler.requests
        assert "currency=USD" in get_request.url.query.decode()
        assert decode_form(post_request.content.decode()) == {"perkId": "1", "currency": "USD"}

    # State: ad-hoc headers on every method
    def test_adhoc_header_every_method(self):
        handler = RecordingHandler(json_response(200, {}))
        funder = _sync_funder(handler)
        funder.add_adhoc_header("X-Bot-Field", "human")

        funder.get_payment({"id": "1"})
        funder.make_pledge({"perkId": "1"})

        assert all(r.headers["X-Bot-Field"] == "human" for r in handler.requests)

    # Decision: lowercase ad-hoc content-type replaces the default on the wire
    def test_adhoc_content_type_sent_once(self):
        handler = RecordingHandler(json_response(200, {}))
        funder = _sync_funder(handler)
        funder.add_adhoc_header("content-type", "text/plain")

        funder.make_payment({"a": "1"})

        assert handler.last.headers.get_list("content-type") == ["text/plain"]

    def test_context_manager_closes(self):
        client = MagicMock(spec=SyncFunderClient)
        with Funder(client):
            pass
        client.close.assert_called_once()


class TestFunderConfigSurface:
    """Configuration accessors delegate to the shared FunderConfig."""

    def test_base_url(self):
        funder = _sync_funder(RecordingHandler(json_response(200, {})), FunderConfig())
        funder.set_base_url("http://other:8080")
        assert funder.get_base_url() == "http://other:8080"
        assert funder.config.base_url == "http://other:8080"

    def test_named_path_accessors(self):
        funder = _sync_funder(RecordingHandler(json_response(200, {})))
        funder.set_campaigns_path("/c")
        funder.set_projects_path("/pr")
        funder.set_perks_path("/k")
        funder.set_payments_path("/pay")
        funder.set_pledges_path("/pl")
        funder.set_advertisements_path("/ads")
        assert funder.get_campaigns_path() == "/c"
        assert funder.get_projects_path() == "/pr"
        assert funder.get_perks_path() == "/k"
        assert funder.get_payments_path() == "/pay"
        assert funder.get_pledges_path() == "/pl"
        assert funder.get_advertisements_path() == "/ads"
        assert funder.get_resource_path(Resource.ADVERTISEMENTS) == "/ads"

    def test_path_override_used_on_wire(self):
        handler = RecordingHandler(json_response(200, {}))
        funder = _sync_funder(handler, FunderConfig(base_url="http://localhost:3000/api"))
        funder.set_resource_path("perks", "/v2/perks")

        funder.get_perks()

        assert str(handler.last.url) == "http://localhost:3000/api/v2/perks"

    def test_adhoc_accessors(self):
        funder = _sync_funder(RecordingHandler(json_response(200, {})))
        funder.add_adhoc_field("currency", "USD")
        funder.add_adhoc_header("X-A", "1")
        assert funder.get_adhoc_fields() == {"currency": "USD"}
        assert funder.get_adhoc_headers() == {"X-A": "1"}
        funder.remove_adhoc_field("currency")
        funder.remove_adhoc_header("X-A")
        assert funder.get_adhoc_fields() == {}
        assert funder.get_adhoc_headers() == {}


class TestAsyncFunderCallbacks:
    """Callback dispatch by status class."""

    # Scenario 2: 202 goes to on_success with the parsed body
    @pytest.mark.asyncio
    async def test_make_payment_accepted(self):
        body = {"Code": 202, "Message": "Successfully scheduled payment"}
        funder = _async_funder(RecordingHandler(json_response(202, body)))
        on_success = MagicMock()
        on_error = MagicMock()

        result = await funder.make_payment({"perkId": "1"}, on_success, on_error)

        on_success.assert_called_once_with(body, 202, funder)
        on_error.assert_not_called()
        assert result.status == 202

    # Scenario 3: network unreachable goes to on_error with the envelope
    @pytest.mark.asyncio
    async def test_make_payment_unreachable(self):
        funder = _async_funder(refused)
        on_success = MagicMock()
        on_error = MagicMock()

        await funder.make_payment({"perkId": "1"}, on_success=on_success, on_error=on_error)

        on_success.assert_not_called()
        on_error.assert_called_once_with(
            {"code": 503, "code_message": "Service unavailable", "message": "Connection refused"},
            503,
            funder,
        )

    # Decision: 4xx/5xx go to on_error with the backend body
    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 404, 500, 503])
    async def test_error_status(self, status):
        body = {"Code": status, "Message": "nope"}
        funder = _async_funder(RecordingHandler(json_response(status, body)))
        on_success = MagicMock()
        on_error = MagicMock()

        await funder.get_campaign({"name": "alpha"}, on_success, on_error)

        on_success.assert_not_called()
        on_error.assert_called_once_with(body, status, funder)

    # Decision: 1xx/3xx fire no callback but still resolve
    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [101, 302, 304])
    async def test_unhandled_status_classes(self, status):
        funder = _async_funder(RecordingHandler(json_response(status, {"moved": True})))
        on_success = MagicMock()
        on_error = MagicMock()

        result = await funder.get_perks({}, on_success, on_error)

        on_success.assert_not_called()
        on_error.assert_not_called()
        assert result.status == status

    # Error Path: body is not JSON goes to on_error
    @pytest.mark.asyncio
    async def test_malformed_goes_to_on_error(self):
        handler = RecordingHandler(lambda request: httpx.Response(200, content=b"<html></html>"))
        funder = _async_funder(handler)
        on_success = MagicMock()
        on_error = MagicMock()

        await funder.get_advertisements({}, on_success, on_error)

        on_success.assert_not_called()
        body, status, _ = on_error.call_args.args
        assert status == 200
        assert body["code_message"] == "Malformed response"

    # Error Path: undecodable body goes to on_error
    @pytest.mark.asyncio
    async def test_undecodable_body_goes_to_on_error(self):
        funder = _async_funder(corrupt_gzip)
        on_success = MagicMock()
        on_error = MagicMock()

        result = await funder.get_perks({}, on_success, on_error)

        on_success.assert_not_called()
        body, status, _ = on_error.call_args.args
        assert status == 503
        assert body["code_message"] == "Service unavailable"
        assert result.kind == "unavailable"

    # Path: coroutine callbacks are awaited
    @pytest.mark.asyncio
    async def test_async_callback_awaited(self):
        seen = []

        async def on_success(body, status, funder):
            seen.append((body, status))

        funder = _async_funder(RecordingHandler(json_response(200, CAMPAIGN)))
        await funder.get_campaign({"name": "alpha"}, on_success=on_success)

        assert seen == [(CAMPAIGN, 200)]

    # Path: only one callback supplied, the other branch is silent
    @pytest.mark.asyncio
    async def test_missing_callback_is_skipped(self):
        funder = _async_funder(RecordingHandler(json_response(500, {"Message": "boom"})))
        on_success = MagicMock()

        result = await funder.get_payment({"id": "1"}, on_success=on_success)

        on_success.assert_not_called()
        assert result.status == 500

    # Path: no callbacks at all, the result is the only outcome
    @pytest.mark.asyncio
    async def test_no_callbacks(self):
        funder = _async_funder(RecordingHandler(json_response(201, {"id": "x"})))

        result = await funder.make_pledge({"perkId": "1"})

        assert result.body == {"id": "x"}

    @pytest.mark.asyncio
    async def test_update_payment_requires_id(self):
        funder = _async_funder(RecordingHandler(json_response(200, {})))
        with pytest.raises(ValueError):
            await funder.update_payment({})

    @pytest.mark.asyncio
    async def test_update_payment_success(self):
        handler = RecordingHandler(json_response(200, {"perk": {"name": "Sticker"}}))
        funder = _async_funder(handler)
        on_success = MagicMock()

        await funder.update_payment({"id": "abc", "paypalToken": "t"}, on_success=on_success)

        assert handler.last.method == "PUT"
        on_success.assert_called_once()

    @pytest.mark.asyncio
    async def test_get_project(self):
        handler = RecordingHandler(json_response(200, {"name": "beta"}))
        funder = _async_funder(handler)

        result = await funder.get_project({"name": "beta"})

        assert handler.last.url.path == "/projects"
        assert result.body == {"name": "beta"}

    @pytest.mark.asyncio
    async def test_async_context_manager(self):
        funder = _async_funder(RecordingHandler(json_response(200, {})))
        async with funder:
            await funder.get_perks()
        with pytest.raises(RuntimeError):
            await funder.get_perks()
