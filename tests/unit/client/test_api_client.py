"""Unit tests for the client's HTTP layer."""

import httpx
import pytest

from client.api import ApiClient, ApiError
from client.session import MemoryTokenStorage, Session


def _client(handler, session: Session | None = None) -> ApiClient:
    return ApiClient(
        session or Session(MemoryTokenStorage()),
        base_url="http://api.test",
        transport=httpx.MockTransport(handler),
    )


class TestApiClient:
    @pytest.mark.asyncio
    async def test_attaches_session_token_per_request(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.headers.get("authorization"))
            return httpx.Response(200, json={"ok": True})

        session = Session(MemoryTokenStorage())
        async with _client(handler, session) as api:
            await api.get("/api/posts")
            session.authorize("Bearer abc")
            assert await api.get("/api/posts") == {"ok": True}
            session.clear()
            await api.get("/api/posts")

        assert seen == [None, "Bearer abc", None]

    @pytest.mark.asyncio
    async def test_post_sends_json_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "POST"
            assert request.url.path == "/api/posts/like/p1"
            assert request.content == b"{}"
            return httpx.Response(200, json={"id": "p1"})

        async with _client(handler) as api:
            assert await api.post("/api/posts/like/p1") == {"id": "p1"}

    @pytest.mark.asyncio
    async def test_error_payload_kept_verbatim(self):
        payload = {"error_code": "VALIDATION_ERROR", "details": {"text": "Text field is required"}}

        async with _client(lambda request: httpx.Response(400, json=payload)) as api:
            with pytest.raises(ApiError) as exc:
                await api.post("/api/posts", {"text": ""})

        assert exc.value.status_code == 400
        assert exc.value.payload == payload

    @pytest.mark.asyncio
    async def test_non_json_error(self):
        async with _client(lambda request: httpx.Response(502, text="Bad gateway")) as api:
            with pytest.raises(ApiError) as exc:
                await api.get("/api/posts")

        assert exc.value.payload == {"error_code": "HTTP_ERROR", "message": "Bad gateway"}

    @pytest.mark.asyncio
    async def test_transport_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(handler) as api:
            with pytest.raises(ApiError) as exc:
                await api.get("/api/posts")

        assert exc.value.status_code == 0
        assert exc.value.payload["error_code"] == "NETWORK_ERROR"

    @pytest.mark.asyncio
    async def test_empty_body(self):
        async with _client(lambda request: httpx.Response(204)) as api:
            assert await api.delete("/api/posts/p1") is None
