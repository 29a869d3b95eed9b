import httpx
import pytest
import respx

from tracker_validator.core.application.tools.common.exceptions import ProviderError
from tracker_validator.infrastructure.tools.common import BaseHttpClient

BASE_URL = "https://api.example.com"


class _DummyClient(BaseHttpClient):
    _PROVIDER = "Dummy"

    def _get_headers(self) -> dict[str, str]:
        return {"Authorization": "Bearer super-secret"}


@pytest.fixture()
def client() -> _DummyClient:
    return _DummyClient(f"{BASE_URL}/")


class TestErrorTranslation:
    @pytest.mark.asyncio
    @respx.mock
    async def test_status_error_carries_status_code(self, client: _DummyClient) -> None:
        respx.get(f"{BASE_URL}/things/1").mock(
            return_value=httpx.Response(403, text="denied for Bearer abc123")
        )

        with pytest.raises(ProviderError) as exc_info:
            await client.get("/things/1")

        error = exc_info.value
        assert error.provider == "Dummy"
        assert error.status_code == 403
        assert "abc123" not in error.message
        assert "[REDACTED]" in error.message

    @pytest.mark.asyncio
    @respx.mock
    async def test_transport_error_has_no_status_code(self, client: _DummyClient) -> None:
        respx.get(f"{BASE_URL}/things/1").mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(ProviderError) as exc_info:
            await client.get("things/1")

        assert exc_info.value.status_code is None
        assert "refused" in str(exc_info.value)


class TestResponses:
    @pytest.mark.asyncio
    @respx.mock
    async def test_json_body_is_decoded(self, client: _DummyClient) -> None:
        respx.get(f"{BASE_URL}/things", params={"page": "2"}).mock(
            return_value=httpx.Response(200, json=[{"id": 1}])
        )

        assert await client.get("things", params={"page": 2}) == [{"id": 1}]

    @pytest.mark.asyncio
    @respx.mock
    async def test_no_content_returns_none(self, client: _DummyClient) -> None:
        respx.delete(f"{BASE_URL}/things/1").mock(return_value=httpx.Response(204))

        assert await client.delete("things/1") is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_connected_session_is_reused_and_closed(self, client: _DummyClient) -> None:
        route = respx.post(f"{BASE_URL}/things").mock(
            return_value=httpx.Response(201, json={"id": 2})
        )

        await client.connect()
        session = client._client
        await client.post("things", {"name": "a"})
        await client.post("things", {"name": "b"})
        await client.disconnect()

        assert session is not None and session.is_closed
        assert client._client is None
        assert route.call_count == 2
        assert route.calls.last.request.headers["Authorization"] == "Bearer super-secret"
