"""Unit tests for base_client module."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest

from research_scrolls.data_sources.base_client import (
    BaseClient,
    ClientConfig,
    DataSourceError,
    MalformedResponseError,
    RetryConfig,
    TransientUpstreamError,
)


class ConcreteTestClient(BaseClient):
    """Concrete implementation of BaseClient for testing."""

    @property
    def _source_name(self) -> str:
        return "test_client"


def _client(max_retries: int = 1) -> ConcreteTestClient:
    return ConcreteTestClient(ClientConfig(retry=RetryConfig(max_retries=max_retries)))


def _response(status: int, body: str = "") -> MagicMock:
    """A response usable as `async with session.get(...) as resp`."""
    resp = MagicMock()
    resp.status = status
    resp.text = AsyncMock(return_value=body)
    resp.__aenter__ = AsyncMock(return_value=resp)
    resp.__aexit__ = AsyncMock(return_value=None)
    return resp


def _session(*responses) -> MagicMock:
    session = MagicMock()
    session.get = MagicMock(side_effect=list(responses))
    return session


@pytest.mark.asyncio
class TestBaseClient:
    """Unit tests for BaseClient session lifecycle (no network calls)."""

    async def test_client_context_manager(self):
        """Test that client can be used as async context manager."""
        async with ConcreteTestClient() as client:
            assert client._session is None  # Session created lazily
            session = await client._get_session()

            assert session is not None
            assert not session.closed

        assert client._session.closed

    async def test_session_reuse(self):
        """Test that session is reused across requests."""
        client = ConcreteTestClient()

        session1 = await client._get_session()
        session2 = await client._get_session()

        assert session1 is session2
        await client.close()

    async def test_close_without_session(self):
        client = ConcreteTestClient()
        await client.close()
        assert client._session is None

    async def test_config_is_used(self):
        config = ClientConfig(timeout_seconds=2.5, retry=RetryConfig(max_retries=3))
        client = ConcreteTestClient(config)

        assert client.config.timeout_seconds == 2.5
        assert client.config.retry.max_retries == 3


@pytest.mark.asyncio
class TestRestGetXml:
    """Unit tests for _rest_get_xml."""

    async def test_returns_xml_text_on_success(self):
        """Test _rest_get_xml returns raw text for a 200 response."""
        xml_body = "<feed><entry></entry></feed>"
        mock_session = _session(_response(200, xml_body))

        client = ConcreteTestClient()
        with patch.object(
            client, "_get_session", new_callable=AsyncMock, return_value=mock_session
        ):
            result = await client._rest_get_xml(
                "https://example.com/xml", params={"id": "1"}
            )

        assert result == xml_body
        mock_session.get.assert_called_once_with(
            "https://example.com/xml", params={"id": "1"}, headers=None
        )

    async def test_raises_transient_error_on_4xx(self):
        """Non-retryable 4xx raises immediately without retrying."""
        mock_session = _session(_response(404, "Not Found"))

        client = _client(max_retries=1)
        with patch.object(
            client, "_get_session", new_callable=AsyncMock, return_value=mock_session
        ):
            with pytest.raises(TransientUpstreamError, match="HTTP 404") as exc_info:
                await client._rest_get_xml("https://example.com/xml", params={})

        assert exc_info.value.status_code == 404
        assert exc_info.value.source == "test_client"
        assert mock_session.get.call_count == 1

    @patch("research_scrolls.data_sources.base_client.asyncio.sleep", new_callable=AsyncMock)
    async def test_retries_on_5xx_then_succeeds(self, mock_sleep):
        """Test _rest_get_xml retries on 500 and succeeds on next attempt."""
        mock_session = _session(_response(500, "oops"), _response(200, "<root>OK</root>"))

        client = _client(max_retries=1)
        with patch.object(
            client, "_get_session", new_callable=AsyncMock, return_value=mock_session
        ):
            result = await client._rest_get_xml("https://example.com/xml")

        assert result == "<root>OK</root>"
        assert mock_session.get.call_count == 2
        mock_sleep.assert_awaited_once_with(0.5)

    @patch("research_scrolls.data_sources.base_client.asyncio.sleep", new_callable=AsyncMock)
    async def test_raises_after_retries_exhausted(self, mock_sleep):
        mock_session = _session(_response(503, "busy"), _response(503, "busy"))

        client = _client(max_retries=1)
        with patch.object(
            client, "_get_session", new_callable=AsyncMock, return_value=mock_session
        ):
            with pytest.raises(TransientUpstreamError, match="HTTP 503") as exc_info:
                await client._rest_get_xml("https://example.com/xml")

        assert exc_info.value.status_code == 503
        assert mock_session.get.call_count == 2

    @patch("research_scrolls.data_sources.base_client.asyncio.sleep", new_callable=AsyncMock)
    async def test_timeout_is_a_transient_error(self, mock_sleep):
        mock_session = MagicMock()
        mock_session.get = MagicMock(side_effect=asyncio.TimeoutError())

        client = _client(max_retries=1)
        with patch.object(
            client, "_get_session", new_callable=AsyncMock, return_value=mock_session
        ):
            with pytest.raises(TransientUpstreamError, match="Timeout"):
                await client._rest_get_xml("https://example.com/xml")

        assert mock_session.get.call_count == 2

    async def test_connection_error_is_a_transient_error(self):
        mock_session = MagicMock()
        mock_session.get = MagicMock(
            side_effect=aiohttp.ClientConnectionError("refused")
        )

        client = _client(max_retries=0)
        with patch.object(
            client, "_get_session", new_callable=AsyncMock, return_value=mock_session
        ):
            with pytest.raises(TransientUpstreamError, match="Connection error"):
                await client._rest_get_xml("https://example.com/xml")

    async def test_error_response_is_released(self):
        resp = _response(404, "Not Found")
        mock_session = _session(resp)

        client = _client(max_retries=0)
        with patch.object(
            client, "_get_session", new_callable=AsyncMock, return_value=mock_session
        ):
            with pytest.raises(TransientUpstreamError):
                await client._rest_get_xml("https://example.com/xml")

        resp.__aexit__.assert_awaited_once()

    async def test_undecodable_body_is_malformed_and_released(self):
        resp = _response(200)
        resp.text = AsyncMock(
            side_effect=UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        )
        mock_session = _session(resp)

        client = _client(max_retries=0)
        with patch.object(
            client, "_get_session", new_callable=AsyncMock, return_value=mock_session
        ):
            with pytest.raises(MalformedResponseError, match="Undecodable body"):
                await client._rest_get_xml("https://example.com/xml")

        resp.__aexit__.assert_awaited_once()


@pytest.mark.asyncio
class TestRestGet:
    """Unit tests for _rest_get JSON decoding."""

    async def test_returns_decoded_json(self):
        mock_session = _session(_response(200, '{"data": [1, 2]}'))

        client = ConcreteTestClient()
        with patch.object(
            client, "_get_session", new_callable=AsyncMock, return_value=mock_session
        ):
            result = await client._rest_get("https://example.com/api", {"q": "x"})

        assert result == {"data": [1, 2]}
        _, kwargs = mock_session.get.call_args
        assert kwargs["headers"] == {"Accept": "application/json"}

    async def test_invalid_json_raises_malformed_response_error(self):
        mock_session = _session(_response(200, "<html>not json</html>"))

        client = ConcreteTestClient()
        with patch.object(
            client, "_get_session", new_callable=AsyncMock, return_value=mock_session
        ):
            with pytest.raises(MalformedResponseError, match="Invalid JSON") as exc_info:
                await client._rest_get("https://example.com/api")

        assert isinstance(exc_info.value, DataSourceError)
        assert exc_info.value.source == "test_client"


def test_backoff_is_capped():
    client = ConcreteTestClient()
    assert client._backoff(0) == 0.5
    assert client._backoff(1) == 1.0
    assert client._backoff(10) == 5.0
