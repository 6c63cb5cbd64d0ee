"""Unit tests for base_client module."""

import asyncio
from unittest.mock import AsyncMock, patch

import aiohttp
import pytest

from naijamed_atlas.data_sources.base_client import BaseClient, DataSourceError


class ConcreteTestClient(BaseClient):
    """Concrete implementation of BaseClient for testing."""

    @property
    def _source_name(self) -> str:
        return "test_client"


def _mock_session(resp=None, side_effect=None) -> AsyncMock:
    session = AsyncMock()
    session.get = AsyncMock(return_value=resp, side_effect=side_effect)
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

        # Session should be closed after exiting context
        assert client._session.closed

    async def test_session_reuse(self):
        """Test that session is reused across requests."""
        client = ConcreteTestClient()

        session1 = await client._get_session()
        session2 = await client._get_session()

        assert session1 is session2
        await client.close()


@pytest.mark.asyncio
class TestRestGet:
    """Unit tests for _rest_get."""

    async def test_returns_decoded_json(self):
        mock_resp = AsyncMock()
        mock_resp.status = 200
        mock_resp.json = AsyncMock(return_value={"esearchresult": {"idlist": ["1"]}})

        client = ConcreteTestClient()
        with patch.object(
            client,
            "_get_session",
            new_callable=AsyncMock,
            return_value=_mock_session(mock_resp),
        ):
            result = await client._rest_get("https://example.com/json", {"term": "x"})

        assert result == {"esearchresult": {"idlist": ["1"]}}

    async def test_undecodable_json_raises_datasource_error(self):
        mock_resp = AsyncMock()
        mock_resp.status = 200
        mock_resp.json = AsyncMock(side_effect=ValueError("Expecting value"))

        client = ConcreteTestClient()
        with patch.object(
            client,
            "_get_session",
            new_callable=AsyncMock,
            return_value=_mock_session(mock_resp),
        ):
            with pytest.raises(DataSourceError, match="Invalid response body"):
                await client._rest_get("https://example.com/json", {})

    async def test_connection_error_raises_datasource_error(self):
        client = ConcreteTestClient()
        session = _mock_session(side_effect=aiohttp.ClientConnectionError("refused"))
        with patch.object(
            client, "_get_session", new_callable=AsyncMock, return_value=session
        ):
            with pytest.raises(DataSourceError, match="Connection error") as exc_info:
                await client._rest_get("https://example.com/json", {})

        assert exc_info.value.source == "test_client"

    async def test_timeout_raises_datasource_error(self):
        client = ConcreteTestClient()
        session = _mock_session(side_effect=asyncio.TimeoutError())
        with patch.object(
            client, "_get_session", new_callable=AsyncMock, return_value=session
        ):
            with pytest.raises(DataSourceError, match="Timeout"):
                await client._rest_get("https://example.com/json", {})


@pytest.mark.asyncio
class TestRestGetXml:
    """Unit tests for _rest_get_xml."""

    async def test_returns_xml_text_on_success(self):
        """Test _rest_get_xml returns raw text for a 200 response."""
        xml_body = (
            "<PubmedArticleSet><PubmedArticle></PubmedArticle></PubmedArticleSet>"
        )
        mock_resp = AsyncMock()
        mock_resp.status = 200
        mock_resp.text = AsyncMock(return_value=xml_body)

        client = ConcreteTestClient()
        with patch.object(
            client,
            "_get_session",
            new_callable=AsyncMock,
            return_value=_mock_session(mock_resp),
        ):
            result = await client._rest_get_xml(
                "https://example.com/xml", params={"id": "1"}
            )

        assert result == xml_body

    async def test_raises_datasource_error_on_4xx(self):
        """Test _rest_get_xml raises DataSourceError for 4xx."""
        mock_resp = AsyncMock()
        mock_resp.status = 404
        mock_resp.text = AsyncMock(return_value="Not Found")

        client = ConcreteTestClient()
        with patch.object(
            client,
            "_get_session",
            new_callable=AsyncMock,
            return_value=_mock_session(mock_resp),
        ):
            with pytest.raises(DataSourceError, match="HTTP 404") as exc_info:
                await client._rest_get_xml("https://example.com/xml", params={})

        assert exc_info.value.status_code == 404
        assert exc_info.value.source == "test_client"

    async def test_5xx_is_not_retried(self):
        """A server error is reported after a single attempt."""
        error_resp = AsyncMock()
        error_resp.status = 503
        error_resp.text = AsyncMock(return_value="Service Unavailable")
        session = _mock_session(error_resp)

        client = ConcreteTestClient()
        with patch.object(
            client, "_get_session", new_callable=AsyncMock, return_value=session
        ):
            with pytest.raises(DataSourceError, match="HTTP 503"):
                await client._rest_get_xml("https://example.com/xml", params={})

        assert session.get.call_count == 1


class TestDataSourceError:
    """Tests for DataSourceError."""

    def test_error_message_format(self):
        """Test error message includes source."""
        error = DataSourceError("pubmed", "Connection failed")
        assert "[pubmed]" in str(error)
        assert "Connection failed" in str(error)

    def test_error_with_status_code(self):
        """Test error can include status code."""
        error = DataSourceError("api", "Not found", status_code=404)
        assert error.source == "api"
        assert error.status_code == 404
