"""
Base client for all outbound literature clients.

Provides: lazy session management, structured request logging and a single
error type for upstream failures. Requests are made exactly once; callers
decide how to degrade when a DataSourceError is raised.
"""

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from typing import Any

import aiohttp
from pydantic import BaseModel

from naijamed_atlas.constants import DEFAULT_TIMEOUT

logger = logging.getLogger("naijamed_atlas.data_sources")


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ClientConfig(BaseModel):
    """Per-client HTTP settings."""

    timeout_seconds: float = DEFAULT_TIMEOUT


# ---------------------------------------------------------------------------
# Request context (for structured logging)
# ---------------------------------------------------------------------------


class RequestContext(BaseModel):
    """Metadata attached to every outgoing request for logging."""

    source: str  # e.g. "pubmed", "eutils"
    method: str  # e.g. "search", "efetch"
    params: dict[str, Any] = {}


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class DataSourceError(Exception):
    """Base exception for data source failures."""

    def __init__(self, source: str, message: str, status_code: int | None = None):
        self.source = source
        self.status_code = status_code
        super().__init__(f"[{source}] {message}")


# ---------------------------------------------------------------------------
# Base client
# ---------------------------------------------------------------------------


class BaseClient(ABC):
    """
    Abstract base for the upstream E-utilities client and the proxy client.

    Subclasses implement `_source_name` and their own typed methods that
    call `_rest_get()` for JSON bodies or `_rest_get_xml()` for raw text.
    """

    def __init__(self, config: ClientConfig | None = None):
        self.config = config or ClientConfig()
        self._session: aiohttp.ClientSession | None = None

    @property
    @abstractmethod
    def _source_name(self) -> str:
        """Identifier for this data source, e.g. 'pubmed'."""
        ...

    # -- Session management --------------------------------------------------

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout_seconds)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.close()

    # -- Core request --------------------------------------------------------

    async def _request(
        self,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        as_text: bool = False,
        context: RequestContext | None = None,
    ) -> Any:
        """
        Make a single GET request and return the decoded body.

        Parameters
        ----------
        url : str
            Full URL.
        params : dict, optional
            Query string parameters.
        headers : dict, optional
            Additional HTTP headers.
        as_text : bool
            Return the body as text instead of decoding JSON.
        context : RequestContext, optional
            Logging context.

        Raises
        ------
        DataSourceError
            On HTTP >= 400, timeouts, connection errors or an undecodable body.
        """
        ctx = context or RequestContext(source=self._source_name, method="unknown")
        start = time.monotonic()

        try:
            session = await self._get_session()
            logger.info("Request [%s.%s] url=%s", ctx.source, ctx.method, url)

            resp = await session.get(url, params=params, headers=headers)

            if resp.status >= 400:
                body = await resp.text()
                raise DataSourceError(
                    ctx.source,
                    f"HTTP {resp.status}: {body[:500]}",
                    status_code=resp.status,
                )

            data = await resp.text() if as_text else await resp.json(content_type=None)

        except asyncio.TimeoutError:
            elapsed = time.monotonic() - start
            logger.warning(
                "Timeout [%s.%s] elapsed=%.1fs", ctx.source, ctx.method, elapsed
            )
            raise DataSourceError(ctx.source, f"Timeout after {elapsed:.1f}s")

        except aiohttp.ClientError as e:
            logger.warning("Connection error [%s.%s]: %s", ctx.source, ctx.method, e)
            raise DataSourceError(ctx.source, f"Connection error: {e}") from e

        except ValueError as e:
            logger.warning("Invalid body [%s.%s]: %s", ctx.source, ctx.method, e)
            raise DataSourceError(ctx.source, f"Invalid response body: {e}") from e

        logger.info(
            "Success [%s.%s] elapsed=%.2fs",
            ctx.source,
            ctx.method,
            time.monotonic() - start,
        )
        return data

    # -- Convenience methods for subclasses ----------------------------------

    async def _rest_get(
        self,
        url: str,
        params: dict[str, Any],
        *,
        headers: dict[str, str] | None = None,
        context: RequestContext | None = None,
    ) -> Any:
        """GET a JSON endpoint and return the decoded body."""
        return await self._request(url, params=params, headers=headers, context=context)

    async def _rest_get_xml(
        self,
        url: str,
        params: dict[str, Any],
        *,
        headers: dict[str, str] | None = None,
        context: RequestContext | None = None,
    ) -> str:
        """GET an XML endpoint and return the raw text body."""
        return await self._request(
            url, params=params, headers=headers, as_text=True, context=context
        )
