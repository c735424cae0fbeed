"""
Base client for all live paper source clients.

Provides: a lazily created aiohttp session with a per-request timeout,
retry with exponential backoff on transient 5xx responses, structured
request logging, and the error taxonomy adapters fall back on.
"""

import asyncio
import json
import logging
import time
from abc import ABC, abstractmethod
from typing import Any

import aiohttp
from pydantic import BaseModel

from research_scrolls.constants import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
)

logger = logging.getLogger("research_scrolls.data_sources")


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class RetryConfig(BaseModel):
    """Retry behaviour for failed requests."""

    max_retries: int = DEFAULT_MAX_RETRIES
    base_delay: float = 0.5  # seconds
    max_delay: float = 5.0  # seconds
    backoff_factor: float = 2.0
    retryable_status_codes: set[int] = {500, 502, 503, 504}


class ClientConfig(BaseModel):
    """Top-level HTTP client config."""

    retry: RetryConfig = RetryConfig()
    timeout_seconds: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT


# ---------------------------------------------------------------------------
# Request context (for structured logging)
# ---------------------------------------------------------------------------


class RequestContext(BaseModel):
    """Metadata attached to every outgoing request for logging."""

    source: str  # e.g. "arxiv", "pubmed"
    method: str  # e.g. "esearch", "search"
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


class TransientUpstreamError(DataSourceError):
    """Non-2xx status, connection failure, or timeout."""

    pass


class MalformedResponseError(DataSourceError):
    """A successful response whose body could not be decoded or parsed."""

    pass


# ---------------------------------------------------------------------------
# Base client
# ---------------------------------------------------------------------------


class BaseClient(ABC):
    """
    Abstract base for the arXiv, PubMed, Semantic Scholar and bioRxiv clients.

    Subclasses implement `_source_name` and call `_rest_get()` for JSON or
    `_rest_get_xml()` for XML/text payloads. Both raise DataSourceError
    subclasses; deciding what to do about a failure is the caller's job.
    """

    def __init__(self, config: ClientConfig | None = None):
        self.config = config or ClientConfig()
        self._session: aiohttp.ClientSession | None = None

    @property
    @abstractmethod
    def _source_name(self) -> str:
        """Identifier for this data source, e.g. 'arxiv'."""
        ...

    # -- Session management --------------------------------------------------

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout_seconds)
            self._session = aiohttp.ClientSession(
                timeout=timeout, headers={"User-Agent": self.config.user_agent}
            )
        return self._session

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.close()

    # -- Core request with retry ---------------------------------------------

    def _backoff(self, attempt: int) -> float:
        retry = self.config.retry
        return min(retry.base_delay * (retry.backoff_factor**attempt), retry.max_delay)

    async def _request(
        self,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        context: RequestContext | None = None,
    ) -> str:
        """
        GET `url` and return the response body as text.

        Parameters
        ----------
        url : str
            Full URL.
        params : dict, optional
            Query string parameters.
        headers : dict, optional
            Additional HTTP headers.
        context : RequestContext, optional
            Logging context.

        Raises
        ------
        TransientUpstreamError
            On a non-2xx status, connection error or timeout, once retries
            are exhausted. Non-retryable statuses raise immediately.
        MalformedResponseError
            If a 2xx body cannot be decoded as text.
        """
        ctx = context or RequestContext(source=self._source_name, method="get")
        retry = self.config.retry
        last_error: DataSourceError | None = None
        start = time.monotonic()

        for attempt in range(retry.max_retries + 1):
            try:
                session = await self._get_session()

                logger.info(
                    "Request [%s.%s] attempt=%d url=%s",
                    ctx.source,
                    ctx.method,
                    attempt + 1,
                    url,
                )

                async with session.get(url, params=params, headers=headers) as resp:
                    # --- Handle HTTP errors ---
                    if resp.status in retry.retryable_status_codes:
                        body = await resp.text(errors="replace")
                        logger.warning(
                            "Retryable %d from %s.%s: %s",
                            resp.status,
                            ctx.source,
                            ctx.method,
                            body[:200],
                        )
                        last_error = TransientUpstreamError(
                            ctx.source,
                            f"HTTP {resp.status}: {body[:200]}",
                            status_code=resp.status,
                        )

                    elif not 200 <= resp.status < 300:
                        body = await resp.text(errors="replace")
                        raise TransientUpstreamError(
                            ctx.source,
                            f"HTTP {resp.status}: {body[:500]}",
                            status_code=resp.status,
                        )

                    else:
                        # --- Success ---
                        try:
                            text = await resp.text()
                        except UnicodeDecodeError as e:
                            raise MalformedResponseError(
                                ctx.source, f"Undecodable body: {e}"
                            ) from e
                        logger.info(
                            "Success [%s.%s] elapsed=%.2fs",
                            ctx.source,
                            ctx.method,
                            time.monotonic() - start,
                        )
                        return text

            except asyncio.TimeoutError:
                elapsed = time.monotonic() - start
                last_error = TransientUpstreamError(
                    ctx.source, f"Timeout after {elapsed:.1f}s"
                )
                logger.warning(
                    "Timeout [%s.%s] attempt=%d elapsed=%.1fs",
                    ctx.source,
                    ctx.method,
                    attempt + 1,
                    elapsed,
                )

            except aiohttp.ClientError as e:
                last_error = TransientUpstreamError(
                    ctx.source, f"Connection error: {e}"
                )
                logger.warning(
                    "Connection error [%s.%s] attempt=%d: %s",
                    ctx.source,
                    ctx.method,
                    attempt + 1,
                    e,
                )

            # Exponential backoff before next attempt
            if attempt < retry.max_retries:
                await asyncio.sleep(self._backoff(attempt))

        logger.error(
            "All retries exhausted [%s.%s] after %.1fs: %s",
            ctx.source,
            ctx.method,
            time.monotonic() - start,
            last_error,
        )
        raise last_error or TransientUpstreamError(ctx.source, "No attempts made")

    # -- Convenience methods for subclasses ----------------------------------

    async def _rest_get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        *,
        context: RequestContext | None = None,
    ) -> Any:
        """GET a JSON endpoint and return the decoded body."""
        text = await self._request(
            url,
            params=params,
            headers={"Accept": "application/json"},
            context=context,
        )
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedResponseError(self._source_name, f"Invalid JSON: {e}")

    async def _rest_get_xml(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        *,
        context: RequestContext | None = None,
    ) -> str:
        """GET an XML (or other text) endpoint and return the raw body."""
        return await self._request(url, params=params, context=context)
