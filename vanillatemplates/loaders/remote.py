"""HTTP partial loader.

Fetches partials (and JSON data files) over HTTP with retry logic.
No transformation - just fetch and return the response text.
"""

import asyncio
import logging

import httpx

from vanillatemplates.core import PartialLoader

logger = logging.getLogger(__name__)


class HTTPLoader(PartialLoader):
    """Async HTTP loader.

    Identifiers are URLs relative to `base_url` (absolute URLs pass through).
    Failed requests are retried with linear backoff; when retries run out the
    last error is raised, which aborts the render that asked for it.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        retry_count: int = 3,
        retry_delay: float = 1.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url
        self._timeout = timeout
        self._retry_count = max(1, retry_count)
        self._retry_delay = retry_delay
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def name(self) -> str:
        return "http"

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def load(self, identifier: str) -> str:
        """Fetch one resource with retry logic.

        Raises:
            httpx.HTTPStatusError: Non-2xx response on the final attempt
            httpx.RequestError: Network failure on the final attempt
        """
        for attempt in range(self._retry_count):
            try:
                response = await self._get_client().get(identifier)
                response.raise_for_status()
                return response.text
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                logger.warning("[LOADER] HTTP %d for %s", status, identifier)
                # Client errors won't fix themselves
                if status < 500 or attempt == self._retry_count - 1:
                    raise
            except httpx.RequestError as e:
                logger.warning("[LOADER] Request failed for %s: %s", identifier, e)
                if attempt == self._retry_count - 1:
                    raise
            await asyncio.sleep(self._retry_delay * (attempt + 1))

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
