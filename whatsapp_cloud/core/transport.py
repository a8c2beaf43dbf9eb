from __future__ import annotations

import logging
from typing import Any, Protocol
from urllib.parse import quote

import httpx

from whatsapp_cloud.core.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

# Extra keyword arguments forwarded to httpx.AsyncClient.request for one call
# (headers, timeout, cookies, ...). They take precedence over anything the
# resource method computed.
RequestOptions = dict[str, Any]


def encode_path_segment(value: str) -> str:
    """Percent-encode an identifier so it always stays a single path segment.

    The marks !'()* stay literal; /, ? and # are always escaped.
    """
    return quote(str(value), safe="!'()*")


class Transport(Protocol):
    """Anything able to issue one Graph API call and return the decoded JSON.

    Implement this protocol to plug in a different HTTP stack or a fake
    for tests.
    """

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        request: RequestOptions | None = None,
    ) -> Any:
        """Perform a request relative to the versioned API root."""
        ...


class GraphTransport(Transport):
    """httpx-backed transport for the Meta Graph API."""

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            settings: Connection settings. Defaults to the environment-driven ones.
            client: Preconfigured client. When given, the caller owns its lifecycle
                and its base_url/auth are used as they are.
        """
        self.settings = settings or default_settings
        self._owns_client = client is None

        if client is None:
            client = httpx.AsyncClient(
                base_url=self.settings.base_url,
                headers={"Authorization": f"Bearer {self.settings.access_token}"},
                timeout=httpx.Timeout(self.settings.timeout),
            )
        self.client = client

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        request: RequestOptions | None = None,
    ) -> Any:
        options: dict[str, Any] = {"params": params, "json": json}
        options.update(request or {})

        logger.debug("%s %s params=%s", method, path, options.get("params"))
        response = await self.client.request(method=method, url=path, **options)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError:
            logger.warning(
                "Graph API %s %s failed with status %s: %s",
                method,
                path,
                response.status_code,
                response.text,
            )
            raise

        if not response.content:
            return {}
        return response.json()

    async def __aenter__(self) -> GraphTransport:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client if this transport created it."""
        if self._owns_client:
            await self.client.aclose()
