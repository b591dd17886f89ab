"""
HTTP transport for the WooCommerce REST API.

The resource clients only depend on the `Transport` protocol. `AiohttpTransport`
is the default implementation: one pooled aiohttp session sending the consumer
key/secret pair as an HTTP Basic ``Authorization`` header.
"""

import base64
import json
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable

import aiohttp
from aiohttp import ClientTimeout

from woocommerce_api.core.config import Settings, get_settings
from woocommerce_api.core.logging_config import log_api_call

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    """Raw HTTP response: status code, body text and headers."""

    status: int
    text: str
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        """
        Parse the body as JSON.

        Raises:
            ValueError: If the body is not valid JSON
        """
        return json.loads(self.text)

    @classmethod
    def from_json(cls, status: int, data: Any, headers: Optional[Mapping[str, str]] = None) -> "TransportResponse":
        return cls(status=status, text=json.dumps(data), headers=dict(headers or {}))


@runtime_checkable
class Transport(Protocol):
    """
    Narrow HTTP interface consumed by the resource clients.

    ``path`` is relative to the API root (``products/categories/5``).
    Network failures surface as ``aiohttp.ClientError`` or
    ``asyncio.TimeoutError``.
    """

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> TransportResponse: ...


class AiohttpTransport:
    """
    aiohttp based transport.

    The session is created by ``initialize()`` or lazily on the first request
    and shared by every resource client using this transport.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the transport from settings without opening the session."""
        self.settings = settings or get_settings()
        self.base_url = self.settings.api_base_url
        self.session: Optional[aiohttp.ClientSession] = None

        logger.info(f"Initialized WooCommerce transport for {self.base_url}")

    async def initialize(self) -> None:
        """Create the HTTP session."""
        if self.session is not None and not self.session.closed:
            return

        timeout = ClientTimeout(
            total=self.settings.HTTP_TIMEOUT_SECONDS,
            connect=self.settings.HTTP_CONNECT_TIMEOUT_SECONDS,
        )
        connector = aiohttp.TCPConnector(limit=self.settings.HTTP_POOL_LIMIT)

        self.session = aiohttp.ClientSession(
            timeout=timeout,
            connector=connector,
            headers={**self.settings.get_default_headers(), "Authorization": self.authorization_header()},
        )
        logger.info("WooCommerce transport session opened")

    async def close(self) -> None:
        """Close the HTTP session and release pooled connections."""
        if self.session:
            await self.session.close()
            self.session = None
            logger.info("WooCommerce transport closed")

    async def __aenter__(self) -> "AiohttpTransport":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def authorization_header(self) -> str:
        """HTTP Basic credentials built from the consumer key and secret."""
        credentials = f"{self.settings.WOOCOMMERCE_CONSUMER_KEY}:{self.settings.WOOCOMMERCE_CONSUMER_SECRET}"
        return "Basic " + base64.b64encode(credentials.encode("utf-8")).decode("ascii")

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> TransportResponse:
        """
        Perform one HTTP call. No retries are attempted.

        Args:
            method: HTTP method
            path: Path relative to the API root
            params: Query parameters (already serialized to wire values)
            json: JSON body

        Returns:
            TransportResponse: Status, body text and headers of any status code

        Raises:
            aiohttp.ClientError: On connection failures
            asyncio.TimeoutError: When the configured timeout expires
        """
        await self.initialize()

        url = self.url_for(path)
        start = time.monotonic()
        async with self.session.request(method, url, params=params, json=json) as response:
            text = await response.text()
            duration = time.monotonic() - start
            log_api_call(method, url, response.status, duration, params=params)
            return TransportResponse(status=response.status, text=text, headers=dict(response.headers))
