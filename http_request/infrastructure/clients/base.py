"""Base transport over httpx."""
import logging
from typing import Any, Dict, Optional

import httpx

from http_request.domain.exceptions import TransportFailure

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class HttpTransport:
    """Single HTTP round trip with timeout.

    A fresh ``httpx.AsyncClient`` is opened per call; ``transport`` lets
    callers swap the network layer (``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        timeout: float,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    async def send(
        self,
        method: str,
        url: str,
        json: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """Send the request, raising TransportFailure if nothing came back."""
        async with self._client() as client:
            try:
                response = await client.request(
                    method, url, headers=JSON_HEADERS, json=json
                )
                return response
            except httpx.TimeoutException as e:
                logger.info(f"<-- Timeout calling {url}: {e!r}")
                raise TransportFailure(method, url, "timeout") from e
            except httpx.HTTPError as e:
                logger.info(f"<-- Error calling {url}: {e!r}")
                raise TransportFailure(method, url, e.__class__.__name__) from e
            except Exception as e:
                logger.info(f"<-- Error calling {url}: {e!r}")
                raise TransportFailure(method, url, e.__class__.__name__) from e
