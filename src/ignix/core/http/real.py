"""Production HttpClient implementation using httpx."""

import json
import logging
from typing import Any

import httpx

from ignix.core.errors import HttpFetchError
from ignix.core.http.abc import HttpClient

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


class RealHttpClient(HttpClient):
    """Production implementation backed by a single httpx.Client.

    Requests are synchronous and issued one at a time; there is no retry.
    The client is closed by the root command when the CLI exits.
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._client = (
            client
            if client is not None
            else httpx.Client(follow_redirects=True, timeout=DEFAULT_TIMEOUT_SECONDS)
        )

    def _get(self, url: str) -> httpx.Response:
        logger.debug("GET %s", url)
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise HttpFetchError(url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise HttpFetchError(url, str(e) or type(e).__name__) from e
        return response

    def get_json(self, url: str) -> Any:
        response = self._get(url)
        try:
            return response.json()
        except json.JSONDecodeError as e:
            raise HttpFetchError(url, f"invalid JSON: {e}") from e

    def get_text(self, url: str) -> str:
        return self._get(url).text

    def close(self) -> None:
        self._client.close()
