"""Fake implementation of HttpClient for testing."""

import json
from typing import Any

from ignix.core.errors import HttpFetchError
from ignix.core.http.abc import HttpClient


class FakeHttpClient(HttpClient):
    """In-memory fake serving pre-configured responses by URL.

    Constructor Injection:
    - All responses are provided via constructor parameters
    - Only request tracking changes after construction

    Responses that are dicts or lists are served as JSON documents; strings
    are served verbatim (and decoded as JSON by get_json). Unknown URLs fail
    like an HTTP 404.

    Examples:
        >>> http = FakeHttpClient(
        ...     responses={
        ...         "https://registry.test/registry.json": {"components": {}},
        ...         "https://registry.test/button/index.tsx": "export const Button = 1;",
        ...     }
        ... )
        >>> http.get_text("https://registry.test/button/index.tsx")
        'export const Button = 1;'

        # Simulate a network failure
        >>> http = FakeHttpClient(failing_urls={"https://registry.test/registry.json"})
    """

    def __init__(
        self,
        *,
        responses: dict[str, Any] | None = None,
        failing_urls: set[str] | None = None,
    ) -> None:
        self._responses = responses or {}
        self._failing_urls = failing_urls or set()
        self._requests: list[str] = []
        self._closed = False

    def _lookup(self, url: str) -> Any:
        self._requests.append(url)
        if url in self._failing_urls:
            raise HttpFetchError(url, "connection refused")
        if url not in self._responses:
            raise HttpFetchError(url, "HTTP 404")
        return self._responses[url]

    def get_json(self, url: str) -> Any:
        body = self._lookup(url)
        if isinstance(body, str):
            try:
                return json.loads(body)
            except json.JSONDecodeError as e:
                raise HttpFetchError(url, f"invalid JSON: {e}") from e
        return body

    def get_text(self, url: str) -> str:
        body = self._lookup(url)
        if isinstance(body, str):
            return body
        return json.dumps(body)

    def close(self) -> None:
        self._closed = True

    @property
    def requests(self) -> list[str]:
        """URLs requested so far, in order.

        This property is for test assertions only.
        """
        return self._requests.copy()

    @property
    def closed(self) -> bool:
        return self._closed
