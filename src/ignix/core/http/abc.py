"""HTTP operations interface.

Architecture:
- HttpClient: Abstract base class defining the interface
- RealHttpClient: Production implementation using httpx
- FakeHttpClient (tests/fakes/http.py): In-memory responses keyed by URL
"""

from abc import ABC, abstractmethod
from typing import Any


class HttpClient(ABC):
    """Abstract interface for fetching registry documents and asset files.

    All implementations (real and fake) must implement this interface.
    Failures of any kind (network, non-2xx status, undecodable JSON) are
    raised as HttpFetchError.
    """

    @abstractmethod
    def get_json(self, url: str) -> Any:
        """GET url and return the decoded JSON body.

        Raises:
            HttpFetchError: If the request fails or the body isn't valid JSON
        """
        ...

    @abstractmethod
    def get_text(self, url: str) -> str:
        """GET url and return the body as text.

        Raises:
            HttpFetchError: If the request fails
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Release the underlying connections. Called once, when the CLI exits."""
        ...
