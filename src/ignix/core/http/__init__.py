from ignix.core.http.abc import HttpClient
from ignix.core.http.real import RealHttpClient

__all__ = [
    "HttpClient",
    "RealHttpClient",
]
