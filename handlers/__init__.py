"""Transport handlers for FusionTranslator.

This package provides the asynchronous HTTP client the translation engines talk through.
"""

from handlers.async_comm import AsyncCommError, AsyncCommTimeoutError, AsyncHttp, HttpClient, HttpResponse

__all__: list[str] = [
    "AsyncCommError",
    "AsyncCommTimeoutError",
    "AsyncHttp",
    "HttpClient",
    "HttpResponse",
]
