"""Asynchronous HTTP communication for the translation engines.

``AsyncHttp`` is the aiohttp implementation of the ``HttpClient`` protocol the engines depend on.
It returns the status and raw body of every completed exchange, leaving the interpretation of
non-2xx statuses to the caller, and converts transport-level failures (timeouts, refused or reset
connections, DNS and TLS errors) into ``AsyncCommError`` / ``AsyncCommTimeoutError``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Final, Literal, Protocol, Self

import aiohttp
from aiohttp.client import ClientSession

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Mapping


__all__: list[str] = [
    "AsyncCommError",
    "AsyncCommTimeoutError",
    "AsyncHttp",
    "HttpClient",
    "HttpResponse",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

HTTPMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

CONNECT_TIMEOUT: Final[float] = 1.0
DEFAULT_TIMEOUT: Final[float] = 10.0


@dataclass(frozen=True)
class HttpResponse:
    """Status and raw body of a completed HTTP exchange.

    Attributes:
        status (int): HTTP status code.
        body (bytes): Raw response body.
        reason (str | None): Reason phrase sent by the server.
        headers (dict[str, str]): Response headers.
    """

    status: int
    body: bytes = b""
    reason: str | None = None
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            ValueError: If the body is not valid JSON (json.JSONDecodeError is a ValueError).
        """
        return json.loads(self.body.decode("utf-8"))


class HttpClient(Protocol):
    """Capability consumed by the translation engines."""

    async def request(
        self,
        method: HTTPMethod,
        url: str,
        *,
        params: Mapping[str, str] | None = None,
        data: Mapping[str, str] | None = None,
        json: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse: ...

    async def close(self) -> None: ...


class AsyncHttp:
    """aiohttp-backed HTTP client.

    The session is created lazily on the first request, so constructing an instance performs no I/O
    and does not require a running event loop. The instance can be used as an async context manager;
    leaving the context closes the session, and the next request opens a fresh one.
    """

    def __init__(self, *, total_timeout: float = DEFAULT_TIMEOUT, proxy: str | None = None) -> None:
        """Initialize the AsyncHttp client.

        Args:
            total_timeout (float): Total timeout per request in seconds. 0 or negative disables it.
            proxy (str | None): Proxy URL applied to every request.
        """
        logger.debug("%s initializing (timeout=%s, proxy=%s)", self.__class__.__name__, total_timeout, proxy)
        self.__session: ClientSession | None = None
        self.total_timeout: float = total_timeout
        self.proxy: str | None = proxy or None

    async def __aenter__(self) -> Self:
        logger.debug("%s entering context", self.__class__.__name__)
        self.initialize_session(suppress_already_log=True)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        _ = exc_type, exc_val, exc_tb
        logger.debug("%s exiting context", self.__class__.__name__)
        await self.close()

    def initialize_session(self, *, suppress_already_log: bool = False) -> None:
        """Create the aiohttp session if it does not exist or has been closed.

        Args:
            suppress_already_log (bool): If True, do not log when the session is already initialized.
        """
        if self.__session is None or self.__session.closed:
            self.__session = ClientSession()
            logger.debug("%s session initialized", self.__class__.__name__)
        elif not suppress_already_log:
            logger.debug("%s session already initialized", self.__class__.__name__)

    @property
    def session(self) -> ClientSession:
        if self.__session is None or self.__session.closed:
            msg = "Session is not initialized or has been closed"
            raise RuntimeError(msg)
        return self.__session

    @property
    def closed(self) -> bool:
        return self.__session is None or self.__session.closed

    async def close(self) -> None:
        """Close the aiohttp session if it is open."""
        if self.__session is not None and not self.__session.closed:
            await self.__session.close()
            logger.debug("%s session closed", self.__class__.__name__)
        self.__session = None

    async def get(
        self,
        *,
        url: str,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        return await self.request("GET", url, params=params, headers=headers)

    async def post(
        self,
        *,
        url: str,
        data: Mapping[str, str] | None = None,
        json: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        return await self.request("POST", url, data=data, json=json, headers=headers)

    def _build_timeout(self) -> aiohttp.ClientTimeout:
        if self.total_timeout <= 0:
            return aiohttp.ClientTimeout(total=None)
        if self.total_timeout < CONNECT_TIMEOUT:
            # A connect timeout longer than the total would never fire.
            return aiohttp.ClientTimeout(total=self.total_timeout)
        return aiohttp.ClientTimeout(connect=CONNECT_TIMEOUT, total=self.total_timeout)

    async def request(
        self,
        method: HTTPMethod,
        url: str,
        *,
        params: Mapping[str, str] | None = None,
        data: Mapping[str, str] | None = None,
        json: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        """Perform an HTTP request and return its status and body.

        Args:
            method (HTTPMethod): HTTP method.
            url (str): Request URL.
            params (Mapping[str, str] | None): Query-string parameters.
            data (Mapping[str, str] | None): Form fields, sent as application/x-www-form-urlencoded.
            json (Any | None): JSON body.
            headers (Mapping[str, str] | None): Extra request headers.

        Returns:
            HttpResponse: Status, reason, headers and raw body. Non-2xx statuses are not raised.

        Raises:
            AsyncCommTimeoutError: If the request timed out.
            AsyncCommError: If the connection could not be established or was interrupted.
        """
        logger.debug("[%s] url=%s timeout=%s", method, url, self.total_timeout)
        self.initialize_session(suppress_already_log=True)

        try:
            async with self.session.request(
                method=method,
                url=url,
                params=params,
                data=data,
                json=json,
                headers=headers,
                timeout=self._build_timeout(),
                proxy=self.proxy,
            ) as resp:
                body: bytes = await resp.read()
                logger.debug("[%s] url=%s status=%s length=%d", method, url, resp.status, len(body))
                return HttpResponse(
                    status=resp.status,
                    body=body,
                    reason=resp.reason,
                    headers=dict(resp.headers),
                )

        except TimeoutError as err:
            logger.debug(err)
            msg = "Timeout due to a lack of response from the server."
            raise AsyncCommTimeoutError(msg) from err
        except ConnectionResetError as err:
            logger.debug(err)
            msg = "The connection to the server has been disconnected."
            raise AsyncCommError(msg) from err
        except aiohttp.ClientConnectorError as err:
            logger.debug(err)
            msg = "The server could not be reached."
            raise AsyncCommError(msg) from err
        except aiohttp.ClientError as err:
            logger.debug(err)
            msg = f"HTTP transport error: {err}"
            raise AsyncCommError(msg) from err


class AsyncCommError(Exception):
    """An HTTP exchange could not be completed."""

    def __init__(self, msg: str | BaseException) -> None:
        self.msg: str = str(msg)
        super().__init__(self.msg)


class AsyncCommTimeoutError(AsyncCommError):
    """An HTTP exchange did not complete within the configured timeout."""
