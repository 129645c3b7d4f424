import logging

import aiohttp

from .base import Request, Response
from .transport import Transport

logger = logging.getLogger(__package__)


class AioHttpTransport(Transport):
    __slots__ = (
        "__allow_redirects",
        "__client_session",
        "__timeout",
    )

    def __init__(
        self,
        client_session: aiohttp.ClientSession,
        *,
        timeout: float = 20.0,
        allow_redirects: bool = True,
    ) -> None:
        if timeout <= 0:
            raise ValueError("timeout must be positive")

        self.__client_session = client_session
        self.__timeout = timeout
        self.__allow_redirects = allow_redirects

    async def fetch(self, request: Request) -> Response:
        logger.debug(
            "Sending request %s %s with timeout %s",
            request.method,
            request.url,
            self.__timeout,
            extra={
                "request_method": request.method,
                "request_url": request.url,
                "request_timeout": self.__timeout,
            },
        )
        async with self.__client_session.request(
            request.method,
            request.url,
            headers=request.headers,
            data=request.body,
            timeout=aiohttp.ClientTimeout(total=self.__timeout),
            allow_redirects=self.__allow_redirects,
        ) as response:
            body = await response.read()
            return Response(status=response.status, headers=response.headers, body=body)
