import logging

import httpx
import multidict

from .base import Request, Response
from .transport import Transport

logger = logging.getLogger(__package__)


class HttpxTransport(Transport):
    __slots__ = (
        "__client",
        "__follow_redirects",
        "__timeout",
    )

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        timeout: float = 20.0,
        follow_redirects: bool = True,
    ):
        if timeout <= 0:
            raise ValueError("timeout must be positive")

        self.__client = client
        self.__timeout = timeout
        self.__follow_redirects = follow_redirects

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
        client_request = self.__client.build_request(
            method=request.method,
            url=httpx.URL(str(request.url)),
            content=request.body,
            headers=list(request.headers.items()),
            timeout=self.__timeout,
        )
        client_response = await self.__client.send(client_request, follow_redirects=self.__follow_redirects)
        try:
            body = await client_response.aread()
        finally:
            await client_response.aclose()

        headers = multidict.CIMultiDict[str](client_response.headers.multi_items())
        return Response(
            status=client_response.status_code,
            headers=multidict.CIMultiDictProxy[str](headers),
            body=body,
        )
