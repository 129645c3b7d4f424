import asyncio
import contextlib
import logging
import socket
import struct
from collections.abc import AsyncIterator, Callable

import aiohttp
import httpx
import pytest
from _pytest.fixtures import SubRequest

import aio_network

logging.basicConfig(level="DEBUG")


class HangingTransport(aio_network.Transport):
    __slots__ = ("requests",)

    def __init__(self) -> None:
        self.requests: list[aio_network.Request] = []

    async def fetch(self, request: aio_network.Request) -> aio_network.Response:
        self.requests.append(request)
        await asyncio.get_running_loop().create_future()
        raise RuntimeError("Should not be here")


@pytest.fixture
def hanging_transport() -> HangingTransport:
    return HangingTransport()


@pytest.fixture(params=("aiohttp", "httpx"))
async def transport(request: SubRequest) -> AsyncIterator[aio_network.Transport]:
    if request.param == "aiohttp":
        async with aiohttp.ClientSession() as client_session:
            yield aio_network.AioHttpTransport(client_session, timeout=1.0)
    elif request.param == "httpx":
        async with httpx.AsyncClient() as async_client:
            yield aio_network.HttpxTransport(async_client, timeout=1.0)
    else:
        raise ValueError(f"Unknown transport {request.param}")


@pytest.fixture(scope="session")
def unused_port() -> Callable[[], int]:
    def f() -> int:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.bind(("127.0.0.1", 0))
            return s.getsockname()[1]

    return f


@pytest.fixture
async def resetting_server_factory() -> AsyncIterator[Callable[[int], contextlib.AbstractAsyncContextManager[None]]]:
    @contextlib.asynccontextmanager
    async def run_server(port: int) -> AsyncIterator[None]:
        async def handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
            try:
                await reader.read(1)
                sock = writer.get_extra_info("socket")
                assert sock
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_LINGER, struct.pack("ii", 1, 0))
            finally:
                writer.close()

        server_handle = await asyncio.start_server(handle, "127.0.0.1", port)

        yield

        server_handle.close()
        await server_handle.wait_closed()

    yield run_server
