import collections.abc
import dataclasses

import multidict
import yarl

EMPTY_HEADERS = multidict.CIMultiDictProxy[str](multidict.CIMultiDict[str]())


class Method:
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


class Header:
    ACCEPT = multidict.istr("Accept")
    AUTHORIZATION = multidict.istr("Authorization")
    CONTENT_TYPE = multidict.istr("Content-Type")
    CONTENT_LENGTH = multidict.istr("Content-Length")
    LOCATION = multidict.istr("Location")
    USER_AGENT = multidict.istr("User-Agent")


Headers = (
    collections.abc.Mapping[str | multidict.istr, str] | multidict.CIMultiDictProxy[str] | multidict.CIMultiDict[str]
)


class NetworkError(Exception):
    """Request has not produced a usable response"""


class ConnectivityError(NetworkError):
    """Exchange with the server has not completed"""


class InvalidResponseError(NetworkError):
    """Exchange has completed, but the status is not accepted"""

    def __init__(self, status: int):
        super().__init__(f"Unexpected response status {status}")
        self.status = status


def freeze_headers(headers: Headers | None) -> multidict.CIMultiDictProxy[str]:
    if headers is None or headers is EMPTY_HEADERS:
        return EMPTY_HEADERS
    return multidict.CIMultiDictProxy[str](multidict.CIMultiDict[str](headers))


@dataclasses.dataclass(frozen=True, slots=True)
class Request:
    method: str
    url: yarl.URL
    headers: multidict.CIMultiDictProxy[str] = dataclasses.field(default_factory=lambda: EMPTY_HEADERS, hash=False)
    body: bytes | None = None

    def __post_init__(self) -> None:
        if not self.url.is_absolute():
            raise RuntimeError("Request url should be absolute")
        object.__setattr__(self, "headers", freeze_headers(self.headers))

    def update_headers(self, headers: Headers) -> "Request":
        updated_headers = multidict.CIMultiDict[str](self.headers)
        updated_headers.update(headers)
        return dataclasses.replace(self, headers=multidict.CIMultiDictProxy[str](updated_headers))

    def extend_headers(self, headers: Headers) -> "Request":
        updated_headers = multidict.CIMultiDict[str](self.headers)
        updated_headers.extend(headers)
        return dataclasses.replace(self, headers=multidict.CIMultiDictProxy[str](updated_headers))

    def __repr__(self) -> str:
        return f"<Request [{self.method} {self.url}]>"


@dataclasses.dataclass(frozen=True, slots=True)
class Response:
    status: int
    headers: multidict.CIMultiDictProxy[str] = dataclasses.field(default_factory=lambda: EMPTY_HEADERS, hash=False)
    body: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", freeze_headers(self.headers))

    def is_informational(self) -> bool:
        return 100 <= self.status < 200

    def is_successful(self) -> bool:
        return 200 <= self.status < 300

    def is_redirection(self) -> bool:
        return 300 <= self.status < 400

    def is_client_error(self) -> bool:
        return 400 <= self.status < 500

    def is_server_error(self) -> bool:
        return 500 <= self.status < 600

    @property
    def content_type(self) -> str | None:
        return self.headers.get(Header.CONTENT_TYPE)

    def __repr__(self) -> str:
        return f"<Response [{self.status}]>"
