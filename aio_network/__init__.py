import re
import sys
from typing import NamedTuple

from .base import (
    ConnectivityError,
    Header,
    InvalidResponseError,
    Method,
    NetworkError,
    Request,
    Response,
)
from .executor import RequestExecutor
from .request import (
    delete,
    get,
    patch,
    patch_json,
    post,
    post_json,
    put,
    put_json,
    request,
    request_json,
)
from .response_classifier import DefaultResponseClassifier, ResponseClassifier, ResponseVerdict
from .testing import RecordingTransport
from .transport import Transport

__all__: tuple[str, ...] = (
    "ConnectivityError",
    "DefaultResponseClassifier",
    "Header",
    "InvalidResponseError",
    "Method",
    "NetworkError",
    "RecordingTransport",
    "Request",
    "RequestExecutor",
    "Response",
    "ResponseClassifier",
    "ResponseVerdict",
    "Transport",
    "delete",
    "get",
    "patch",
    "patch_json",
    "post",
    "post_json",
    "put",
    "put_json",
    "request",
    "request_json",
)
try:
    import aiohttp  # noqa

    from .aiohttp import AioHttpTransport

    __all__ += ("AioHttpTransport",)  # type: ignore
except ImportError:
    pass

try:
    import httpx  # noqa

    from .httpx import HttpxTransport

    __all__ += ("HttpxTransport",)  # type: ignore
except ImportError:
    pass

__version__ = "0.1.0"

version = f"{__version__}, Python {sys.version}"


class VersionInfo(NamedTuple):
    major: int
    minor: int
    micro: int
    release_level: str
    serial: int


def _parse_version(v: str) -> VersionInfo:
    version_re = r"^(?P<major>\d+)\.(?P<minor>\d+)\.(?P<micro>\d+)((?P<release_level>[a-z]+)(?P<serial>\d+)?)?$"
    match = re.match(version_re, v)
    if not match:
        raise ImportError(f"Invalid package version {v}")
    try:
        major = int(match.group("major"))
        minor = int(match.group("minor"))
        micro = int(match.group("micro"))
        levels = {"rc": "candidate", "a": "alpha", "b": "beta", None: "final"}
        release_level = levels[match.group("release_level")]
        serial = int(match.group("serial")) if match.group("serial") else 0
        return VersionInfo(major, minor, micro, release_level, serial)
    except Exception as e:
        raise ImportError(f"Invalid package version {v}") from e


version_info = _parse_version(__version__)
