import collections.abc
import json
from typing import Any

import multidict
import yarl

from .base import Header, Headers, Method, Request, freeze_headers


def get(url: str | yarl.URL, *, headers: Headers | None = None) -> Request:
    return request(Method.GET, url, headers=headers)


def post(url: str | yarl.URL, body: bytes | None = None, *, headers: Headers | None = None) -> Request:
    return request(Method.POST, url, headers=headers, body=body)


def put(url: str | yarl.URL, body: bytes | None = None, *, headers: Headers | None = None) -> Request:
    return request(Method.PUT, url, headers=headers, body=body)


def patch(url: str | yarl.URL, body: bytes | None = None, *, headers: Headers | None = None) -> Request:
    return request(Method.PATCH, url, headers=headers, body=body)


def delete(url: str | yarl.URL, *, headers: Headers | None = None) -> Request:
    return request(Method.DELETE, url, headers=headers)


def post_json(
    url: str | yarl.URL,
    data: Any,
    *,
    headers: Headers | None = None,
    encoding: str = "utf-8",
    dumps: collections.abc.Callable[[Any], str] = json.dumps,
    content_type: str = "application/json",
) -> Request:
    return request_json(
        Method.POST,
        url,
        data,
        headers=headers,
        encoding=encoding,
        dumps=dumps,
        content_type=content_type,
    )


def put_json(
    url: str | yarl.URL,
    data: Any,
    *,
    headers: Headers | None = None,
    encoding: str = "utf-8",
    dumps: collections.abc.Callable[[Any], str] = json.dumps,
    content_type: str = "application/json",
) -> Request:
    return request_json(
        Method.PUT,
        url,
        data,
        headers=headers,
        encoding=encoding,
        dumps=dumps,
        content_type=content_type,
    )


def patch_json(
    url: str | yarl.URL,
    data: Any,
    *,
    headers: Headers | None = None,
    encoding: str = "utf-8",
    dumps: collections.abc.Callable[[Any], str] = json.dumps,
    content_type: str = "application/json",
) -> Request:
    return request_json(
        Method.PATCH,
        url,
        data,
        headers=headers,
        encoding=encoding,
        dumps=dumps,
        content_type=content_type,
    )


def request_json(
    method: str,
    url: str | yarl.URL,
    data: Any,
    *,
    headers: Headers | None = None,
    encoding: str = "utf-8",
    dumps: collections.abc.Callable[[Any], str] = json.dumps,
    content_type: str = "application/json",
) -> Request:
    enriched_headers = multidict.CIMultiDict[str](headers) if headers is not None else multidict.CIMultiDict[str]()
    enriched_headers[Header.CONTENT_TYPE] = content_type

    body = dumps(data).encode(encoding)

    return request(method, url, headers=enriched_headers, body=body)


def request(
    method: str,
    url: str | yarl.URL,
    *,
    headers: Headers | None = None,
    body: bytes | None = None,
) -> Request:
    return Request(
        method=method,
        url=yarl.URL(url) if isinstance(url, str) else url,
        headers=freeze_headers(headers),
        body=body,
    )
