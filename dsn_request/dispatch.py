"""
Single-shot request dispatch.

:func:`execute` turns a :class:`Params` into one HTTP request, hands it to a
transport :class:`~dsn_request.network.Client` and returns the response
untouched.  Reading and closing the body is the caller's job.

Defaults: method ``GET``, client :func:`~dsn_request.network.default_client`
(5 s timeout).
"""

import re
import urllib.parse
from dataclasses import dataclass
from typing import IO, Mapping, Union

import requests

from dsn_request.address import Endpoint
from dsn_request.config import DEFAULT_METHOD
from dsn_request.logging_setup import log
from dsn_request.network.client import Client, default_client

Body = Union[bytes, str, IO[bytes], None]

# RFC 7230 token: what an HTTP method may consist of
_METHOD_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")

# Schemes the requests transport has adapters for
_HTTP_SCHEMES = frozenset(("http", "https"))


class RequestBuildError(ValueError):
    """The request could not be constructed; nothing was sent."""


@dataclass
class Params:
    method: str = ""
    url: Union[str, Endpoint] = ""
    body: Body = None
    headers: Mapping[str, str] | None = None
    client: Client | None = None


def build_request(params: Params) -> requests.Request:
    """
    Build the outgoing request for *params* without sending it.

    Raises:
        RequestBuildError: malformed method, URL or header, or a URL scheme
            other than http/https
    """
    method = params.method or DEFAULT_METHOD
    if not _METHOD_RE.fullmatch(method):
        raise RequestBuildError(f"invalid HTTP method {method!r}")

    url = str(params.url)
    scheme = urllib.parse.urlsplit(url).scheme.lower()
    if scheme and scheme not in _HTTP_SCHEMES:
        log.debug("Could not build %s %s: unsupported scheme %r", method, url, scheme)
        raise RequestBuildError(f"unsupported URL scheme {scheme!r} in {url!r}")

    headers: dict[str, str] = {}
    for key, value in (params.headers or {}).items():
        headers[key] = value

    request = requests.Request(method, url, headers=headers, data=params.body)
    try:
        # Validation only: the result is discarded and the client prepares
        # the request again against its own session defaults.
        request.prepare()
    except (requests.RequestException, ValueError) as exc:
        log.debug("Could not build %s %s: %s", method, url, exc)
        raise RequestBuildError(str(exc)) from exc
    return request


def execute(params: Params) -> requests.Response:
    """
    Send the request described by *params* and return the raw response.

    Transport failures (timeouts, refused connections, TLS errors) propagate
    as the ``requests`` exceptions the client raised.  *params* is not
    modified.
    """
    request = build_request(params)
    client = params.client if params.client is not None else default_client()
    return client.execute(request)


def get(url: Union[str, Endpoint], headers: Mapping[str, str] | None = None,
        client: Client | None = None) -> requests.Response:
    """Default request: ``GET`` *url* without a body."""
    return execute(Params(url=url, headers=headers, client=client))
