"""
HTTP transport client.

The dispatcher talks to anything satisfying :class:`Client`; the stock
implementation wraps a ``requests.Session`` and enforces the configured
timeout on every send.
"""

import functools
from typing import Protocol

import requests

from dsn_request.config import ClientConfig
from dsn_request.logging_setup import log


class Client(Protocol):
    def execute(self, request: requests.Request) -> requests.Response:
        ...


def build_session(verify_ssl: bool = True) -> requests.Session:
    """
    Return a plain requests.Session.

    No retry adapter is mounted: a failed send surfaces to the caller as-is.

    Args:
        verify_ssl: Whether to verify SSL certificates

    Returns:
        Configured requests.Session instance
    """
    session = requests.Session()
    session.verify = verify_ssl
    return session


class SessionClient:
    """Client backed by a ``requests.Session``."""

    def __init__(self, config: ClientConfig | None = None,
                 session: requests.Session | None = None) -> None:
        self.config = config or ClientConfig()
        self.session = session or build_session(self.config.verify_ssl)

    def execute(self, request: requests.Request) -> requests.Response:
        # Session defaults merge underneath the request's own headers
        prepared = self.session.prepare_request(request)
        log.debug("→ %s %s (timeout=%ss)", prepared.method, prepared.url,
                  self.config.timeout)
        resp = self.session.send(prepared, timeout=self.config.timeout)
        log.debug("← %s %s", resp.status_code, prepared.url)
        return resp


@functools.lru_cache(maxsize=None)
def default_client() -> SessionClient:
    """Process-wide client with the default 5-second timeout."""
    return SessionClient(ClientConfig())
