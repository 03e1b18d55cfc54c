"""
HTTP transport: the Client protocol and its requests-based implementation.
"""

from dsn_request.network.client import Client, SessionClient, build_session, default_client

__all__ = ["Client", "SessionClient", "build_session", "default_client"]
