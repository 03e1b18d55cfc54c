"""Configuration constants for the dsn_request package."""

import math
import os
from dataclasses import dataclass


def _env_float(name: str, default: float) -> float:
    """Positive finite float from the environment, else *default*."""
    raw = os.environ.get(name, "")
    try:
        value = float(raw) if raw else default
    except ValueError:
        return default
    return value if math.isfinite(value) and value > 0 else default


DEFAULT_METHOD = "GET"

# Overall per-request timeout of the shared default client (seconds).
# Can also be supplied via the DSN_REQUEST_TIMEOUT env var.
DEFAULT_TIMEOUT = _env_float("DSN_REQUEST_TIMEOUT", 5.0)
DEFAULT_VERIFY_SSL = os.environ.get("DSN_REQUEST_NO_VERIFY_SSL", "") not in ("1", "true", "yes")

MAX_PREVIEW_BYTES = 2048   # body bytes printed by ``dsn-request fetch``


@dataclass(frozen=True)
class ClientConfig:
    """Settings handed to whoever constructs a transport client."""

    timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool = DEFAULT_VERIFY_SSL

    def __post_init__(self) -> None:
        if not (math.isfinite(self.timeout) and self.timeout > 0):
            raise ValueError(f"timeout must be a positive finite number, got {self.timeout!r}")
