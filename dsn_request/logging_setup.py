"""
Logging configuration for dsn_request.

The library itself only emits DEBUG records on the ``dsn-request`` logger and
never installs handlers; :func:`setup_logging` is for the CLI.  In debug mode
the same handler is also attached to ``urllib3`` so its connection trace
("Starting new HTTP connection ...") shows up next to ours.
"""

import logging

try:
    import colorlog
    _COLORLOG_AVAILABLE = True
except ImportError:
    _COLORLOG_AVAILABLE = False

log = logging.getLogger("dsn-request")

_TRANSPORT_LOGGER = "urllib3"
_LOG_FMT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_LOG_DATEFMT = "%H:%M:%S"

# Handler currently installed on the urllib3 logger by setup_logging
_transport_handler: logging.Handler | None = None


def _console_handler() -> logging.Handler:
    if _COLORLOG_AVAILABLE:
        handler = colorlog.StreamHandler()
        handler.setFormatter(colorlog.ColoredFormatter(
            "%(log_color)s" + _LOG_FMT.replace("%(message)s", "%(reset)s%(message)s"),
            datefmt=_LOG_DATEFMT,
            log_colors={
                "DEBUG":    "cyan",
                "INFO":     "green",
                "WARNING":  "yellow",
                "ERROR":    "red",
                "CRITICAL": "bold_red",
            },
        ))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FMT, datefmt=_LOG_DATEFMT))
    return handler


def setup_logging(debug: bool = False) -> None:
    """
    Send package log records (and, with *debug*, urllib3's) to stderr.

    Safe to call repeatedly: handlers from a previous call are replaced.

    Args:
        debug: Enable debug-level logging including urllib3 connection trace
    """
    global _transport_handler

    handler = _console_handler()
    log.setLevel(logging.DEBUG if debug else logging.INFO)
    log.handlers.clear()
    log.addHandler(handler)

    transport = logging.getLogger(_TRANSPORT_LOGGER)
    if _transport_handler is not None:
        transport.removeHandler(_transport_handler)
        _transport_handler = None
    if debug:
        transport.setLevel(logging.DEBUG)
        transport.addHandler(handler)
        _transport_handler = handler
    else:
        transport.setLevel(logging.NOTSET)
