"""
Command-line interface for dsn_request.

    dsn-request build postgres localhost dbname sslmode disable --user u --password p
    dsn-request fetch http://localhost:8080/headers -H "User-Agent: Bacon/1.0"
"""

import argparse
import io
import sys

import requests
import urllib3

from dsn_request.address import Address
from dsn_request.config import DEFAULT_METHOD, DEFAULT_TIMEOUT, MAX_PREVIEW_BYTES, ClientConfig
from dsn_request.dispatch import Params, RequestBuildError, execute
from dsn_request.logging_setup import _COLORLOG_AVAILABLE, log, setup_logging
from dsn_request.network.client import SessionClient


def _parse_header(raw: str) -> tuple[str, str]:
    name, sep, value = raw.partition(":")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"header must look like 'Name: value', got {raw!r}")
    return name.strip(), value.strip()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="dsn-request",
        description="Compose service URLs and send one-off HTTP requests.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  dsn-request build postgres localhost dbname sslmode disable\n"
            "  dsn-request build http pie.dev get --user bob --password s3cret\n"
            "  dsn-request fetch https://pie.dev/post -X POST --data '{\"key\": 1}'\n"
        ),
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Print a composed URL")
    build.add_argument("scheme", help="URL scheme (http, postgres, ...)")
    build.add_argument("host", help="Host, optionally with :port")
    build.add_argument("path", help="Endpoint path")
    build.add_argument(
        "keyval", nargs="*", metavar="KEY VALUE",
        help="Alternating query keys and values; an unpaired last key is dropped",
    )
    build.add_argument("--user", help="Username for the userinfo segment")
    build.add_argument("--password", help="Password (requires --user)")

    fetch = sub.add_parser("fetch", help="Send one request and print the response")
    fetch.add_argument("url", help="Target URL")
    fetch.add_argument(
        "-X", "--method", default="",
        help=f"HTTP method (default: {DEFAULT_METHOD})",
    )
    fetch.add_argument(
        "-H", "--header", dest="headers", action="append", default=[],
        type=_parse_header, metavar="'NAME: VALUE'",
        help="Request header; may be repeated, later values win",
    )
    fetch.add_argument("--data", help="Request body (sent as UTF-8)")
    fetch.add_argument(
        "--timeout", type=float, default=DEFAULT_TIMEOUT,
        help=f"Overall timeout in seconds (default: {DEFAULT_TIMEOUT})",
    )
    fetch.add_argument(
        "--no-verify-ssl", dest="verify_ssl", action="store_false", default=True,
        help="Disable TLS certificate verification",
    )
    return parser.parse_args(argv)


def _cmd_build(args: argparse.Namespace) -> int:
    if args.password is not None and args.user is None:
        log.error("--password given without --user")
        return 2
    credentials = [c for c in (args.user, args.password) if c is not None]
    address = Address.new(args.scheme, args.host, *credentials)
    print(address.build(args.path, *args.keyval))
    return 0


def _cmd_fetch(args: argparse.Namespace) -> int:
    try:
        config = ClientConfig(timeout=args.timeout, verify_ssl=args.verify_ssl)
    except ValueError as exc:
        log.error("Invalid --timeout: %s", exc)
        return 2
    if not args.verify_ssl:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        log.warning("TLS certificate verification is DISABLED (--no-verify-ssl)")

    client = SessionClient(config)
    body = io.BytesIO(args.data.encode("utf-8")) if args.data is not None else None
    params = Params(
        method=args.method,
        url=args.url,
        body=body,
        headers=dict(args.headers),
        client=client,
    )

    try:
        resp = execute(params)
    except RequestBuildError as exc:
        log.error("Invalid request: %s", exc)
        return 2
    except requests.RequestException as exc:
        log.error("Request failed: %s", exc)
        return 1

    with resp:
        print(f"HTTP {resp.status_code} {resp.reason}")
        for name, value in resp.headers.items():
            print(f"{name}: {value}")
        print()
        preview = resp.content[:MAX_PREVIEW_BYTES]
        print(preview.decode(resp.encoding or "utf-8", errors="replace"))
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the dsn-request CLI.
    """
    args = parse_args(argv)

    setup_logging(debug=args.debug)

    if args.debug and not _COLORLOG_AVAILABLE:
        log.debug("Tip: install colorlog for colored output   (pip install colorlog)")

    if args.command == "build":
        return _cmd_build(args)
    return _cmd_fetch(args)


if __name__ == "__main__":
    sys.exit(main())
