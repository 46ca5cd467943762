"""
=============================================================================
COMMAND LINE INTERFACE
=============================================================================

Usage:
    python -m reqparse parse request.txt        # Parse a file
    cat request.txt | python -m reqparse parse  # Parse stdin
    python -m reqparse parse --strict req.txt   # Reject malformed input
    python -m reqparse client --port 3000       # Greeting client

Settings not given on the command line come from REQPARSE_* environment
variables (see config.py).

=============================================================================
"""

import argparse
import json
import logging
import sys

from . import __version__
from .config import ParserConfig
from .core import GreetingClient
from .http import MalformedRequest, ParsedRequest


def request_to_dict(request: ParsedRequest) -> dict:
    """JSON-friendly view of a parsed request."""
    return {
        "method": request.method.name,
        "version": request.version.name,
        "resource": request.path,
        "headers": dict(request.headers),
        "body": request.body,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reqparse",
        description="Parse raw HTTP/1.x requests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m reqparse parse request.txt      # Parse a request file
  python -m reqparse parse - < request.txt  # Parse stdin
  python -m reqparse client --port 3000     # Send a greeting
        """
    )

    parser.add_argument(
        "--log-level", "-l",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: REQPARSE_LOG_LEVEL or WARNING)"
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"reqparse {__version__}"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    # ─────────────────────────────────────────────────────────────────────
    # parse
    # ─────────────────────────────────────────────────────────────────────

    parse_cmd = commands.add_parser("parse", help="Parse a request and print it as JSON")
    parse_cmd.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Request file (default: stdin)"
    )
    parse_cmd.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail on a missing or malformed request line"
    )

    # ─────────────────────────────────────────────────────────────────────
    # client
    # ─────────────────────────────────────────────────────────────────────

    client_cmd = commands.add_parser("client", help="Send a greeting and print the reply")
    client_cmd.add_argument("--host", "-H", default=None, help="Server host")
    client_cmd.add_argument("--port", "-p", type=int, default=None, help="Server port")
    client_cmd.add_argument("--message", "-m", default=None, help="Message to send")
    client_cmd.add_argument(
        "--buffer-size", "-b",
        type=int,
        default=None,
        help="Bytes to read back (default: 5)"
    )

    return parser


def configure(args: argparse.Namespace) -> ParserConfig:
    """Overlay command-line arguments on the environment configuration."""
    config = ParserConfig.from_env()

    if args.log_level:
        config.log_level = args.log_level
    if getattr(args, "strict", None):
        config.strict = True
    for name in ("host", "port", "buffer_size"):
        value = getattr(args, name, None)
        if value is not None:
            setattr(config, name, value)
    if getattr(args, "message", None) is not None:
        config.greeting = args.message

    config.validate()
    return config


def setup_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("reqparse").setLevel(level)


def run_parse(args: argparse.Namespace, config: ParserConfig) -> int:
    if args.file == "-":
        raw = sys.stdin.buffer.read()
    else:
        with open(args.file, "rb") as f:
            raw = f.read()

    try:
        request = config.parser().parse_bytes(raw)
    except MalformedRequest as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(request_to_dict(request), indent=2))
    return 0


def run_client(config: ParserConfig) -> int:
    client = GreetingClient(
        host=config.host,
        port=config.port,
        message=config.greeting,
        buffer_size=config.buffer_size,
        timeout=config.timeout,
        encoding=config.encoding,
    )
    try:
        reply = client.exchange()
    except (ConnectionError, TimeoutError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Got response from server: {reply!r}")
    return 0


def main(argv=None) -> int:
    """Main CLI entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        config = configure(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    setup_logging(config.log_level)

    if args.command == "parse":
        return run_parse(args, config)
    return run_client(config)


if __name__ == "__main__":
    sys.exit(main())
