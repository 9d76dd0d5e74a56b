"""
waitutil CLI — Wait for services from shell and deploy scripts.

Commands:
    waitutil service HOST PORT     Wait until HOST:PORT accepts TCP connections

Global options:
    --options/-o "{timeout_sec: 30, delay_sec: 2}"   Poll options as YAML
    --timeout, --delay, --verbose                    Override single options
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import DEFAULT_OPTIONS


def _build_config(args: argparse.Namespace):
    """Merge --options with the explicit flags and validate the result."""
    from .config import load_options, merge_options, parse_options

    options = merge_options(
        parse_options(args.options),
        {
            "timeout_sec": args.timeout,
            "delay_sec": args.delay,
            "verbose": True if args.verbose else None,
        },
    )
    return load_options(options)


def cmd_service(args: argparse.Namespace) -> None:
    """Wait for a TCP port to become available."""
    from .protocol import ConfigError, WaitTimeoutError
    from .service import ServiceWaiter

    try:
        config = _build_config(args)
    except ConfigError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(2)

    description = args.description or "service"
    try:
        ServiceWaiter(connect_timeout=args.connect_timeout).wait(
            description, args.host, args.port, config
        )
    except WaitTimeoutError as e:
        print(f"⏰ {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"❌ Error probing {args.host}:{args.port}: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"✅ {args.host}:{args.port} is accepting connections")


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="waitutil",
        description="⏳ waitutil — Wait for asynchronous external state",
    )
    parser.add_argument(
        "--options", "-o",
        default=None,
        help="Poll options as a YAML mapping, e.g. '{timeout_sec: 30}'",
    )
    parser.add_argument(
        "--timeout", type=float, default=None,
        help=f"Seconds before giving up (default: {DEFAULT_OPTIONS['timeout_sec']})",
    )
    parser.add_argument(
        "--delay", type=float, default=None,
        help=f"Seconds between attempts (default: {DEFAULT_OPTIONS['delay_sec']})",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log when waiting starts and succeeds",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # ── service ───────────────────────────────────────────────────────
    service_parser = subparsers.add_parser(
        "service", help="Wait until HOST:PORT accepts TCP connections"
    )
    service_parser.add_argument("host", help="Hostname or IP address")
    service_parser.add_argument("port", type=int, help="TCP port")
    service_parser.add_argument(
        "--description", "-d", default="",
        help="Name of the service, used in messages (default: service)",
    )
    service_parser.add_argument(
        "--connect-timeout", type=float, default=None,
        help="Timeout for each connection attempt in seconds (default: OS)",
    )
    service_parser.set_defaults(func=cmd_service)

    # ── Parse and dispatch ────────────────────────────────────────────
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args.func(args)


if __name__ == "__main__":
    main()
