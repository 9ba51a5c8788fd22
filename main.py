#!/usr/bin/env python3
"""
TestFlight Slot Monitor - Main Entry Point

This is the main driver script for the TestFlight slot monitor.
It checks every configured beta on a fixed interval and sends Pushover and
Discord notifications when a slot opens up.

Usage:
    python main.py
    python main.py --once --target "WhatsApp=https://testflight.apple.com/join/krUFQpyJ"
"""

import argparse
import sys

from config.settings import is_valid_interval
from config.targets import parse_target_spec


def build_parser():
    parser = argparse.ArgumentParser(description="TestFlight Slot Monitor")

    parser.add_argument("--interval", type=float, default=None,
                        help="Seconds between cycles (default: CHECK_INTERVAL or 5)")
    parser.add_argument("--once", action="store_true", help="Run a single cycle and exit")
    parser.add_argument("--target", action="append", default=None, metavar="NAME=URL",
                        help="Beta to watch; repeat to watch several (replaces the built-in list)")
    parser.add_argument("--no-clear", action="store_true", help="Do not clear the console between cycles")
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL or INFO)")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    target_entries = None
    if args.target:
        try:
            target_entries = [parse_target_spec(spec) for spec in args.target]
        except ValueError as e:
            parser.error(str(e))

    if args.interval is not None and not is_valid_interval(args.interval):
        parser.error("--interval must be a finite number of seconds, not negative")

    from services.monitoring_daemon import main as run_daemon
    run_daemon(
        target_entries=target_entries,
        interval=args.interval,
        once=args.once,
        clear=not args.no_clear,
        log_level=args.log_level.upper() if args.log_level else None,
        log_file=args.log_file,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
