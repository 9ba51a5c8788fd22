"""
CLI Monitor Interface

Console helpers for the status display: clearing the screen between cycles
and printing the startup banner.
"""

import os
import sys

ANSI_CLEAR = "\033[H\033[2J"


def is_windows(environ=None):
    env = os.environ if environ is None else environ
    return "Windows" in env.get("OS", "")


def clear_console(environ=None, stream=None):
    """
    Clear the terminal before a new cycle is printed.

    Windows consoles get 'cls'; everything else gets the ANSI home/clear sequence.
    """
    if is_windows(environ):
        os.system("cls")
        return

    out = stream or sys.stdout
    out.write(ANSI_CLEAR)
    out.flush()


def print_banner(targets, interval, stream=None):
    """Print which targets are being watched and how often."""
    out = stream or sys.stdout
    out.write("TestFlight Monitor started...\n")
    out.write(f"Watching {len(targets)} beta(s) every {interval:g}s:\n")
    for target in targets:
        out.write(f"  - {target.name}: {target.url}\n")
    out.flush()
