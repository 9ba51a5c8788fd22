"""
Monitoring Daemon

Long-running service that loads configuration from the environment and
keeps checking every TestFlight target until the process is killed.
"""

import logging
from functools import partial

import requests
from dotenv import load_dotenv

from config.settings import load_credentials, get_check_interval, get_log_level
from config.targets import build_targets
from monitoring.checker import check
from monitoring.cli_monitor import clear_console, print_banner
from monitoring.monitor import Monitor
from monitoring.notifier import build_notifiers

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level="INFO", log_file=None):
    """
    Configure root logging to the console, and optionally to a file.
    """
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def create_monitor(target_entries=None, interval=None, clear=True, session=None):
    """Wire targets, notifiers and the check loop from the current environment."""
    credentials = load_credentials()
    if interval is None:
        interval = get_check_interval()
    session = session or requests.Session()

    return Monitor(
        targets=build_targets(target_entries),
        notifiers=build_notifiers(credentials, session=session),
        checker=partial(check, session=session),
        interval=interval,
        clear_screen=clear_console if clear else None,
    )


def main(target_entries=None, interval=None, once=False, clear=True, log_level=None, log_file=None):
    """
    Main daemon entry point. Runs until killed unless once is set.
    """
    load_dotenv()
    setup_logging(log_level or get_log_level(), log_file)

    monitor = create_monitor(target_entries, interval=interval, clear=clear)
    print_banner(monitor.targets, monitor.interval)
    logger.info("Starting Monitoring Daemon")

    try:
        monitor.run(max_cycles=1 if once else None)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    finally:
        logger.info("Monitoring Daemon stopped")


if __name__ == "__main__":
    main()
