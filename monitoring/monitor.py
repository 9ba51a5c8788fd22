"""
Main Monitor Class

Orchestrates the check cycle: every target is checked in order, available
targets trigger every notifier, and per-target miss counters are updated.
"""

import time
import logging

from config.models import AvailabilityResult
from config.settings import DEFAULT_CHECK_INTERVAL
from monitoring.checker import check
from monitoring.cli_monitor import clear_console
from monitoring.errors import CheckError, NotifyError

logger = logging.getLogger(__name__)


class Monitor:
    """
    Polls a fixed list of targets and relays open slots to the notifiers.

    Targets are checked one after another, never concurrently. Errors from a
    check or a notification are logged and never stop the loop.
    """

    def __init__(self, targets, notifiers, checker=check, interval=DEFAULT_CHECK_INTERVAL,
                 clear_screen=clear_console, sleep=time.sleep):
        """
        Args:
            targets (list[MonitoredTarget]): Targets in display order
            notifiers (list[Notifier]): Channels to notify when a slot opens
            checker (callable): Function taking a URL and returning an AvailabilityResult
            interval (float): Seconds to wait after each cycle
            clear_screen (callable, optional): Called at the start of every cycle
            sleep (callable): Sleep function
        """
        self.targets = list(targets)
        self.notifiers = list(notifiers)
        self.checker = checker
        self.interval = interval
        self.clear_screen = clear_screen
        self.sleep = sleep
        self.cycle_count = 0

    def notify_all(self, target):
        """
        Send every notification for a target. A failing channel does not block the others.

        Returns:
            int: Number of notifications delivered
        """
        sent = 0
        for notifier in self.notifiers:
            try:
                notifier.notify(target.name, target.url)
                sent += 1
            except NotifyError as e:
                logger.error(f"Error sending {notifier.label} notification for {target.name}: {e}")
        return sent

    def check_target(self, target):
        """
        Check one target and apply the result to its miss counter.

        Returns:
            AvailabilityResult or None: None when the check failed and the target was skipped
        """
        try:
            result = self.checker(target.url)
        except CheckError as e:
            logger.error(f"Error checking {target.name}: {e}")
            return None

        if result == AvailabilityResult.AVAILABLE:
            logger.info(f"Slot available for {target.name}! Sending notifications...")
            self.notify_all(target)
            target.reset_misses()
        else:
            misses = target.record_miss()
            logger.info(f"No slot available for {target.name} ({misses}x)")

        return result

    def run_cycle(self):
        """Run one pass over all targets and return their results in order."""
        self.cycle_count += 1
        if self.clear_screen:
            self.clear_screen()

        logger.debug(f"=== Monitoring Cycle #{self.cycle_count} ===")
        return [self.check_target(target) for target in self.targets]

    def run(self, max_cycles=None):
        """
        Run cycles until the process is killed, or until max_cycles have run.

        The sleep is skipped after the last bounded cycle.
        """
        completed = 0
        while max_cycles is None or completed < max_cycles:
            try:
                self.run_cycle()
            except Exception as e:
                logger.error(f"Error in monitoring cycle: {e}", exc_info=True)

            completed += 1
            if max_cycles is not None and completed >= max_cycles:
                break

            self.sleep(self.interval)
