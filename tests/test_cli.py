"""
Tests for the console helpers, daemon wiring and command line entry point.
"""

import io

import pytest
from unittest.mock import Mock, patch

import main as entry
from conftest import make_response
from config.models import AvailabilityResult, MonitoredTarget
from monitoring.cli_monitor import ANSI_CLEAR, clear_console, is_windows, print_banner
from monitoring.notifier import PushoverNotifier, WebhookNotifier
from services import monitoring_daemon


class TestConsole:
    def test_windows_detection(self):
        assert is_windows({"OS": "Windows_NT"})
        assert not is_windows({})

    def test_ansi_clear_on_unix(self):
        out = io.StringIO()

        clear_console(environ={}, stream=out)

        assert out.getvalue() == ANSI_CLEAR

    def test_cls_on_windows(self):
        with patch("monitoring.cli_monitor.os.system") as system:
            clear_console(environ={"OS": "Windows_NT"}, stream=io.StringIO())

        system.assert_called_once_with("cls")

    def test_banner_lists_targets(self):
        out = io.StringIO()
        targets = [MonitoredTarget("WhatsApp", "https://testflight.apple.com/join/krUFQpyJ")]

        print_banner(targets, 5, stream=out)

        text = out.getvalue()
        assert "TestFlight Monitor started..." in text
        assert "every 5s" in text
        assert "WhatsApp: https://testflight.apple.com/join/krUFQpyJ" in text


class TestDaemon:
    def test_create_monitor_from_environment(self, monkeypatch):
        monkeypatch.setenv("PUSHOVER_USER_KEY", "u")
        monkeypatch.setenv("PUSHOVER_API_TOKEN", "t")
        monkeypatch.setenv("DISCORD_WEBHOOK_URL", "https://discord.example/hook")
        monkeypatch.setenv("CHECK_INTERVAL", "12")

        monitor = monitoring_daemon.create_monitor(session=Mock())

        assert monitor.interval == 12
        assert len(monitor.targets) == 5
        pushover, webhook = monitor.notifiers
        assert isinstance(pushover, PushoverNotifier)
        assert pushover.credentials.pushover_api_token == "t"
        assert isinstance(webhook, WebhookNotifier)
        assert webhook.webhook_url == "https://discord.example/hook"

    def test_checker_uses_shared_session(self):
        session = Mock()
        session.get.return_value = make_response(200, "This beta is full")

        monitor = monitoring_daemon.create_monitor(
            target_entries=[{'name': 'WhatsApp', 'url': 'https://testflight.apple.com/join/krUFQpyJ'}],
            interval=1,
            clear=False,
            session=session,
        )

        assert monitor.clear_screen is None
        assert monitor.run_cycle() == [AvailabilityResult.UNAVAILABLE]
        session.get.assert_called_once()

    def test_main_once_runs_single_cycle(self):
        monitor = Mock()
        monitor.targets = []
        monitor.interval = 5

        with patch.object(monitoring_daemon, "load_dotenv") as load_dotenv, \
                patch.object(monitoring_daemon, "setup_logging"), \
                patch.object(monitoring_daemon, "print_banner"), \
                patch.object(monitoring_daemon, "create_monitor", return_value=monitor):
            monitoring_daemon.main(once=True)

        load_dotenv.assert_called_once()
        monitor.run.assert_called_once_with(max_cycles=1)

    def test_main_logs_keyboard_interrupt(self, caplog):
        monitor = Mock()
        monitor.targets = []
        monitor.interval = 5
        monitor.run.side_effect = KeyboardInterrupt

        with patch.object(monitoring_daemon, "load_dotenv"), \
                patch.object(monitoring_daemon, "setup_logging"), \
                patch.object(monitoring_daemon, "print_banner"), \
                patch.object(monitoring_daemon, "create_monitor", return_value=monitor), \
                caplog.at_level("INFO"):
            monitoring_daemon.main()

        assert "Interrupted by user" in caplog.text


class TestEntryPoint:
    def test_passes_options_to_daemon(self):
        with patch("services.monitoring_daemon.main") as run_daemon:
            code = entry.main([
                "--once", "--no-clear", "--interval", "2.5", "--log-level", "debug",
                "--target", "WhatsApp=https://testflight.apple.com/join/krUFQpyJ",
            ])

        assert code == 0
        run_daemon.assert_called_once_with(
            target_entries=[{'name': 'WhatsApp', 'url': 'https://testflight.apple.com/join/krUFQpyJ'}],
            interval=2.5,
            once=True,
            clear=False,
            log_level="DEBUG",
            log_file=None,
        )

    def test_defaults(self):
        with patch("services.monitoring_daemon.main") as run_daemon:
            entry.main([])

        kwargs = run_daemon.call_args.kwargs
        assert kwargs["target_entries"] is None
        assert kwargs["interval"] is None
        assert kwargs["once"] is False
        assert kwargs["clear"] is True

    @pytest.mark.parametrize("argv", [
        ["--target", "broken"],
        ["--interval", "-3"],
        ["--interval", "nan"],
        ["--interval", "inf"],
    ])
    def test_rejects_bad_arguments(self, argv):
        with patch("services.monitoring_daemon.main") as run_daemon, pytest.raises(SystemExit):
            entry.main(argv)

        run_daemon.assert_not_called()
