"""
Target Registry

Default TestFlight betas to watch, in display order.
"""

from config.models import MonitoredTarget

DEFAULT_TARGETS = [
    {'name': 'WhatsApp', 'url': 'https://testflight.apple.com/join/krUFQpyJ'},
    {'name': 'Capcut', 'url': 'https://testflight.apple.com/join/Gu9kI6ky'},
    {'name': 'Instagram', 'url': 'https://testflight.apple.com/join/72eyUWVE'},
    {'name': 'WhatsApp Business', 'url': 'https://testflight.apple.com/join/oscYikr0'},
    {'name': 'Snapchat', 'url': 'https://testflight.apple.com/join/p7hGbZUR'},
]


def build_targets(entries=None):
    """Create fresh targets with zeroed miss counters (defaults to DEFAULT_TARGETS)."""
    if entries is None:
        entries = DEFAULT_TARGETS
    return [MonitoredTarget(name=entry['name'], url=entry['url']) for entry in entries]


def parse_target_spec(spec):
    """
    Parse a "NAME=URL" command line value into a target entry.

    Raises:
        ValueError: If the value has no '=' or either side is empty
    """
    name, sep, url = spec.partition("=")
    name = name.strip()
    url = url.strip()
    if not sep or not name or not url:
        raise ValueError(f"Invalid target '{spec}'. Expected NAME=URL")
    return {'name': name, 'url': url}
