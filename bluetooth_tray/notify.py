"""Bluetooth Tray - Desktop notifications via notify-send."""

import logging
import subprocess

from . import __app_name__, config

LOG = logging.getLogger(__name__)


def show_notification(message: str) -> None:
    """Show a best-effort desktop notification; failures are ignored."""
    cmd = [config.get_notify_command(), __app_name__, message]
    try:
        result = subprocess.run(cmd, capture_output=True, timeout=config.get_timeout())
    except (OSError, subprocess.TimeoutExpired) as exc:
        LOG.debug("notification not shown: %s", exc)
        return
    if result.returncode != 0:
        LOG.debug("%s exited with %s", cmd[0], result.returncode)
