"""Bluetooth Tray - Configuration.

All settings come from environment variables and are read on each call
so tests and the relaunched process always see the current environment.
"""

import logging
import os
from typing import Optional

# Environment variable names
ENV_MODE = "BT_TRAY_MODE"
ENV_BTCTL = "BT_TRAY_BTCTL"
ENV_NOTIFY = "BT_TRAY_NOTIFY"
ENV_TIMEOUT = "BT_TRAY_TIMEOUT"
ENV_LANG = "BT_TRAY_LANG"
ENV_LOG_LEVEL = "BT_TRAY_LOG_LEVEL"

DEFAULT_MODE = "production"
DEFAULT_BTCTL = "bluetoothctl"
DEFAULT_NOTIFY = "notify-send"
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Icon theme names for the tray
ICON_POWERED = "bluetooth-active"
ICON_DISABLED = "bluetooth-disabled"


def get_mode() -> str:
    """Return 'production' (default) or 'test'."""
    return os.environ.get(ENV_MODE, DEFAULT_MODE).strip().lower() or DEFAULT_MODE


def get_btctl_command() -> str:
    """Return the bluetoothctl executable to invoke."""
    return os.environ.get(ENV_BTCTL) or DEFAULT_BTCTL


def get_notify_command() -> str:
    """Return the desktop notification executable to invoke."""
    return os.environ.get(ENV_NOTIFY) or DEFAULT_NOTIFY


def get_timeout() -> Optional[float]:
    """Return the subprocess timeout in seconds, or None to wait forever.

    Unset, empty, non-numeric and non-positive values all mean no timeout.
    """
    raw = os.environ.get(ENV_TIMEOUT, "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def get_forced_language() -> Optional[str]:
    """Return the language forced via environment, if any."""
    value = os.environ.get(ENV_LANG, "").strip()
    return value or None


def get_log_level() -> int:
    """Return the numeric logging level, falling back to INFO."""
    name = os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.INFO
