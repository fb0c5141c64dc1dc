"""Bluetooth Tray - Backend using bluetoothctl.

All Bluetooth operations are performed by invoking bluetoothctl as a
subprocess and scanning its human-readable output.  Every call blocks
the caller until the tool exits; no timeout is applied unless one is
configured through BT_TRAY_TIMEOUT.

Tool failures never raise: a missing binary, a spawn error or an
unexpected output all degrade to False or an empty list.
"""

import logging
import subprocess
from typing import List, Optional

from . import config
from .interfaces import AdapterStatus, Device

LOG = logging.getLogger(__name__)

POWERED_MARKER = "Powered: yes"
CONNECTED_MARKER = "Connected: yes"
DEVICE_PREFIX = "Device "


# ---------------------------------------------------------------------------
# Helper: run bluetoothctl
# ---------------------------------------------------------------------------

def _run_btctl(args: List[str]) -> subprocess.CompletedProcess:
    """Execute a bluetoothctl command and return the result.

    Output is decoded as UTF-8 whatever the locale; invalid bytes are
    replaced so they never raise.

    Args:
        args: Arguments to pass after the bluetoothctl executable.

    Returns:
        A subprocess.CompletedProcess instance.
    """
    cmd = [config.get_btctl_command()] + args
    LOG.debug("running: %s", " ".join(cmd))
    return subprocess.run(
        cmd,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
        timeout=config.get_timeout(),
    )


def _btctl_output(args: List[str]) -> str:
    """Run bluetoothctl and return stdout, or '' if it could not run."""
    try:
        result = _run_btctl(args)
    except (OSError, subprocess.TimeoutExpired) as exc:
        LOG.debug("bluetoothctl %s failed: %s", " ".join(args), exc)
        return ""
    return result.stdout or ""


# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------

def is_powered_output(text: str) -> bool:
    """Return True if 'show' output reports the adapter as powered."""
    return POWERED_MARKER in text


def is_connected_output(text: str) -> bool:
    """Return True if 'info' output reports an active link."""
    return CONNECTED_MARKER in text


def parse_device_line(line: str, paired: bool = True) -> Optional[Device]:
    """Parse one line of bluetoothctl device list output.

    Expected format: 'Device AA:BB:CC:DD:EE:FF Device Name'.  The name
    is everything after the second space, taken verbatim.

    Args:
        line: A single output line.
        paired: Value for the resulting device's paired flag.

    Returns:
        A Device, or None if the line is not a device entry.
    """
    if not line.startswith(DEVICE_PREFIX):
        return None
    parts = line.split(" ", 2)
    if len(parts) < 3:
        return None
    return Device(address=parts[1], name=parts[2], paired=paired)


def parse_device_list(output: str, paired: bool = True) -> List[Device]:
    """Parse bluetoothctl device list output, skipping non-device lines."""
    devices: List[Device] = []
    for line in output.splitlines():
        device = parse_device_line(line, paired)
        if device is not None:
            devices.append(device)
    return devices


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_adapter_power() -> bool:
    """Return True if the Bluetooth adapter reports itself powered on.

    False is also returned when bluetoothctl is missing or fails, so it
    is not proof that the radio is off.
    """
    return is_powered_output(_btctl_output(["show"]))


def get_adapter_status() -> AdapterStatus:
    """Return a fresh AdapterStatus snapshot."""
    return AdapterStatus(powered=get_adapter_power())


def set_adapter_power(on: bool) -> bool:
    """Power the Bluetooth adapter on or off.

    The exit status of bluetoothctl is not inspected: once the command
    has been spawned the change is reported as successful.

    Args:
        on: True to power on, False to power off.

    Returns:
        False only if bluetoothctl could not be started.
    """
    state = "on" if on else "off"
    try:
        result = _run_btctl(["power", state])
    except OSError as exc:
        LOG.warning("could not run bluetoothctl power %s: %s", state, exc)
        return False
    except subprocess.TimeoutExpired:
        LOG.warning("bluetoothctl power %s timed out", state)
        return True
    if result.returncode != 0:
        LOG.debug("bluetoothctl power %s exited with %s", state, result.returncode)
    return True


def is_device_connected(address: str) -> bool:
    """Return True if bluetoothctl reports an active link to the device."""
    return is_connected_output(_btctl_output(["info", address]))


def list_paired_devices() -> List[Device]:
    """Get paired Bluetooth devices with their connection state.

    Runs one 'info' query per device after the listing, so the cost is
    1 + n bluetoothctl invocations.

    Returns:
        Devices in the order bluetoothctl lists them.
    """
    devices = parse_device_list(_btctl_output(["devices", "Paired"]))
    for device in devices:
        device.connected = is_device_connected(device.address)
    return devices


def _run_status(args: List[str]) -> bool:
    """Run bluetoothctl and return True iff it exits with status 0."""
    try:
        result = _run_btctl(args)
    except (OSError, subprocess.TimeoutExpired) as exc:
        LOG.warning("bluetoothctl %s failed: %s", " ".join(args), exc)
        return False
    return result.returncode == 0


def connect(address: str) -> bool:
    """Connect to a paired Bluetooth device.

    Args:
        address: The MAC address of the device.

    Returns:
        True if bluetoothctl exited successfully.
    """
    return _run_status(["connect", address])


def disconnect(address: str) -> bool:
    """Disconnect from a Bluetooth device.

    Args:
        address: The MAC address of the device.

    Returns:
        True if bluetoothctl exited successfully.
    """
    return _run_status(["disconnect", address])
