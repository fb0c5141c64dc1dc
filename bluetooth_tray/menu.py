"""Bluetooth Tray - Menu model and actions.

Builds the tray menu as plain data so it can be rendered by GTK or
inspected by tests.  Every successful state change relaunches the
application, which then rebuilds its menu from fresh bluetoothctl
output; nothing is cached between runs.
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional

from .interfaces import BackendInterface, Device
from .notify import show_notification
from .translations import get_text, detect_system_language

LOG = logging.getLogger(__name__)

RELAUNCH_MODULE = "bluetooth_tray"

PAIRED_ICON = "\U0001F517"        # Link
UNPAIRED_ICON = "\u274C"          # Cross mark
CONNECTED_ICON = "\U0001F4F1"     # Phone
DISCONNECTED_ICON = "\U0001F4A4"  # Sleeping


@dataclass
class MenuEntry:
    """One tray menu line. Entries without an action are plain labels."""

    label: str
    action: Optional[Callable[[], None]] = None
    separator_before: bool = False

    @property
    def is_label(self) -> bool:
        return self.action is None


def restart_process() -> None:
    """Replace the running process with a fresh copy of the application."""
    args = [sys.executable, "-m", RELAUNCH_MODULE]
    LOG.info("relaunching: %s", " ".join(args))
    for handler in logging.getLogger().handlers:
        handler.flush()
    try:
        os.execv(sys.executable, args)
    except OSError as exc:
        LOG.error("could not relaunch the application: %s", exc)


def exit_process() -> None:
    sys.exit(0)


def device_label(device: Device) -> str:
    """Return '<paired><connected> <name>' for a device menu entry."""
    icons = (PAIRED_ICON if device.paired else UNPAIRED_ICON) + (
        CONNECTED_ICON if device.connected else DISCONNECTED_ICON
    )
    return f"{icons} {device.display_name}"


class TrayController:
    """Connects menu entries to backend calls, notifications and restarts."""

    def __init__(
        self,
        backend: BackendInterface,
        notifier: Callable[[str], None] = show_notification,
        restarter: Callable[[], None] = restart_process,
        quitter: Callable[[], None] = exit_process,
        language: Optional[str] = None,
    ):
        self._backend = backend
        self._notify = notifier
        self._restart = restarter
        self._quit = quitter
        self._lang = language or detect_system_language()

    def t(self, key, **kwargs):
        """Return translated text for the current language."""
        text = get_text(key, self._lang)
        return text.format(**kwargs) if kwargs else text

    # -- Menu construction -------------------------------------------------

    def build_entries(self) -> List[MenuEntry]:
        """Query the backend and return the full menu, top to bottom."""
        powered = self._backend.get_adapter_power()
        entries = [
            MenuEntry(self.t("status_on") if powered else self.t("status_off")),
            MenuEntry(self.t("toggle"), self.toggle_power),
        ]

        if powered:
            entries.extend(self._device_entries())
        else:
            entries.append(MenuEntry(self.t("disabled")))

        entries.append(MenuEntry(self.t("restart"), self.restart, separator_before=True))
        entries.append(MenuEntry(self.t("quit"), self.quit))
        return entries

    def _device_entries(self) -> List[MenuEntry]:
        devices = self._backend.list_paired_devices()
        if not devices:
            return [MenuEntry(self.t("no_devices"))]

        entries = [MenuEntry(self.t("devices_header"))]
        for device in devices:
            entries.append(MenuEntry(
                device_label(device),
                lambda dev=device: self.toggle_device(dev),
            ))
        return entries

    # -- Actions -----------------------------------------------------------

    def toggle_power(self) -> bool:
        """Flip the adapter power; restart on success."""
        new_state = not self._backend.get_adapter_power()
        if self._backend.set_adapter_power(new_state):
            state = self.t("on") if new_state else self.t("off")
            LOG.info("Bluetooth: %s", state)
            self._notify(self.t("power_changed", state=state))
            self._restart()
            return True

        LOG.error("could not change the Bluetooth state")
        self._notify(self.t("power_failed"))
        return False

    def toggle_device(self, device: Device) -> bool:
        """Disconnect a connected device, connect any other; restart on success."""
        address = device.address
        if device.connected:
            LOG.info("disconnecting device: %s", address)
            ok = self._backend.disconnect(address)
            done_key, failed_key = "device_disconnected", "disconnect_failed"
        else:
            LOG.info("connecting device: %s", address)
            ok = self._backend.connect(address)
            done_key, failed_key = "device_connected", "connect_failed"

        if ok:
            self._notify(self.t(done_key, address=address))
            self._restart()
            return True

        LOG.error("%s: %s", self.t(failed_key), address)
        self._notify(self.t(failed_key))
        return False

    def restart(self) -> None:
        LOG.info("restarting application...")
        self._notify(self.t("restarting"))
        self._restart()

    def quit(self) -> None:
        LOG.info("closing application...")
        self._quit()
