#!/usr/bin/env python3
"""Bluetooth Tray - Entry point."""

import logging

import gi
gi.require_version('Gtk', '3.0')
from gi.repository import Gtk

from . import config
from .factory import create_backend
from .menu import TrayController
from .tray import BluetoothTray

LOG = logging.getLogger("bluetooth_tray")


def main():
    """Launch the Bluetooth tray applet and run the GTK main loop."""
    logging.basicConfig(level=config.get_log_level(), format=config.LOG_FORMAT)

    backend = create_backend()
    controller = TrayController(backend, quitter=Gtk.main_quit)
    powered = backend.get_adapter_power()

    tray = BluetoothTray(controller, powered)  # noqa: F841
    LOG.info(
        "Bluetooth tray started. Initial state: %s",
        controller.t("on") if powered else controller.t("off"),
    )
    Gtk.main()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
