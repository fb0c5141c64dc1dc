"""Bluetooth Tray Utility.

A small GTK3 system tray applet that toggles the Bluetooth adapter
and connects or disconnects paired devices. Uses bluetoothctl as the
backend for all Bluetooth operations.
"""

__version__ = "1.0.0"
__app_id__ = "bluetooth-tray"
__app_name__ = "Bluetooth Manager"
