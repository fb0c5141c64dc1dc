"""Bluetooth Tray - GTK3 status icon.

Shows the adapter state as a tray icon and pops up a menu built from
TrayController.build_entries() on every click, so the menu always
reflects the current bluetoothctl output.
"""

import logging

import gi
gi.require_version('Gtk', '3.0')
from gi.repository import Gtk

from . import __app_name__, config
from .menu import TrayController

LOG = logging.getLogger(__name__)


class BluetoothTray:
    """System tray icon wired to a TrayController."""

    def __init__(self, controller: TrayController, powered: bool):
        self._controller = controller
        self._menu = None

        icon_name = config.ICON_POWERED if powered else config.ICON_DISABLED
        self._icon = Gtk.StatusIcon()
        self._icon.set_from_icon_name(icon_name)
        self._icon.set_title(__app_name__)
        self._icon.set_tooltip_text(
            controller.t("status_on") if powered else controller.t("status_off")
        )
        self._icon.connect("activate", self._on_activate)
        self._icon.connect("popup-menu", self._on_popup_menu)
        self._icon.set_visible(True)

    # -- Menu --------------------------------------------------------------

    def build_menu(self):
        """Render the controller's entries into a fresh Gtk.Menu."""
        menu = Gtk.Menu()
        for entry in self._controller.build_entries():
            if entry.separator_before:
                menu.append(Gtk.SeparatorMenuItem())
            item = Gtk.MenuItem(label=entry.label)
            if entry.is_label:
                item.set_sensitive(False)
            else:
                item.connect("activate", self._on_item_activate, entry.action)
            menu.append(item)
        menu.show_all()
        return menu

    def _popup(self, button, activate_time):
        self._menu = self.build_menu()
        self._menu.popup(
            None, None, Gtk.StatusIcon.position_menu, self._icon,
            button, activate_time,
        )

    # -- Event Handlers ----------------------------------------------------

    def _on_activate(self, status_icon):
        self._popup(0, Gtk.get_current_event_time())

    def _on_popup_menu(self, status_icon, button, activate_time):
        self._popup(button, activate_time)

    def _on_item_activate(self, menu_item, action):
        action()
