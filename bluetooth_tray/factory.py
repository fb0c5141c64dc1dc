"""Bluetooth Tray - Backend factory.

Factory pattern to create backend instances.
Enables dependency injection for testing.
"""

import logging

from . import backend, config
from .interfaces import BackendInterface

LOG = logging.getLogger(__name__)


class RealBluetoothBackend(BackendInterface):
    """Wrapper for real backend functions."""

    def get_adapter_power(self):
        return backend.get_adapter_power()

    def set_adapter_power(self, on):
        return backend.set_adapter_power(on)

    def list_paired_devices(self):
        return backend.list_paired_devices()

    def connect(self, address):
        return backend.connect(address)

    def disconnect(self, address):
        return backend.disconnect(address)


def create_backend() -> BackendInterface:
    """Create backend instance based on environment mode.

    Environment:
        BT_TRAY_MODE: 'production' (default) or 'test'

    Returns:
        Backend instance implementing BackendInterface.
    """
    mode = config.get_mode()

    if mode == "test":
        from .mock_backend import MockBluetoothBackend

        LOG.info("using mock Bluetooth backend")
        return MockBluetoothBackend()

    return RealBluetoothBackend()
