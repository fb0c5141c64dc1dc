"""Bluetooth Tray - Mock backend for testing.

Provides an in-memory implementation of BackendInterface that simulates
the adapter and paired devices without calling bluetoothctl.
"""

from typing import List

from .interfaces import BackendInterface, Device


class MockBluetoothBackend(BackendInterface):
    """Mock implementation for unit testing and BT_TRAY_MODE=test."""

    def __init__(self, powered: bool = True):
        self._powered = powered
        self._devices: List[Device] = []
        self._connected: set = set()
        self.fail_addresses: set = set()

    def get_adapter_power(self) -> bool:
        return self._powered

    def set_adapter_power(self, on: bool) -> bool:
        self._powered = on
        if not on:
            self._connected.clear()
        return True

    def list_paired_devices(self) -> List[Device]:
        # Fresh snapshots, so callers never alias internal state
        return [
            Device(
                address=dev.address,
                name=dev.name,
                paired=True,
                connected=dev.address in self._connected,
            )
            for dev in self._devices
        ]

    def connect(self, address: str) -> bool:
        if not self._powered or address in self.fail_addresses:
            return False
        if address not in [d.address for d in self._devices]:
            return False
        self._connected.add(address)
        return True

    def disconnect(self, address: str) -> bool:
        if address in self.fail_addresses:
            return False
        self._connected.discard(address)
        return True

    def add_device(self, device: Device) -> None:
        """Manually add a paired device for testing."""
        if device.address not in [d.address for d in self._devices]:
            self._devices.append(device)
            if device.connected:
                self._connected.add(device.address)

    def clear_devices(self) -> None:
        """Clear all devices for testing."""
        self._devices = []
        self._connected.clear()
