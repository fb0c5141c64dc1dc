"""Bluetooth Tray - Abstract interfaces.

Defines contracts for backend operations to enable dependency injection
and testing without requiring real hardware or GTK.
"""

from abc import ABC, abstractmethod
from typing import List
from dataclasses import dataclass


@dataclass
class Device:
    """Represents one Bluetooth peripheral known to the adapter."""

    address: str
    name: str = ""
    paired: bool = False
    connected: bool = False

    @property
    def display_name(self) -> str:
        """Return user-friendly display name."""
        return self.name if self.name else self.address


@dataclass(frozen=True)
class AdapterStatus:
    """Power state of the local adapter at query time."""

    powered: bool = False


class BackendInterface(ABC):
    """Abstract interface for Bluetooth backend operations."""

    @abstractmethod
    def get_adapter_power(self) -> bool:
        """Check if adapter is powered on."""

    @abstractmethod
    def set_adapter_power(self, on: bool) -> bool:
        """Power adapter on or off."""

    @abstractmethod
    def list_paired_devices(self) -> List[Device]:
        """Get paired devices with their connection state."""

    @abstractmethod
    def connect(self, address: str) -> bool:
        """Connect to a paired device."""

    @abstractmethod
    def disconnect(self, address: str) -> bool:
        """Disconnect from a device."""

    def get_adapter_status(self) -> AdapterStatus:
        """Return a fresh AdapterStatus snapshot."""
        return AdapterStatus(powered=self.get_adapter_power())
