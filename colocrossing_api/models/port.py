"""
Models for the ports of switches and PDUs.

Ports are embedded in the payload of the switch or PDU they belong to, and
always carry that device as their ``parent``.
"""

from dataclasses import dataclass
from typing import Optional

from .base import ResourceObject

CONTROL_FLAG_KEYS = ("control", "control-enabled", "control_enabled")


@dataclass(eq=False)
class Port(ResourceObject):
    """
    A port on a distribution device.

    A port is controllable when the API flags it for control and it is
    assigned to a device that can be fetched. Only controllable ports can be
    switched on or off.
    """

    def is_control_enabled(self) -> bool:
        for key in CONTROL_FLAG_KEYS:
            if key in self.values:
                return bool(self.values[key])
        return False

    def get_device(self):
        """The device this port is assigned to, fetched from the devices resource."""
        return self.resolve("device", self.client.devices)

    def is_controllable(self) -> bool:
        return self.is_control_enabled() and self.get_device() is not None

    def get_control_resource(self):
        raise NotImplementedError

    def set_status(self, status: str) -> bool:
        """
        Change the status of the port.

        Returns:
            bool: True if the API reports success, False if the port is not
            controllable or the change was refused.
        """
        if not self.is_controllable() or self.parent_id is None:
            return False

        device = self.get_device()
        return self.get_control_resource().set_port_status(
            self.parent_id, self.id, device.id, status
        )

    def turn_on(self) -> bool:
        return self.set_status("on")

    def turn_off(self) -> bool:
        return self.set_status("off")


@dataclass(eq=False)
class SwitchPort(Port):
    """A port on a switch."""

    def get_switch(self) -> Optional[ResourceObject]:
        return self.parent

    def get_control_resource(self):
        return self.client.devices.switches


@dataclass(eq=False)
class PowerPort(Port):
    """A port on a PDU. Besides on and off, power ports can be restarted."""

    def get_power_distribution_unit(self) -> Optional[ResourceObject]:
        return self.parent

    def get_control_resource(self):
        return self.client.devices.pdus

    def restart(self) -> bool:
        return self.set_status("restart")
