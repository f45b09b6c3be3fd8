"""
Child resources of devices that can switch ports on and off.
"""

from typing import Tuple

from ..logging import get_logger
from .base import ChildResource

logger = get_logger(__name__)


class PortControlResource(ChildResource):
    """
    Distribution devices (PDUs, switches) attached to a device, whose ports
    can be controlled.

    Subclasses set the statuses a port accepts and the device capability the
    distribution device must have.
    """

    port_statuses: Tuple[str, ...] = ()

    def is_distribution_device(self, device) -> bool:
        raise NotImplementedError

    def set_port_status(self, distribution_id, port_id, device_id, status) -> bool:
        """
        Set the status of a port on a distribution device that is connected
        to the given device.

        Each precondition that fails makes this return False without
        changing anything; errors raised by the transport propagate.

        Args:
            distribution_id: Id of the PDU or switch the port is on.
            port_id: Id of the port to control.
            device_id: Id of the device the port is assigned to.
            status: The new port status, case-insensitive.

        Returns:
            bool: True if the API reports success, False otherwise.
        """
        if not isinstance(status, str) or status.lower() not in self.port_statuses:
            logger.warning(
                f"Invalid port status {status!r}; expected one of {', '.join(self.port_statuses)}")
            return False
        status = status.lower()

        distribution = self.find(device_id, distribution_id)
        if distribution is None or not self.is_distribution_device(distribution):
            logger.warning(
                f"Device {device_id} has no {self.name} {distribution_id} that can control ports")
            return False

        port = distribution.get_port(port_id)
        if port is None or not port.is_controllable():
            logger.warning(
                f"Port {port_id} on {self.name} {distribution_id} is not controllable")
            return False

        url = self.create_object_url(distribution_id, device_id)
        payload = {
            "status": status,
            "port_id": port_id,
        }
        logger.info(
            f"Setting port {port_id} on {self.name} {distribution_id} to '{status}' via {url}")
        response = self.client.send("PUT", url, payload)

        content = response.content
        return bool(content) and content.get("status") == "ok"


class PowerDistributionUnits(PortControlResource):
    """The PDUs a device is plugged into, at ``/devices/{id}/power``."""

    port_statuses = ("on", "off", "restart")

    def __init__(self, client):
        super().__init__(client, "devices", "pdu", "/power", "pdus")

    def is_distribution_device(self, device) -> bool:
        return device.is_power_distribution()


class Switches(PortControlResource):
    """The switches a device is connected to, at ``/devices/{id}/network``."""

    port_statuses = ("on", "off")

    def __init__(self, client):
        super().__init__(client, "devices", "switch", "/network", "switches")

    def is_distribution_device(self, device) -> bool:
        return device.is_network_distribution()
