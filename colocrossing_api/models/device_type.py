"""
Device types and the capabilities each one has.

The API tags every device with a type. The tag is mapped once, when the
device is hydrated, to one member of :class:`DeviceType`; every capability
question is then answered from :data:`DEVICE_CAPABILITIES`.
"""

from enum import Enum
from typing import Any, NamedTuple

from ..logging import get_logger

logger = get_logger(__name__)


class DeviceCapabilities(NamedTuple):
    racked: bool = False
    network_distribution: bool = False
    power_distribution: bool = False
    network_endpoint: bool = False
    power_endpoint: bool = False


class DeviceType(Enum):
    """
    Closed set of device profiles.

    - ``GENERIC``: no rack position, no ports, no uplinks.
    - ``RACKED``: occupies rack space.
    - ``NETWORK_DISTRIBUTION``: a switch, has switch ports.
    - ``POWER_DISTRIBUTION``: a PDU, has power ports.
    - ``NETWORK_POWER_ENDPOINT``: a racked device fed by both switches and
      PDUs, such as a dedicated server; has subnets.
    """

    GENERIC = "generic"
    RACKED = "racked"
    NETWORK_DISTRIBUTION = "network_distribution"
    POWER_DISTRIBUTION = "power_distribution"
    NETWORK_POWER_ENDPOINT = "network_power_endpoint"

    @classmethod
    def from_tag(cls, tag: Any) -> "DeviceType":
        """
        Map a type tag from the API to a DeviceType.

        Tags are matched case-insensitively, with spaces and dashes read as
        underscores. Missing or unknown tags map to ``GENERIC``.
        """
        if tag is None or tag == "":
            return cls.GENERIC

        normalized = str(tag).strip().lower().replace(" ", "_").replace("-", "_")
        try:
            return cls(normalized)
        except ValueError:
            logger.warning(f"Unknown device type '{tag}', treating it as generic")
            return cls.GENERIC

    @property
    def capabilities(self) -> DeviceCapabilities:
        return DEVICE_CAPABILITIES[self]

    @property
    def is_racked(self) -> bool:
        return self.capabilities.racked

    @property
    def is_network_distribution(self) -> bool:
        return self.capabilities.network_distribution

    @property
    def is_power_distribution(self) -> bool:
        return self.capabilities.power_distribution

    @property
    def is_network_endpoint(self) -> bool:
        return self.capabilities.network_endpoint

    @property
    def is_power_endpoint(self) -> bool:
        return self.capabilities.power_endpoint

    @property
    def is_network_power_endpoint(self) -> bool:
        return self.is_network_endpoint and self.is_power_endpoint

    @property
    def has_ports(self) -> bool:
        return self.is_network_distribution or self.is_power_distribution


DEVICE_CAPABILITIES = {
    DeviceType.GENERIC: DeviceCapabilities(),
    DeviceType.RACKED: DeviceCapabilities(racked=True),
    DeviceType.NETWORK_DISTRIBUTION: DeviceCapabilities(
        racked=True, network_distribution=True),
    DeviceType.POWER_DISTRIBUTION: DeviceCapabilities(
        racked=True, power_distribution=True),
    DeviceType.NETWORK_POWER_ENDPOINT: DeviceCapabilities(
        racked=True, network_endpoint=True, power_endpoint=True),
}
