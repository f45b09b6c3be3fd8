"""
Models for ColoCrossing devices.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .base import ResourceObject
from .collection import Collection
from .device_type import DeviceType
from ..utils import get_object_from_collection_by_id


@dataclass(eq=False)
class Device(ResourceObject):
    """
    Represents a device, such as a server, switch, PDU or cabinet.

    The device's type tag is mapped to a :class:`DeviceType` when the object
    is created. Every accessor below exists on every device regardless of
    type: when the device's type does not support it, collections come back
    empty and single lookups come back as None, without calling the API.
    This lets callers chain calls without checking the type first.
    """

    device_type: DeviceType = field(default=DeviceType.GENERIC, init=False)

    def __post_init__(self):
        super().__post_init__()
        self.device_type = DeviceType.from_tag(self.values.get("type"))

    @property
    def hostname(self) -> Optional[str]:
        return self.values.get("hostname")

    def get_type(self) -> DeviceType:
        return self.device_type

    def is_racked(self) -> bool:
        return self.device_type.is_racked

    def is_network_distribution(self) -> bool:
        return self.device_type.is_network_distribution

    def is_power_distribution(self) -> bool:
        return self.device_type.is_power_distribution

    def is_network_endpoint(self) -> bool:
        return self.device_type.is_network_endpoint

    def is_power_endpoint(self) -> bool:
        return self.device_type.is_power_endpoint

    def is_network_power_endpoint(self) -> bool:
        return self.device_type.is_network_power_endpoint

    def get_ports(self) -> Collection:
        """
        The ports of a switch or PDU.

        Switch ports are returned as SwitchPort, PDU ports as PowerPort.
        Empty for devices of any other type.
        """
        if not self.device_type.has_ports:
            return Collection()
        if self.is_network_distribution():
            return self.resolve_many("ports", "switch_port")
        return self.resolve_many("ports", "power_port")

    def get_port(self, id):
        return get_object_from_collection_by_id(self.get_ports(), id)

    def get_subnets(self, options: Optional[Mapping[str, Any]] = None) -> Collection:
        """The subnets assigned to a network endpoint."""
        if not self.is_network_endpoint():
            return Collection()
        return self._get_children("subnets", options)

    def get_subnet(self, id):
        if not self.is_network_endpoint():
            return None
        return get_object_from_collection_by_id(self.get_subnets(), id)

    def get_switches(self, options: Optional[Mapping[str, Any]] = None) -> Collection:
        """The switches a network endpoint is connected to."""
        if not self.is_network_endpoint():
            return Collection()
        return self._get_children("switches", options)

    def get_switch(self, id):
        if not self.is_network_endpoint():
            return None
        return self.get_child_object("switches", id, resource=self.client.devices)

    def get_power_distribution_units(self, options: Optional[Mapping[str, Any]] = None) -> Collection:
        """The PDUs a power endpoint is plugged into."""
        if not self.is_power_endpoint():
            return Collection()
        return self._get_children("pdus", options)

    def get_power_distribution_unit(self, id):
        if not self.is_power_endpoint():
            return None
        return self.get_child_object("pdus", id, resource=self.client.devices)

    def get_rack(self) -> Optional[ResourceObject]:
        """The rack a racked device is mounted in, as embedded in the payload."""
        if not self.is_racked():
            return None
        return self.resolve("rack")

    def get_assets(self, options: Optional[Mapping[str, Any]] = None) -> Collection:
        return self._get_children("assets", options)

    def get_asset(self, id):
        return get_object_from_collection_by_id(self.get_assets(), id)

    def get_notes(self, options: Optional[Mapping[str, Any]] = None) -> Collection:
        return self._get_children("notes", options)

    def get_note(self, id):
        return get_object_from_collection_by_id(self.get_notes(), id)

    def _get_children(self, child_name: str, options) -> Collection:
        return self.get_child_collection(child_name, options, resource=self.client.devices)
