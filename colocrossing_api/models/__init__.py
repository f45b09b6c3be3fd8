"""
Object models for ColoCrossing API responses.

Every object keeps the exact attribute mapping the API returned in its
``values`` attribute; the typed properties and methods on each class are
conveniences over that mapping. Fields the API adds later are available
through ``values`` and ``get_value`` without changes to this package.

:data:`OBJECT_TYPES` maps each object type name used by the resources to the
class its payloads are hydrated as. Names without an entry are hydrated as
plain :class:`ResourceObject`.
"""

from typing import Any, Mapping, Optional

from .base import ResourceObject
from .collection import Collection
from .device_type import DeviceType, DeviceCapabilities, DEVICE_CAPABILITIES
from .device import Device
from .port import Port, SwitchPort, PowerPort
from .subnet import Subnet
from .network import Network
from .null_route import NullRoute
from .asset import Asset
from .rdns_record import ReverseDNSRecord

OBJECT_TYPES = {
    "device": Device,
    "pdu": Device,
    "switch": Device,
    "switch_port": SwitchPort,
    "power_port": PowerPort,
    "subnet": Subnet,
    "network": Network,
    "null_route": NullRoute,
    "asset": Asset,
    "rdns_record": ReverseDNSRecord,
}


def create_object(
    object_type: Optional[str],
    client: Any,
    values: Mapping[str, Any],
    resource: Optional[Any] = None,
    parent: Optional[ResourceObject] = None,
    parent_id: Optional[Any] = None,
) -> ResourceObject:
    """
    Hydrate a payload as the class registered for ``object_type``.

    Args:
        object_type: Object type name, e.g. 'device'. None gives a ResourceObject.
        client: The client the object resolves its relations through.
        values: The raw attribute mapping.
        resource: The resource the payload was fetched from, if any.
        parent: The object the payload was embedded in, if any.
        parent_id: Id of the parent object of a child resource.
    """
    object_class = OBJECT_TYPES.get(object_type, ResourceObject)
    return object_class(
        client, values, resource=resource, parent=parent, parent_id=parent_id
    )


__all__ = [
    "OBJECT_TYPES",
    "create_object",
    "ResourceObject",
    "Collection",
    "DeviceType",
    "DeviceCapabilities",
    "DEVICE_CAPABILITIES",
    "Device",
    "Port",
    "SwitchPort",
    "PowerPort",
    "Subnet",
    "Network",
    "NullRoute",
    "Asset",
    "ReverseDNSRecord",
]
