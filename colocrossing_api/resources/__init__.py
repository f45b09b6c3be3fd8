"""
Resource handles for the ColoCrossing API.

:data:`RESOURCES` maps each top-level resource name to the constructor the
client builds it with.
"""

from functools import partial

from .base import Resource, ChildResource, Ticket, UpdateResult
from .devices import PortControlResource, PowerDistributionUnits, Switches
from .null_routes import NullRoutes
from .subnets import ReverseDNSRecords, SubnetNullRoutes
from .registry import CHILD_RESOURCES, ChildResourceRegistry, child_resource_registry

RESOURCES = {
    "devices": partial(Resource, name="device", url="/devices"),
    "networks": partial(Resource, name="network", url="/networks"),
    "subnets": partial(Resource, name="subnet", url="/subnets"),
    "null_routes": NullRoutes,
}

__all__ = [
    "RESOURCES",
    "CHILD_RESOURCES",
    "Resource",
    "ChildResource",
    "ChildResourceRegistry",
    "child_resource_registry",
    "PortControlResource",
    "PowerDistributionUnits",
    "Switches",
    "NullRoutes",
    "SubnetNullRoutes",
    "ReverseDNSRecords",
    "Ticket",
    "UpdateResult",
]
