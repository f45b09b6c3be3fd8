"""
ColoCrossing API client for the ColoCrossing infrastructure management API.

This package provides a Python interface to the ColoCrossing API, giving
access to devices, PDUs, switches, networks, subnets and null routes, and
control over switch and PDU ports.
"""

__version__ = "1.0.0"

from .api_client import ColoCrossingClient, Response
from .resources import Resource, ChildResource, Ticket
from .models import (
    ResourceObject,
    Collection,
    Device,
    DeviceType,
    SwitchPort,
    PowerPort,
    Subnet,
    Network,
    NullRoute,
    Asset,
    ReverseDNSRecord,
)
from .exceptions import (
    ColoCrossingError,
    ColoCrossingConfigurationError,
    ColoCrossingTransportError,
    ColoCrossingAPIError,
    ColoCrossingAuthenticationError,
    ColoCrossingDataError,
)

__all__ = [
    "ColoCrossingClient",
    "Response",
    "Resource",
    "ChildResource",
    "Ticket",
    "ResourceObject",
    "Collection",
    "Device",
    "DeviceType",
    "SwitchPort",
    "PowerPort",
    "Subnet",
    "Network",
    "NullRoute",
    "Asset",
    "ReverseDNSRecord",
    "ColoCrossingError",
    "ColoCrossingConfigurationError",
    "ColoCrossingTransportError",
    "ColoCrossingAPIError",
    "ColoCrossingAuthenticationError",
    "ColoCrossingDataError",
]
