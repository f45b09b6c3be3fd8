"""
Registry of the child resources available under each top-level resource.

:data:`CHILD_RESOURCES` is plain data: ``{parent name: {child name: constructor}}``.
A constructor takes the client and returns the child resource. Adding a
child resource means adding an entry here.
"""

import threading
from functools import partial
from typing import Dict, Tuple

from ..exceptions import ColoCrossingConfigurationError
from ..logging import get_logger
from .base import ChildResource
from .devices import PowerDistributionUnits, Switches
from .subnets import ReverseDNSRecords, SubnetNullRoutes

logger = get_logger(__name__)

CHILD_RESOURCES = {
    "devices": {
        "assets": partial(ChildResource, parent_name="devices", name="asset", url="/assets"),
        "notes": partial(ChildResource, parent_name="devices", name="note", url="/notes"),
        "subnets": partial(ChildResource, parent_name="devices", name="subnet", url="/subnets"),
        "pdus": PowerDistributionUnits,
        "switches": Switches,
    },
    "networks": {
        "subnets": partial(ChildResource, parent_name="networks", name="subnet", url="/subnets"),
        "null_routes": partial(
            ChildResource, parent_name="networks", name="null_route", url="/null_routes"),
    },
    "subnets": {
        "null_routes": SubnetNullRoutes,
        "rdns_records": ReverseDNSRecords,
    },
}


class ChildResourceRegistry:
    """
    Creates child resources on demand, one instance per client.

    Instances are stored on the client they belong to, so they live as long
    as the client does.
    """

    def __init__(self, available_child_resources: Dict[str, Dict[str, object]]):
        self._available = available_child_resources
        self._lock = threading.RLock()

    def get_available_child_resources(self, parent_name: str) -> Tuple[str, ...]:
        return tuple(self._available.get(parent_name, ()))

    def get(self, parent_name: str, child_name: str, client) -> ChildResource:
        """
        Get the ``child_name`` child resource of ``parent_name`` for ``client``.

        Raises:
            ColoCrossingConfigurationError: If the pair is not registered.
        """
        constructor = self._available.get(parent_name, {}).get(child_name)
        if constructor is None:
            error_msg = f"ColoCrossing API child resource not found: {parent_name}.{child_name}"
            logger.error(error_msg)
            raise ColoCrossingConfigurationError(error_msg)

        with self._lock:
            instances = client.__dict__.setdefault("_child_resources", {})
            resource = instances.get((parent_name, child_name))
            if resource is None:
                logger.debug(f"Creating child resource {parent_name}.{child_name}")
                resource = constructor(client)
                instances[(parent_name, child_name)] = resource
        return resource


child_resource_registry = ChildResourceRegistry(CHILD_RESOURCES)
