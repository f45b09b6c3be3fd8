from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .base import ResourceObject
from .collection import Collection
from ..utils import get_object_from_collection_by_id


@dataclass(eq=False)
class Network(ResourceObject):
    """Represents a network assigned to the account, and the subnets carved out of it."""

    @property
    def ip_address(self) -> Optional[str]:
        return self.values.get("ip_address")

    @property
    def cidr(self) -> Optional[int]:
        cidr = self.values.get("cidr")
        return int(cidr) if cidr is not None else None

    def get_subnets(self, options: Optional[Mapping[str, Any]] = None) -> Collection:
        return self.get_child_collection("subnets", options, resource=self.client.networks)

    def get_subnet(self, id):
        return get_object_from_collection_by_id(self.get_subnets(), id)

    def get_null_routes(self, options: Optional[Mapping[str, Any]] = None) -> Collection:
        return self.get_child_collection("null_routes", options, resource=self.client.networks)
