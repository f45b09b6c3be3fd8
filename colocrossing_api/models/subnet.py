"""
Models for ColoCrossing subnets.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from .base import ResourceObject
from .collection import Collection
from ..addressing import AddressRange, address_count, ip_in_range
from ..utils import get_object_from_collection_by_id


@dataclass(eq=False)
class Subnet(ResourceObject):
    """
    Represents a subnet: a block of IPv4 addresses starting at ``ip_address``
    with prefix length ``cidr``.

    Subnets are never changed in place; fetch the subnet again to see changes.
    """

    @property
    def ip_address(self) -> Optional[str]:
        return self.values.get("ip_address")

    @property
    def cidr(self) -> Optional[int]:
        cidr = self.values.get("cidr")
        return int(cidr) if cidr is not None else None

    def is_reverse_dns_enabled(self) -> bool:
        return bool(self.values.get("is_reverse_dns_enabled"))

    def get_network(self) -> Optional[ResourceObject]:
        """
        The network this subnet is on.

        When the payload's network carries an ``owner`` the network is
        assigned to the caller, and the detailed Network is fetched. Otherwise
        the partial network from the payload is returned as is.
        """
        network = self.values.get("network")
        if not network or not isinstance(network, Mapping):
            return None

        resource = self.client.networks if isinstance(network.get("owner"), Mapping) else None
        return self.resolve("network", resource)

    def get_device(self):
        """The device the subnet is assigned to, or None if it is unassigned."""
        return self.resolve("device", self.client.devices)

    def get_null_routes(self, options: Optional[Mapping[str, Any]] = None) -> Collection:
        return self.get_child_collection("null_routes", options, resource=self.client.subnets)

    def get_null_route(self, id):
        return get_object_from_collection_by_id(self.get_null_routes(), id)

    def get_null_routes_by_ip_address(
        self, ip_address: str, options: Optional[Mapping[str, Any]] = None
    ) -> Collection:
        return self.client.subnets.null_routes.find_all_by_ip_address(
            self.id, ip_address, options)

    def add_null_route(self, ip_address: str, comment: str = "", expire_date: Optional[int] = None):
        """
        Null route an address of this subnet.

        Returns:
            The new NullRoute object if created, False otherwise.
        """
        return self.client.null_routes.add(self.id, ip_address, comment, expire_date)

    def get_reverse_dns_records(self, options: Optional[Mapping[str, Any]] = None) -> Collection:
        """The reverse DNS records of the subnet. Empty unless reverse DNS is enabled."""
        if not self.is_reverse_dns_enabled():
            return Collection()
        return self.get_child_collection("rdns_records", options, resource=self.client.subnets)

    def get_reverse_dns_record(self, id):
        if not self.is_reverse_dns_enabled():
            return None
        return self.get_child_object("rdns_records", id, resource=self.client.subnets)

    def update_reverse_dns_records(self, rdns_records: List[Dict[str, Any]]):
        """
        Update several reverse DNS records of this subnet at once.

        Args:
            rdns_records: Mappings with the ``id`` and new ``value`` of each record.

        Returns:
            True if applied, a Ticket if queued for review, False otherwise.
        """
        return self.client.subnets.rdns_records.update_all(self.id, rdns_records)

    def get_number_of_ip_addresses(self) -> int:
        """Total number of addresses in the subnet, 2 ** (32 - cidr). 0 without a cidr."""
        if self.cidr is None:
            return 0
        return address_count(self.cidr)

    def get_ip_addresses(self) -> AddressRange:
        """
        All addresses of the subnet, in order.

        The result is computed lazily and can be iterated more than once. It is
        empty when the payload lacks the address or the cidr.
        """
        if self.ip_address is None or self.cidr is None:
            return AddressRange("0.0.0.0", 0)
        return AddressRange(self.ip_address, self.get_number_of_ip_addresses())

    def is_ip_address_in_subnet(self, ip_address: str) -> bool:
        if self.ip_address is None or self.cidr is None:
            return False
        return ip_in_range(self.ip_address, self.cidr, ip_address)
