from typing import Any, Dict, List, Mapping, Optional

from ..logging import get_logger
from ..models.collection import Collection
from .base import ChildResource, UpdateResult

logger = get_logger(__name__)


class SubnetNullRoutes(ChildResource):
    """Null routes on a subnet, at ``/subnets/{id}/null_routes``."""

    def __init__(self, client):
        super().__init__(client, "subnets", "null_route", "/null_routes", "null_routes")

    def find_all_by_ip_address(
        self, subnet_id, ip_address: str, options: Optional[Mapping[str, Any]] = None
    ) -> Collection:
        """Fetch the null routes of a subnet that cover ``ip_address``."""
        params = dict(options) if options else {}
        params["ip_address"] = ip_address
        return self.find_all(subnet_id, params)


class ReverseDNSRecords(ChildResource):
    """Reverse DNS records of a subnet, at ``/subnets/{id}/rdns_records``."""

    def __init__(self, client):
        super().__init__(client, "subnets", "rdns_record", "/rdns_records", "rdns_records")

    def update_all(self, subnet_id, rdns_records: List[Dict[str, Any]]) -> UpdateResult:
        """
        Update several records of a subnet at once.

        Args:
            subnet_id: Id of the subnet.
            rdns_records: Mappings with the ``id`` and new ``value`` of each record.

        Returns:
            True if applied, a Ticket if queued for review, False otherwise.
        """
        records = [{"id": record["id"], "value": record["value"]}
                   for record in rdns_records]
        if not records:
            return False

        url = self.create_collection_url(subnet_id)
        logger.info(f"Updating {len(records)} reverse DNS records via {url}")
        return self._send_change("PUT", url, {"rdns_records": records})
