from typing import Any, Mapping, Optional

from ..logging import get_logger
from ..models.collection import Collection
from .base import Resource

logger = get_logger(__name__)


class NullRoutes(Resource):
    """
    Null routes across all subnets, at ``/null_routes``.

    Besides lookups this resource can add and remove null routes.
    """

    def __init__(self, client):
        super().__init__(client, "null_route", "/null_routes")

    def find_all_by_subnet(
        self, subnet_id, options: Optional[Mapping[str, Any]] = None
    ) -> Collection:
        params = dict(options) if options else {}
        params["subnet_id"] = subnet_id
        return self.find_all(params)

    def find_all_by_ip_address(
        self, ip_address: str, options: Optional[Mapping[str, Any]] = None
    ) -> Collection:
        params = dict(options) if options else {}
        params["ip_address"] = ip_address
        return self.find_all(params)

    def add(self, subnet_id, ip_address: str, comment: str = "", expire_date: Optional[int] = None):
        """
        Null route an IP address of a subnet.

        Args:
            subnet_id: Id of the subnet the address belongs to.
            ip_address: The address to null route.
            comment: Reason for the null route.
            expire_date: Unix timestamp the null route expires at. The API
                         defaults to 4 hours from now and allows at most 30 days.

        Returns:
            The new NullRoute object if the API created it, False otherwise.
        """
        payload = {
            "subnet_id": subnet_id,
            "ip_address": ip_address,
            "comment": comment,
        }
        if expire_date is not None:
            payload["expire_date"] = int(expire_date)

        url = self.create_collection_url()
        logger.info(f"Adding null route for {ip_address} on subnet {subnet_id} via {url}")
        response = self.client.send("POST", url, payload)

        content = response.content
        if not content or content.get("status") != "ok":
            logger.warning(f"Null route for {ip_address} was not added: {content}")
            return False

        values = content.get(self.name)
        if not isinstance(values, Mapping):
            return False
        return self.create_object(values)

    def remove(self, id) -> bool:
        """
        Remove a null route.

        Returns:
            True if the API removed it, False otherwise.
        """
        return self._send_change("DELETE", self.create_object_url(id)) is True
