from dataclasses import dataclass
from typing import Optional

from .base import ResourceObject


@dataclass(eq=False)
class ReverseDNSRecord(ResourceObject):
    """The reverse DNS (PTR) record of one address of a subnet."""

    @property
    def ip_address(self) -> Optional[str]:
        return self.values.get("ip_address")

    @property
    def value(self) -> Optional[str]:
        return self.values.get("value")

    def update(self, value: str):
        """
        Change the record's value.

        Returns:
            True if applied, a Ticket if queued for review, False otherwise.
        """
        if self.parent_id is None:
            return False
        return self.client.subnets.rdns_records.update(self.parent_id, self.id, {"value": value})
