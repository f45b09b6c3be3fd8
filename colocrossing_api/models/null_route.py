from dataclasses import dataclass
from typing import Optional

from .base import ResourceObject


@dataclass(eq=False)
class NullRoute(ResourceObject):
    """A null route on one IP address of a subnet."""

    @property
    def ip_address(self) -> Optional[str]:
        return self.values.get("ip_address")

    @property
    def comment(self) -> Optional[str]:
        return self.values.get("comment")

    def get_subnet(self):
        return self.resolve("subnet", self.client.subnets)

    def remove(self) -> bool:
        return self.client.null_routes.remove(self.id)
