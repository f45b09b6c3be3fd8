from dataclasses import dataclass

from .base import ResourceObject
from .collection import Collection
from ..utils import get_object_from_collection_by_id


@dataclass(eq=False)
class Asset(ResourceObject):
    """
    An asset of a device.

    Holds the groups the asset belongs to. The groups are embedded in the
    payload with their id and name only.
    """

    def get_groups(self) -> Collection:
        return self.resolve_many("groups")

    def get_group(self, id):
        return get_object_from_collection_by_id(self.get_groups(), id)
