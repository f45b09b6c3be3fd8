from collections.abc import Sequence
from typing import Any, Iterable, Optional

from ..utils import get_object_from_collection_by_id


class Collection(Sequence):
    """
    Read-only, ordered list of objects returned by the API.

    ``total_record_count`` is the number of records the server holds across
    all pages, when it reported one; ``page`` and ``per_page`` echo the
    paging options the collection was requested with.
    """

    def __init__(
        self,
        items: Optional[Iterable[Any]] = None,
        total_record_count: Optional[int] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ):
        self._items = tuple(items) if items is not None else ()
        self.total_record_count = total_record_count
        self.page = page
        self.per_page = per_page

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Collection({list(self._items)!r}, total_record_count={self.total_record_count!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, Collection):
            return self._items == other._items
        return NotImplemented

    __hash__ = None

    def get(self, id) -> Optional[Any]:
        """Return the object with the given id, or None."""
        return get_object_from_collection_by_id(self._items, id)

    def to_dict_list(self):
        return [item.to_dict() for item in self._items]
