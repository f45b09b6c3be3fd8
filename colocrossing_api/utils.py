"""
Utility functions for the ColoCrossing API package.
"""

from typing import Any, Iterable, Optional


def ids_match(left: Any, right: Any) -> bool:
    """
    Compare two object ids, treating ``5`` and ``"5"`` as equal.

    The API returns ids as integers, callers often pass them as strings.
    """
    if left is None or right is None:
        return False
    return left == right or str(left) == str(right)


def get_object_from_collection_by_id(objects: Iterable[Any], id: Any) -> Optional[Any]:
    """
    Find the object with the given id in an already fetched collection.

    Args:
        objects: The objects to search through.
        id: The id to search for.

    Returns:
        The first object whose id matches, or None if there is no match.
    """
    for obj in objects:
        if ids_match(obj.id, id):
            return obj
    return None


def freeze_options(options: Any) -> Any:
    """Turn an options mapping into a hashable value usable as a cache key."""
    if not options:
        return None
    return tuple(sorted((str(k), repr(v)) for k, v in options.items()))
