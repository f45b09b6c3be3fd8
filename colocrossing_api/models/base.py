"""
Base object model for ColoCrossing API payloads.
"""

import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Hashable, Mapping, Optional

from ..logging import get_logger
from ..utils import freeze_options
from .collection import Collection

logger = get_logger(__name__)


def freeze_values(value: Any) -> Any:
    """
    Deep-copy a payload into read-only form.

    Mappings become ``MappingProxyType`` and lists become tuples, at every
    level, so nothing is shared with the caller's payload.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze_values(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_values(item) for item in value)
    return value


def thaw_values(value: Any) -> Any:
    """Inverse of :func:`freeze_values`: a fresh, mutable deep copy."""
    if isinstance(value, Mapping):
        return {key: thaw_values(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw_values(item) for item in value]
    return value


@dataclass(eq=False)
class ResourceObject:
    """
    An entity returned by the API.

    Wraps the raw attribute mapping of one entity and resolves the entity's
    relations to other objects on demand.

    Every resolved relation is memoized on the instance: asking for the same
    relation (same name, same options) again returns the cached result,
    including a cached ``None``, without another API call. The cache lives
    as long as the object and is guarded by a per-object lock. To see changes
    made on the server, fetch the object again.
    """

    client: Any = field(repr=False)
    values: Mapping[str, Any]
    resource: Optional[Any] = field(default=None, repr=False)
    parent: Optional["ResourceObject"] = field(default=None, repr=False)
    parent_id: Optional[Any] = field(default=None, repr=False)

    _relations: Dict[Hashable, Any] = field(default_factory=dict, init=False, repr=False)
    _lock: Any = field(default_factory=threading.RLock, init=False, repr=False)

    def __post_init__(self):
        self.values = freeze_values(self.values)
        if self.parent is not None and self.parent_id is None:
            self.parent_id = self.parent.id

    @property
    def id(self) -> Any:
        return self.values.get("id")

    @property
    def name(self) -> Optional[str]:
        return self.values.get("name")

    def get_value(self, name: str, default: Any = None) -> Any:
        """Return a raw attribute, or ``default`` if the payload lacks it."""
        return self.values.get(name, default)

    def identity(self):
        return (type(self).__name__, self.parent_id, self.id)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ResourceObject):
            return NotImplemented
        return self.identity() == other.identity()

    def __hash__(self) -> int:
        return hash(self.identity())

    def resolve(
        self,
        name: str,
        resource: Optional[Any] = None,
        object_type: Optional[str] = None,
    ) -> Optional["ResourceObject"]:
        """
        Resolve the relation ``name`` to a single object.

        Without a ``resource`` the relation is embedded: a nested mapping under
        ``name`` is wrapped directly and nothing is fetched. With a
        ``resource`` the relation is referenced: the id (the nested mapping's
        ``id``, or the raw value itself) is fetched with ``resource.find``.

        A missing or empty value resolves to None without any API call.

        Args:
            name: Attribute holding the related entity or its id.
            resource: Resource to fetch the related entity from.
            object_type: Type to wrap an embedded entity as. Defaults to a
                         plain ResourceObject.
        """
        return self._memoize(
            ("object", name), lambda: self._resolve_object(name, resource, object_type)
        )

    def resolve_many(self, name: str, object_type: Optional[str] = None) -> Collection:
        """
        Wrap the embedded list of entities under ``name`` as a Collection.

        The wrapped objects get this object as their parent. Never calls the
        API. A missing value gives an empty collection.
        """
        return self._memoize(
            ("collection", name), lambda: self._resolve_collection(name, object_type)
        )

    def get_child_collection(
        self,
        child_name: str,
        options: Optional[Mapping[str, Any]] = None,
        resource: Optional[Any] = None,
    ) -> Collection:
        """
        Fetch this object's entries of a child resource, e.g. a subnet's null routes.

        Args:
            child_name: Name of the child resource.
            options: Paging and sorting options passed to the API.
            resource: Parent resource to use. Defaults to the resource this
                      object was fetched from.
        """
        resource = resource if resource is not None else self.resource
        if resource is None or self.id is None:
            return Collection()

        child = resource.get_child_resource(child_name)
        return self._memoize(
            ("children", child_name, freeze_options(options)),
            lambda: child.find_all(self.id, options),
        )

    def get_child_object(self, child_name: str, id: Any, resource: Optional[Any] = None):
        """Fetch one of this object's entries of a child resource by id."""
        resource = resource if resource is not None else self.resource
        if resource is None or self.id is None or id is None:
            return None

        child = resource.get_child_resource(child_name)
        return self._memoize(
            ("child", child_name, str(id)),
            lambda: child.find(self.id, id),
        )

    def clear_relations(self) -> None:
        """Drop every memoized relation so the next access fetches again."""
        with self._lock:
            self._relations.clear()

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the object to a dictionary.

        Returns:
            A deep, mutable copy of the raw attribute mapping.
        """
        return thaw_values(self.values)

    def _memoize(self, key: Hashable, loader: Callable[[], Any]) -> Any:
        with self._lock:
            if key not in self._relations:
                self._relations[key] = loader()
            return self._relations[key]

    def _resolve_object(self, name, resource, object_type):
        value = self.values.get(name)
        if value is None or value == "" or (isinstance(value, Mapping) and not value):
            return None

        if resource is None:
            if not isinstance(value, Mapping):
                logger.debug(
                    f"Cannot wrap '{name}' of {type(self).__name__} {self.id}: not an embedded object")
                return None
            return self._wrap(value, object_type)

        related_id = value.get("id") if isinstance(value, Mapping) else value
        if related_id is None:
            return None
        return resource.find(related_id)

    def _resolve_collection(self, name, object_type):
        value = self.values.get(name)
        if not value:
            return Collection()
        return Collection(
            self._wrap(item, object_type, parent=self)
            for item in value if isinstance(item, Mapping)
        )

    def _wrap(self, values, object_type, **kwargs):
        from . import create_object

        return create_object(object_type, self.client, values, **kwargs)
