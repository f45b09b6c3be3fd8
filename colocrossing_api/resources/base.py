"""
Generic resource handles.

A resource is bound to a URL and an object type. It fetches payloads through
the client and turns them into :class:`~colocrossing_api.models.base.ResourceObject`
instances.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from ..exceptions import ColoCrossingDataError
from ..logging import get_logger
from ..models import create_object
from ..models.collection import Collection

logger = get_logger(__name__)


@dataclass(frozen=True)
class Ticket:
    """
    A change the API accepted for review instead of applying it immediately.

    Returned in place of ``True`` by updates the server defers.
    """

    id: int


UpdateResult = Union[bool, Ticket]


class Resource:
    """
    Handle for one top-level API endpoint family, such as ``/devices``.

    Child resources registered for this resource in
    :data:`~colocrossing_api.resources.registry.CHILD_RESOURCES` are reachable
    as attributes, e.g. ``client.devices.pdus``.
    """

    def __init__(
        self,
        client,
        name: str,
        url: str,
        collection_name: Optional[str] = None,
        object_type: Optional[str] = None,
    ):
        """
        Args:
            client: The client requests are sent through.
            name: Singular name; also the payload key of a single object.
            url: Path of the collection, e.g. '/devices'.
            collection_name: Plural name; the payload key of a listing and the
                             key child resources are registered under.
                             Defaults to the URL without slashes.
            object_type: Type of object created from payloads. Defaults to name.
        """
        self.client = client
        self.name = name
        self.url = url
        self.collection_name = collection_name or url.strip("/")
        self.object_type = object_type or name

    @property
    def registry_name(self) -> Optional[str]:
        """Name child resources of this resource are registered under."""
        return self.collection_name

    def __getattr__(self, name):
        client = self.__dict__.get("client")
        if name.startswith("_") or client is None or self.registry_name is None:
            raise AttributeError(name)
        if name in client.get_available_child_resources(self.registry_name):
            return self.get_child_resource(name)
        raise AttributeError(
            f"'{type(self).__name__}' object has no attribute '{name}'")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(url={self.url!r}, object_type={self.object_type!r})"

    def get_child_resource(self, name: str) -> "ChildResource":
        """
        Get the child resource ``name`` of this resource.

        Raises:
            ColoCrossingConfigurationError: If no such child resource is registered.
        """
        return self.client.get_child_resource(self.registry_name, name)

    def create_collection_url(self) -> str:
        return self.url

    def create_object_url(self, id) -> str:
        return f"{self.create_collection_url()}/{id}"

    def create_object(self, values: Mapping[str, Any], parent_id=None):
        """Hydrate an object of this resource's type from a raw payload."""
        return create_object(
            self.object_type, self.client, values, resource=self, parent_id=parent_id
        )

    def find(self, id):
        """
        Fetch a single object by id.

        Returns:
            The object, or None if the API reports it does not exist.

        Raises:
            ColoCrossingTransportError: On any failure other than "not found".
        """
        return self._find(self.create_object_url(id))

    def find_all(self, options: Optional[Mapping[str, Any]] = None) -> Collection:
        """
        Fetch a page of objects.

        Args:
            options: Paging and sorting options (``page``, ``per_page``,
                     ``sort_by``, ``sort_order``). Passed to the API unmodified,
                     unknown keys included.

        Returns:
            Collection: The objects, with any count metadata the server supplied.
        """
        return self._find_all(self.create_collection_url(), options)

    def update(self, id, payload: Dict[str, Any]) -> UpdateResult:
        """
        Update an object.

        Returns:
            True if the API applied the change, a :class:`Ticket` if the change
            was queued for review, False otherwise.
        """
        return self._send_change("PUT", self.create_object_url(id), payload)

    def _find(self, url: str, parent_id=None):
        logger.info(f"Fetching {self.name} from {url}")
        response = self.client.send("GET", url)
        if response.status_code == 404:
            logger.debug(f"{self.name} at {url} not found")
            return None

        values = self._extract_object(response.content, url)
        return self.create_object(values, parent_id=parent_id)

    def _find_all(
        self, url: str, options: Optional[Mapping[str, Any]] = None, parent_id=None
    ) -> Collection:
        params = dict(options) if options else None
        logger.info(f"Fetching {self.collection_name} from {url}")
        response = self.client.send("GET", url, params)

        page = params.get("page") if params else None
        per_page = params.get("per_page") if params else None

        if response.status_code == 404:
            logger.debug(f"{self.collection_name} at {url} not found")
            return Collection(page=page, per_page=per_page)

        content = response.content
        items = content.get(self.collection_name) if content else None
        if not isinstance(items, list):
            error_msg = f"Unexpected API response format for {url}: missing '{self.collection_name}'"
            logger.error(error_msg)
            raise ColoCrossingDataError(error_msg)

        objects = [self.create_object(values, parent_id=parent_id)
                   for values in items]
        logger.debug(f"Returning {len(objects)} {self.collection_name}.")
        return Collection(
            objects,
            total_record_count=content.get("total_record_count"),
            page=page,
            per_page=per_page,
        )

    def _extract_object(self, content: Optional[Dict[str, Any]], url: str) -> Mapping[str, Any]:
        if content:
            values = content.get(self.name)
            if isinstance(values, Mapping):
                return values
            if "id" in content:
                return content

        error_msg = f"Unexpected API response format for {url}: missing '{self.name}'"
        logger.error(error_msg)
        raise ColoCrossingDataError(error_msg)

    def _send_change(
        self, method: str, url: str, payload: Optional[Dict[str, Any]] = None
    ) -> UpdateResult:
        logger.info(f"Sending {method} to {url}")
        response = self.client.send(method, url, payload)
        return self._interpret_change(response.content, url)

    def _interpret_change(self, content: Optional[Dict[str, Any]], url: str) -> UpdateResult:
        if not content:
            return False

        if content.get("status") == "ok":
            return True

        ticket_id = content.get("ticket_id")
        if ticket_id is not None:
            try:
                ticket = Ticket(int(ticket_id))
            except (TypeError, ValueError) as e:
                error_msg = f"Unexpected ticket id {ticket_id!r} in API response for {url}"
                logger.error(error_msg)
                raise ColoCrossingDataError(error_msg) from e
            logger.warning(f"Change to {url} was queued for review as ticket {ticket.id}")
            return ticket

        logger.debug(f"Change to {url} was not applied: {content}")
        return False


class ChildResource(Resource):
    """
    Handle for a collection nested under an object of a parent resource,
    such as ``/devices/{device_id}/power``.

    Every operation takes the parent object's id first.
    """

    def __init__(
        self,
        client,
        parent_name: str,
        name: str,
        url: str,
        collection_name: Optional[str] = None,
        object_type: Optional[str] = None,
    ):
        super().__init__(client, name, url, collection_name, object_type)
        self.parent = client.get_resource(parent_name)

    @property
    def registry_name(self) -> Optional[str]:
        return None

    def create_collection_url(self, parent_id) -> str:
        return f"{self.parent.create_object_url(parent_id)}{self.url}"

    def create_object_url(self, id, parent_id) -> str:
        return f"{self.create_collection_url(parent_id)}/{id}"

    def find(self, parent_id, id):
        return self._find(self.create_object_url(id, parent_id), parent_id=parent_id)

    def find_all(self, parent_id, options: Optional[Mapping[str, Any]] = None) -> Collection:
        return self._find_all(
            self.create_collection_url(parent_id), options, parent_id=parent_id
        )

    def update(self, parent_id, id, payload: Dict[str, Any]) -> UpdateResult:
        return self._send_change("PUT", self.create_object_url(id, parent_id), payload)
