import threading
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import requests
import urllib3

from .logging import get_logger, log_api_response, log_payload
from .resources import RESOURCES, child_resource_registry
from .exceptions import (
    ColoCrossingAPIError,
    ColoCrossingAuthenticationError,
    ColoCrossingConfigurationError,
    ColoCrossingDataError,
)

logger = get_logger(__name__)

DEFAULT_API_URL = "https://portal.colocrossing.com/api/1"
DEFAULT_TIMEOUT = 30
SUPPORTED_METHODS = ("GET", "PUT", "POST", "DELETE")
CONFIGURABLE_OPTIONS = ("api_url", "verify_ssl", "timeout")


@dataclass(frozen=True)
class Response:
    """Status code and decoded body of a completed API call."""

    status_code: int
    content: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class ColoCrossingClient:
    """
    Client for the ColoCrossing infrastructure management API.

    The client is the transport every resource sends its requests through,
    and the entry point to the top-level resources::

        client = ColoCrossingClient(api_token="...")
        device = client.devices.find(38)

    Top-level resources are created on first access and reused. Child
    resources (``client.devices.pdus``) are handed out by the
    :class:`~colocrossing_api.resources.registry.ChildResourceRegistry`,
    one instance per client.
    """

    def __init__(
        self,
        api_token=None,
        api_url=DEFAULT_API_URL,
        verify_ssl=True,
        timeout=DEFAULT_TIMEOUT,
        session=None,
    ):
        """
        Initialize the ColoCrossing client.

        Args:
            api_token: API token issued by the ColoCrossing portal. May also be set
                       later through the ``api_token`` attribute.
            api_url: Base URL of the API, including the version segment.
            verify_ssl: Whether to verify SSL certificates. Can be:
                       - True: Verify SSL certificates (default, recommended)
                       - False: Disable verification (insecure, not recommended)
                       - str: Path to a CA bundle file or directory with certificates of trusted CAs
            timeout: Request timeout in seconds (1-300). Defaults to 30.
            session: Optional pre-configured ``requests.Session`` to send requests with.
        """
        self.api_token = api_token
        self.session = session if session is not None else requests.Session()
        self._resources: Dict[str, Any] = {}
        self._resources_lock = threading.RLock()
        self._child_resources: Dict[Any, Any] = {}
        self._options: Dict[str, Any] = {}

        self.set_option("api_url", api_url)
        self.set_option("verify_ssl", verify_ssl)
        self.set_option("timeout", timeout)

        logger.debug(f"Initialized ColoCrossingClient with URL: {self.api_url}")

    @property
    def api_url(self) -> str:
        return self._options["api_url"]

    @property
    def verify_ssl(self) -> Union[bool, str]:
        return self._options["verify_ssl"]

    @property
    def timeout(self) -> int:
        return self._options["timeout"]

    def set_option(self, name: str, value: Any) -> None:
        """
        Set a client option.

        Args:
            name: One of ``api_url``, ``verify_ssl`` or ``timeout``.
            value: The new value.

        Raises:
            ColoCrossingConfigurationError: If the option is unknown.
            ValueError: If the value is out of range.
        """
        if name not in CONFIGURABLE_OPTIONS:
            raise ColoCrossingConfigurationError(f"Unknown client option: {name}")

        if name == "api_url":
            if not value:
                raise ValueError("api_url must not be empty")
            value = value.rstrip("/")
        elif name == "timeout":
            if value < 1 or value > 300:
                raise ValueError("timeout must be between 1 and 300")
        elif name == "verify_ssl" and value is False:
            logger.warning(
                "SSL certificate verification is disabled. This is not recommended for production use."
            )
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

        self._options[name] = value

    def get_option(self, name: str) -> Any:
        """Return the current value of a client option."""
        if name not in CONFIGURABLE_OPTIONS:
            raise ColoCrossingConfigurationError(f"Unknown client option: {name}")
        return self._options[name]

    def get_resource(self, name: str):
        """
        Get the top-level resource registered under ``name``.

        Raises:
            ColoCrossingConfigurationError: If no such resource exists.
        """
        constructor = RESOURCES.get(name)
        if constructor is None:
            raise ColoCrossingConfigurationError(f"ColoCrossing API resource not found: {name}")

        with self._resources_lock:
            resource = self._resources.get(name)
            if resource is None:
                resource = constructor(self)
                self._resources[name] = resource
        return resource

    def get_child_resource(self, parent_name: str, child_name: str):
        """
        Get the child resource ``child_name`` of the top-level resource ``parent_name``.

        Raises:
            ColoCrossingConfigurationError: If the pair is not registered.
        """
        return child_resource_registry.get(parent_name, child_name, self)

    def get_available_child_resources(self, parent_name: str):
        return child_resource_registry.get_available_child_resources(parent_name)

    @property
    def devices(self):
        return self.get_resource("devices")

    @property
    def networks(self):
        return self.get_resource("networks")

    @property
    def subnets(self):
        return self.get_resource("subnets")

    @property
    def null_routes(self):
        return self.get_resource("null_routes")

    def send(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Response:
        """
        Send a request to the API and decode its JSON body.

        GET parameters are sent as the query string; for other methods they
        are sent as a JSON body. A 404 is returned to the caller so resources
        can treat it as "not found".

        Args:
            method: 'GET', 'PUT', 'POST' or 'DELETE'.
            path: Path relative to the API URL, e.g. '/devices/38'.
            params: Optional query parameters or request body.

        Returns:
            Response: The status code and decoded content.

        Raises:
            ColoCrossingAuthenticationError: If no token is set or the token is rejected.
            ColoCrossingAPIError: On network failure, timeout or an error status other than 404.
            ColoCrossingDataError: If the body is not a JSON object.
            ValueError: If an unsupported HTTP method is provided.
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        if not self.api_token:
            error_msg = "No API token set on the ColoCrossing client."
            logger.error(error_msg)
            raise ColoCrossingAuthenticationError(error_msg)

        url = f"{self.api_url}{path}"
        request_kwargs = {
            "headers": {
                "Accept": "application/json",
                "X-API-Token": self.api_token,
            },
            "verify": self.verify_ssl,
            "timeout": self.timeout,
        }
        if params:
            if method == "GET":
                request_kwargs["params"] = params
            else:
                request_kwargs["json"] = params

        log_payload(logger, method, url, params)

        try:
            response = self.session.request(method, url, **request_kwargs)
        except requests.exceptions.RequestException as e:
            error_msg = f"API {method} request to {url} failed: {str(e)}"
            logger.error(error_msg)
            raise ColoCrossingAPIError(error_msg) from e

        if response.status_code in (401, 403):
            error_msg = f"API token rejected for {method} {url} (Status: {response.status_code})"
            logger.error(error_msg)
            raise ColoCrossingAuthenticationError(error_msg)

        content = self._decode_content(response, url)
        log_api_response(logger, url, content, response.status_code)

        if response.status_code == 404:
            logger.debug(f"API {method} {url} returned 404")
            return Response(status_code=404, content=content)

        if response.status_code >= 400:
            error_msg = f"API {method} request to {url} failed (Status: {response.status_code})"
            if content and content.get("message"):
                error_msg += f": {content['message']}"
            logger.error(error_msg)
            raise ColoCrossingAPIError(error_msg, status_code=response.status_code)

        logger.debug(
            f"API {method} request to {url} successful (Status: {response.status_code})")
        return Response(status_code=response.status_code, content=content)

    def _decode_content(
        self, response: requests.Response, url: str
    ) -> Optional[Dict[str, Any]]:
        """
        Decode a response body as a JSON object.

        Empty bodies decode to None. Error responses with an unparseable body
        also decode to None so the status code can be reported instead.

        Raises:
            ColoCrossingDataError: If a successful response is not a JSON object.
        """
        if not response.content:
            return None

        try:
            content = response.json()
        except ValueError as e:
            if response.status_code >= 400:
                return None
            error_msg = f"Failed to parse API response from {url}: {e}"
            logger.error(error_msg)
            raise ColoCrossingDataError(error_msg) from e

        if not isinstance(content, dict):
            if response.status_code >= 400:
                return None
            error_msg = f"Unexpected API response format for {url}"
            logger.error(error_msg)
            raise ColoCrossingDataError(error_msg)

        return content
