class ColoCrossingError(Exception):
    """Base exception for ColoCrossing API client errors."""

    pass


class ColoCrossingConfigurationError(ColoCrossingError):
    """Raised when the client or a resource is misconfigured (e.g. unknown child resource)."""

    pass


class ColoCrossingTransportError(ColoCrossingError):
    """Base exception for failures while talking to the ColoCrossing API."""

    pass


class ColoCrossingAPIError(ColoCrossingTransportError):
    """Raised when an API call to the ColoCrossing API fails."""

    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class ColoCrossingAuthenticationError(ColoCrossingTransportError):
    """Raised when the API token is missing or rejected."""

    pass


class ColoCrossingDataError(ColoCrossingTransportError):
    """Raised when there is an error parsing data from the ColoCrossing API."""

    pass
