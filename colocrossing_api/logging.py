import logging
import json
from typing import Any, Dict, Optional


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with the appropriate name.

    Args:
        name: Optional specific logger name. If not provided, uses the package logger.

    Returns:
        A logger instance for the specified name
    """
    if name is None:
        return logging.getLogger("colocrossing_api")
    elif name.startswith("colocrossing_api"):
        return logging.getLogger(name)
    else:
        return logging.getLogger(f"colocrossing_api.{name}")


def log_api_response(
    logger: logging.Logger,
    url: str,
    response_data: Optional[Dict[str, Any]],
    status_code: int,
    truncate: bool = True,
    max_length: int = 500,
):
    """
    Log API response data using the provided logger.

    Args:
        logger: Logger to use
        url: The API URL that was called.
        response_data: The decoded response body, if any.
        status_code: HTTP status code.
        truncate: Whether to truncate large response values. Default is True.
        max_length: Maximum length for response in the log if truncated. Default is 500.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    try:
        response_str = json.dumps(response_data)
        if truncate and len(response_str) > max_length:
            response_str = response_str[:max_length] + "... [truncated]"

        logger.debug(
            f"API Response from {url} (Status: {status_code}):\n{response_str}"
        )
    except (TypeError, ValueError) as e:
        logger.debug(
            f"API Response from {url} (Status: {status_code}) - Error serializing: {e}"
        )


def log_payload(
    logger: logging.Logger,
    method: str,
    url: str,
    payload: Optional[Dict[str, Any]],
    max_length: int = 300,
):
    """
    Log the parameters sent with a request, truncating long values.

    Args:
        logger: Logger to use
        method: HTTP method of the request.
        url: The API URL being called.
        payload: Query parameters or body of the request.
        max_length: Maximum length for a single value in the log. Default is 300.
    """
    if not payload:
        logger.debug(f"API {method} {url} without parameters")
        return

    truncated_fields = {}
    for key, value in payload.items():
        if isinstance(value, (dict, list)):
            try:
                value_str = json.dumps(value)
                if len(value_str) > max_length:
                    value_str = value_str[:max_length] + "... [truncated]"
                truncated_fields[key] = value_str
            except (TypeError, ValueError):
                truncated_fields[key] = f"<complex structure: {type(value).__name__}>"
        elif isinstance(value, str) and len(value) > max_length:
            truncated_fields[key] = value[:max_length] + "... [truncated]"
        else:
            truncated_fields[key] = value

    logger.debug(f"API {method} {url} with parameters: {truncated_fields}")
