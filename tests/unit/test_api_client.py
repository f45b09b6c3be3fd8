import threading
import time
from unittest.mock import Mock

import pytest
import requests

from colocrossing_api import ColoCrossingClient
from colocrossing_api.api_client import DEFAULT_API_URL, Response
from colocrossing_api.exceptions import (
    ColoCrossingAPIError,
    ColoCrossingAuthenticationError,
    ColoCrossingConfigurationError,
    ColoCrossingDataError,
    ColoCrossingTransportError,
)
from colocrossing_api.resources import RESOURCES, NullRoutes, Resource


def make_http_response(status_code=200, json_data=None, content=b"{}"):
    response = Mock()
    response.status_code = status_code
    response.content = content
    if isinstance(json_data, Exception):
        response.json = Mock(side_effect=json_data)
    else:
        response.json = Mock(return_value=json_data)
    return response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def http_client(session):
    return ColoCrossingClient(api_token="secret", session=session)


def test_defaults():
    client = ColoCrossingClient(api_token="secret")

    assert client.api_url == DEFAULT_API_URL
    assert client.verify_ssl is True
    assert client.timeout == 30


def test_api_url_trailing_slash_is_stripped():
    client = ColoCrossingClient(api_token="secret", api_url="https://api.example.com/1/")

    assert client.api_url == "https://api.example.com/1"


@pytest.mark.parametrize("timeout", [0, 301])
def test_timeout_out_of_range_raises(timeout):
    with pytest.raises(ValueError):
        ColoCrossingClient(api_token="secret", timeout=timeout)


def test_set_option_unknown_raises():
    client = ColoCrossingClient(api_token="secret")

    with pytest.raises(ColoCrossingConfigurationError):
        client.set_option("retries", 3)
    with pytest.raises(ColoCrossingConfigurationError):
        client.get_option("retries")


def test_set_option_verify_ssl_false_logs_warning(caplog):
    client = ColoCrossingClient(api_token="secret")

    with caplog.at_level("WARNING", logger="colocrossing_api"):
        client.set_option("verify_ssl", False)

    assert client.get_option("verify_ssl") is False
    assert "SSL certificate verification is disabled" in caplog.text


def test_send_get_passes_query_params(http_client, session):
    session.request.return_value = make_http_response(
        200, {"status": "ok", "device": {"id": 38}})

    response = http_client.send("GET", "/devices/38", {"page": 2})

    assert response == Response(status_code=200, content={"status": "ok", "device": {"id": 38}})
    args, kwargs = session.request.call_args
    assert args == ("GET", f"{DEFAULT_API_URL}/devices/38")
    assert kwargs["params"] == {"page": 2}
    assert "json" not in kwargs
    assert kwargs["headers"]["X-API-Token"] == "secret"
    assert kwargs["timeout"] == 30
    assert kwargs["verify"] is True


def test_send_put_sends_json_body(http_client, session):
    session.request.return_value = make_http_response(200, {"status": "ok"})

    http_client.send("put", "/devices/1/power/2", {"status": "on", "port_id": 4})

    args, kwargs = session.request.call_args
    assert args[0] == "PUT"
    assert kwargs["json"] == {"status": "on", "port_id": 4}
    assert "params" not in kwargs


def test_send_unsupported_method(http_client):
    with pytest.raises(ValueError):
        http_client.send("PATCH", "/devices")


def test_send_without_token_raises_before_request(session):
    client = ColoCrossingClient(session=session)

    with pytest.raises(ColoCrossingAuthenticationError):
        client.send("GET", "/devices")
    session.request.assert_not_called()


def test_send_network_failure_raises_api_error(http_client, session):
    session.request.side_effect = requests.exceptions.ConnectionError("connection refused")

    with pytest.raises(ColoCrossingAPIError) as excinfo:
        http_client.send("GET", "/devices")

    assert isinstance(excinfo.value, ColoCrossingTransportError)
    assert "connection refused" in str(excinfo.value)


def test_send_timeout_raises_api_error(http_client, session):
    session.request.side_effect = requests.exceptions.Timeout("read timed out")

    with pytest.raises(ColoCrossingAPIError):
        http_client.send("GET", "/devices")


def test_send_401_raises_authentication_error(http_client, session):
    session.request.return_value = make_http_response(401, {"message": "Invalid token"})

    with pytest.raises(ColoCrossingAuthenticationError):
        http_client.send("GET", "/devices")


def test_send_404_is_returned(http_client, session):
    session.request.return_value = make_http_response(404, {"status": "error"})

    response = http_client.send("GET", "/devices/999")

    assert response.status_code == 404
    assert not response.ok


def test_send_500_raises_with_status_and_message(http_client, session):
    session.request.return_value = make_http_response(500, {"message": "Database failure"})

    with pytest.raises(ColoCrossingAPIError) as excinfo:
        http_client.send("GET", "/devices")

    assert excinfo.value.status_code == 500
    assert "Database failure" in str(excinfo.value)


def test_send_500_with_html_body_still_reports_status(http_client, session):
    session.request.return_value = make_http_response(
        502, ValueError("Expecting value"), content=b"<html>Bad Gateway</html>")

    with pytest.raises(ColoCrossingAPIError) as excinfo:
        http_client.send("GET", "/devices")

    assert excinfo.value.status_code == 502


def test_send_malformed_body_raises_data_error(http_client, session):
    session.request.return_value = make_http_response(
        200, ValueError("Expecting value"), content=b"<html>")

    with pytest.raises(ColoCrossingDataError):
        http_client.send("GET", "/devices")


def test_send_non_object_body_raises_data_error(http_client, session):
    session.request.return_value = make_http_response(200, [1, 2, 3], content=b"[1, 2, 3]")

    with pytest.raises(ColoCrossingDataError):
        http_client.send("GET", "/devices")


def test_send_empty_body_gives_no_content(http_client, session):
    session.request.return_value = make_http_response(204, None, content=b"")

    response = http_client.send("DELETE", "/null_routes/3")

    assert response.content is None
    assert response.ok


def test_top_level_resources_are_created_once():
    client = ColoCrossingClient(api_token="secret")

    assert isinstance(client.devices, Resource)
    assert client.devices is client.devices
    assert client.devices.url == "/devices"
    assert client.networks.url == "/networks"
    assert client.subnets.url == "/subnets"
    assert isinstance(client.null_routes, NullRoutes)


def test_unknown_top_level_resource_raises():
    client = ColoCrossingClient(api_token="secret")

    with pytest.raises(ColoCrossingConfigurationError):
        client.get_resource("widgets")


def test_concurrent_first_access_builds_one_resource(monkeypatch):
    built = []

    def slow_devices(client):
        time.sleep(0.01)
        resource = Resource(client, name="device", url="/devices")
        built.append(resource)
        return resource

    monkeypatch.setitem(RESOURCES, "devices", slow_devices)
    client = ColoCrossingClient(api_token="secret")
    results = []

    def worker():
        results.append(client.devices)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(built) == 1
    assert all(result is built[0] for result in results)
