import pytest

from colocrossing_api import ColoCrossingClient
from colocrossing_api.api_client import Response


class FakeTransport:
    """Answers requests from canned responses and records every call."""

    def __init__(self):
        self.routes = {}
        self.calls = []

    def add(self, method, path, content, status_code=200):
        self.routes[(method, path)] = Response(status_code=status_code, content=content)

    def __call__(self, method, path, params=None):
        self.calls.append((method, path, params))
        response = self.routes.get((method, path))
        if response is None:
            return Response(status_code=404, content={"status": "error", "message": "Not Found"})
        return response

    def count(self, method=None, path=None):
        return len([
            call for call in self.calls
            if (method is None or call[0] == method) and (path is None or call[1] == path)
        ])


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(transport):
    client = ColoCrossingClient(api_token="test-token")
    client.send = transport
    return client


@pytest.fixture
def switch_payload():
    return {
        "id": 38,
        "name": "SW-38",
        "type": "network_distribution",
        "ports": [
            {"id": 3, "name": "Gi0/3", "control": False, "device": {"id": 101, "name": "srv-101"}},
            {"id": 4, "name": "Gi0/4", "control": True, "device": {"id": 101, "name": "srv-101"}},
        ],
    }


@pytest.fixture
def pdu_payload():
    return {
        "id": 55,
        "name": "PDU-55",
        "type": "power_distribution",
        "ports": [
            {"id": 7, "name": "Outlet 7", "control": True, "device": {"id": 101, "name": "srv-101"}},
            {"id": 8, "name": "Outlet 8", "control": True, "device": None},
        ],
    }


@pytest.fixture
def server_payload():
    return {
        "id": 101,
        "name": "srv-101",
        "hostname": "srv-101.example.com",
        "type": "network_power_endpoint",
        "rack": {"id": 9, "name": "Cabinet 9"},
    }
