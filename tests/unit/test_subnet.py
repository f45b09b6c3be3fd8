import pytest

from colocrossing_api.models import Device, Network, NullRoute, ResourceObject, Subnet
from colocrossing_api.resources import Ticket


@pytest.fixture
def subnet(client):
    return Subnet(client, {
        "id": 12,
        "ip_address": "10.0.0.0",
        "cidr": 30,
        "is_reverse_dns_enabled": True,
        "network": {"id": 4, "ip_address": "10.0.0.0", "cidr": 24},
        "device": {"id": 101},
    }, resource=client.subnets)


def test_slash_30(subnet):
    assert subnet.get_number_of_ip_addresses() == 4
    assert list(subnet.get_ip_addresses()) == ["10.0.0.0", "10.0.0.1", "10.0.0.2", "10.0.0.3"]
    assert subnet.is_ip_address_in_subnet("10.0.0.3")
    assert not subnet.is_ip_address_in_subnet("10.0.0.4")
    assert not subnet.is_ip_address_in_subnet("9.255.255.255")


def test_ip_addresses_can_be_iterated_twice(subnet):
    addresses = subnet.get_ip_addresses()

    assert list(addresses) == list(addresses)
    assert addresses[-1] == "10.0.0.3"
    assert "10.0.0.2" in addresses


def test_cidr_from_string(client):
    subnet = Subnet(client, {"id": 1, "ip_address": "192.168.1.0", "cidr": "29"})

    assert subnet.cidr == 29
    assert subnet.get_number_of_ip_addresses() == 8


def test_subnet_without_address_is_never_a_member(client):
    assert not Subnet(client, {"id": 1}).is_ip_address_in_subnet("10.0.0.1")


@pytest.mark.parametrize("values", [
    {"id": 1, "ip_address": "10.0.0.0"},
    {"id": 1, "cidr": 30},
    {"id": 1},
])
def test_subnet_missing_address_or_cidr_has_no_addresses(client, values):
    subnet = Subnet(client, values)

    assert list(subnet.get_ip_addresses()) == []
    assert len(subnet.get_ip_addresses()) == 0


def test_subnet_without_cidr_counts_zero(client):
    assert Subnet(client, {"id": 1, "ip_address": "10.0.0.0"}).get_number_of_ip_addresses() == 0


def test_network_stub_is_not_fetched(subnet, transport):
    network = subnet.get_network()

    assert type(network) is ResourceObject
    assert network.id == 4
    assert network.get_value("cidr") == 24
    assert transport.calls == []


def test_owned_network_is_fetched(client, transport):
    transport.add("GET", "/networks/4", {"status": "ok", "network": {
        "id": 4, "ip_address": "10.0.0.0", "cidr": 24, "owner": {"id": 1, "name": "Acme"}}})
    subnet = Subnet(client, {
        "id": 12, "ip_address": "10.0.0.0", "cidr": 30,
        "network": {"id": 4, "owner": {"id": 1, "name": "Acme"}},
    })

    network = subnet.get_network()

    assert isinstance(network, Network)
    assert network.cidr == 24
    assert subnet.get_network() is network
    assert transport.count("GET", "/networks/4") == 1


def test_missing_network_is_none(client, transport):
    assert Subnet(client, {"id": 12}).get_network() is None
    assert Subnet(client, {"id": 12, "network": 4}).get_network() is None
    assert transport.calls == []


def test_get_device(subnet, transport, server_payload):
    transport.add("GET", "/devices/101", {"status": "ok", "device": server_payload})

    device = subnet.get_device()

    assert isinstance(device, Device)
    assert device.hostname == "srv-101.example.com"


def test_unassigned_subnet_has_no_device(client, transport):
    assert Subnet(client, {"id": 12, "device": None}).get_device() is None
    assert transport.calls == []


def test_null_routes(subnet, transport):
    transport.add("GET", "/subnets/12/null_routes", {"null_routes": [
        {"id": 9, "ip_address": "10.0.0.2", "comment": "abuse"},
    ]})

    null_routes = subnet.get_null_routes()

    assert isinstance(null_routes[0], NullRoute)
    assert null_routes[0].parent_id == 12
    assert subnet.get_null_route(9).comment == "abuse"
    assert subnet.get_null_route(10) is None
    assert transport.count("GET", "/subnets/12/null_routes") == 1


def test_null_routes_by_ip_address(subnet, transport):
    transport.add("GET", "/subnets/12/null_routes", {"null_routes": []})

    subnet.get_null_routes_by_ip_address("10.0.0.2")

    assert transport.calls == [("GET", "/subnets/12/null_routes", {"ip_address": "10.0.0.2"})]


def test_add_null_route(subnet, transport):
    transport.add("POST", "/null_routes", {"status": "ok", "null_route": {"id": 9, "ip_address": "10.0.0.2"}})

    null_route = subnet.add_null_route("10.0.0.2", "abuse")

    assert null_route.id == 9
    assert transport.calls[0][2]["subnet_id"] == 12


def test_reverse_dns_disabled_skips_transport(client, transport):
    subnet = Subnet(client, {"id": 12, "is_reverse_dns_enabled": False}, resource=client.subnets)

    assert len(subnet.get_reverse_dns_records()) == 0
    assert subnet.get_reverse_dns_record(3) is None
    assert transport.calls == []


def test_reverse_dns_records(subnet, transport):
    transport.add("GET", "/subnets/12/rdns_records", {"rdns_records": [
        {"id": 3, "ip_address": "10.0.0.1", "value": "a.example.com"},
    ]})
    transport.add("GET", "/subnets/12/rdns_records/3", {"rdns_record": {
        "id": 3, "ip_address": "10.0.0.1", "value": "a.example.com"}})
    transport.add("PUT", "/subnets/12/rdns_records/3", {"status": "pending", "ticket_id": 31})

    records = subnet.get_reverse_dns_records()
    record = subnet.get_reverse_dns_record(3)

    assert records[0].value == "a.example.com"
    assert record.ip_address == "10.0.0.1"
    assert record.parent_id == 12
    assert record.update("b.example.com") == Ticket(31)
    assert transport.calls[-1] == ("PUT", "/subnets/12/rdns_records/3", {"value": "b.example.com"})


def test_update_reverse_dns_records(subnet, transport):
    transport.add("PUT", "/subnets/12/rdns_records", {"status": "ok"})

    assert subnet.update_reverse_dns_records([{"id": 3, "value": "b.example.com"}]) is True


def test_subnet_found_through_resource(client, transport):
    transport.add("GET", "/subnets/12", {"subnet": {"id": 12, "ip_address": "172.16.0.0", "cidr": 22}})

    subnet = client.subnets.find(12)

    assert subnet.get_number_of_ip_addresses() == 1024
    assert subnet.is_ip_address_in_subnet("172.16.3.255")
    assert not subnet.is_ip_address_in_subnet("172.16.4.0")
