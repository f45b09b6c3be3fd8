"""
IPv4 address arithmetic used by subnets.

All functions here are pure; nothing in this module talks to the API.
"""

import ipaddress
from typing import Iterator, Union

MAX_ADDRESS = 2 ** 32 - 1


def ip_to_int(ip_address: str) -> int:
    """
    Convert a dotted quad to its 32-bit integer value.

    Raises:
        ValueError: If the string is not a valid IPv4 address.
    """
    return int(ipaddress.IPv4Address(ip_address))


def int_to_ip(value: int) -> str:
    """Convert a 32-bit integer to a dotted quad."""
    return str(ipaddress.IPv4Address(value))


def address_count(cidr: Union[int, str]) -> int:
    """
    Number of addresses covered by a prefix length.

    Python integers do not overflow, so a /0 yields exactly 2 ** 32.

    Args:
        cidr: Prefix length between 0 and 32.

    Returns:
        2 ** (32 - cidr)

    Raises:
        ValueError: If cidr is not an integer in the range 0-32.
    """
    cidr = int(cidr)
    if cidr < 0 or cidr > 32:
        raise ValueError(f"cidr must be between 0 and 32, got {cidr}")
    return 2 ** (32 - cidr)


def ip_in_range(base_ip: str, cidr: Union[int, str], ip_address: str) -> bool:
    """
    Determine whether ip_address lies within the block starting at base_ip.

    The block runs from base_ip through base_ip + address_count(cidr) - 1.
    Unparseable addresses and prefix lengths outside 0-32 never match.
    """
    try:
        start = ip_to_int(base_ip)
        candidate = ip_to_int(ip_address)
        count = address_count(cidr)
    except (TypeError, ValueError):
        return False

    end = start + count - 1
    return start <= candidate <= end


class AddressRange:
    """
    Lazy, restartable sequence of consecutive IPv4 addresses.

    Each iteration starts again from the first address. Increments carry
    across octets, so a /22 starting at 10.0.252.0 runs through 10.0.255.255.
    A range that would run past 255.255.255.255 stops there.
    """

    def __init__(self, start_ip: str, count: int):
        self.start = ip_to_int(start_ip)
        self.count = max(0, min(count, MAX_ADDRESS - self.start + 1))

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[str]:
        for offset in range(self.count):
            yield int_to_ip(self.start + offset)

    def __getitem__(self, index: int) -> str:
        if index < 0:
            index += self.count
        if index < 0 or index >= self.count:
            raise IndexError("address range index out of range")
        return int_to_ip(self.start + index)

    def __contains__(self, ip_address) -> bool:
        try:
            value = ip_to_int(ip_address)
        except ValueError:
            return False
        return self.start <= value < self.start + self.count

    def __repr__(self) -> str:
        return f"AddressRange({int_to_ip(self.start)!r}, {self.count})"
