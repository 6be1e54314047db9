"""Conversion of loosely typed values to and from MAC addresses.

Human-readable formats such as JSON or YAML carry MAC addresses as strings,
while binary formats carry the six raw octets. The functions in this module
accept both so MAC addresses can be read from either kind of source.
"""

from functools import singledispatch
from typing import Any, Union

from .address import MacAddress, parse_mac_address

__all__ = ("encode_mac_address", "to_mac_address")


@singledispatch
def to_mac_address(value: Any) -> MacAddress:
    """Converts a value to a MAC address.

    Strings are parsed in any of the accepted notations, bytes-like objects
    and lists or tuples of integers are taken as the raw octets, and integers
    are taken as the 48-bit integer form of the address. MAC addresses are
    returned intact.

    The function can be used as a converter for ``attr.ib()``.

    Raises:
        TypeError: if the value has a type that cannot be converted
        ValueError: if the value has the right type but does not represent a
            valid MAC address
    """
    raise TypeError(f"cannot convert {type(value)} to a MAC address")


@to_mac_address.register
def _mac_address_to_mac_address(value: MacAddress) -> MacAddress:
    return value


@to_mac_address.register
def _string_to_mac_address(value: str) -> MacAddress:
    return parse_mac_address(value)


@to_mac_address.register(bytes)
@to_mac_address.register(bytearray)
@to_mac_address.register(memoryview)
@to_mac_address.register(list)
@to_mac_address.register(tuple)
def _octets_to_mac_address(value) -> MacAddress:
    return MacAddress.from_bytes(value)


@to_mac_address.register
def _int_to_mac_address(value: int) -> MacAddress:
    if isinstance(value, bool):
        raise TypeError(f"cannot convert {type(value)} to a MAC address")
    return MacAddress.from_int(value)


def encode_mac_address(
    address: MacAddress, human_readable: bool = True
) -> Union[str, bytes]:
    """Encodes a MAC address for serialization.

    Parameters:
        address: the address to encode
        human_readable: whether the target format is human-readable

    Returns:
        the canonical textual form of the address if the target format is
        human-readable, its six raw octets otherwise
    """
    return address.format() if human_readable else bytes(address)
