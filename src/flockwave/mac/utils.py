"""String-level utility functions for code that keeps MAC addresses as
text.
"""

import logging

from logging import Logger
from typing import Iterable, List, Optional

from .address import MacAddress, parse_mac_address
from .errors import ParseError

__all__ = (
    "canonicalize_mac_address",
    "is_mac_address",
    "is_mac_address_unicast",
    "is_mac_address_universal",
    "parse_mac_addresses",
)

package_log = logging.getLogger(__name__.rpartition(".")[0])


def canonicalize_mac_address(address: str) -> str:
    """Returns a canonical representation of a MAC address, with all whitespace
    stripped, hexadecimal characters converted to lowercase and the octets
    separated by colons.

    Raises:
        ParseError: if the input is not a valid MAC address
    """
    return parse_mac_address(address.strip()).format()


def is_mac_address(address: str) -> bool:
    """Returns whether the given string is a valid MAC address in any of the
    accepted notations, ignoring surrounding whitespace.
    """
    try:
        parse_mac_address(address.strip())
    except ParseError:
        return False
    else:
        return True


def is_mac_address_unicast(address: str) -> bool:
    """Returns whether a given MAC address (specified as text in any of the
    accepted notations) is a unicast MAC address.

    Raises:
        ParseError: if the input is not a valid MAC address
    """
    return parse_mac_address(address.strip()).is_unicast()


def is_mac_address_universal(address: str) -> bool:
    """Returns whether a given MAC address (specified as text in any of the
    accepted notations) is a universal, vendor-assigned MAC address.

    Raises:
        ParseError: if the input is not a valid MAC address
    """
    return parse_mac_address(address.strip()).is_universal()


def parse_mac_addresses(
    addresses: Iterable[str], *, strict: bool = True, log: Optional[Logger] = None
) -> List[MacAddress]:
    """Parses a list of MAC addresses, e.g. an allow-list read from a
    configuration file.

    Surrounding whitespace is ignored in each entry.

    Parameters:
        addresses: the textual MAC addresses to parse
        strict: whether to raise an exception for the first malformed entry.
            When false, malformed entries are skipped.
        log: logger to write warnings about skipped entries to; defaults to
            the logger of the package

    Returns:
        the parsed MAC addresses, in the order they appeared in the input

    Raises:
        ParseError: if an entry is malformed and ``strict`` is true
    """
    log = log or package_log

    result = []
    for index, address in enumerate(addresses):
        try:
            result.append(parse_mac_address(address.strip()))
        except ParseError as ex:
            if strict:
                raise
            log.warning(f"Skipping entry #{index}: {ex}")
    return result
