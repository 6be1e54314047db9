"""Value type representing a 6-byte MAC address."""

import attr

from typing import Iterator, Sequence, Union

from .errors import LengthError
from .notation import parse_octets

__all__ = (
    "BROADCAST_MAC_ADDRESS",
    "MacAddress",
    "OctetsLike",
    "ZERO_MAC_ADDRESS",
    "format_mac_address",
    "parse_mac_address",
)

OctetsLike = Union[bytes, bytearray, memoryview, Sequence[int]]
"""Type alias for objects that can be turned into the octets of a MAC
address.
"""

MAC_ADDRESS_LENGTH = 6
"""Number of octets in a MAC address."""

MULTICAST_BIT = 0x01
"""Bit of the first octet that marks group (multicast) addresses."""

LOCAL_BIT = 0x02
"""Bit of the first octet that marks locally administered addresses."""


def _to_octets(value: OctetsLike) -> bytes:
    """Converts a bytes-like object or a sequence of integers to the octets of
    a MAC address.

    Raises:
        LengthError: if the value does not have exactly six octets
    """
    if isinstance(value, int):
        # bytes(6) would happily return six zero bytes
        raise TypeError(f"bytes-like object or sequence expected, got {type(value)}")

    octets = bytes(value)
    if len(octets) != MAC_ADDRESS_LENGTH:
        raise LengthError(len(octets))

    return octets


@attr.s(frozen=True, slots=True, order=True, repr=False)
class MacAddress:
    """Immutable value object holding the six octets of a MAC address.

    Instances compare equal if and only if their octets are equal, and they
    are ordered lexicographically by their octets, the first octet being the
    most significant one. Instances are hashable so they can be used as
    dictionary keys.

    Any six-octet pattern is a valid MAC address; only textual notations can
    be malformed.
    """

    _octets: bytes = attr.ib(converter=_to_octets)

    @classmethod
    def from_bytes(cls, octets: OctetsLike) -> "MacAddress":
        """Creates a MAC address from a bytes-like object or a sequence of
        integers.

        Parameters:
            octets: the six octets of the address

        Raises:
            LengthError: if the value does not have exactly six octets
        """
        return cls(octets)

    @classmethod
    def from_octets(
        cls, a: int, b: int, c: int, d: int, e: int, f: int
    ) -> "MacAddress":
        """Creates a MAC address from six separate octets."""
        return cls((a, b, c, d, e, f))

    @classmethod
    def from_int(cls, value: int) -> "MacAddress":
        """Creates a MAC address from its 48-bit big-endian integer form.

        Raises:
            ValueError: if the value does not fit in 48 bits or is negative
        """
        if not 0 <= value < (1 << 48):
            raise ValueError(f"MAC address out of range: {value}")
        return cls(value.to_bytes(MAC_ADDRESS_LENGTH, "big"))

    @classmethod
    def parse(cls, text: str) -> "MacAddress":
        """Parses a MAC address from colon-, hyphen- or dot-separated notation
        or from twelve hex digits without separators.

        Raises:
            ParseError: if the string is not a valid MAC address
        """
        if not isinstance(text, str):
            raise TypeError(f"string expected, got {type(text)}")
        return cls(parse_octets(text))

    @property
    def octets(self) -> bytes:
        """The six octets of the MAC address."""
        return self._octets

    def format(self) -> str:
        """Returns the canonical textual form of the MAC address: lowercase
        hex digits, two per octet, separated by colons.
        """
        return ":".join(f"{octet:02x}" for octet in self._octets)

    def is_broadcast(self) -> bool:
        """Returns whether this is the broadcast address,
        ``ff:ff:ff:ff:ff:ff``.
        """
        return self._octets == b"\xff" * MAC_ADDRESS_LENGTH

    def is_local(self) -> bool:
        """Returns whether the address is locally administered."""
        return bool(self._octets[0] & LOCAL_BIT)

    def is_multicast(self) -> bool:
        """Returns whether the address is a group (multicast or broadcast)
        address.
        """
        return bool(self._octets[0] & MULTICAST_BIT)

    def is_unicast(self) -> bool:
        """Returns whether the address is an individual (unicast) address."""
        return not self.is_multicast()

    def is_universal(self) -> bool:
        """Returns whether the address is universally administered, i.e.
        assigned by the vendor.
        """
        return not self.is_local()

    def __bytes__(self) -> bytes:
        return self._octets

    def __getitem__(self, index):
        return self._octets[index]

    def __int__(self) -> int:
        return int.from_bytes(self._octets, "big")

    def __iter__(self) -> Iterator[int]:
        return iter(self._octets)

    def __len__(self) -> int:
        return MAC_ADDRESS_LENGTH

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.format()!r})"

    def __str__(self) -> str:
        return self.format()


ZERO_MAC_ADDRESS = MacAddress(bytes(MAC_ADDRESS_LENGTH))
"""The all-zeros MAC address."""

BROADCAST_MAC_ADDRESS = MacAddress(b"\xff" * MAC_ADDRESS_LENGTH)
"""The broadcast MAC address."""


def format_mac_address(address: MacAddress) -> str:
    """Returns the canonical textual form of a MAC address, e.g.
    ``01:23:45:67:89:ab``.
    """
    return address.format()


def parse_mac_address(text: str) -> MacAddress:
    """Parses a MAC address from its textual form.

    Accepted notations are ``01:23:45:67:89:ab``, ``01-23-45-67-89-ab``,
    ``0123.4567.89ab`` and ``0123456789ab``; hex digits may be lowercase or
    uppercase.

    Parameters:
        text: the string to parse

    Returns:
        the parsed MAC address

    Raises:
        EmptyAddressError: if the string is empty
        InvalidDigitError: if the string contains a character that is neither
            a hex digit nor a separator
        InconsistentSeparatorError: if the string mixes different separators
        WrongLengthError: if the string does not contain exactly six octets
        InvalidGroupError: if a group of digits has the wrong width for the
            notation
    """
    return MacAddress.parse(text)
