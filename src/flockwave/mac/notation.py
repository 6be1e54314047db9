"""Textual notations of MAC addresses and the parser that turns them into
raw octets.
"""

from enum import Enum
from string import hexdigits

from .errors import (
    EmptyAddressError,
    InconsistentSeparatorError,
    InvalidDigitError,
    InvalidGroupError,
    WrongLengthError,
)

__all__ = ("Notation", "detect_notation", "parse_octets")


HEX_DIGITS = frozenset(hexdigits)
"""Characters accepted as hexadecimal digits, in both lowercase and
uppercase.
"""

SEPARATORS = ":-."
"""Characters accepted as group separators."""


class Notation(Enum):
    """Textual notations accepted by the MAC address parser. The value of each
    member is the separator character of the notation.
    """

    COLON = ":"
    """Six groups of two hex digits separated by colons, e.g.
    ``01:23:45:67:89:ab``. This is also the canonical output notation.
    """

    HYPHEN = "-"
    """Six groups of two hex digits separated by hyphens, e.g.
    ``01-23-45-67-89-ab``.
    """

    DOT = "."
    """Three groups of four hex digits separated by dots (Cisco-style), e.g.
    ``0123.4567.89ab``.
    """

    BARE = ""
    """Twelve hex digits without any separator, e.g. ``0123456789ab``."""

    @property
    def separator(self) -> str:
        """The separator character of the notation; empty for the bare
        notation.
        """
        return self.value

    @property
    def group_width(self) -> int:
        """Number of hex digits in a single group of the notation."""
        return _GROUP_WIDTHS[self]

    @property
    def group_count(self) -> int:
        """Number of groups that make up a complete MAC address."""
        return 12 // _GROUP_WIDTHS[self]


_GROUP_WIDTHS = {
    Notation.COLON: 2,
    Notation.HYPHEN: 2,
    Notation.DOT: 4,
    Notation.BARE: 12,
}


def detect_notation(text: str) -> Notation:
    """Detects the notation of a MAC address string from its first character
    that is not a hexadecimal digit.

    Only the first separator is examined; the rest of the string is not
    validated.

    Parameters:
        text: the string to examine

    Returns:
        the detected notation; ``Notation.BARE`` if the string consists of
        hexadecimal digits only

    Raises:
        EmptyAddressError: if the string is empty
        InvalidDigitError: if the first character that is not a hexadecimal
            digit is not a separator either
    """
    if not text:
        raise EmptyAddressError(text)

    for index, ch in enumerate(text):
        if ch in HEX_DIGITS:
            continue
        if ch in SEPARATORS:
            return Notation(ch)
        raise InvalidDigitError(text, ch, index)

    return Notation.BARE


def parse_octets(text: str) -> bytes:
    """Parses a MAC address string in any of the accepted notations and
    returns its six octets.

    Parameters:
        text: the string to parse

    Returns:
        the six octets of the MAC address

    Raises:
        ParseError: if the string is not a valid MAC address. The exact
            subclass of the exception tells what is wrong with the input.
    """
    notation = detect_notation(text)
    separator = notation.separator

    for index, ch in enumerate(text):
        if ch in HEX_DIGITS:
            continue
        if ch not in SEPARATORS:
            raise InvalidDigitError(text, ch, index)
        if ch != separator:
            raise InconsistentSeparatorError(text, separator, ch, index)

    if notation is Notation.BARE:
        if len(text) % 2:
            raise InvalidGroupError(text, text, 0)
        if len(text) != 12:
            raise WrongLengthError(text, len(text) // 2)
        return bytes.fromhex(text)

    groups = text.split(separator)
    width = notation.group_width
    limit = notation.group_count

    start = 0
    for count, group in enumerate(groups):
        if count == limit:
            raise WrongLengthError(text, (count + 1) * width // 2)
        if len(group) != width:
            raise InvalidGroupError(text, group, start)
        start += width + 1

    if len(groups) < limit:
        raise WrongLengthError(text, len(groups) * width // 2)

    return bytes.fromhex("".join(groups))
