"""Package that holds a value type representing hardware (MAC) addresses
of network interfaces, along with functions that parse them from and format
them to their common textual notations.

MAC addresses are immutable, hashable and ordered so they can be used as
dictionary keys or sorted. Textual input is accepted in colon-, hyphen- and
dot-separated notations as well as without separators; output always uses the
canonical lowercase, colon-separated notation.
"""

from .address import (
    BROADCAST_MAC_ADDRESS,
    MacAddress,
    ZERO_MAC_ADDRESS,
    format_mac_address,
    parse_mac_address,
)
from .conversion import encode_mac_address, to_mac_address
from .errors import (
    EmptyAddressError,
    InconsistentSeparatorError,
    InvalidDigitError,
    InvalidGroupError,
    LengthError,
    MacAddressError,
    ParseError,
    WrongLengthError,
)
from .notation import Notation, detect_notation
from .utils import (
    canonicalize_mac_address,
    is_mac_address,
    is_mac_address_unicast,
    is_mac_address_universal,
    parse_mac_addresses,
)
from .version import __version__

__all__ = (
    "BROADCAST_MAC_ADDRESS",
    "EmptyAddressError",
    "InconsistentSeparatorError",
    "InvalidDigitError",
    "InvalidGroupError",
    "LengthError",
    "MacAddress",
    "MacAddressError",
    "Notation",
    "ParseError",
    "WrongLengthError",
    "ZERO_MAC_ADDRESS",
    "canonicalize_mac_address",
    "detect_notation",
    "encode_mac_address",
    "format_mac_address",
    "is_mac_address",
    "is_mac_address_unicast",
    "is_mac_address_universal",
    "parse_mac_address",
    "parse_mac_addresses",
    "to_mac_address",
    "__version__",
)
