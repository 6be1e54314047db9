__all__ = (
    "EmptyAddressError",
    "InconsistentSeparatorError",
    "InvalidDigitError",
    "InvalidGroupError",
    "LengthError",
    "MacAddressError",
    "ParseError",
    "WrongLengthError",
)


class MacAddressError(ValueError):
    """Base class for MAC address related errors."""

    pass


class LengthError(MacAddressError):
    """Error thrown when a MAC address is constructed from a byte sequence
    that does not have exactly six octets.
    """

    def __init__(self, length: int):
        """Constructor.

        Parameters:
            length: the number of octets that the user supplied
        """
        super().__init__(f"Expected 6 octets but found {length}")
        self.length = length


class ParseError(MacAddressError):
    """Base class for errors thrown when a string cannot be parsed as a
    MAC address.
    """

    def __init__(self, text: str, message: str = ""):
        """Constructor.

        Parameters:
            text: the string that failed to parse
            message: the error message
        """
        super().__init__(message or f"Invalid MAC address: {text!r}")
        self.text = text


class EmptyAddressError(ParseError):
    """Error thrown when trying to parse an empty string as a MAC address."""

    def __init__(self, text: str = ""):
        super().__init__(text, "Empty string is not a valid MAC address")


class InvalidDigitError(ParseError):
    """Error thrown when a MAC address string contains a character that is
    neither a hexadecimal digit nor a separator.
    """

    def __init__(self, text: str, character: str, index: int):
        """Constructor.

        Parameters:
            text: the string that failed to parse
            character: the offending character
            index: the index of the offending character in the string
        """
        super().__init__(
            text,
            f"Invalid character {character!r} at index {index} in MAC address "
            f"{text!r}",
        )
        self.character = character
        self.index = index


class InconsistentSeparatorError(ParseError):
    """Error thrown when a MAC address string uses more than one kind of
    separator, e.g. ``01:23-45:67:89:ab``.
    """

    def __init__(self, text: str, expected: str, found: str, index: int):
        """Constructor.

        Parameters:
            text: the string that failed to parse
            expected: the separator that was detected first in the string
            found: the conflicting separator
            index: the index of the conflicting separator in the string
        """
        super().__init__(
            text,
            f"Separator {found!r} at index {index} does not match separator "
            f"{expected!r} in MAC address {text!r}",
        )
        self.expected = expected
        self.found = found
        self.index = index


class WrongLengthError(ParseError):
    """Error thrown when a MAC address string is well-formed but does not
    contain exactly six octets.
    """

    def __init__(self, text: str, octets: int):
        """Constructor.

        Parameters:
            text: the string that failed to parse
            octets: the number of octets found in the string
        """
        super().__init__(
            text, f"Expected 6 octets but found {octets} in MAC address {text!r}"
        )
        self.octets = octets


class InvalidGroupError(ParseError):
    """Error thrown when a group of hexadecimal digits between two separators
    in a MAC address string does not have the width required by the notation,
    e.g. ``1:23:45:67:89:ab`` or ``01::23:45:67:89``.
    """

    def __init__(self, text: str, group: str, index: int):
        """Constructor.

        Parameters:
            text: the string that failed to parse
            group: the offending group of digits; may be empty
            index: the index where the offending group starts in the string
        """
        super().__init__(
            text,
            f"Invalid group {group!r} at index {index} in MAC address {text!r}",
        )
        self.group = group
        self.index = index
