from pytest import mark, raises

from flockwave.mac import (
    EmptyAddressError,
    InconsistentSeparatorError,
    InvalidDigitError,
    InvalidGroupError,
    MacAddress,
    Notation,
    ParseError,
    WrongLengthError,
    detect_notation,
    parse_mac_address,
)


def test_parse_colon_notation():
    assert parse_mac_address("00:00:00:00:00:00") == MacAddress(bytes(6))
    assert parse_mac_address("ff:ff:ff:ff:ff:ff") == MacAddress(b"\xff" * 6)
    assert parse_mac_address("12:34:56:78:90:ab") == MacAddress(
        b"\x12\x34\x56\x78\x90\xab"
    )


def test_notations_are_equivalent():
    expected = MacAddress(b"\x01\x23\x45\x67\x89\xab")

    assert parse_mac_address("01:23:45:67:89:ab") == expected
    assert parse_mac_address("01-23-45-67-89-ab") == expected
    assert parse_mac_address("0123.4567.89ab") == expected
    assert parse_mac_address("0123456789ab") == expected
    assert MacAddress.parse("0123456789ab") == expected


def test_parse_is_case_insensitive():
    expected = MacAddress(b"\xaa\xbb\xcc\xdd\xee\xff")

    assert parse_mac_address("AA:BB:CC:DD:EE:FF") == expected
    assert parse_mac_address("Aa-bB-cc-DD-ee-Ff") == expected
    assert parse_mac_address("AABB.CCDD.EEFF") == expected
    assert parse_mac_address("AABBCCDDEEFF") == expected
    assert str(parse_mac_address("AABBCCDDEEFF")) == "aa:bb:cc:dd:ee:ff"


def test_parse_empty_string():
    with raises(EmptyAddressError):
        parse_mac_address("")


def test_parse_invalid_digit():
    with raises(InvalidDigitError) as info:
        parse_mac_address("gg:23:45:67:89:ab")
    assert info.value.character == "g"
    assert info.value.index == 0

    with raises(InvalidDigitError) as info:
        parse_mac_address("01:23:45:67:89:ax")
    assert info.value.character == "x"
    assert info.value.index == 16

    with raises(InvalidDigitError) as info:
        parse_mac_address("xx:xx:xx:xx:xx:xx")
    assert info.value.index == 0

    with raises(InvalidDigitError) as info:
        parse_mac_address("01 23 45 67 89 ab")
    assert info.value.character == " "
    assert info.value.index == 2

    with raises(InvalidDigitError) as info:
        parse_mac_address(" 01:23:45:67:89:ab")
    assert info.value.index == 0

    with raises(InvalidDigitError) as info:
        parse_mac_address("0123456789aZ")
    assert info.value.character == "Z"
    assert info.value.index == 11


def test_parse_inconsistent_separator():
    with raises(InconsistentSeparatorError) as info:
        parse_mac_address("01:23-45:67:89:ab")
    assert info.value.expected == ":"
    assert info.value.found == "-"
    assert info.value.index == 5

    with raises(InconsistentSeparatorError):
        parse_mac_address("0123.4567:89ab")

    with raises(InconsistentSeparatorError):
        parse_mac_address("01-23-45-67-89:ab")


def test_parse_wrong_length():
    with raises(WrongLengthError) as info:
        parse_mac_address("01:23:45")
    assert info.value.octets == 3

    with raises(WrongLengthError) as info:
        parse_mac_address("12:34:56:78:90")
    assert info.value.octets == 5

    with raises(WrongLengthError) as info:
        parse_mac_address("12:34:56:78:90:00:00")
    assert info.value.octets == 7

    with raises(WrongLengthError) as info:
        parse_mac_address("0123.4567")
    assert info.value.octets == 4

    with raises(WrongLengthError) as info:
        parse_mac_address("0123456789")
    assert info.value.octets == 5

    with raises(WrongLengthError) as info:
        parse_mac_address("0123456789abcd")
    assert info.value.octets == 7

    with raises(WrongLengthError) as info:
        parse_mac_address("12:34:56:78:90:00:00:00")
    assert info.value.octets == 7

    with raises(WrongLengthError) as info:
        parse_mac_address("0123.4567.89ab.cdef")
    assert info.value.octets == 8

    # the seventh group is not examined
    with raises(WrongLengthError) as info:
        parse_mac_address("12:34:56:78:90:ab:")
    assert info.value.octets == 7


def test_parse_reports_first_invalid_group():
    with raises(InvalidGroupError) as info:
        parse_mac_address("::::::")
    assert info.value.group == ""
    assert info.value.index == 0

    with raises(InvalidGroupError) as info:
        parse_mac_address("0::::::")
    assert info.value.group == "0"
    assert info.value.index == 0

    with raises(InvalidGroupError) as info:
        parse_mac_address("::::0::")
    assert info.value.group == ""
    assert info.value.index == 0

    with raises(InvalidGroupError) as info:
        parse_mac_address("12:34:56:78:")
    assert info.value.group == ""
    assert info.value.index == 12


def test_parse_groups_of_other_notation():
    # six groups of two digits are not a dot notation address
    with raises(InvalidGroupError) as info:
        parse_mac_address("01.23.45.67.89.ab")
    assert info.value.group == "01"
    assert info.value.index == 0

    # three groups of four digits are not a colon notation address
    with raises(InvalidGroupError) as info:
        parse_mac_address("0123:4567:89ab")
    assert info.value.group == "0123"
    assert info.value.index == 0


def test_parse_invalid_group():
    with raises(InvalidGroupError) as info:
        parse_mac_address("1:23:45:67:89:ab")
    assert info.value.group == "1"
    assert info.value.index == 0

    with raises(InvalidGroupError) as info:
        parse_mac_address("12:34:56:78:90:")
    assert info.value.group == ""
    assert info.value.index == 15

    with raises(InvalidGroupError) as info:
        parse_mac_address("01:23:456:78:9:ab")
    assert info.value.group == "456"
    assert info.value.index == 6

    with raises(InvalidGroupError) as info:
        parse_mac_address("01234.567.89ab")
    assert info.value.group == "01234"

    with raises(InvalidGroupError):
        parse_mac_address("0123456789a")


@mark.parametrize(
    "text",
    ["", "foobarbaz", "01:23:45", "01:23-45:67:89:ab", "1:23:45:67:89:ab"],
)
def test_parse_errors_are_value_errors(text):
    with raises(ParseError) as info:
        parse_mac_address(text)

    assert isinstance(info.value, ValueError)
    assert info.value.text == text
    assert str(info.value)


def test_parse_non_string():
    with raises(TypeError):
        parse_mac_address(b"01:23:45:67:89:ab")  # type: ignore


def test_parse_is_deterministic():
    for text in ("01:23:45:67:89:ab", "01:23:45", "gg:23:45:67:89:ab"):
        results = []
        for _ in range(3):
            try:
                results.append(parse_mac_address(text))
            except ParseError as ex:
                results.append((type(ex), str(ex)))
        assert results[0] == results[1] == results[2]


def test_detect_notation():
    assert detect_notation("01:23:45:67:89:ab") is Notation.COLON
    assert detect_notation("01-23-45-67-89-ab") is Notation.HYPHEN
    assert detect_notation("0123.4567.89ab") is Notation.DOT
    assert detect_notation("0123456789ab") is Notation.BARE

    # only the first separator counts
    assert detect_notation("01:23-45") is Notation.COLON

    with raises(EmptyAddressError):
        detect_notation("")

    with raises(InvalidDigitError):
        detect_notation("01/23/45/67/89/ab")


def test_notation_properties():
    assert Notation.COLON.separator == ":"
    assert Notation.BARE.separator == ""

    assert [(n.group_width, n.group_count) for n in Notation] == [
        (2, 6),
        (2, 6),
        (4, 3),
        (12, 1),
    ]
