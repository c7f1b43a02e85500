"""
IP2C — Response parser.

The service answers with a single line of four `;`-separated segments:

    <code>;<two-letter>;<three-letter>;<full name>

where code is 0 (wrong input), 1 (found) or 2 (unknown), e.g.
"1;CA;CAN;Canada", "0;;;WRONG INPUT", "2;;;UNKNOWN".

Checks run in a fixed order and the first failure wins.
"""

from __future__ import annotations

from ip2c.errors import FormatError, UnknownAddressError, WrongInputError
from ip2c.lookup.models import CountryInfo

SEPARATOR = ";"
SEGMENT_COUNT = 4


def parse_country_info(text: str) -> CountryInfo:
    """Parse a response body, raising an IP2CError if it is not a match."""
    segments = text.split(SEPARATOR)
    if len(segments) != SEGMENT_COUNT:
        raise FormatError(
            f"Expected {SEGMENT_COUNT} segments but found {len(segments)}", text,
        )

    code = segments[0]
    if code == "0":
        raise WrongInputError()
    if code == "2":
        raise UnknownAddressError()
    if code != "1":
        raise FormatError(
            f"Expected code of 0, 1, or 2 in 1st segment but found {code}", text,
        )

    two_letter_code = segments[1]
    if len(two_letter_code) != 2:
        raise FormatError(
            f"Expected 2 letter code in 2nd segment but found {len(two_letter_code)}",
            text,
        )

    three_letter_code = segments[2]
    if len(three_letter_code) != 3:
        raise FormatError(
            f"Expected 3 letter code in 3rd segment but found {len(three_letter_code)}",
            text,
        )

    full_name = segments[3].strip()
    if not full_name:
        raise FormatError("Expected full name in 4th segment but found blank", text)

    return CountryInfo(
        two_letter_code=two_letter_code,
        three_letter_code=three_letter_code,
        full_name=full_name,
    )
