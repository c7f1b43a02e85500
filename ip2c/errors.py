"""
IP2C — Error types.

Every error raised by this package derives from IP2CError and carries an
ErrorKind. Transport failures from httpx and failures raised while reading
the response body are not wrapped.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    WRONG_INPUT = "wrong_input"  # service rejected the input syntax
    UNKNOWN = "unknown"          # valid input, not in the database
    FORMAT = "format"            # malformed response body
    STATUS = "status"            # non-200 HTTP status


class IP2CError(Exception):
    """Base class for errors raised by the IP2C client."""

    kind: ErrorKind


class _WellKnownError(IP2CError):
    """Fixed-message error; instances of the same kind compare equal."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _WellKnownError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


class WrongInputError(_WellKnownError):
    """The service did not process the request due to invalid input syntax."""

    kind = ErrorKind.WRONG_INPUT

    def __init__(self) -> None:
        super().__init__(
            "ip2c: your request has not been processed due to invalid syntax"
        )


class UnknownAddressError(_WellKnownError):
    """The input is well formed but not assigned to any country."""

    kind = ErrorKind.UNKNOWN

    def __init__(self) -> None:
        super().__init__(
            "ip2c: given ip/dec not found in database or not yet "
            "physically assigned to any country"
        )


class FormatError(IP2CError):
    """The response body does not follow the `code;XX;XXX;Name` format."""

    kind = ErrorKind.FORMAT

    def __init__(self, detail: str, text: str) -> None:
        self.text = text
        super().__init__(f'Invalid format. {detail}: "{text}"')


class UnexpectedStatusError(IP2CError):
    kind = ErrorKind.STATUS

    def __init__(self, actual: int, expected: int = 200) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Unexpected response. Expected {expected} but found {actual}"
        )


# Comparison values, e.g. `err == WRONG_INPUT`
WRONG_INPUT = WrongInputError()
UNKNOWN = UnknownAddressError()
