"""
IP2C — Test doubles.

Clients that answer every lookup with a canned CountryInfo or a canned
error, without touching the network. Useful for unit tests that need a
plausible country rather than an exact lookup (tests usually run on
localhost or in a container).
"""

from __future__ import annotations

from typing import Optional

from ip2c.lookup.client import AsyncClient, Client
from ip2c.lookup.models import CountryInfo

DEFAULT_COUNTRY = CountryInfo(
    two_letter_code="CA",
    three_letter_code="CAN",
    full_name="Canada",
)


class ErrorForTesting(Exception):
    """Raised by error_client_for_testing() to simulate a failed lookup."""


ERROR_FOR_TESTING = ErrorForTesting("error from IP2C for testing")


class StaticClient(Client):
    """Returns `country_info`, or raises `error` when one is set."""

    def __init__(
        self,
        country_info: Optional[CountryInfo] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.country_info = country_info
        self.error = error

    def _answer(self) -> CountryInfo:
        if self.error is not None:
            # Drop chaining left over from a previous raise of the same object.
            self.error.__context__ = None
            self.error.__cause__ = None
            raise self.error.with_traceback(None)
        return self.country_info

    def lookup_ipv4(self, ip: str) -> CountryInfo:
        return self._answer()

    def lookup_decimal(self, dec: int) -> CountryInfo:
        return self._answer()

    def lookup_self(self) -> CountryInfo:
        return self._answer()


class StaticAsyncClient(AsyncClient):
    """Async variant of StaticClient."""

    def __init__(
        self,
        country_info: Optional[CountryInfo] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self._static = StaticClient(country_info, error)

    async def lookup_ipv4(self, ip: str) -> CountryInfo:
        return self._static.lookup_ipv4(ip)

    async def lookup_decimal(self, dec: int) -> CountryInfo:
        return self._static.lookup_decimal(dec)

    async def lookup_self(self) -> CountryInfo:
        return self._static.lookup_self()


def simple_client_for_testing(country_info: Optional[CountryInfo] = None) -> StaticClient:
    """Client that always resolves to `country_info` (Canada by default)."""
    return StaticClient(country_info=country_info or DEFAULT_COUNTRY)


def error_client_for_testing(error: Optional[Exception] = None) -> StaticClient:
    """Client that always raises `error` (ERROR_FOR_TESTING by default)."""
    return StaticClient(error=error or ERROR_FOR_TESTING)
