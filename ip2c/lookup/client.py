"""
IP2C — Lookup clients.

Resolves an IPv4 address, a decimal-encoded address, or the caller's own
address to a CountryInfo by querying the IP2C service over HTTP:

    GET {base_url}/?ip=1.1.1.1
    GET {base_url}/?dec=16843009
    GET {base_url}/self

The HTTP client and a body transform (wraps the raw byte stream before it
is decoded) are injected at construction. Transport errors from httpx and
errors raised while reading the transformed body propagate unchanged.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import AsyncIterable, AsyncIterator, Callable, Iterable, Iterator, Optional

import httpx

from ip2c.config import settings
from ip2c.errors import IP2CError, UnexpectedStatusError
from ip2c.lookup.models import CountryInfo
from ip2c.lookup.parser import parse_country_info

logger = logging.getLogger("ip2c.client")

EXPECTED_STATUS = 200
ENCODING = "utf-8"

BodyTransform = Callable[[Iterator[bytes]], Iterable[bytes]]
AsyncBodyTransform = Callable[[AsyncIterator[bytes]], AsyncIterable[bytes]]


def _identity(stream):
    return stream


def ipv4_url(base_url: str, ip: str) -> str:
    # No client-side validation; the service reports bad syntax itself.
    return f"{base_url}/?ip={ip}"


def decimal_url(base_url: str, dec: int) -> str:
    return f"{base_url}/?dec={dec:d}"


def self_url(base_url: str) -> str:
    return f"{base_url}/self"


def _check_status(response: httpx.Response) -> None:
    logger.debug("%s -> %d", response.request.url, response.status_code)
    if response.status_code != EXPECTED_STATUS:
        raise UnexpectedStatusError(response.status_code, EXPECTED_STATUS)


def _parse_body(body: bytes) -> CountryInfo:
    text = body.decode(ENCODING)
    try:
        return parse_country_info(text)
    except IP2CError as exc:
        logger.debug("Lookup rejected (%s): %r", exc.kind.value, text)
        raise


# ── Synchronous ─────────────────────────────────────────────


class Client(ABC):
    """Operations offered by an IP2C client."""

    @abstractmethod
    def lookup_ipv4(self, ip: str) -> CountryInfo:
        ...

    @abstractmethod
    def lookup_decimal(self, dec: int) -> CountryInfo:
        ...

    @abstractmethod
    def lookup_self(self) -> CountryInfo:
        ...


class IP2CClient(Client):
    """Client backed by an httpx.Client."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        body_transform: Optional[BodyTransform] = None,
    ) -> None:
        self.base_url = base_url or settings.base_url
        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.Client(timeout=settings.timeout)
        self.body_transform = body_transform or _identity

    def lookup_ipv4(self, ip: str) -> CountryInfo:
        return self._lookup(ipv4_url(self.base_url, ip))

    def lookup_decimal(self, dec: int) -> CountryInfo:
        return self._lookup(decimal_url(self.base_url, dec))

    def lookup_self(self) -> CountryInfo:
        return self._lookup(self_url(self.base_url))

    def _lookup(self, url: str) -> CountryInfo:
        logger.debug("GET %s", url)
        with self.http_client.stream("GET", url) as response:
            _check_status(response)
            body = b"".join(self.body_transform(response.iter_bytes()))
        return _parse_body(body)

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client:
            self.http_client.close()

    def __enter__(self) -> IP2CClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


# ── Asynchronous ────────────────────────────────────────────


class AsyncClient(ABC):
    """Async counterpart of Client."""

    @abstractmethod
    async def lookup_ipv4(self, ip: str) -> CountryInfo:
        ...

    @abstractmethod
    async def lookup_decimal(self, dec: int) -> CountryInfo:
        ...

    @abstractmethod
    async def lookup_self(self) -> CountryInfo:
        ...


class AsyncIP2CClient(AsyncClient):
    """Client backed by an httpx.AsyncClient."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        body_transform: Optional[AsyncBodyTransform] = None,
    ) -> None:
        self.base_url = base_url or settings.base_url
        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(timeout=settings.timeout)
        self.body_transform = body_transform or _identity

    async def lookup_ipv4(self, ip: str) -> CountryInfo:
        return await self._lookup(ipv4_url(self.base_url, ip))

    async def lookup_decimal(self, dec: int) -> CountryInfo:
        return await self._lookup(decimal_url(self.base_url, dec))

    async def lookup_self(self) -> CountryInfo:
        return await self._lookup(self_url(self.base_url))

    async def _lookup(self, url: str) -> CountryInfo:
        logger.debug("GET %s", url)
        async with self.http_client.stream("GET", url) as response:
            _check_status(response)
            chunks = [
                chunk async for chunk in self.body_transform(response.aiter_bytes())
            ]
        return _parse_body(b"".join(chunks))

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> AsyncIP2CClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
