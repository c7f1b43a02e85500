"""
IP2C — Command-line entry point.

    ip2c 1.1.1.1
    ip2c --dec 16843009
    ip2c                 # resolve this machine's public address
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

import httpx

from ip2c.config import settings
from ip2c.errors import IP2CError
from ip2c.lookup.client import Client, IP2CClient
from ip2c.lookup.models import CountryInfo

logger = logging.getLogger("ip2c.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ip2c", description="Resolve an IPv4 address to its country via IP2C",
    )
    target = parser.add_mutually_exclusive_group()
    target.add_argument("ip", nargs="?", help="IPv4 address (omit for self lookup)")
    target.add_argument("--dec", type=int, help="address as a decimal integer")
    parser.add_argument("--base-url", default=settings.base_url)
    parser.add_argument("--timeout", type=float, default=settings.timeout)
    parser.add_argument("--json", action="store_true", help="print a JSON object")
    parser.add_argument("--log-level", default=settings.log_level)
    return parser


def run_lookup(client: Client, args: argparse.Namespace) -> CountryInfo:
    if args.dec is not None:
        return client.lookup_decimal(args.dec)
    if args.ip is not None:
        return client.lookup_ipv4(args.ip)
    return client.lookup_self()


def format_result(info: CountryInfo, as_json: bool = False) -> str:
    if as_json:
        return json.dumps(info.to_dict())
    return f"{info.two_letter_code} {info.three_letter_code} {info.full_name}"


def main(argv: Optional[Sequence[str]] = None, client: Optional[Client] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        force=True,
    )

    http_client: Optional[httpx.Client] = None
    if client is None:
        http_client = httpx.Client(timeout=args.timeout)
        client = IP2CClient(base_url=args.base_url, http_client=http_client)
    try:
        info = run_lookup(client, args)
    except (IP2CError, httpx.HTTPError, UnicodeDecodeError) as exc:
        logger.debug("Lookup failed", exc_info=True)
        print(f"lookup failed: {exc}", file=sys.stderr)
        return 1
    finally:
        if http_client is not None:
            http_client.close()

    print(format_result(info, args.json))
    return 0


if __name__ == "__main__":
    sys.exit(main())
