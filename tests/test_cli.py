"""
Tests for the ip2c command-line entry point.
"""

import json

import httpx

from ip2c.errors import UNKNOWN
from ip2c.lookup.client import Client, IP2CClient
from ip2c.main import main
from ip2c.testing import error_client_for_testing, simple_client_for_testing


class RecordingClient(Client):
    """Remembers which operation was called."""

    def __init__(self):
        self.calls = []
        self._inner = simple_client_for_testing()

    def lookup_ipv4(self, ip):
        self.calls.append(("ipv4", ip))
        return self._inner.lookup_ipv4(ip)

    def lookup_decimal(self, dec):
        self.calls.append(("decimal", dec))
        return self._inner.lookup_decimal(dec)

    def lookup_self(self):
        self.calls.append(("self",))
        return self._inner.lookup_self()


def test_cli_ipv4(capsys):
    client = RecordingClient()
    assert main(["1.1.1.1"], client=client) == 0
    assert client.calls == [("ipv4", "1.1.1.1")]
    assert capsys.readouterr().out.strip() == "CA CAN Canada"


def test_cli_decimal():
    client = RecordingClient()
    assert main(["--dec", "16843009"], client=client) == 0
    assert client.calls == [("decimal", 16843009)]


def test_cli_self_json(capsys):
    client = RecordingClient()
    assert main(["--json"], client=client) == 0
    assert client.calls == [("self",)]
    data = json.loads(capsys.readouterr().out)
    assert data["two_letter_code"] == "CA"
    assert data["full_name"] == "Canada"


def test_cli_error_exit_code(capsys):
    client = error_client_for_testing(UNKNOWN)
    assert main(["0.0.0.0"], client=client) == 1
    err = capsys.readouterr().err
    assert "not found in database" in err


def test_cli_empty_ip_is_not_self_lookup():
    """An explicit empty address is still sent as an ip query."""
    client = RecordingClient()
    assert main([""], client=client) == 0
    assert client.calls == [("ipv4", "")]


def make_http_client(handler):
    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    return IP2CClient(base_url="http://ip2c.test", http_client=http_client)


def test_cli_transport_error_exit_code(capsys):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    assert main(["1.1.1.1"], client=make_http_client(handler)) == 1
    err = capsys.readouterr().err
    assert "lookup failed" in err
    assert "connection refused" in err


def test_cli_undecodable_body_exit_code(capsys):
    def handler(request):
        return httpx.Response(200, content=b"1;CA;CAN;\xff\xfe")

    assert main(["1.1.1.1"], client=make_http_client(handler)) == 1
    assert "lookup failed" in capsys.readouterr().err


def test_cli_closes_its_own_http_client(monkeypatch, capsys):
    """Without an injected client the CLI builds one and closes it afterwards."""
    created = []
    real_client = httpx.Client

    def fake_client(**kwargs):
        kwargs["transport"] = httpx.MockTransport(
            lambda request: httpx.Response(200, text="1;CA;CAN;Canada")
        )
        created.append(real_client(**kwargs))
        return created[-1]

    monkeypatch.setattr("ip2c.main.httpx.Client", fake_client)
    assert main(["--base-url", "http://ip2c.test", "1.1.1.1"]) == 0
    assert capsys.readouterr().out.strip() == "CA CAN Canada"
    assert len(created) == 1
    assert created[0].is_closed
