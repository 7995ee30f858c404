import copy
from ipaddress import IPv4Address, ip_address

import pytest

from knob import ParseFailure, optopt
from knob.network import SocketAddress, SocketKey, SocketSettings


def test_compound_socket_settings() -> None:
    settings = SocketSettings()
    settings.set(SocketKey.PORT, "12345")
    settings.set(SocketKey.IP, "127.0.0.1")
    assert str(settings.socket()) == "127.0.0.1:12345"


def test_ipv6_addr() -> None:
    settings = SocketSettings()
    settings.set(SocketKey.IP, "::0.0.0.1")
    assert settings.ip() == ip_address("::1")
    assert str(settings.socket()) == "[::1]:8080"


def test_socket_overrides_port() -> None:
    settings = SocketSettings()
    settings.set(SocketKey.PORT, "12345")
    settings.set(SocketKey.IP, "127.0.0.1")
    settings.set(SocketKey.ADDR, "0.0.0.0:4567")
    assert str(settings.socket()) == "0.0.0.0:4567"


def test_defaults() -> None:
    settings = SocketSettings()
    assert settings.port() == 8080
    assert settings.ip() == IPv4Address("127.0.0.1")
    assert settings.socket() == SocketAddress(ip="127.0.0.1", port=8080)


def test_bad_port_is_a_parse_failure() -> None:
    settings = SocketSettings()
    settings.set(SocketKey.PORT, "http")
    with pytest.raises(ParseFailure):
        settings.socket()


@pytest.mark.parametrize("raw", ["0.0.0.0", ":80", "1.2.3.4:99999", "[::1]:x"])
def test_bad_addr(raw: str) -> None:
    settings = SocketSettings()
    settings.set(SocketKey.ADDR, raw)
    with pytest.raises(ParseFailure):
        settings.socket()


def test_socket_address_from_string() -> None:
    addr = SocketAddress.model_validate("[2001:db8::1]:443")
    assert addr.ip == ip_address("2001:db8::1")
    assert addr.port == 443
    assert str(addr) == "[2001:db8::1]:443"


def test_socket_from_command_line() -> None:
    settings = SocketSettings()
    settings.opt(optopt("i", "ip", "ip", "IP"))
    settings.opt(optopt("p", "port", "port", "PORT"))
    assert settings.load_args(["-i", "10.0.0.1", "--port=9000"]) == []
    assert str(settings.socket()) == "10.0.0.1:9000"


def test_copies_keep_socket_accessors() -> None:
    settings = SocketSettings()
    settings.set(SocketKey.IP, "10.0.0.1")
    settings.set(SocketKey.PORT, "9000")

    for duplicate in (settings.copy(), copy.copy(settings), copy.deepcopy(settings)):
        assert isinstance(duplicate, SocketSettings)
        duplicate.set(SocketKey.PORT, "9001")
        assert str(duplicate.socket()) == "10.0.0.1:9001"

    assert str(settings.socket()) == "10.0.0.1:9000"
