"""Tests for local address discovery."""

import ipaddress

import pytest
from natricine_rocketmq import get_local_address
from natricine_rocketmq import network

pytestmark = pytest.mark.usefixtures("fresh_local_address")


class TestLocalAddress:
    def test_returns_ip_address(self) -> None:
        ipaddress.ip_address(get_local_address())

    def test_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = 0

        def hostname_addresses() -> list[str]:
            nonlocal calls
            calls += 1
            return ["10.0.0.4"]

        monkeypatch.setattr(network, "_hostname_addresses", hostname_addresses)
        monkeypatch.setattr(network, "_route_address", lambda: None)

        assert get_local_address() == "10.0.0.4"
        assert get_local_address() == "10.0.0.4"
        assert calls == 1

    def test_prefers_private_over_public(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(
            network, "_hostname_addresses", lambda: ["127.0.1.1", "8.8.4.4"]
        )
        monkeypatch.setattr(network, "_route_address", lambda: "192.168.1.20")
        assert get_local_address() == "192.168.1.20"

    def test_public_when_no_private(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(network, "_hostname_addresses", lambda: ["8.8.4.4"])
        monkeypatch.setattr(network, "_route_address", lambda: None)
        assert get_local_address() == "8.8.4.4"

    def test_loopback_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(network, "_hostname_addresses", lambda: ["127.0.0.1"])
        monkeypatch.setattr(network, "_route_address", lambda: None)
        assert get_local_address() == "127.0.0.1"
