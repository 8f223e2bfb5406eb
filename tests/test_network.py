"""Tests for hostfetch.core.network: interface ranking and address choice."""

from __future__ import annotations

import socket
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from fakes import iface, make_probes
from hostfetch.config import (
    DEFAULT_PRIORITY_RULES,
    NO_CONNECTION,
    PRIORITY_DEFAULT,
    PRIORITY_LOOPBACK,
    PRIORITY_MAX,
    PRIORITY_VPN,
)
from hostfetch.core.network import (
    interface_priority,
    preferred_address,
    resolve_primary_address,
    snapshot_interfaces,
)


class TestInterfacePriority:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("enp3s0", 0),
            ("eth0", 0),
            ("EN0", 0),
            ("wlan0", 1),
            ("wlp2s0", 1),
            ("wwan0", 2),
            ("tun0", 1000),
            ("tap1", 1000),
            ("wg0", 1000),
            ("vpn0", 1000),
            ("nm-bridge", 1001),
            ("tailscale0", PRIORITY_MAX - 1),
            ("lo", PRIORITY_MAX),
            ("LO", PRIORITY_MAX),
            ("br0", 69),
            ("docker0", 69),
        ],
    )
    def test_scores(self, name: str, expected: int) -> None:
        assert interface_priority(name) == expected

    def test_loopback_is_exact_match(self) -> None:
        assert interface_priority("lo0") == PRIORITY_LOOPBACK
        assert interface_priority("lo1") == PRIORITY_DEFAULT
        assert interface_priority("local0") == PRIORITY_DEFAULT
        assert interface_priority("lo") == PRIORITY_LOOPBACK

    def test_extra_vpn_prefixes(self) -> None:
        rules = DEFAULT_PRIORITY_RULES.with_vpn_prefixes(["ZT", " ppp ", ""])
        assert interface_priority("zt0", rules) == PRIORITY_VPN
        assert interface_priority("ppp0", rules) == PRIORITY_VPN
        assert interface_priority("zt0") == PRIORITY_DEFAULT
        assert rules.vpn[:4] == DEFAULT_PRIORITY_RULES.vpn


class TestPreferredAddress:
    def test_ipv4_beats_ipv6(self) -> None:
        assert str(preferred_address(iface("wlan0", "fe80::1", "10.0.0.5"))) == "10.0.0.5"

    def test_same_family_keeps_order(self) -> None:
        assert str(preferred_address(iface("eth0", "fe80::2", "fe80::1"))) == "fe80::2"
        assert str(preferred_address(iface("eth0", "10.0.0.9", "10.0.0.1"))) == "10.0.0.9"

    def test_no_addresses(self) -> None:
        assert preferred_address(iface("eth0")) is None


class TestResolvePrimaryAddress:
    def test_wireless_outranks_tunnel(self) -> None:
        probes = make_probes(interfaces=lambda: [
            iface("lo", "127.0.0.1"),
            iface("wlan0", "fe80::1", "10.0.0.5"),
            iface("tun0", "10.8.0.2"),
        ])
        assert resolve_primary_address(probes) == "10.0.0.5"

    def test_loopback_only_is_no_connection(self) -> None:
        probes = make_probes(interfaces=lambda: [iface("lo", "127.0.0.1")])
        assert resolve_primary_address(probes) == NO_CONNECTION

    def test_loopback_names_never_answer(self) -> None:
        probes = make_probes(interfaces=lambda: [
            iface("LO", "127.0.0.1"),
            iface("lo0", "::1", "127.0.0.1"),
            iface("eth0"),
        ])
        assert resolve_primary_address(probes) == NO_CONNECTION

    def test_nothing_at_all(self) -> None:
        assert resolve_primary_address(make_probes()) == NO_CONNECTION

    def test_skips_interfaces_without_addresses(self) -> None:
        probes = make_probes(interfaces=lambda: [
            iface("eth0"),
            iface("wlan0"),
            iface("br0", "192.168.122.1"),
            iface("lo", "127.0.0.1"),
        ])
        assert resolve_primary_address(probes) == "192.168.122.1"

    def test_loopback_never_wins_over_any_other_address(self) -> None:
        names = ["lo", "tailscale0", "nm-x", "tun0", "weird0"]
        for other in names[1:]:
            probes = make_probes(interfaces=lambda other=other: [
                iface("lo", "127.0.0.1", "::1"),
                iface(other, "fd00::5"),
            ])
            assert resolve_primary_address(probes) == "fd00::5"

    def test_ties_keep_enumeration_order(self) -> None:
        probes = make_probes(interfaces=lambda: [
            iface("br1", "172.16.0.1"),
            iface("br0", "172.17.0.1"),
        ])
        assert resolve_primary_address(probes) == "172.16.0.1"

    def test_custom_vpn_prefix_demotes_interface(self) -> None:
        rules = DEFAULT_PRIORITY_RULES.with_vpn_prefixes(["zt"])
        probes = make_probes(
            rules=rules,
            interfaces=lambda: [iface("zt0", "10.147.0.2"), iface("tun0", "10.8.0.2"), iface("br0", "192.168.1.4")],
        )
        assert resolve_primary_address(probes) == "192.168.1.4"

    def test_snapshot_failure_is_no_connection(self) -> None:
        def boom():
            raise OSError("netlink unavailable")

        assert resolve_primary_address(make_probes(interfaces=boom)) == NO_CONNECTION

    def test_fresh_snapshot_each_call(self) -> None:
        calls = []

        def snapshot():
            calls.append(1)
            return [iface("eth0", "10.0.0.%d" % len(calls))]

        probes = make_probes(interfaces=snapshot)
        assert resolve_primary_address(probes) == "10.0.0.1"
        assert resolve_primary_address(probes) == "10.0.0.2"


class TestSnapshot:
    def test_filters_families_and_strips_zone(self) -> None:
        fake = {
            "eth0": [
                SimpleNamespace(family=socket.AF_INET, address="192.168.1.10"),
                SimpleNamespace(family=socket.AF_INET6, address="fe80::1%eth0"),
                SimpleNamespace(family=-1, address="aa:bb:cc:dd:ee:ff"),
            ],
            "dummy0": [],
        }
        with patch("hostfetch.core.network.psutil.net_if_addrs", return_value=fake):
            result = snapshot_interfaces()

        assert [i.name for i in result] == ["eth0", "dummy0"]
        assert [str(a) for a in result[0].addresses] == ["192.168.1.10", "fe80::1"]
        assert result[1].addresses == ()
