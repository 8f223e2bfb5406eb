"""
Primary network address selection.

Interfaces are ranked by name (physical first, VPNs and loopback last) and
the first ranked interface with a bound address supplies the answer, IPv4
preferred over IPv6.
"""

from __future__ import annotations

import ipaddress
import logging
import socket
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple, Union

import psutil

from hostfetch.config import (
    DEFAULT_PRIORITY_RULES,
    NO_CONNECTION,
    PRIORITY_DEFAULT,
    PRIORITY_ETHERNET,
    PRIORITY_LOOPBACK,
    PRIORITY_MOBILE,
    PRIORITY_NETWORK_MANAGER,
    PRIORITY_OVERLAY,
    PRIORITY_VPN,
    PRIORITY_WIRELESS,
    InterfacePriorityRules,
)
from hostfetch.core.utils import sort_by_priority

if TYPE_CHECKING:
    from hostfetch.core.probes import Probes

log = logging.getLogger(__name__)

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


@dataclass(frozen=True)
class NetworkInterface:
    name: str
    addresses: Tuple[IPAddress, ...] = ()


# ── Snapshot ──────────────────────────────────────────────────────────────────


def _parse_address(raw: str) -> Optional[IPAddress]:
    """Parse an address string, dropping any IPv6 zone suffix (``fe80::1%eth0``)."""
    try:
        return ipaddress.ip_address(raw.split("%", 1)[0])
    except ValueError:
        log.debug("skipping unparsable address %r", raw)
        return None


def snapshot_interfaces() -> List[NetworkInterface]:
    """Return the current interfaces and their IPv4/IPv6 addresses."""
    interfaces: list[NetworkInterface] = []
    for name, addrs in psutil.net_if_addrs().items():
        parsed: list[IPAddress] = []
        for addr in addrs:
            if addr.family not in (socket.AF_INET, socket.AF_INET6):
                continue
            ip = _parse_address(addr.address)
            if ip is not None:
                parsed.append(ip)
        interfaces.append(NetworkInterface(name=name, addresses=tuple(parsed)))
    return interfaces


# ── Ranking ───────────────────────────────────────────────────────────────────


def interface_priority(name: str, rules: InterfacePriorityRules = DEFAULT_PRIORITY_RULES) -> int:
    """Score an interface *name*; lower scores are preferred."""
    name = name.lower()

    # Physical: Ethernet, Wi-Fi, WWAN
    if name.startswith(rules.ethernet):
        return PRIORITY_ETHERNET
    if name.startswith(rules.wireless):
        return PRIORITY_WIRELESS
    if name.startswith(rules.mobile):
        return PRIORITY_MOBILE
    # VPNs
    if name.startswith(rules.overlay):
        return PRIORITY_OVERLAY
    if name.startswith(rules.vpn):
        return PRIORITY_VPN
    # NetworkManager internals
    if name.startswith(rules.network_manager):
        return PRIORITY_NETWORK_MANAGER
    if name in rules.loopback:
        return PRIORITY_LOOPBACK
    # Bridges, hosts, everything else
    return PRIORITY_DEFAULT


def preferred_address(interface: NetworkInterface) -> Optional[IPAddress]:
    """Return the first IPv4 address of *interface*, else its first IPv6 one."""
    ordered = sort_by_priority(interface.addresses, lambda ip: 0 if ip.version == 4 else 1)
    return ordered[0] if ordered else None


# ── Public API ────────────────────────────────────────────────────────────────


def resolve_primary_address(probes: Probes) -> str:
    """Return the address that best represents this host on the network."""
    rules = probes.rules
    try:
        interfaces = probes.interfaces()
    except (OSError, psutil.Error) as exc:
        log.debug("interface snapshot failed: %s", exc)
        return NO_CONNECTION
    ranked = sort_by_priority(interfaces, lambda iface: interface_priority(iface.name, rules))

    for iface in ranked:
        # loopback sorts last and never supplies the answer
        if iface.name.lower() in rules.loopback:
            continue
        ip = preferred_address(iface)
        if ip is not None:
            log.debug("primary address %s from %s", ip, iface.name)
            return str(ip)

    return NO_CONNECTION
