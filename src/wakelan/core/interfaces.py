"""Local IPv4 interface discovery and broadcast address selection."""

import ipaddress
import logging
import socket
from dataclasses import dataclass
from typing import Iterable, Optional

import psutil

from wakelan.core.errors import InterfaceNotFound

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NetworkInterface:
    """An IPv4 address on a local interface, with the subnet it broadcasts to."""

    name: str
    address: ipaddress.IPv4Interface

    @property
    def ip(self) -> ipaddress.IPv4Address:
        """The interface's own IPv4 address."""
        return self.address.ip

    @property
    def broadcast(self) -> ipaddress.IPv4Address:
        """Subnet broadcast address (host bits all set)."""
        return self.address.network.broadcast_address

    def __str__(self) -> str:
        return f"{self.name} ({self.address.with_prefixlen})"


@dataclass(frozen=True)
class _AddressEntry:
    name: str
    ip: ipaddress.IPv4Address
    netmask: Optional[str]
    is_up: bool


def broadcast_address(spec: str) -> ipaddress.IPv4Address:
    """
    Compute the broadcast address of an ``IP/SUBNET`` string.

    ``"192.168.1.10/24"`` and ``"192.168.1.10/255.255.255.0"`` both give
    ``192.168.1.255``.

    Raises:
        ValueError: If the string is not an IPv4 interface specification
    """
    return ipaddress.IPv4Interface(spec.strip()).network.broadcast_address


def _ipv4_entries() -> list[_AddressEntry]:
    stats = psutil.net_if_stats()
    entries: list[_AddressEntry] = []
    for name, addrs in psutil.net_if_addrs().items():
        stat = stats.get(name)
        is_up = stat.isup if stat is not None else True
        for addr in addrs:
            if addr.family != socket.AF_INET:
                continue
            try:
                ip = ipaddress.IPv4Address(addr.address)
            except ValueError:
                logger.debug("Skipping unparseable address %r on %s", addr.address, name)
                continue
            entries.append(_AddressEntry(name, ip, addr.netmask or None, is_up))
    return entries


def _to_interface(entry: _AddressEntry) -> NetworkInterface:
    return NetworkInterface(entry.name, ipaddress.IPv4Interface(f"{entry.ip}/{entry.netmask}"))


def local_interfaces() -> list[NetworkInterface]:
    """
    List the local IPv4 interfaces a broadcast can be sent from.

    Loopback addresses, interfaces reported down and addresses with no known
    netmask are left out.
    """
    found: list[NetworkInterface] = []
    for entry in _ipv4_entries():
        if entry.ip.is_loopback:
            continue
        if not entry.is_up:
            logger.debug("Skipping %s (%s): interface is down", entry.name, entry.ip)
            continue
        if not entry.netmask:
            logger.debug("Skipping %s (%s): no netmask", entry.name, entry.ip)
            continue
        found.append(_to_interface(entry))
    logger.debug("Eligible interfaces: %s", ", ".join(str(i) for i in found) or "none")
    return found


def _match_spec(spec: str) -> NetworkInterface:
    text = spec.strip()
    entries = _ipv4_entries()

    by_name = [e for e in entries if e.name == text]
    if by_name:
        usable = [e for e in by_name if e.netmask]
        if not usable:
            raise InterfaceNotFound(spec, f"interface {text} has no IPv4 netmask")
        return _to_interface(usable[0])

    if "/" in text:
        try:
            requested = ipaddress.IPv4Interface(text)
        except ValueError:
            raise InterfaceNotFound(
                spec, "not an IPv4 address, network or interface name"
            ) from None
        inside = [e for e in entries if e.ip in requested.network]
        if not inside:
            raise InterfaceNotFound(spec, f"no local address in {requested.network}")
        # Up before down, then the exact address before others in the subnet.
        chosen = sorted(inside, key=lambda e: (not e.is_up, e.ip != requested.ip))[0]
        return NetworkInterface(
            chosen.name,
            ipaddress.IPv4Interface(f"{chosen.ip}/{requested.network.prefixlen}"),
        )

    try:
        ip = ipaddress.IPv4Address(text)
    except ValueError:
        raise InterfaceNotFound(
            spec, "not an IPv4 address, network or interface name"
        ) from None
    exact = [e for e in entries if e.ip == ip]
    if not exact:
        raise InterfaceNotFound(spec, f"no local interface has address {ip}")
    if not exact[0].netmask:
        raise InterfaceNotFound(spec, "subnet mask unknown, give it as IP/PREFIX")
    return _to_interface(exact[0])


def resolve_interfaces(spec: Optional[str] = None) -> list[NetworkInterface]:
    """
    Pick the interfaces to broadcast from.

    Args:
        spec: ``IP``, ``IP/PREFIX``, ``IP/NETMASK`` or an interface name.
            ``None`` selects every eligible local interface.

    Returns:
        One interface for an explicit spec, all eligible ones otherwise

    Raises:
        InterfaceNotFound: If the spec matches nothing, its netmask cannot be
            determined, or no eligible interface exists at all
    """
    if spec is None:
        found = local_interfaces()
        if not found:
            raise InterfaceNotFound("all interfaces", "no eligible IPv4 interface")
        return found
    iface = _match_spec(spec)
    logger.debug("Resolved %r to %s, broadcast %s", spec, iface, iface.broadcast)
    return [iface]


def resolve_many(specs: Optional[Iterable[str]] = None) -> list[NetworkInterface]:
    """Resolve several ``--net`` values, dropping duplicates and keeping order."""
    specs = list(specs or [])
    if not specs:
        return resolve_interfaces(None)
    resolved: list[NetworkInterface] = []
    for spec in specs:
        for iface in resolve_interfaces(spec):
            if iface not in resolved:
                resolved.append(iface)
    return resolved
