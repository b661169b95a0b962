"""Wake-on-LAN orchestration: parse targets, build packets, send per interface."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from wakelan.core.errors import InvalidFormat, SendFailed
from wakelan.core.interfaces import NetworkInterface
from wakelan.core.mac import MacAddress, parse_mac
from wakelan.core.packet import build_magic_packet
from wakelan.core.sender import WOL_PORT, send_packet

logger = logging.getLogger(__name__)

# Exit codes reported by the CLI
EXIT_OK = 0
EXIT_BAD_INPUT = 1
EXIT_SEND_FAILED = 2


@dataclass(frozen=True)
class SendTarget:
    """One packet bound for one interface's broadcast address."""

    mac: MacAddress
    packet: bytes
    interface: NetworkInterface
    port: int = WOL_PORT


@dataclass
class SendResult:
    """Outcome of one target string on one interface (or of parsing it)."""

    target: str
    success: bool
    mac: Optional[MacAddress] = None
    interface: Optional[NetworkInterface] = None
    port: int = WOL_PORT
    error: Optional[str] = None

    @property
    def invalid(self) -> bool:
        return self.mac is None


@dataclass
class WakeReport:
    """Every SendResult of a run, in the order they were produced."""

    results: list[SendResult] = field(default_factory=list)

    @property
    def sent(self) -> list[SendResult]:
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> list[SendResult]:
        return [r for r in self.results if not r.success and not r.invalid]

    @property
    def invalid(self) -> list[SendResult]:
        return [r for r in self.results if r.invalid]

    @property
    def exit_code(self) -> int:
        if self.failed:
            return EXIT_SEND_FAILED
        if self.invalid or not self.results:
            return EXIT_BAD_INPUT
        return EXIT_OK


def wake_targets(
    targets: Iterable[str],
    interfaces: list[NetworkInterface],
    port: int = WOL_PORT,
    on_result: Optional[Callable[[SendResult], None]] = None,
) -> WakeReport:
    """
    Send a magic packet for every target on every interface.

    All targets are parsed before anything is sent. A target that fails to
    parse is recorded as invalid and the others still go out; a failed send
    is recorded and the remaining pairs are still attempted.

    Args:
        targets: MAC address strings
        interfaces: Interfaces to broadcast from (one datagram each per MAC)
        port: UDP destination port (default: 9)
        on_result: Called with each SendResult as soon as it is known

    Returns:
        WakeReport with one entry per invalid target and per (MAC, interface) pair
    """
    report = WakeReport()

    def _record(result: SendResult) -> None:
        report.results.append(result)
        if on_result is not None:
            on_result(result)

    parsed: list[tuple[str, MacAddress]] = []
    for text in targets:
        try:
            parsed.append((text, parse_mac(text)))
        except InvalidFormat as exc:
            logger.info("%s", exc)
            _record(SendResult(target=text, success=False, port=port, error=str(exc)))

    for text, mac in parsed:
        packet = build_magic_packet(mac)
        for iface in interfaces:
            target = SendTarget(mac=mac, packet=packet, interface=iface, port=port)
            logger.debug(
                "Sending %d-byte WOL packet for %s via %s -> %s:%d",
                len(target.packet),
                mac,
                iface,
                iface.broadcast,
                port,
            )
            try:
                send_packet(target.mac, target.interface, port=target.port)
            except SendFailed as exc:
                _record(
                    SendResult(
                        target=text,
                        success=False,
                        mac=mac,
                        interface=iface,
                        port=port,
                        error=str(exc.os_error),
                    )
                )
                continue
            _record(SendResult(target=text, success=True, mac=mac, interface=iface, port=port))

    logger.info(
        "WOL run finished: %d sent, %d failed, %d invalid",
        len(report.sent),
        len(report.failed),
        len(report.invalid),
    )
    return report
