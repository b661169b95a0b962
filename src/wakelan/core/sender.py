"""UDP broadcast transmission of magic packets."""

import logging

from wakeonlan import send_magic_packet

from wakelan.core.errors import SendFailed
from wakelan.core.interfaces import NetworkInterface
from wakelan.core.mac import MacAddress

logger = logging.getLogger(__name__)

WOL_PORT = 9


def send_packet(mac: MacAddress, interface: NetworkInterface, port: int = WOL_PORT) -> None:
    """
    Broadcast one magic packet for a MAC on one interface.

    The packet goes to the interface's subnet broadcast address from a socket
    bound to the interface address, so it leaves through that interface.

    Args:
        mac: Target machine's MAC address
        interface: Interface to send from; its subnet broadcast is the destination
        port: UDP destination port (default: 9)

    Raises:
        SendFailed: If the OS rejects creating, binding or sending on the socket
    """
    broadcast = str(interface.broadcast)
    try:
        send_magic_packet(str(mac), ip_address=broadcast, port=port, interface=str(interface.ip))
    except OSError as exc:
        logger.info("Send via %s to %s:%d failed: %s", interface, broadcast, port, exc)
        raise SendFailed(str(interface), port, exc) from exc
    logger.debug("Sent WOL packet for %s via %s to %s:%d", mac, interface, broadcast, port)
