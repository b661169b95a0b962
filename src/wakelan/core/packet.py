"""Magic packet construction."""

from wakeonlan import create_magic_packet

from wakelan.core.mac import MacAddress

MAGIC_HEADER = b"\xff" * 6
MAC_REPEAT = 16
PACKET_SIZE = len(MAGIC_HEADER) + 6 * MAC_REPEAT


def build_magic_packet(mac: MacAddress) -> bytes:
    """Return the 102-byte payload: six 0xFF bytes then the MAC sixteen times."""
    return create_magic_packet(str(mac))


def extract_mac(packet: bytes) -> MacAddress:
    """
    Read the target MAC back out of a magic packet.

    Raises:
        ValueError: If the packet has the wrong size, header, or repetitions
    """
    if len(packet) != PACKET_SIZE:
        raise ValueError(f"magic packet must be {PACKET_SIZE} bytes, got {len(packet)}")
    if packet[: len(MAGIC_HEADER)] != MAGIC_HEADER:
        raise ValueError("magic packet does not start with 6 x 0xFF")
    body = packet[len(MAGIC_HEADER):]
    octets = body[:6]
    if body != octets * MAC_REPEAT:
        raise ValueError("magic packet body is not one MAC repeated 16 times")
    return MacAddress(octets)
