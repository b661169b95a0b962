"""MAC address parsing and validation."""

import re
from dataclasses import dataclass

from wakelan.core.errors import InvalidFormat

_GROUP_RE = re.compile(r"[0-9A-Fa-f]{1,2}")


@dataclass(frozen=True)
class MacAddress:
    """A 48-bit hardware address."""

    octets: bytes

    def __post_init__(self) -> None:
        if len(self.octets) != 6:
            raise ValueError(f"MAC address needs 6 bytes, got {len(self.octets)}")

    def __str__(self) -> str:
        return ":".join(f"{b:02X}" for b in self.octets)


def parse_mac(text: str) -> MacAddress:
    """
    Parse a MAC address written as six hex groups.

    Groups are separated uniformly by ``:`` or ``-`` and hold one or two hex
    digits each, so ``1:2:3:a:b:c`` and ``01-23-45-67-89-AB`` are both valid.

    Args:
        text: Address as typed by the user

    Returns:
        The parsed MacAddress

    Raises:
        InvalidFormat: On empty input, mixed separators, a group count other
            than six, or a group that is not 1-2 hex digits
    """
    value = text.strip()
    if not value:
        raise InvalidFormat(text, "empty address")

    has_colon = ":" in value
    has_dash = "-" in value
    if has_colon and has_dash:
        raise InvalidFormat(text, "mixed ':' and '-' separators")
    if not (has_colon or has_dash):
        raise InvalidFormat(text, "expected groups separated by ':' or '-'")

    groups = value.split(":" if has_colon else "-")
    if len(groups) != 6:
        raise InvalidFormat(text, f"expected 6 groups, got {len(groups)}")

    for group in groups:
        if not _GROUP_RE.fullmatch(group):
            raise InvalidFormat(text, f"group '{group}' is not 1-2 hex digits")

    return MacAddress(bytes(int(group, 16) for group in groups))
