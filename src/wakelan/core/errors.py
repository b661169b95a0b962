"""Exception types raised by the wake pipeline."""

from pathlib import Path
from typing import Optional


class WakeError(Exception):
    """Base class for every wakelan error."""


class InvalidFormat(WakeError):
    """Raised when a string is not a valid MAC address."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"invalid MAC address '{text}': {reason}")


class InterfaceNotFound(WakeError):
    """Raised when a network specification matches no usable local interface."""

    def __init__(self, spec: str, reason: str) -> None:
        self.spec = spec
        self.reason = reason
        super().__init__(f"no interface for '{spec}': {reason}")


class SendFailed(WakeError):
    """Raised when the OS refuses to create, configure or send on a socket."""

    def __init__(self, interface: str, port: int, os_error: OSError) -> None:
        self.interface = interface
        self.port = port
        self.os_error = os_error
        super().__init__(f"send via {interface} port {port} failed: {os_error}")


class FileReadError(WakeError):
    """Raised when a target file cannot be read."""

    def __init__(self, path: Path, os_error: Optional[Exception] = None) -> None:
        self.path = path
        self.os_error = os_error
        detail = f": {os_error}" if os_error else ""
        super().__init__(f"cannot read target file {path}{detail}")
