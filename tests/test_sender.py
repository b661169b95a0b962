"""Tests for UDP broadcast sending."""

import ipaddress
from unittest.mock import MagicMock, patch

import pytest

from wakelan.core.errors import SendFailed
from wakelan.core.interfaces import NetworkInterface
from wakelan.core.mac import parse_mac
from wakelan.core.sender import send_packet

ETH0 = NetworkInterface("eth0", ipaddress.IPv4Interface("192.168.1.10/24"))
MAC = parse_mac("01:23:45:67:89:ab")


class TestSendPacket:
    """Tests for send_packet."""

    @patch("wakelan.core.sender.send_magic_packet")
    def test_sends_to_subnet_broadcast_from_interface(self, mock_send: MagicMock) -> None:
        """Should broadcast on the subnet, bound to the interface address."""
        send_packet(MAC, ETH0)

        mock_send.assert_called_once_with(
            "01:23:45:67:89:AB", ip_address="192.168.1.255", port=9, interface="192.168.1.10"
        )

    @patch("wakelan.core.sender.send_magic_packet")
    def test_custom_port(self, mock_send: MagicMock) -> None:
        send_packet(MAC, ETH0, port=7)

        assert mock_send.call_args.kwargs["port"] == 7

    @patch("wakelan.core.sender.send_magic_packet")
    def test_send_error_wrapped(self, mock_send: MagicMock) -> None:
        """Should raise SendFailed carrying the OS error."""
        error = OSError(101, "Network is unreachable")
        mock_send.side_effect = error

        with pytest.raises(SendFailed) as exc_info:
            send_packet(MAC, ETH0)

        assert exc_info.value.os_error is error
        assert exc_info.value.__cause__ is error
        assert exc_info.value.port == 9
        assert "eth0" in exc_info.value.interface

    @patch("wakelan.core.sender.send_magic_packet", side_effect=PermissionError("denied"))
    def test_permission_error_wrapped(self, mock_send: MagicMock) -> None:
        with pytest.raises(SendFailed):
            send_packet(MAC, ETH0)

    @patch("wakelan.core.sender.send_magic_packet", side_effect=ValueError("bad"))
    def test_non_os_errors_propagate(self, mock_send: MagicMock) -> None:
        with pytest.raises(ValueError):
            send_packet(MAC, ETH0)
