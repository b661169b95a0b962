"""Tests for reading targets from a file."""

from pathlib import Path

import pytest

from wakelan.core.errors import FileReadError
from wakelan.core.targets import read_targets


class TestReadTargets:
    """Tests for read_targets."""

    def test_one_per_line(self, tmp_path: Path) -> None:
        f = tmp_path / "macs.txt"
        f.write_text("01:23:45:67:89:ab\naa-bb-cc-dd-ee-ff\n")

        assert read_targets(f) == ["01:23:45:67:89:ab", "aa-bb-cc-dd-ee-ff"]

    def test_skips_blank_and_comment_lines(self, tmp_path: Path) -> None:
        f = tmp_path / "macs.txt"
        f.write_text("# office\n\n   \n// lab\n01:23:45:67:89:ab\n")

        assert read_targets(f) == ["01:23:45:67:89:ab"]

    def test_strips_whitespace(self, tmp_path: Path) -> None:
        f = tmp_path / "macs.txt"
        f.write_text("  01:23:45:67:89:ab \r\n")

        assert read_targets(f) == ["01:23:45:67:89:ab"]

    def test_keeps_malformed_lines(self, tmp_path: Path) -> None:
        """Malformed lines are reported later, one by one."""
        f = tmp_path / "macs.txt"
        f.write_text("01:23:45:67:89:ab\nnot-a-mac\n")

        assert read_targets(f) == ["01:23:45:67:89:ab", "not-a-mac"]

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileReadError) as exc_info:
            read_targets(tmp_path / "nope.txt")
        assert exc_info.value.path == tmp_path / "nope.txt"

    def test_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileReadError):
            read_targets(tmp_path)

    def test_binary_file_raises(self, tmp_path: Path) -> None:
        f = tmp_path / "macs.bin"
        f.write_bytes(b"\xff\xfe\x00\x81")
        with pytest.raises(FileReadError):
            read_targets(f)
