"""Reading wake targets from a text file."""

import logging
from pathlib import Path

from wakelan.core.errors import FileReadError

logger = logging.getLogger(__name__)

_COMMENT_PREFIXES = ("#", "//")


def read_targets(path: Path) -> list[str]:
    """
    Read one target per line from a plain-text file.

    Blank lines and lines starting with ``#`` or ``//`` are skipped. Lines are
    not validated here so that each malformed one can be reported on its own.

    Raises:
        FileReadError: If the file is missing, unreadable or not valid UTF-8
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(Path(path), exc) from exc

    targets: list[str] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith(_COMMENT_PREFIXES):
            continue
        targets.append(line)
    logger.debug("Read %d target(s) from %s", len(targets), path)
    return targets
