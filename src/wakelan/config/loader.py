"""YAML configuration loader and validator."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from wakelan.core.errors import InvalidFormat
from wakelan.core.mac import parse_mac
from wakelan.core.sender import WOL_PORT


class ConfigError(Exception):
    """Raised for invalid or unreadable configuration."""


@dataclass
class Settings:
    """Defaults applied to a wakelan run."""

    port: int = WOL_PORT
    nets: list[str] = field(default_factory=list)
    # Host alias -> MAC address, so "wakelan nas" works.
    hosts: dict[str, str] = field(default_factory=dict)

    def expand(self, target: str) -> str:
        """Return the MAC for a configured host alias, or the target unchanged."""
        return self.hosts.get(target, target)


def load_config(path: Path) -> Optional[dict[str, Any]]:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML config file

    Returns:
        Parsed configuration dictionary, or None if file is empty

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is invalid
    """
    with open(path) as f:
        result: Optional[dict[str, Any]] = yaml.safe_load(f)
        return result


def validate_config(config: Any) -> list[str]:
    """
    Validate a loaded configuration dictionary.

    Returns:
        List of validation error messages (empty list = valid)
    """
    if not isinstance(config, dict):
        return ["Config root must be a YAML mapping"]

    errors: list[str] = []

    settings = config.get("settings", {}) or {}
    if not isinstance(settings, dict):
        errors.append("'settings' must be a mapping")
    else:
        port = settings.get("port")
        if port is not None and (
            isinstance(port, bool) or not isinstance(port, int) or not 1 <= port <= 65535
        ):
            errors.append(f"settings.port: '{port}' is not a port number (1-65535)")
        nets = settings.get("nets")
        if nets is not None and (
            not isinstance(nets, list) or not all(isinstance(n, str) for n in nets)
        ):
            errors.append("settings.nets: must be a list of strings")

    hosts = config.get("hosts", {}) or {}
    if not isinstance(hosts, dict):
        errors.append("'hosts' must be a mapping of name to MAC address")
    else:
        for name, mac in hosts.items():
            try:
                parse_mac(str(mac))
            except InvalidFormat as exc:
                errors.append(f"hosts.{name}: {exc.reason} ('{mac}')")

    return errors


def settings_from_config(config: Optional[dict[str, Any]]) -> Settings:
    """Build Settings from a validated config dict; None gives the defaults."""
    if not config:
        return Settings()
    settings = config.get("settings", {}) or {}
    hosts = config.get("hosts", {}) or {}
    return Settings(
        port=int(settings.get("port", WOL_PORT)),
        nets=list(settings.get("nets", []) or []),
        hosts={str(name): str(mac) for name, mac in hosts.items()},
    )


def load_settings(path: Path, required: bool = False) -> Settings:
    """
    Load, validate and convert a config file in one step.

    Args:
        path: Config file location
        required: If False, a missing file yields default Settings

    Raises:
        ConfigError: If the file is unreadable, not YAML, or fails validation
    """
    if not path.exists():
        if required:
            raise ConfigError(f"Config file not found: {path}")
        return Settings()
    try:
        raw = load_config(path)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot load config {path}: {exc}") from exc
    if raw is None:
        return Settings()
    errors = validate_config(raw)
    if errors:
        raise ConfigError("Config validation errors:\n" + "\n".join(f"  • {e}" for e in errors))
    return settings_from_config(raw)
