"""
Configuration manager.

Holds the staged configuration for a shell session and keeps the boot
and running configuration files in step when it is saved.
"""

from pathlib import Path

from .dataclasses import InterfaceConfig, RouterConfig
from .serialization import (
    backup_config,
    load_config,
    load_or_create_config,
    save_config,
)


class ConfigManager:
    """Staged configuration backed by a boot and a running file."""

    def __init__(self, boot_file: Path, running_file: Path):
        self.boot_file = Path(boot_file)
        self.running_file = Path(running_file)
        self.config = RouterConfig()
        self.dirty = False

    def load(self) -> RouterConfig:
        """Load the boot file, creating both files with defaults if absent."""
        self.config = load_or_create_config(self.boot_file, self.running_file)
        self.dirty = False
        return self.config

    def save(self) -> None:
        """Write the staged configuration to the boot and running files."""
        save_config(self.config, self.boot_file, self.running_file)
        self.dirty = False

    def set_hostname(self, hostname: str) -> None:
        self.config.hostname = hostname
        self.dirty = True

    def set_dns(self, servers: list[str]) -> None:
        self.config.dns = list(servers)
        self.dirty = True

    def add_dns(self, server: str) -> bool:
        """Append a DNS server. Returns False if it was already present."""
        if server in self.config.dns:
            return False
        self.config.dns.append(server)
        self.dirty = True
        return True

    def get_interface(self, name: str) -> InterfaceConfig:
        """Return a copy of the named interface (empty if unconfigured)."""
        iface = self.config.interfaces.get(name)
        if iface is None:
            return InterfaceConfig()
        return InterfaceConfig(address=iface.address, mac=iface.mac)

    def set_interface(self, name: str, iface: InterfaceConfig) -> None:
        self.config.interfaces[name] = iface
        self.dirty = True

    def set_default_route(self, route: str) -> None:
        self.config.default_route = route
        self.dirty = True

    def backup(self, backup_dir: Path) -> Path:
        """Write a timestamped backup of the staged configuration."""
        return backup_config(self.config, backup_dir)

    def restore(self, backup_file: Path) -> RouterConfig:
        """Replace the configuration with a backup and save it."""
        self.config = load_config(backup_file)
        self.save()
        return self.config
