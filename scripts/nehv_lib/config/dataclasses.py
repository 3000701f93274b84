"""
Configuration dataclasses for network configuration.

These define the structure of the configuration as stored in
boot.config.yaml and running.config.yaml.
"""

from dataclasses import dataclass, field

from .constants import DEFAULT_HOSTNAME


@dataclass
class InterfaceConfig:
    """Addressing for one named network interface."""
    address: str = ""  # IP address with optional prefix (e.g., "192.168.1.1/24")
    mac: str = ""      # Omitted from the saved document when empty


@dataclass
class RouterConfig:
    """Complete network configuration."""
    hostname: str = DEFAULT_HOSTNAME
    interfaces: dict[str, InterfaceConfig] = field(default_factory=dict)
    dns: list[str] = field(default_factory=list)
    default_route: str = ""  # Next-hop address, empty when unset
