"""
Configuration serialization.

Functions for saving and loading the network configuration to/from YAML.
"""

import shutil
from dataclasses import asdict
from datetime import datetime
from pathlib import Path

import yaml

from .constants import DEFAULT_HOSTNAME
from .dataclasses import InterfaceConfig, RouterConfig


class ConfigError(Exception):
    """Raised when a configuration file cannot be read, parsed or written."""
    pass


def to_dict(config: RouterConfig) -> dict:
    """Convert a RouterConfig into the document layout written to disk."""
    data = asdict(config)
    for iface in data['interfaces'].values():
        if not iface.get('mac'):
            iface.pop('mac', None)
    return data


def from_dict(data: dict) -> RouterConfig:
    """Build a RouterConfig from a parsed document, filling in defaults."""
    if not isinstance(data, dict):
        raise ConfigError("Configuration document must be a mapping")

    interfaces_data = data.get('interfaces') or {}
    if not isinstance(interfaces_data, dict):
        raise ConfigError("'interfaces' must be a mapping of interface names")

    interfaces = {}
    for name, iface_data in interfaces_data.items():
        iface_data = iface_data or {}
        if not isinstance(iface_data, dict):
            raise ConfigError(f"Interface '{name}' must be a mapping with address/mac keys")
        interfaces[str(name)] = InterfaceConfig(
            address=str(iface_data.get('address') or ""),
            mac=str(iface_data.get('mac') or ""),
        )

    dns = data.get('dns') or []
    if not isinstance(dns, list):
        raise ConfigError("'dns' must be a list of server addresses")

    return RouterConfig(
        hostname=str(data.get('hostname') or DEFAULT_HOSTNAME),
        interfaces=interfaces,
        dns=[str(d) for d in dns],
        default_route=str(data.get('default_route') or ""),
    )


def dump_config(config: RouterConfig) -> str:
    """Serialize a configuration to YAML text."""
    return yaml.safe_dump(to_dict(config), default_flow_style=False, sort_keys=False)


def load_config(config_file: Path) -> RouterConfig:
    """Load configuration from a YAML file."""
    try:
        with open(config_file) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Failed to read config file {config_file}: {e}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse config file {config_file}: {e}")

    # An empty file parses to None
    return from_dict(data or {})


def save_config(config: RouterConfig, *config_files: Path) -> None:
    """Save configuration to every given file."""
    text = dump_config(config)
    for config_file in config_files:
        config_file = Path(config_file)
        try:
            config_file.parent.mkdir(parents=True, exist_ok=True)
            config_file.write_text(text)
        except OSError as e:
            raise ConfigError(f"Failed to write {config_file}: {e}")


def load_or_create_config(boot_file: Path, running_file: Path) -> RouterConfig:
    """Load the boot configuration, writing a default one if it is missing."""
    if not Path(boot_file).exists():
        config = RouterConfig()
        save_config(config, boot_file, running_file)
        return config
    return load_config(boot_file)


def backup_config(config: RouterConfig, backup_dir: Path) -> Path:
    """Write a timestamped copy of the configuration into backup_dir."""
    backup_dir = Path(backup_dir)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    backup_file = backup_dir / f"config_{stamp}.yaml"
    save_config(config, backup_file)
    return backup_file


def copy_config(source: Path, dest: Path) -> None:
    """Copy a configuration file verbatim (e.g., running over boot)."""
    try:
        shutil.copyfile(source, dest)
    except OSError as e:
        raise ConfigError(f"Failed to copy {source} to {dest}: {e}")
