"""
nehv_lib.config - Network configuration dataclasses and utilities.

This package contains:
- dataclasses: Configuration data structures (RouterConfig, InterfaceConfig)
- validation: IP address, CIDR and MAC validation functions
- constants: Path constants (BOOT_CONFIG_FILE, RUNNING_CONFIG_FILE, etc.)
- serialization: YAML save/load functions
- manager: ConfigManager holding the staged configuration
"""

from .constants import (
    BOOT_CONFIG_FILE,
    RUNNING_CONFIG_FILE,
    BACKUP_DIR,
    HISTORY_FILE,
    PROMPT,
)

from .validation import (
    validate_ip,
    validate_cidr,
    validate_ip_or_cidr,
    validate_dns_address,
    validate_mac,
)

from .dataclasses import (
    InterfaceConfig,
    RouterConfig,
)

from .serialization import (
    ConfigError,
    to_dict,
    from_dict,
    dump_config,
    load_config,
    save_config,
    load_or_create_config,
    backup_config,
    copy_config,
)

from .manager import ConfigManager

__all__ = [
    # Constants
    'BOOT_CONFIG_FILE',
    'RUNNING_CONFIG_FILE',
    'BACKUP_DIR',
    'HISTORY_FILE',
    'PROMPT',
    # Validation
    'validate_ip',
    'validate_cidr',
    'validate_ip_or_cidr',
    'validate_dns_address',
    'validate_mac',
    # Dataclasses
    'InterfaceConfig',
    'RouterConfig',
    # Serialization
    'ConfigError',
    'to_dict',
    'from_dict',
    'dump_config',
    'load_config',
    'save_config',
    'load_or_create_config',
    'backup_config',
    'copy_config',
    # Manager
    'ConfigManager',
]
