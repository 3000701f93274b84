"""
Configuration constants for the configuration shell.

Paths and default values used across the configuration system.
"""

from pathlib import Path


# Configuration file paths (relative to the working directory)
BOOT_CONFIG_FILE = Path("boot.config.yaml")
RUNNING_CONFIG_FILE = Path("running.config.yaml")
BACKUP_DIR = Path("backup")

# Interactive session
HISTORY_FILE = Path.home() / ".nehv_configure_history"
PROMPT = "(config)# "

DEFAULT_HOSTNAME = "vyos-router"

# Version information shown by 'show version'
BUILD_DATE = "unknown"
AUTHOR = "nehv"
