"""
nehv_lib.common - Shared utilities for the configuration shell

This module provides:
- colors: ANSI color codes and logging functions
- system: Actions that apply configuration to the running system
- prompts: Interactive confirmation prompts
"""

from .colors import Colors, log, warn, error, info
from .system import (
    run_command,
    write_resolv_conf,
    restart_name_services,
    add_default_route,
)
from .prompts import prompt_yes_no

__all__ = [
    'Colors', 'log', 'warn', 'error', 'info',
    'run_command', 'write_resolv_conf', 'restart_name_services', 'add_default_route',
    'prompt_yes_no',
]
