"""
nehv_lib.repl.commands - Command handlers for the configuration shell

This package contains command handler functions organized by feature area:
- dns: DNS server list
- interfaces: Interface address and MAC
- routing: Default route and hostname
- system: Save, commit and help
"""

from .dns import cmd_set_dns, cmd_add_dns
from .interfaces import cmd_set_interface
from .routing import cmd_set_default_route, cmd_set_hostname
from .system import cmd_save, cmd_commit, cmd_help

__all__ = [
    'cmd_set_dns', 'cmd_add_dns',
    'cmd_set_interface',
    'cmd_set_default_route', 'cmd_set_hostname',
    'cmd_save', 'cmd_commit', 'cmd_help',
]
