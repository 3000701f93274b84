"""
Configuration display functions for the configuration shell.

These functions display the staged configuration state to the user.
"""

from nehv_lib import __version__
from nehv_lib.common import Colors
from nehv_lib.config import RouterConfig, dump_config
from nehv_lib.config.constants import AUTHOR, BUILD_DATE


def show_dns(config: RouterConfig) -> None:
    """Show configured DNS servers."""
    if not config.dns:
        print("Current DNS: (none)")
        return
    print(f"Current DNS: {', '.join(config.dns)}")


def show_interfaces(config: RouterConfig) -> None:
    """Show interface addressing."""
    print(f"{Colors.BOLD}Interfaces{Colors.NC}")
    if not config.interfaces:
        print("  (none configured)")
        return
    for name in sorted(config.interfaces):
        iface = config.interfaces[name]
        print(f"  {name}:")
        print(f"    address: {iface.address or '(unset)'}")
        if iface.mac:
            print(f"    mac: {iface.mac}")


def show_config(config: RouterConfig) -> None:
    """Show the whole configuration as a YAML document."""
    print("---")
    print(dump_config(config), end="")


def show_version() -> None:
    print(f"Version: {__version__}")
    print(f"Build Date: {BUILD_DATE}")
    print(f"Author: {AUTHOR}")
