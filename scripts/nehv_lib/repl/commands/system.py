"""
Save, commit and help commands for the configuration shell.

Commit applies the staged configuration to the running system in three
steps (resolver file, name services, default route) and stops at the
first step that fails. The resolver file is left alone when no DNS
servers are staged.
"""

from nehv_lib.common import (
    Colors,
    log,
    warn,
    error,
    write_resolv_conf,
    restart_name_services,
    add_default_route,
)
from nehv_lib.config import ConfigError


def cmd_save(ctx, args: list[str]) -> None:
    """Save configuration to the boot and running files."""
    try:
        ctx.manager.save()
    except ConfigError as e:
        error(f"Failed to save configuration: {e}")
        return
    log("Configuration saved successfully")


def cmd_commit(ctx, args: list[str]) -> bool:
    """Apply the staged configuration to the system. Returns True on success."""
    config = ctx.config

    if config.dns:
        ok, msg = write_resolv_conf(config.dns)
        if not ok:
            error(f"Failed to write resolv.conf: {msg}")
            return False
    else:
        warn("No DNS servers configured, leaving resolv.conf unchanged")

    ok, msg = restart_name_services()
    if not ok:
        error(f"Failed to restart services: {msg}")
        return False

    if config.default_route:
        ok, msg = add_default_route(config.default_route)
        if not ok:
            error(f"Failed to set default route: {msg}")
            return False

    log("Configuration applied successfully")
    return True


def cmd_help(ctx, args: list[str]) -> None:
    """Show the command reference."""
    print()
    print(f"{Colors.BOLD}Available Commands:{Colors.NC}")
    print()
    print(f"  {Colors.CYAN}Configuration:{Colors.NC}")
    print("    set dns <address>                       Set DNS address")
    print("    add dns <address>                       Add DNS address")
    print("    set interfaces <iface> address <ip[/prefix]>")
    print("                                            Set interface IP address")
    print("    set interfaces <iface> mac <address>    Set interface MAC address")
    print("    set ip route default via <ip>           Set default route")
    print("    set hostname <name>                     Set hostname")
    print()
    print(f"  {Colors.CYAN}Display:{Colors.NC}")
    print("    show dns                                Show current DNS settings")
    print("    show config                             Show current configuration")
    print("    show interfaces                         Show interface settings")
    print("    show version                            Show version information")
    print()
    print(f"  {Colors.CYAN}Actions:{Colors.NC}")
    print("    save                                    Save current configuration")
    print("    commit                                  Apply current configuration")
    print("    exit                                    Exit configuration mode")
    print("    help, ?                                 Show this help message")
    print()
    print("  Press Tab to complete, or type '?' after a word to list options")
    print()
