"""
Routing and system identity commands for the configuration shell.
"""

from nehv_lib.common import log, error
from nehv_lib.config import validate_ip


def cmd_set_default_route(ctx, args: list[str]) -> None:
    """Set the default route next-hop."""
    if not args:
        error("Missing IP address for default route")
        return
    gateway = args[0]
    if not validate_ip(gateway):
        error(f"Invalid IP address: {gateway}")
        return
    ctx.manager.set_default_route(gateway)
    log(f"Set default route via {gateway}")


def cmd_set_hostname(ctx, args: list[str]) -> None:
    """Set the router hostname."""
    if len(args) != 1:
        error("Usage: set hostname <name>")
        return
    ctx.manager.set_hostname(args[0])
    log(f"Set hostname: {args[0]}")
