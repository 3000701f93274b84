"""
DNS commands for the configuration shell.
"""

from nehv_lib.common import log, warn, error
from nehv_lib.config import validate_dns_address


def cmd_set_dns(ctx, args: list[str]) -> None:
    """Replace the DNS server list with a single server."""
    if len(args) != 1:
        error("Usage: set dns <address>")
        return
    addr = args[0]
    if not validate_dns_address(addr):
        error(f"Invalid DNS address: {addr}")
        return
    ctx.manager.set_dns([addr])
    log(f"Set DNS: {addr}")


def cmd_add_dns(ctx, args: list[str]) -> None:
    """Append a DNS server to the list."""
    if len(args) != 1:
        error("Usage: add dns <address>")
        return
    addr = args[0]
    if not validate_dns_address(addr):
        error(f"Invalid DNS address: {addr}")
        return
    if not ctx.manager.add_dns(addr):
        warn(f"DNS {addr} already configured")
        return
    log(f"Added DNS: {addr}")
