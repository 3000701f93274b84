"""
Interface commands for the configuration shell.

Handles 'set interfaces <iface> <param> <value>' where param is
'address' or 'mac'.
"""

from nehv_lib.common import log, error
from nehv_lib.config import validate_ip_or_cidr, validate_mac

USAGE = "Usage: set interfaces <iface> address <ip[/prefix]> | mac <xx:xx:xx:xx:xx:xx>"


def cmd_set_interface(ctx, args: list[str]) -> None:
    """Set an interface address or MAC."""
    if len(args) < 2:
        error("Missing interface parameters")
        print(f"  {USAGE}")
        return

    name, param = args[0], args[1]
    value = args[2] if len(args) > 2 else ""
    iface = ctx.manager.get_interface(name)

    if param == "address":
        if not validate_ip_or_cidr(value):
            error(f"Invalid IP address: {value}")
            return
        iface.address = value
    elif param == "mac":
        if not validate_mac(value):
            error(f"Invalid MAC address: {value} (expected XX:XX:XX:XX:XX:XX)")
            return
        iface.mac = value
    else:
        error(f"Unknown interface parameter: {param}")
        print(f"  {USAGE}")
        return

    ctx.manager.set_interface(name, iface)
    log(f"Set interface {name} {param} to {value}")
