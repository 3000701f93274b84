"""
System apply actions.

Functions that push the staged configuration onto the running system:
the resolver file, the name-resolution services and the default route.
Each action returns a (success, message) tuple.
"""

import os
import subprocess
from pathlib import Path
from typing import List, Optional, Tuple


DEFAULT_RESOLV_CONF = Path("/etc/resolv.conf")

# Restarted in this order
NAME_SERVICES = ["resolvconf.service", "systemd-resolved.service"]


def resolv_conf_path() -> Path:
    """Resolver file path, overridable with the RESOLV_CONF environment variable."""
    return Path(os.environ.get("RESOLV_CONF", str(DEFAULT_RESOLV_CONF)))


def run_command(args: List[str], timeout: int = 30) -> Tuple[bool, str]:
    """
    Execute an external command and capture output.

    Args:
        args: Command and arguments (e.g., ["ip", "route", "show"])
        timeout: Seconds to wait before giving up

    Returns:
        Tuple of (success: bool, output: str)
        On failure, output contains the error message.
    """
    try:
        result = subprocess.run(
            args,
            capture_output=True,
            text=True,
            timeout=timeout
        )
    except subprocess.TimeoutExpired:
        return False, f"Command timed out: {' '.join(args)}"
    except OSError as e:
        return False, str(e)

    if result.returncode != 0:
        message = result.stderr.strip() or f"exit status {result.returncode}"
        return False, message
    return True, result.stdout.strip()


def write_resolv_conf(servers: List[str], path: Optional[Path] = None) -> Tuple[bool, str]:
    """
    Write nameserver entries for the given DNS servers.

    Args:
        servers: DNS server addresses, in preference order
        path: Resolver file to write (default: resolv_conf_path())

    Returns:
        Tuple of (success: bool, message: str)
    """
    target = Path(path) if path else resolv_conf_path()
    content = "nameserver " + "\nnameserver ".join(servers)
    try:
        target.write_text(content)
    except OSError as e:
        return False, f"{target}: {e}"
    return True, f"Wrote {len(servers)} nameserver(s) to {target}"


def restart_name_services() -> Tuple[bool, str]:
    """Restart the name-resolution services, stopping at the first failure."""
    for service in NAME_SERVICES:
        ok, output = run_command(["sudo", "systemctl", "restart", service])
        if not ok:
            return False, f"{service}: {output}"
    return True, "Name services restarted"


def add_default_route(gateway: str) -> Tuple[bool, str]:
    """Install a default route via the given gateway."""
    ok, output = run_command(["sudo", "ip", "route", "add", "default", "via", gateway])
    if not ok:
        return False, output
    return True, f"Default route via {gateway}"
