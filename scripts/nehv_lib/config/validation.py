"""
Validation functions for network configuration.

IP address, CIDR and MAC address validation utilities.
"""

import ipaddress
import re


MAC_PATTERN = re.compile(r"^([0-9A-Fa-f]{2}:){5}[0-9A-Fa-f]{2}$")


def validate_ip(ip: str) -> bool:
    """Validate an IPv4 or IPv6 address."""
    try:
        ipaddress.ip_address(ip)
        return True
    except ValueError:
        return False


def validate_cidr(cidr: str) -> bool:
    """Validate an IPv4 or IPv6 CIDR notation (host bits may be set)."""
    if "/" not in cidr:
        return False
    try:
        ipaddress.ip_network(cidr, strict=False)
        return True
    except ValueError:
        return False


def validate_ip_or_cidr(value: str) -> bool:
    """Validate an address with optional /prefix."""
    if "/" in value:
        return validate_cidr(value)
    return validate_ip(value)


def validate_dns_address(value: str) -> bool:
    """DNS servers accept the same forms as interface addresses."""
    return validate_ip_or_cidr(value)


def validate_mac(mac: str) -> bool:
    """Validate a colon-separated MAC address (XX:XX:XX:XX:XX:XX)."""
    return bool(MAC_PATTERN.fullmatch(mac))
