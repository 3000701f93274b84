"""
Colored status output for the configuration shell.

Every status line is a tag followed by the message: [+] success,
[!] warning, [ERROR] failure, [i] information. Errors go to stderr so the
one-shot subcommands (copy, backup, restore) can be scripted; everything
else is ordinary shell output on stdout. Tags are colored only when the
stream is a terminal and NO_COLOR is unset.
"""

import os
import sys
from typing import TextIO


class Colors:
    """ANSI color escape codes for terminal output."""
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[1;33m"
    CYAN = "\033[0;36m"
    BOLD = "\033[1m"
    NC = "\033[0m"  # No Color / Reset


def use_color(stream: TextIO) -> bool:
    if "NO_COLOR" in os.environ:
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _emit(color: str, tag: str, msg: str, stream: TextIO) -> None:
    if use_color(stream):
        tag = f"{color}{tag}{Colors.NC}"
    print(f"{tag} {msg}", file=stream)


def log(msg: str) -> None:
    """Report a completed change in green."""
    _emit(Colors.GREEN, "[+]", msg, sys.stdout)


def warn(msg: str) -> None:
    """Report a skipped or questionable step in yellow."""
    _emit(Colors.YELLOW, "[!]", msg, sys.stdout)


def error(msg: str) -> None:
    """Report a failed command in red, on stderr."""
    _emit(Colors.RED, "[ERROR]", msg, sys.stderr)


def info(msg: str) -> None:
    _emit(Colors.CYAN, "[i]", msg, sys.stdout)
