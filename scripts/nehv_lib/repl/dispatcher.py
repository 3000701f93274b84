"""
Command dispatcher for the configuration shell.

Maps a submitted line to its handler. Unrecognized lines are reported
here, after submission, never during completion.
"""

from nehv_lib.common import warn, prompt_yes_no

from .commands import (
    cmd_set_dns,
    cmd_add_dns,
    cmd_set_interface,
    cmd_set_default_route,
    cmd_set_hostname,
    cmd_save,
    cmd_commit,
    cmd_help,
)
from .context import SessionContext
from .display import show_dns, show_config, show_interfaces, show_version


def handle_command(line: str, ctx: SessionContext) -> bool:
    """
    Handle a command. Returns False if should exit the shell.
    """
    fields = line.split()
    if not fields:
        return True

    if fields == ["exit"]:
        if ctx.dirty and not prompt_yes_no("Discard unsaved changes?"):
            return True
        return False

    if fields in (["help"], ["?"]):
        cmd_help(ctx, [])
        return True

    if fields == ["save"]:
        cmd_save(ctx, [])
        return True

    if fields == ["commit"]:
        cmd_commit(ctx, [])
        return True

    command, args = fields[0], fields[1:]

    if command == "set" and args:
        if len(args) == 2 and args[0] == "dns":
            cmd_set_dns(ctx, args[1:])
            return True
        if len(args) == 2 and args[0] == "hostname":
            cmd_set_hostname(ctx, args[1:])
            return True
        if len(args) >= 3 and args[0] == "interfaces":
            cmd_set_interface(ctx, args[1:])
            return True
        if len(args) == 5 and args[:4] == ["ip", "route", "default", "via"]:
            cmd_set_default_route(ctx, args[4:])
            return True

    if command == "add" and len(args) == 2 and args[0] == "dns":
        cmd_add_dns(ctx, args[1:])
        return True

    if command == "show" and len(args) == 1:
        target = args[0]
        if target == "dns":
            show_dns(ctx.config)
            return True
        if target == "config":
            show_config(ctx.config)
            return True
        if target == "interfaces":
            show_interfaces(ctx.config)
            return True
        if target == "version":
            show_version()
            return True

    warn(f"Unknown command: {' '.join(fields)}")
    print("Type 'help' for available commands")
    return True
