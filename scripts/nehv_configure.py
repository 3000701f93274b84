#!/usr/bin/env python3
"""
nehv_configure.py - Interactive network configuration shell

Router-style shell for DNS, interface addressing and the default route.
Changes are staged in memory until saved to the boot and running
configuration files, and applied to the system with 'commit'.
"""

import argparse
import sys
from pathlib import Path

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from prompt_toolkit.patch_stdout import patch_stdout
from prompt_toolkit.styles import Style

from nehv_lib.common import Colors, log, error, info, prompt_yes_no
from nehv_lib.config import (
    BACKUP_DIR,
    BOOT_CONFIG_FILE,
    HISTORY_FILE,
    RUNNING_CONFIG_FILE,
    ConfigError,
    ConfigManager,
    copy_config,
)
from nehv_lib.repl import (
    CompletionEngine,
    SessionContext,
    TreeCompleter,
    build_command_tree,
    get_prompt_text,
    handle_command,
)


NEHV_STYLE = Style.from_dict({
    'completion-menu.completion': 'bg:#333333 #ffffff',
    'completion-menu.completion.current': 'bg:#00aa00 #000000',
})


# =============================================================================
# Main REPL Loop
# =============================================================================

def run_repl(manager: ConfigManager) -> int:
    """Interactive shell entry point."""
    print()
    print(f"{Colors.BOLD}Network Configuration Mode{Colors.NC}")
    print("Type 'help' for commands, 'exit' to quit")
    print()

    ctx = SessionContext(manager=manager)
    engine = CompletionEngine(build_command_tree())

    session = PromptSession(
        history=FileHistory(str(HISTORY_FILE)),
        completer=TreeCompleter(engine),
        complete_while_typing=False,
        style=NEHV_STYLE,
    )

    # Candidate listings printed during completion land above the prompt
    with patch_stdout():
        while True:
            try:
                line = session.prompt(get_prompt_text(ctx))
                if not handle_command(line, ctx):
                    break

            except KeyboardInterrupt:
                continue
            except EOFError:
                print("exit")
                if ctx.dirty and not prompt_yes_no("Discard unsaved changes?"):
                    continue
                break

    return 0


# =============================================================================
# One-shot Commands
# =============================================================================

def cmd_copy(args) -> int:
    """Copy the running configuration over the boot configuration."""
    try:
        copy_config(args.running_config, args.boot_config)
    except ConfigError as e:
        error(str(e))
        return 1
    log(f"Copied {args.running_config} to {args.boot_config}")
    return 0


def cmd_backup(manager: ConfigManager, args) -> int:
    """Write a timestamped backup of the boot configuration."""
    try:
        backup_file = manager.backup(args.dir)
    except ConfigError as e:
        error(str(e))
        return 1
    log(f"Configuration backed up to {backup_file}")
    return 0


def cmd_restore(manager: ConfigManager, args) -> int:
    """Restore a backup into the boot and running configuration."""
    try:
        manager.restore(args.file)
    except ConfigError as e:
        error(str(e))
        return 1
    log(f"Configuration restored from {args.file}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Configure network settings")
    parser.add_argument("--boot-config", type=Path, default=BOOT_CONFIG_FILE,
                        help=f"Boot configuration file (default: {BOOT_CONFIG_FILE})")
    parser.add_argument("--running-config", type=Path, default=RUNNING_CONFIG_FILE,
                        help=f"Running configuration file (default: {RUNNING_CONFIG_FILE})")

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("copy", help="Copy running configuration to boot configuration")

    backup = subparsers.add_parser("backup", help="Back up the boot configuration")
    backup.add_argument("--dir", type=Path, default=BACKUP_DIR,
                        help=f"Backup directory (default: {BACKUP_DIR})")

    restore = subparsers.add_parser("restore", help="Restore configuration from a backup file")
    restore.add_argument("file", type=Path, help="Backup file to restore")

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "copy":
        return cmd_copy(args)

    manager = ConfigManager(args.boot_config, args.running_config)
    try:
        manager.load()
    except ConfigError as e:
        error(f"Failed to load config: {e}")
        return 1

    if args.command == "backup":
        return cmd_backup(manager, args)
    if args.command == "restore":
        return cmd_restore(manager, args)

    info(f"Loaded configuration from {args.boot_config}")
    return run_repl(manager)


if __name__ == "__main__":
    sys.exit(main())
