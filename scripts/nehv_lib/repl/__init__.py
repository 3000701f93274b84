"""
nehv_lib.repl - Interactive shell components

This package contains the modular components of the configuration shell:
- menu: Command tree structure
- completer: Completion engine and prompt_toolkit adapter
- context: Session state tracking
- display: Configuration display functions
- commands/: Command handlers
- dispatcher: Maps submitted lines to command handlers
"""

from .context import SessionContext, get_prompt_text
from .menu import CommandNode, NodeKind, build_command_tree
from .completer import CompletionEngine, CompletionResult, TreeCompleter
from .dispatcher import handle_command

__all__ = [
    'SessionContext',
    'get_prompt_text',
    'CommandNode',
    'NodeKind',
    'build_command_tree',
    'CompletionEngine',
    'CompletionResult',
    'TreeCompleter',
    'handle_command',
]
