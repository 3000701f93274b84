"""
Session context and prompt utilities for the configuration shell.

This module contains:
- SessionContext: Holds the staged configuration for one shell session
- get_prompt_text: Generates the prompt string, marking unsaved changes
"""

from dataclasses import dataclass

from nehv_lib.config import ConfigManager, PROMPT


@dataclass
class SessionContext:
    """Tracks the staged configuration for one shell session."""
    manager: ConfigManager

    @property
    def config(self):
        return self.manager.config

    @property
    def dirty(self) -> bool:
        return self.manager.dirty


def get_prompt_text(ctx: SessionContext) -> str:
    """Generate the prompt string; '*' marks unsaved changes."""
    if ctx.dirty:
        return PROMPT.replace(")#", ")*#")
    return PROMPT
