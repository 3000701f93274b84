"""
Tab completion for the configuration shell.

CompletionEngine resolves completions for a raw line and cursor position
against a command tree. It never raises: unknown paths, leaves and value
slots all come back as an empty result. TreeCompleter adapts the engine
to prompt_toolkit.
"""

import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

from prompt_toolkit.completion import Completer, Completion

from .menu import CommandNode

# Typed on its own, lists the candidates instead of completing
HELP_TRIGGER = "?"


@dataclass
class CompletionResult:
    """Insertable completions and the position they are anchored at."""
    candidates: list[str] = field(default_factory=list)
    start: int = 0


class CompletionEngine:
    """Resolves next-token completions by walking a command tree."""

    def __init__(self, root: CommandNode, output: Optional[TextIO] = None):
        self.root = root
        self.output = output

    def complete(self, line: str, cursor_pos: int) -> CompletionResult:
        """
        Compute completions for the word under the cursor.

        Args:
            line: Full line buffer
            cursor_pos: Cursor offset into line

        Returns:
            CompletionResult whose candidates are the remaining characters
            of each matching token plus a trailing space, sorted.
        """
        # Find the start of the current word
        start = cursor_pos
        while start > 0 and line[start - 1] != ' ':
            start -= 1
        prefix = line[start:cursor_pos]
        tokens = line[:start].split()

        # Just typed a space: list the next level with no prefix
        if cursor_pos > 0 and line[cursor_pos - 1] == ' ':
            tokens.append("")
            prefix = ""
            start = cursor_pos

        if prefix == HELP_TRIGGER:
            self._print_candidates(self.resolve(tokens, ""))
            return CompletionResult(start=cursor_pos)

        completions = self.resolve(tokens, prefix)
        if not completions:
            return CompletionResult(start=cursor_pos)

        completions.sort()
        return CompletionResult(
            candidates=[(comp + " ")[len(prefix):] for comp in completions],
            start=start,
        )

    def resolve(self, tokens: list[str], prefix: str) -> list[str]:
        """Return child tokens of the node reached by tokens that start with prefix."""
        node = self.root
        for token in tokens:
            if token == "":
                # Empty token doesn't descend (right after a space)
                break
            if not node.has_children:
                return []
            child = node.child(token)
            if child is None:
                return []
            node = child

        # Leaves and value slots offer nothing
        if not node.has_children:
            return []

        matches = [key for key in node.children if key.startswith(prefix)]

        # A single match is authoritative
        if len(matches) == 1:
            return matches

        return matches

    def _print_candidates(self, candidates: list[str]) -> None:
        if not candidates:
            return
        out = self.output or sys.stdout
        out.write("\n")
        for cand in sorted(candidates):
            out.write(f"  {cand}\n")
        out.flush()


class TreeCompleter(Completer):
    """prompt_toolkit completer backed by a CompletionEngine."""

    def __init__(self, engine: CompletionEngine):
        self.engine = engine

    def get_completions(self, document, complete_event):
        line = document.text
        cursor_pos = document.cursor_position
        result = self.engine.complete(line, cursor_pos)

        typed = line[result.start:cursor_pos]
        for suffix in result.candidates:
            # Insert only the untyped remainder at the cursor
            yield Completion(suffix, start_position=0, display=(typed + suffix).rstrip())
