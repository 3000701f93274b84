"""
Command tree definition for the configuration shell.

The grammar is a fixed tree of literal tokens. Each node is one of three
kinds:
- BRANCH: offers further literal tokens (its children)
- VALUE_SLOT: expects a free-form value next (an address, a MAC)
- TERMINAL: the command is complete

Only branches have children, so value slots and terminals both yield no
completions. The tree is built once by build_command_tree() and never
modified afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class NodeKind(Enum):
    BRANCH = "branch"
    VALUE_SLOT = "value"
    TERMINAL = "terminal"


@dataclass(frozen=True)
class CommandNode:
    """One token position in the command grammar."""
    kind: NodeKind
    children: Mapping[str, "CommandNode"] = field(default_factory=lambda: MappingProxyType({}))
    hint: str = ""  # What a value slot expects (e.g., "<address>")

    @property
    def is_value_slot(self) -> bool:
        return self.kind is NodeKind.VALUE_SLOT

    @property
    def has_children(self) -> bool:
        return self.kind is NodeKind.BRANCH and bool(self.children)

    def child(self, token: str) -> Optional["CommandNode"]:
        """Exact, case-sensitive lookup of a child token."""
        if not self.has_children:
            return None
        return self.children.get(token)


def branch(children: dict[str, CommandNode]) -> CommandNode:
    """Create a branch node, rejecting tokens that could never be typed."""
    for token in children:
        if not token or any(c.isspace() for c in token):
            raise ValueError(f"Invalid command token: {token!r}")
    return CommandNode(NodeKind.BRANCH, MappingProxyType(dict(children)))


def value_slot(hint: str = "<value>") -> CommandNode:
    return CommandNode(NodeKind.VALUE_SLOT, hint=hint)


def terminal() -> CommandNode:
    return CommandNode(NodeKind.TERMINAL)


def _interface_node() -> CommandNode:
    return branch({
        "address": value_slot("<ip[/prefix]>"),
        "mac": value_slot("<xx:xx:xx:xx:xx:xx>"),
    })


def build_command_tree(interfaces: tuple[str, ...] = ("eth0", "eth1")) -> CommandNode:
    """Build the command grammar rooted at the top-level commands."""
    return branch({
        "set": branch({
            "dns": value_slot("<address>"),
            "interfaces": branch({name: _interface_node() for name in interfaces}),
        }),
        "add": branch({
            "dns": value_slot("<address>"),
        }),
        "show": branch({
            "dns": terminal(),
            "config": terminal(),
            "interfaces": terminal(),
            "version": terminal(),
        }),
        "save": terminal(),
        "exit": terminal(),
        "help": terminal(),
        "?": terminal(),
    })
