"""
CSS value parser - a small expression tree for declaration values.

`var(--brand, #000)` parses to:

    FunctionNode("var", [WordNode("--brand"), SeparatorNode(", "), WordNode("#000")])

The tree is enough to find variable references and to substitute
function calls; it does not try to understand CSS grammar beyond
words, separators and parenthesized calls.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Union


@dataclass
class WordNode:
    """A run of characters that is not a separator or a parenthesis."""

    value: str


@dataclass
class SeparatorNode:
    """Whitespace and/or commas between words (normalized on parse)."""

    value: str


@dataclass
class FunctionNode:
    """A call like `var(...)` or a bare parenthesized group (empty name)."""

    value: str
    nodes: list[ValueNode] = field(default_factory=list)


ValueNode = Union[WordNode, SeparatorNode, FunctionNode]


class WalkAction(str, Enum):
    """What `walk` should do after visiting a node."""

    CONTINUE = "continue"
    SKIP = "skip"  # Do not descend into this node's children
    STOP = "stop"  # Abort the whole walk


def _normalize_separator(text: str) -> str:
    """Collapse a separator run: commas keep a single trailing space."""
    if "," in text:
        return ", "
    return " "


def parse(value: str) -> list[ValueNode]:
    """Parse a CSS value into a list of nodes."""
    root: list[ValueNode] = []
    stack: list[FunctionNode] = []
    buffer: list[str] = []
    separator: list[str] = []
    quote: str | None = None

    def current() -> list[ValueNode]:
        return stack[-1].nodes if stack else root

    def flush_word() -> None:
        if buffer:
            current().append(WordNode("".join(buffer)))
            buffer.clear()

    def flush_separator() -> None:
        if separator:
            current().append(SeparatorNode(_normalize_separator("".join(separator))))
            separator.clear()

    for char in value:
        if quote is not None:
            buffer.append(char)
            if char == quote:
                quote = None
            continue

        if char in ("'", '"'):
            flush_separator()
            quote = char
            buffer.append(char)
        elif char == "(":
            flush_separator()
            name = "".join(buffer)
            buffer.clear()
            node = FunctionNode(name)
            current().append(node)
            stack.append(node)
        elif char == ")":
            flush_word()
            separator.clear()  # Trailing whitespace inside a call is dropped
            if stack:
                stack.pop()
            else:
                buffer.append(char)
        elif char == "," or char.isspace():
            flush_word()
            if char == "," or current():
                separator.append(char)
        else:
            flush_separator()
            buffer.append(char)

    flush_word()
    return root


def to_css(nodes: list[ValueNode]) -> str:
    """Print nodes back to CSS text."""
    out: list[str] = []
    for node in nodes:
        if isinstance(node, FunctionNode):
            out.append(f"{node.value}({to_css(node.nodes)})")
        else:
            out.append(node.value)
    return "".join(out)


def walk(
    nodes: list[ValueNode],
    visit: Callable[[ValueNode], WalkAction | None],
) -> bool:
    """
    Depth-first walk over nodes.

    Returns False if the walk was stopped early.
    """
    for node in nodes:
        action = visit(node) or WalkAction.CONTINUE
        if action == WalkAction.STOP:
            return False
        if action == WalkAction.SKIP:
            continue
        if isinstance(node, FunctionNode) and not walk(node.nodes, visit):
            return False
    return True


def map_nodes(
    nodes: list[ValueNode],
    transform: Callable[[ValueNode], ValueNode | None],
) -> list[ValueNode]:
    """
    Rebuild a tree, replacing nodes where `transform` returns a node.

    Children of replaced nodes are not visited.
    """
    result: list[ValueNode] = []
    for node in nodes:
        replacement = transform(node)
        if replacement is not None:
            result.append(replacement)
        elif isinstance(node, FunctionNode):
            result.append(FunctionNode(node.value, map_nodes(node.nodes, transform)))
        else:
            result.append(node)
    return result


def variable_references(value: str) -> list[str]:
    """Names of all variables referenced via `var()` in a value, in order."""
    names: list[str] = []

    def visit(node: ValueNode) -> WalkAction | None:
        if isinstance(node, FunctionNode) and node.value == "var" and node.nodes:
            first = node.nodes[0]
            if isinstance(first, WordNode):
                names.append(first.value)
        return None

    walk(parse(value), visit)
    return names
