"""
notation/nodes.py

Expression tree produced by the notation parser.

A tree is built from four node types:
    ComponentNode   a classified component, e.g. R1 -> resistor
    UnresolvedNode  placeholder for a missing or malformed operand
    SeriesNode      children connected end to end, drawn left to right
    ParallelNode    children connected between the same two rails
"""

from dataclasses import dataclass
from typing import Iterator, Union

from models.component import DEFAULT_KIND

# Label shown for placeholder leaves
PLACEHOLDER_LABEL = "?"


@dataclass(frozen=True)
class ComponentNode:
    kind: str
    label: str


@dataclass(frozen=True)
class UnresolvedNode:
    """Placeholder leaf for an operand the parser could not read.

    ``text`` holds the offending token text ("" when input ended early).
    It is laid out like a component of the default kind labelled "?".
    """

    text: str = ""

    @property
    def kind(self) -> str:
        return DEFAULT_KIND

    @property
    def label(self) -> str:
        return PLACEHOLDER_LABEL


@dataclass(frozen=True)
class SeriesNode:
    children: tuple["Node", ...]


@dataclass(frozen=True)
class ParallelNode:
    children: tuple["Node", ...]


Node = Union[ComponentNode, UnresolvedNode, SeriesNode, ParallelNode]
Leaf = Union[ComponentNode, UnresolvedNode]


def is_leaf(node: Node) -> bool:
    return isinstance(node, (ComponentNode, UnresolvedNode))


def make_series(children: list[Node]) -> Node:
    """Build a series node, collapsing a single child to itself."""
    if not children:
        raise ValueError("A series group needs at least one child.")
    if len(children) == 1:
        return children[0]
    return SeriesNode(tuple(children))


def make_parallel(children: list[Node]) -> Node:
    """Build a parallel node, collapsing a single child to itself."""
    if not children:
        raise ValueError("A parallel group needs at least one child.")
    if len(children) == 1:
        return children[0]
    return ParallelNode(tuple(children))


def iter_leaves(node: Node) -> Iterator[Leaf]:
    """Yield the leaves of a tree in left-to-right (top-to-bottom) order."""
    if is_leaf(node):
        yield node
        return
    for child in node.children:
        yield from iter_leaves(child)


def count_leaves(node: Node) -> int:
    return sum(1 for _ in iter_leaves(node))


def iter_unresolved(node: Node) -> Iterator[UnresolvedNode]:
    """Yield the placeholder leaves of a tree."""
    for leaf in iter_leaves(node):
        if isinstance(leaf, UnresolvedNode):
            yield leaf


def describe_tree(node: Node, indent: int = 0) -> list[str]:
    """Render a tree as indented text lines, one node per line."""
    pad = "  " * indent
    if isinstance(node, ComponentNode):
        return [f"{pad}{node.label} ({node.kind})"]
    if isinstance(node, UnresolvedNode):
        detail = f" near {node.text!r}" if node.text else ""
        return [f"{pad}{PLACEHOLDER_LABEL} (unresolved{detail})"]

    name = "series" if isinstance(node, SeriesNode) else "parallel"
    lines = [f"{pad}{name}"]
    for child in node.children:
        lines.extend(describe_tree(child, indent + 1))
    return lines
