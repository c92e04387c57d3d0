"""
notation/formatter.py

Renders an expression tree back into notation text.
Inverse of parser.py for well-formed trees.
"""

from .nodes import PLACEHOLDER_LABEL, ComponentNode, Node, ParallelNode, SeriesNode, UnresolvedNode
from .tokenizer import PARALLEL_OPERATOR, SERIES_OPERATOR


def _needs_parens(child: Node, parent: Node) -> bool:
    """Groups nested in groups are bracketed, except parallel inside series."""
    if not isinstance(child, (SeriesNode, ParallelNode)):
        return False
    return not (isinstance(child, ParallelNode) and isinstance(parent, SeriesNode))


def _series_separator(following: str) -> str:
    # A bare 'nt' followed by a digit or symbol is read as part of the name
    if following[:1] == "(" or following[:1].isalpha():
        return SERIES_OPERATOR
    return f" {SERIES_OPERATOR} "


def format_notation(node: Node) -> str:
    """Render a tree as canonical notation text.

    Series children are joined with 'nt', parallel children with '//'.
    When the next operand starts with a digit or symbol the series
    operator is padded with spaces (e.g. "R1 nt 5"), so that the text
    re-parses to the same tree. Placeholder leaves are written as '?'.
    """
    if isinstance(node, ComponentNode):
        return node.label
    if isinstance(node, UnresolvedNode):
        return PLACEHOLDER_LABEL

    parts = []
    for child in node.children:
        text = format_notation(child)
        if _needs_parens(child, node):
            text = f"({text})"
        parts.append(text)

    if isinstance(node, ParallelNode):
        return PARALLEL_OPERATOR.join(parts)

    result = parts[0]
    for text in parts[1:]:
        result += _series_separator(text) + text
    return result
