"""
notation/parser.py

Parser turning notation tokens into an expression tree.

Grammar:
    Expression    := SeriesChain
    SeriesChain   := ParallelGroup ( ['nt'] ParallelGroup )*
    ParallelGroup := Atom ( '//' Atom )*
    Atom          := '(' Expression ')' | component-name

Parallel binds tighter than series, and a missing 'nt' between two groups
still joins them in series. Parenthesised groups are tracked on an explicit
stack rather than by recursion, so nesting depth is not limited by the
interpreter's recursion limit.

The parser never raises on malformed input: problems become UnresolvedNode
placeholders and are recorded in NotationParser.warnings.
"""

import logging
from typing import Optional

from .classifier import classify
from .nodes import ComponentNode, Node, SeriesNode, UnresolvedNode, make_parallel, make_series
from .tokenizer import Token, TokenKind, tokenize

logger = logging.getLogger(__name__)

# What the parser expects next within the current group
_GROUP_START = "group-start"  # start of a series item; ')' or end close quietly
_OPERAND = "operand"  # right after '//'; a component is required
_AFTER_OPERAND = "after-operand"


class _Group:
    """One open group: the top level, or a '(' waiting for its ')'."""

    def __init__(self, opener: Optional[Token] = None):
        self.opener = opener
        self.series: list[Node] = []
        self.parallel: list[Node] = []
        self.segments: list[Node] = []  # top level: series read before a stray ')'

    def end_parallel(self) -> None:
        if self.parallel:
            self.series.append(make_parallel(self.parallel))
            self.parallel = []

    def result(self) -> Optional[Node]:
        self.end_parallel()
        if not self.series:
            return None
        return make_series(self.series)

    def end_segment(self) -> None:
        """Set aside the series read so far; reading continues in series with it."""
        node = self.result()
        self.series = []
        if isinstance(node, SeriesNode):
            self.segments.extend(node.children)
        elif node is not None:
            self.segments.append(node)


class NotationParser:
    """Single-pass parser over a token list.

    Usage::

        parser = NotationParser(tokenize("R1nt(R2//R3)"))
        tree = parser.parse()
        parser.warnings  # recoveries made along the way
    """

    def __init__(self, tokens: list[Token]):
        self._tokens = tokens
        self._pos = 0
        self.warnings: list[str] = []

    # --- Public API ---

    def parse(self) -> Optional[Node]:
        """Parse the whole token list.

        Returns:
            The expression tree, or None if there is nothing to parse.
        """
        groups = [_Group()]
        state = _GROUP_START

        while not self._at_end():
            group = groups[-1]
            token = self._peek()

            if state == _AFTER_OPERAND:
                if token.kind == TokenKind.PARALLEL_OPERATOR:
                    self._pos += 1
                    state = _OPERAND
                    continue
                if token.kind == TokenKind.PAREN_CLOSE:
                    state = self._close_group(groups)
                    continue
                group.end_parallel()
                state = _GROUP_START
                if token.kind == TokenKind.SERIES_OPERATOR:
                    self._pos += 1
                    if self._at_end() or self._peek().kind == TokenKind.PAREN_CLOSE:
                        self._warn(f"trailing series operator at offset {token.offset}")
                # Otherwise a name or '(' follows directly: implicit series
                continue

            if token.kind == TokenKind.PAREN_CLOSE and state == _GROUP_START:
                state = self._close_group(groups)
                continue

            if token.kind == TokenKind.PAREN_OPEN:
                self._pos += 1
                groups.append(_Group(token))
                state = _GROUP_START
                continue

            if token.kind == TokenKind.COMPONENT_NAME:
                self._pos += 1
                comp = classify(token.text)
                group.parallel.append(ComponentNode(kind=comp.kind, label=comp.label))
            else:
                # Stray operator or ')': placeholder without consuming the token
                self._warn(f"expected a component before {token.text!r} at offset {token.offset}")
                group.parallel.append(UnresolvedNode(token.text))
            state = _AFTER_OPERAND

        if state == _OPERAND:
            self._warn("expected a component at end of input")
            groups[-1].parallel.append(UnresolvedNode(""))

        while len(groups) > 1:
            group = groups.pop()
            self._warn(f"unclosed '(' at offset {group.opener.offset}")
            groups[-1].parallel.append(self._group_node(group))

        top = groups[0]
        top.end_segment()
        if not top.segments:
            return None
        return make_series(top.segments)

    # --- Helpers ---

    def _close_group(self, groups: list[_Group]) -> str:
        """Handle a ')' and return the state to continue in."""
        token = self._peek()
        self._pos += 1

        if len(groups) == 1:
            self._warn(f"unmatched ')' at offset {token.offset}")
            groups[0].end_segment()
            return _GROUP_START

        group = groups.pop()
        groups[-1].parallel.append(self._group_node(group))
        return _AFTER_OPERAND

    def _group_node(self, group: _Group) -> Node:
        node = group.result()
        if node is None:
            self._warn(f"empty group at offset {group.opener.offset}")
            return UnresolvedNode("()")
        return node

    def _at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    def _peek(self) -> Token:
        return self._tokens[self._pos]

    def _warn(self, message: str) -> None:
        logger.debug("Notation recovery: %s", message)
        self.warnings.append(message)


def parse_tokens(tokens: list[Token]) -> Optional[Node]:
    """Parse a token list into an expression tree (None if empty)."""
    return NotationParser(tokens).parse()


def parse_expression(text: str) -> Optional[Node]:
    """Tokenize and parse notation text into an expression tree."""
    return parse_tokens(tokenize(text))
