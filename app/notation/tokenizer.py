"""
notation/tokenizer.py

Splits circuit notation text into tokens.

The notation uses:
    nt    series connection (case-insensitive), e.g. R1ntR2
    //    parallel connection, e.g. R1//R2
    ( )   grouping, e.g. R//R1nt(R2//R3)

Everything else is read as a component name. The letters 'nt' can also
occur inside a name, so whether an 'nt' is an operator is decided from
the surrounding context (see tokenize()).
"""

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

SERIES_OPERATOR = "nt"
PARALLEL_OPERATOR = "//"

# Characters that always end a component name
_NAME_DELIMITERS = frozenset("()/")


class TokenKind(Enum):
    """Kinds of notation tokens."""

    COMPONENT_NAME = "component-name"
    SERIES_OPERATOR = "series-operator"
    PARALLEL_OPERATOR = "parallel-operator"
    PAREN_OPEN = "paren-open"
    PAREN_CLOSE = "paren-close"


@dataclass(frozen=True)
class Token:
    """A single notation token with its offset in the source text."""

    kind: TokenKind
    text: str
    offset: int = 0

    def is_value(self) -> bool:
        """True for tokens that can end an operand (a name or a closing paren)."""
        return self.kind in (TokenKind.COMPONENT_NAME, TokenKind.PAREN_CLOSE)


def _series_operator_at(text: str, index: int) -> bool:
    return text[index : index + 2].lower() == SERIES_OPERATOR


def _ends_name_at(text: str, index: int) -> bool:
    """Check whether an 'nt' at index terminates the name being read.

    Inside a name, 'nt' is an operator only when it is followed by the start
    of another operand (a letter or '('), by whitespace, or by the end of the
    text. 'nt' followed by a digit or symbol stays part of the name.
    """
    if not _series_operator_at(text, index):
        return False
    follow = text[index + 2 : index + 3]
    return follow == "" or follow == "(" or follow.isspace() or follow.isalpha()


def tokenize(text: str) -> list[Token]:
    """Split notation text into an ordered list of tokens.

    Recognized in priority order: whitespace (skipped), '(', ')', '//', the
    series operator 'nt', and otherwise a component name that runs until
    whitespace, a parenthesis, '/', or an 'nt' that ends the name.

    At a token boundary 'nt' is the series operator only after a value
    (a component name or ')'). At the start of the text, or after '(' or
    another operator, it begins a component name instead.

    Never raises: malformed input such as a trailing operator or an
    unmatched parenthesis is tokenized as-is and left to the parser.

    Args:
        text: Notation text, e.g. "R//R1nt(R2//R3)".

    Returns:
        List of Token objects in source order.
    """
    tokens: list[Token] = []
    i = 0
    length = len(text)

    while i < length:
        char = text[i]

        if char.isspace():
            i += 1
            continue

        if char == "(":
            tokens.append(Token(TokenKind.PAREN_OPEN, char, i))
            i += 1
            continue

        if char == ")":
            tokens.append(Token(TokenKind.PAREN_CLOSE, char, i))
            i += 1
            continue

        if char == "/":
            if text[i + 1 : i + 2] == "/":
                tokens.append(Token(TokenKind.PARALLEL_OPERATOR, PARALLEL_OPERATOR, i))
                i += 2
            else:
                logger.debug("Skipping lone '/' at offset %d", i)
                i += 1
            continue

        if _series_operator_at(text, i) and tokens and tokens[-1].is_value():
            tokens.append(Token(TokenKind.SERIES_OPERATOR, text[i : i + 2], i))
            i += 2
            continue

        # Component name; the first character always belongs to it
        start = i
        i += 1
        while i < length:
            char = text[i]
            if char.isspace() or char in _NAME_DELIMITERS:
                break
            if _ends_name_at(text, i):
                break
            i += 1
        tokens.append(Token(TokenKind.COMPONENT_NAME, text[start:i], start))

    return tokens
