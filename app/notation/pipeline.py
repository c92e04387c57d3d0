"""
notation/pipeline.py

Entry point turning notation text into a CircuitLayout:
text -> tokens -> expression tree -> placed components and wires.
"""

import logging
from typing import Optional

from models.circuit import CircuitLayout

from .layout import layout_tree
from .parser import NotationParser
from .settings import LayoutSettings
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


def parse_notation_with_warnings(
    text: str, settings: Optional[LayoutSettings] = None
) -> tuple[CircuitLayout, list[str]]:
    """Parse and lay out notation, also returning the parser's recoveries.

    Same contract as parse_notation(). The warnings list is empty for
    well-formed input and for blank text.

    Returns:
        (layout, warnings)
    """
    if not text or not text.strip():
        return CircuitLayout(), []

    warnings: list[str] = []
    try:
        parser = NotationParser(tokenize(text.strip()))
        tree = parser.parse()
        warnings = parser.warnings
        if tree is None:
            return CircuitLayout(), warnings
        if warnings:
            logger.debug("Parsed %r with %d recoveries", text, len(warnings))
        return layout_tree(tree, settings), warnings
    except Exception as e:
        logger.error("Failed to parse notation %r: %s", text, e, exc_info=True)
        return CircuitLayout(), warnings


def parse_notation(text: str, settings: Optional[LayoutSettings] = None) -> CircuitLayout:
    """Parse circuit notation and lay it out as a schematic.

    Malformed input is recovered from with placeholder components, so a
    partially typed notation still produces a diagram. Any unexpected
    failure is logged and yields an empty layout; this function does not
    raise.

    Args:
        text: Notation such as "R//R1nt(R2//R3)".
        settings: Layout geometry (defaults if None).

    Returns:
        CircuitLayout with fresh ids, numbered from 0 for every call.
    """
    layout, _warnings = parse_notation_with_warnings(text, settings)
    return layout
