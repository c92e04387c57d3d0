"""
notation/classifier.py

Maps component-name tokens to component kinds by case-insensitive
prefix matching, e.g. "Kd1" -> switch_closed, "R2" -> resistor.
"""

import logging
from dataclasses import dataclass

from models.component import DEFAULT_KIND

logger = logging.getLogger(__name__)

# (prefix, kind) rules, tested in order. A longer prefix must come before
# any shorter prefix sharing its first letter ("rb" before "r").
_PREFIX_RULES = [
    ("rb", "variable_resistor"),
    ("kd", "switch_closed"),
    ("km", "switch_open"),
    ("led", "led"),
    ("đ", "bulb"),
    ("cc", "fuse"),
    ("ch", "bell"),
    ("r", "resistor"),
    ("u", "battery"),
    ("c", "capacitor"),
    ("l", "inductor"),
    ("a", "ammeter"),
    ("v", "voltmeter"),
    ("d", "diode"),
]


@dataclass(frozen=True)
class Classification:
    """Result of classifying a component name."""

    kind: str
    label: str
    matched: bool = True


def classify(token: str) -> Classification:
    """Classify a component name.

    Args:
        token: Raw component-name text as typed by the user.

    Returns:
        Classification with the matched kind and the original text as label.
        Names matching no rule get DEFAULT_KIND with matched=False.
    """
    lower = token.lower()
    for prefix, kind in _PREFIX_RULES:
        if lower.startswith(prefix):
            return Classification(kind=kind, label=token)

    logger.debug("No classification rule for %r, using %s", token, DEFAULT_KIND)
    return Classification(kind=DEFAULT_KIND, label=token, matched=False)


def get_prefix_rules() -> list[tuple[str, str]]:
    """Return a copy of the ordered (prefix, kind) rule table."""
    return list(_PREFIX_RULES)
