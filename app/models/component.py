"""
ComponentData - Pure Python data model for placed schematic components.

This module contains no Qt dependencies. Positions are represented as
tuples (x, y) in scene coordinates, with the component centered on its
position.

Component kinds use lower-case identifiers as canonical names:
'resistor', 'variable_resistor', 'capacitor', 'inductor', 'battery', ...
"""

from dataclasses import dataclass
from typing import Optional

# Component kind definitions (canonical identifiers)
COMPONENT_TYPES = [
    "resistor",
    "variable_resistor",
    "capacitor",
    "inductor",
    "battery",
    "switch_open",
    "switch_closed",
    "bulb",
    "ammeter",
    "voltmeter",
    "fuse",
    "bell",
    "diode",
    "led",
    "wire",
]

# Kind assigned to names that match no classification rule
DEFAULT_KIND = "resistor"

# Human-readable names for each kind
DISPLAY_NAMES = {
    "resistor": "Resistor",
    "variable_resistor": "Variable Resistor",
    "capacitor": "Capacitor",
    "inductor": "Inductor",
    "battery": "Battery",
    "switch_open": "Switch (open)",
    "switch_closed": "Switch (closed)",
    "bulb": "Bulb",
    "ammeter": "Ammeter",
    "voltmeter": "Voltmeter",
    "fuse": "Fuse",
    "bell": "Bell",
    "diode": "Diode",
    "led": "LED",
    "wire": "Wire",
}

# Short labels used in the notation and on the palette
SHORT_LABELS = {
    "resistor": "R",
    "variable_resistor": "Rb",
    "capacitor": "C",
    "inductor": "L",
    "battery": "U",
    "switch_open": "Km",
    "switch_closed": "Kd",
    "bulb": "Đ",
    "ammeter": "A",
    "voltmeter": "V",
    "fuse": "CC",
    "bell": "Ch",
    "diode": "D",
    "led": "LED",
}

COMPONENT_CATEGORIES = {
    "resistor": "passive",
    "variable_resistor": "passive",
    "capacitor": "passive",
    "inductor": "passive",
    "battery": "source",
    "switch_open": "switch",
    "switch_closed": "switch",
    "bulb": "other",
    "ammeter": "meter",
    "voltmeter": "meter",
    "fuse": "other",
    "bell": "other",
    "diode": "other",
    "led": "other",
    "wire": "other",
}

# Bounding box (width, height) including leads, for kinds whose symbol
# does not fit the default 80x40 box
COMPONENT_SIZES = {
    "battery": (80, 50),
    "bulb": (80, 50),
    "ammeter": (80, 50),
    "voltmeter": (80, 50),
    "bell": (80, 50),
}


@dataclass
class ComponentData:
    """
    Pure Python data class representing a placed component.

    This class stores all component data without any Qt dependencies.
    Positions are stored as (x, y) tuples.
    """

    component_id: str
    component_type: str
    label: str
    position: tuple[float, float]  # (x, y) in scene coordinates
    rotation: int = 0  # degrees: 0, 90, 180, 270
    value: Optional[str] = None

    def get_display_name(self) -> str:
        """Return the human-readable name for this component kind."""
        return DISPLAY_NAMES.get(self.component_type, self.component_type)

    def get_category(self) -> str:
        """Return the palette category for this component kind."""
        return COMPONENT_CATEGORIES.get(self.component_type, "other")

    def translated(self, dx: float, dy: float) -> "ComponentData":
        """Return a copy of this component moved by (dx, dy)."""
        return ComponentData(
            component_id=self.component_id,
            component_type=self.component_type,
            label=self.label,
            position=(self.position[0] + dx, self.position[1] + dy),
            rotation=self.rotation,
            value=self.value,
        )

    def to_dict(self) -> dict:
        """
        Serialize component to dictionary.

        Uses the flat {id, kind, x, y, rotation, label} shape the editor
        consumes.
        """
        data = {
            "id": self.component_id,
            "kind": self.component_type,
            "x": self.position[0],
            "y": self.position[1],
            "rotation": self.rotation,
            "label": self.label,
        }
        if self.value is not None:
            data["value"] = self.value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ComponentData":
        """
        Deserialize component from dictionary.

        Accepts 'type' as an alias for 'kind'.
        """
        return cls(
            component_id=data["id"],
            component_type=data.get("kind", data.get("type")),
            label=data.get("label", ""),
            position=(data["x"], data["y"]),
            rotation=data.get("rotation", 0),
            value=data.get("value"),
        )

    def __repr__(self) -> str:
        return (
            f"ComponentData(id={self.component_id!r}, kind={self.component_type!r}, "
            f"label={self.label!r}, pos={self.position}, rot={self.rotation})"
        )
