"""
CircuitLayout - Result container for a laid-out schematic.

This module contains no Qt dependencies. It holds the placed components
and routed wires produced from one notation string and hands them to the
editor, which owns them from then on.
"""

import json
from dataclasses import dataclass, field
from typing import Optional

from .component import ComponentData
from .wire import WireData


@dataclass
class CircuitLayout:
    """
    Placed components and wire routes for one parsed notation.

    Component and wire ids are unique within one layout.
    """

    components: list[ComponentData] = field(default_factory=list)
    wires: list[WireData] = field(default_factory=list)

    # --- Queries ---

    def is_empty(self) -> bool:
        """Check if the layout has neither components nor wires."""
        return not self.components and not self.wires

    def get_component(self, component_id: str) -> Optional[ComponentData]:
        """Look up a component by id."""
        for comp in self.components:
            if comp.component_id == component_id:
                return comp
        return None

    def find_by_label(self, label: str) -> list[ComponentData]:
        """Return all components carrying the given label."""
        return [comp for comp in self.components if comp.label == label]

    def bounding_box(self) -> Optional[tuple[float, float, float, float]]:
        """
        Return (min_x, min_y, max_x, max_y) over component centers and wire points.

        Returns None for an empty layout.
        """
        xs = [c.position[0] for c in self.components]
        ys = [c.position[1] for c in self.components]
        for wire in self.wires:
            xs.extend(x for x, _ in wire.points)
            ys.extend(y for _, y in wire.points)
        if not xs:
            return None
        return (min(xs), min(ys), max(xs), max(ys))

    # --- Serialization ---

    def to_dict(self) -> dict:
        """Serialize the layout to the {components, wires} dictionary shape."""
        return {
            "components": [comp.to_dict() for comp in self.components],
            "wires": [wire.to_dict() for wire in self.wires],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize the layout to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: dict) -> "CircuitLayout":
        """Deserialize a layout from its dictionary shape."""
        return cls(
            components=[ComponentData.from_dict(c) for c in data.get("components", [])],
            wires=[WireData.from_dict(w) for w in data.get("wires", [])],
        )

    def __repr__(self) -> str:
        return f"CircuitLayout(components={len(self.components)}, wires={len(self.wires)})"
