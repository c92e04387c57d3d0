"""
WireData - Pure Python data model for schematic wires.

This module contains no Qt dependencies. Points are stored as
tuples (x, y) rather than QPointF.
"""

from dataclasses import dataclass, field


@dataclass
class WireData:
    """
    Pure Python data class representing a wire drawn as an orthogonal polyline.

    Wires produced by the layout engine carry their full route; they are not
    attached to component terminals.
    """

    wire_id: str
    points: list[tuple[float, float]] = field(default_factory=list)

    def get_endpoints(self) -> tuple[tuple[float, float], tuple[float, float]]:
        """Return the first and last point of the route."""
        return self.points[0], self.points[-1]

    def is_orthogonal(self) -> bool:
        """Check that every segment is horizontal or vertical."""
        for (x1, y1), (x2, y2) in zip(self.points, self.points[1:]):
            if x1 != x2 and y1 != y2:
                return False
        return True

    def bend_count(self) -> int:
        """Count direction changes along the route."""
        bends = 0
        for a, b, c in zip(self.points, self.points[1:], self.points[2:]):
            horizontal_in = a[1] == b[1]
            horizontal_out = b[1] == c[1]
            if horizontal_in != horizontal_out:
                bends += 1
        return bends

    def translated(self, dx: float, dy: float) -> "WireData":
        """Return a copy of this wire with every point moved by (dx, dy)."""
        return WireData(wire_id=self.wire_id, points=[(x + dx, y + dy) for x, y in self.points])

    def to_dict(self) -> dict:
        """Serialize wire to dictionary."""
        return {
            "id": self.wire_id,
            "points": [{"x": x, "y": y} for x, y in self.points],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WireData":
        """Deserialize wire from dictionary."""
        return cls(
            wire_id=data["id"],
            points=[(p["x"], p["y"]) for p in data.get("points", [])],
        )

    def __repr__(self) -> str:
        route = " -> ".join(f"({x:g}, {y:g})" for x, y in self.points)
        return f"WireData({self.wire_id}: {route})"
