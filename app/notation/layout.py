"""
notation/layout.py

Turns an expression tree into placed components and orthogonal wires.

Layout is compositional: every subtree is first laid out in its own local
frame, centered on the origin, and then moved into its parent's frame by
translating all of its points at once. Nesting depth therefore needs no
special-case geometry.

Drawing conventions (textbook style):
    - series items run left to right on one centre line
    - parallel branches are stacked vertically between a left and a right
      rail; each branch is joined to the rails by two L-shaped wires
"""

from dataclasses import dataclass, field
from typing import Optional

from models.circuit import CircuitLayout
from models.component import ComponentData
from models.wire import WireData

from .nodes import Node, ParallelNode, SeriesNode, is_leaf
from .settings import LayoutSettings


@dataclass
class IdGenerator:
    """Hands out layout ids from one counter.

    One generator is created per top-level layout call and passed down the
    recursion, so separate calls never share id state.
    """

    next_index: int = 0

    def _take(self) -> int:
        index = self.next_index
        self.next_index += 1
        return index

    def component_id(self) -> str:
        return f"parsed_{self._take()}"

    def wire_id(self) -> str:
        return f"wire_{self._take()}"


@dataclass
class Placement:
    """Laid-out subtree: its elements plus its bounding box size.

    The subtree is centered on the anchor it was laid out at; its entry and
    exit points are the middles of the left and right bounding edges.
    """

    components: list[ComponentData] = field(default_factory=list)
    wires: list[WireData] = field(default_factory=list)
    width: float = 0
    height: float = 0

    def translated(self, dx: float, dy: float) -> "Placement":
        """Return a copy with every component and wire point moved by (dx, dy)."""
        if dx == 0 and dy == 0:
            return self
        return Placement(
            components=[c.translated(dx, dy) for c in self.components],
            wires=[w.translated(dx, dy) for w in self.wires],
            width=self.width,
            height=self.height,
        )

    def extend(self, other: "Placement") -> None:
        self.components.extend(other.components)
        self.wires.extend(other.wires)


def layout_node(
    node: Node,
    anchor_x: float,
    anchor_y: float,
    ids: IdGenerator,
    settings: Optional[LayoutSettings] = None,
) -> Placement:
    """Lay out a subtree centered on (anchor_x, anchor_y).

    Args:
        node: Tree to lay out.
        anchor_x, anchor_y: Centre of the subtree in the caller's frame.
        ids: Id generator shared by the whole layout call.
        settings: Geometry settings (defaults if None).

    Returns:
        Placement with absolute positions and the subtree's bounding size.
    """
    settings = settings or LayoutSettings()

    if is_leaf(node):
        placement = _layout_leaf(node, ids, settings)
    elif isinstance(node, SeriesNode):
        placement = _layout_series(node, ids, settings)
    elif isinstance(node, ParallelNode):
        placement = _layout_parallel(node, ids, settings)
    else:
        raise TypeError(f"Cannot lay out {type(node).__name__}")

    return placement.translated(anchor_x, anchor_y)


def _layout_leaf(node, ids: IdGenerator, settings: LayoutSettings) -> Placement:
    width, height = settings.size_for(node.kind)
    component = ComponentData(
        component_id=ids.component_id(),
        component_type=node.kind,
        label=node.label,
        position=(0.0, 0.0),
    )
    return Placement(components=[component], width=width, height=height)


def _layout_series(node: SeriesNode, ids: IdGenerator, settings: LayoutSettings) -> Placement:
    """Place children left to right, bridging each gap with a straight wire.

    Children are laid out from x=0 rightwards, then the group is shifted so
    that it is centered on the origin.
    """
    gap = settings.series_gap
    result = Placement()
    cursor = 0.0  # left edge of the next child

    for i, child in enumerate(node.children):
        local = layout_node(child, 0, 0, ids, settings)
        result.extend(local.translated(cursor + local.width / 2, 0))

        if i > 0:
            result.wires.append(WireData(wire_id=ids.wire_id(), points=[(cursor - gap, 0.0), (cursor, 0.0)]))

        cursor += local.width + gap
        result.height = max(result.height, local.height)

    result.width = cursor - gap
    return result.translated(-result.width / 2, 0)


def _layout_parallel(node: ParallelNode, ids: IdGenerator, settings: LayoutSettings) -> Placement:
    """Stack children as branches between a left and a right rail.

    The rails sit on the bounding edges, rail_padding outside the widest
    branch. The group's centre line (y=0) meets both rails; each branch
    gets one wire from the left rail and one to the right rail.
    """
    branches = [layout_node(child, 0, 0, ids, settings) for child in node.children]

    branch_width = max(b.width for b in branches) + 2 * settings.rail_padding
    total_height = sum(b.height for b in branches) + settings.parallel_gap * (len(branches) - 1)
    left_rail = -branch_width / 2
    right_rail = branch_width / 2

    result = Placement(width=branch_width, height=total_height)
    top = -total_height / 2

    for branch in branches:
        branch_y = top + branch.height / 2
        result.extend(branch.translated(0, branch_y))

        entry_x = -branch.width / 2
        exit_x = branch.width / 2
        result.wires.append(WireData(wire_id=ids.wire_id(), points=_rail_route(left_rail, entry_x, branch_y)))
        result.wires.append(WireData(wire_id=ids.wire_id(), points=_rail_route(right_rail, exit_x, branch_y)[::-1]))

        top += branch.height + settings.parallel_gap

    return result


def _rail_route(rail_x: float, end_x: float, branch_y: float) -> list[tuple[float, float]]:
    """Route from the rail at the centre line to a branch end, with one bend."""
    if branch_y == 0:
        return [(rail_x, 0.0), (end_x, 0.0)]
    return [(rail_x, 0.0), (rail_x, branch_y), (end_x, branch_y)]


def layout_tree(node: Node, settings: Optional[LayoutSettings] = None) -> CircuitLayout:
    """Lay out a whole tree with a fresh id counter.

    The diagram's left edge is placed at settings.origin_x and its centre
    line at settings.origin_y. With settings.terminal_leads, a lead wire is
    added at each outer end.
    """
    settings = settings or LayoutSettings()
    ids = IdGenerator()

    local = layout_node(node, 0, 0, ids, settings)
    placed = local.translated(settings.origin_x + local.width / 2, settings.origin_y)

    if settings.terminal_leads:
        left = settings.origin_x
        right = settings.origin_x + local.width
        y = settings.origin_y
        lead = settings.terminal_lead
        placed.wires.append(WireData(wire_id=ids.wire_id(), points=[(left - lead, y), (left, y)]))
        placed.wires.append(WireData(wire_id=ids.wire_id(), points=[(right, y), (right + lead, y)]))

    return CircuitLayout(components=placed.components, wires=placed.wires)
