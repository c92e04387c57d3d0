"""
Shared test fixtures for the circuit notation test suite.

All fixtures build pure-Python objects (no Qt dependencies).
"""

import sys
from pathlib import Path

# Ensure app/ is on sys.path so bare imports (models, notation, cli)
# work when running individual test files (e.g., python -m pytest app/tests/unit/test_foo.py).
_app_dir = str(Path(__file__).resolve().parent.parent)
if _app_dir not in sys.path:
    sys.path.insert(0, _app_dir)

import pytest
from models.component import ComponentData
from models.wire import WireData
from notation.nodes import ComponentNode
from notation.settings import LayoutSettings


def make_component(kind, component_id, label, position=(0.0, 0.0)):
    """Helper to create a ComponentData with minimal boilerplate."""
    return ComponentData(
        component_id=component_id,
        component_type=kind,
        label=label,
        position=position,
    )


def make_wire(wire_id, *points):
    """Helper to create a WireData from (x, y) points."""
    return WireData(wire_id=wire_id, points=list(points))


def leaf(label, kind="resistor"):
    """Helper to create a ComponentNode."""
    return ComponentNode(kind=kind, label=label)


def shape(layout):
    """Layout geometry without ids, for comparing two layouts."""
    return (
        [(c.component_type, c.label, c.position, c.rotation) for c in layout.components],
        [tuple(w.points) for w in layout.wires],
    )


@pytest.fixture
def settings():
    """Default layout settings."""
    return LayoutSettings()


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path, monkeypatch):
    """Keep a user's ~/.circuit-notation/layout.json out of the tests."""
    monkeypatch.setattr("notation.settings._CONFIG_FILE", tmp_path / "no-such-dir" / "layout.json")
