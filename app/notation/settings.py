"""
notation/settings.py

Geometry settings for the layout engine, with JSON load/save.

Settings are stored in a user-writable JSON file. Missing or unreadable
files fall back to the built-in defaults.
"""

import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional

from models.component import COMPONENT_SIZES

logger = logging.getLogger(__name__)

_CONFIG_DIR = Path.home() / ".circuit-notation"
_CONFIG_FILE = _CONFIG_DIR / "layout.json"

_NUMERIC_FIELDS = (
    "component_width",
    "component_height",
    "series_gap",
    "parallel_gap",
    "rail_padding",
    "terminal_lead",
)


class SettingsError(ValueError):
    """Raised when layout settings contain invalid values."""


@dataclass
class LayoutSettings:
    """Spacing and placement constants used by the layout engine."""

    component_width: float = 80  # default box width including leads
    component_height: float = 40
    series_gap: float = 20  # horizontal gap between series items
    parallel_gap: float = 50  # vertical gap between parallel branches
    rail_padding: float = 30  # space between a rail and the widest branch
    origin_x: float = 100  # left edge of the whole diagram
    origin_y: float = 300  # centre line of the whole diagram
    terminal_leads: bool = False  # add lead wires at both outer ends
    terminal_lead: float = 40
    component_sizes: dict[str, tuple[float, float]] = field(
        default_factory=lambda: dict(COMPONENT_SIZES)
    )

    def size_for(self, kind: str) -> tuple[float, float]:
        """Return the (width, height) bounding box for a component kind."""
        return self.component_sizes.get(kind, (self.component_width, self.component_height))

    def to_dict(self) -> dict:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["component_sizes"] = {k: list(v) for k, v in self.component_sizes.items()}
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "LayoutSettings":
        """Build settings from a dict, ignoring unknown keys.

        Raises:
            SettingsError: If a value has the wrong type or is negative.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            if key not in known:
                logger.warning("Unknown layout setting %r, ignoring", key)
                continue
            if key in _NUMERIC_FIELDS:
                kwargs[key] = _non_negative(key, value)
            elif key in ("origin_x", "origin_y"):
                kwargs[key] = _number(key, value)
            elif key == "terminal_leads":
                if not isinstance(value, bool):
                    raise SettingsError(f"Layout setting '{key}' must be true or false, got {value!r}")
                kwargs[key] = value
            elif key == "component_sizes":
                kwargs[key] = _parse_sizes(value)

        settings = cls(**kwargs)
        if "component_sizes" in kwargs:
            # Listed kinds override the defaults; others keep theirs
            merged = dict(COMPONENT_SIZES)
            merged.update(kwargs["component_sizes"])
            settings.component_sizes = merged
        return settings


def _number(key, value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SettingsError(f"Layout setting '{key}' must be a number, got {value!r}")
    return value


def _non_negative(key, value) -> float:
    value = _number(key, value)
    if value < 0:
        raise SettingsError(f"Layout setting '{key}' must not be negative, got {value!r}")
    return value


def _parse_sizes(value) -> dict[str, tuple[float, float]]:
    if not isinstance(value, dict):
        raise SettingsError("Layout setting 'component_sizes' must be a mapping of kind to [width, height]")
    sizes = {}
    for kind, size in value.items():
        if not isinstance(size, (list, tuple)) or len(size) != 2:
            raise SettingsError(f"Size for '{kind}' must be [width, height], got {size!r}")
        sizes[kind] = (_non_negative(f"{kind}.width", size[0]), _non_negative(f"{kind}.height", size[1]))
    return sizes


def default_settings_path() -> Path:
    """Return the default path of the layout settings file."""
    return _CONFIG_FILE


def load_layout_settings(path: Optional[Path] = None) -> LayoutSettings:
    """Load layout settings from a JSON file.

    A missing file gives the defaults. A file that cannot be read or holds
    invalid JSON is logged and also gives the defaults.

    Raises:
        SettingsError: If the file is valid JSON but holds invalid values.
    """
    path = Path(path) if path is not None else default_settings_path()
    if not path.exists():
        return LayoutSettings()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to load layout settings from %s: %s", path, e)
        return LayoutSettings()

    if not isinstance(data, dict):
        logger.warning("Layout settings in %s are not a JSON object, using defaults", path)
        return LayoutSettings()

    return LayoutSettings.from_dict(data)


def save_layout_settings(settings: LayoutSettings, path: Optional[Path] = None) -> Path:
    """Write layout settings to a JSON file and return its path."""
    path = Path(path) if path is not None else default_settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(settings.to_dict(), indent=2))
    return path
