"""Graph constants and configuration."""
from __future__ import annotations
import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

# Display settings
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 800
FPS = 60
TITLE = "Random Graph"

# Trail seeding
SEED_POINT_COUNT = 100
SEED_POINT_SPACING = 50.0  # ms between fabricated seed timestamps

# Speed input
NEUTRAL_SPEED_VALUE = 50.0  # Input value that maps to a multiplier of 1
MIN_SPEED_VALUE = 0
MAX_SPEED_VALUE = 100

# Heading timing (all in ms)
HEADING_POLL_INTERVAL = 100
INITIAL_INTERVAL_RANGE = (1000.0, 3000.0)
REROLL_INTERVAL_RANGE = (500.0, 3000.0)
BOUNCE_INTERVAL = 200.0

# Render settings
FADE_COLOR = (10, 10, 10, 0.05)  # RGBA, alpha in [0, 1]. Lower = longer ghosting.
BASE_HUE = 120.0
HUE_AMPLITUDE = 30.0
HUE_STEP = 1.0  # Degrees of phase per frame
GRADIENT_HUE_SHIFT = 60.0
GLOW_BLUR = 15.0
TAIL_MIN_POINTS = 10  # Tail pass only runs above this many points
TAIL_LENGTH = 20
TAIL_MAX_ALPHA = 0.8
PARTICLE_WINDOW = 10
PARTICLE_CHANCE = 0.3
PARTICLE_MIN_RADIUS = 1.0
PARTICLE_RADIUS_SPREAD = 3.0
PARTICLE_HUE = 120.0
PARTICLE_MAX_ALPHA = 0.5

# Bloom: glow layer is shrunk by blur / GLOW_DOWNSCALE_DIVISOR before upscaling
GLOW_DOWNSCALE_DIVISOR = 4.0
# Strokes thinner than this would round to nothing on screen
MIN_STROKE_WIDTH = 0.5

# Logging
LOGGER_NAME = "random_graph"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Colors
COLORS = {
    'ui_bg': (0, 0, 0, 204),
    'ui_text': (255, 255, 255),
    'slider_track': (40, 60, 40),
}


@dataclass
class GraphConfig:
    """Runtime options for a graph instance."""
    retention_window: float = 5000.0  # ms a point stays in the trail
    line_color: str = "#00ff00"
    line_width: float = 4.0
    show_controls: bool = True

    def __post_init__(self) -> None:
        if self.retention_window <= 0:
            raise ValueError(f"retention_window must be positive, got {self.retention_window}")
        if self.line_width < 0:
            raise ValueError(f"line_width must not be negative, got {self.line_width}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GraphConfig:
        """Build a config from a plain mapping (e.g. parsed JSON).

        Raises:
            ValueError: If the mapping contains keys that are not config fields
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def load_config(path: str | Path) -> GraphConfig:
    """Load a GraphConfig from a JSON file."""
    with open(path, 'r') as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    return GraphConfig.from_dict(data)
