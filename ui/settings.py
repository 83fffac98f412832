"""
Settings Module
================
Explorer settings and configuration management.

Features:
- Galaxy generation parameters
- Camera smoothing, zoom range and fly-in timing
- Audio falloff and volume
- Resolution and display settings
"""

import json
import os
from dataclasses import dataclass, field, asdict
from typing import Optional, Tuple


# =====================================================
# SETTINGS DATA
# =====================================================

@dataclass
class GalaxySettings:
    """Settings for procedural generation."""
    num_stars: int = 100
    seed: Optional[int] = None            # None = new galaxy every run
    max_attempts: int = 1000              # Placement attempts before giving up
    separation_margin: float = 30.0       # Added to both star sizes
    edge_margin: float = 50.0             # Keep stars this far from the canvas edge
    warning_ratio: float = 0.8            # Warn below this fraction of num_stars


@dataclass
class CameraSettings:
    """Settings for the camera and view transitions."""
    smoothing: float = 0.05               # Fraction of remaining distance per frame
    min_zoom: float = 0.5
    max_zoom: float = 3.0
    scroll_sensitivity: float = 0.001     # Zoom change per scroll unit
    transition_zoom: float = 5.0          # Fly-in zoom, outside the user range
    transition_duration: float = 1.5      # Seconds


@dataclass
class InputSettings:
    """Settings for pointer input."""
    ui_band_height: int = 150             # Clicks above this go to UI buttons only


@dataclass
class AudioSettings:
    """Settings for star tones."""
    falloff: float = 200.0                # Pixels until a tone is silent
    max_amplitude: float = 0.2
    sample_rate: int = 44100


@dataclass
class GraphicsSettings:
    """Settings for display."""
    resolution: Tuple[int, int] = (1920, 1080)
    fullscreen: bool = False
    max_fps: int = 60                     # 0 for uncapped


@dataclass
class ExplorerSettings:
    """Complete explorer settings."""
    galaxy: GalaxySettings = field(default_factory=GalaxySettings)
    camera: CameraSettings = field(default_factory=CameraSettings)
    input: InputSettings = field(default_factory=InputSettings)
    audio: AudioSettings = field(default_factory=AudioSettings)
    graphics: GraphicsSettings = field(default_factory=GraphicsSettings)

    SECTIONS = ('galaxy', 'camera', 'input', 'audio', 'graphics')

    def save(self, path: str = "settings.json"):
        """Save settings to file."""
        data = {name: asdict(getattr(self, name)) for name in self.SECTIONS}
        data['graphics']['resolution'] = list(self.graphics.resolution)
        with open(path, 'w') as f:
            json.dump(data, f, indent=2)

    @classmethod
    def load(cls, path: str = "settings.json") -> 'ExplorerSettings':
        """Load settings from file. Missing or unreadable files give defaults."""
        if not os.path.exists(path):
            return cls()

        try:
            with open(path, 'r') as f:
                data = json.load(f)

            settings = cls()

            for name in cls.SECTIONS:
                section = getattr(settings, name)
                for key, value in data.get(name, {}).items():
                    if key == 'resolution':
                        section.resolution = tuple(value)
                    elif hasattr(section, key):
                        setattr(section, key, value)

            return settings
        except (OSError, ValueError, TypeError, AttributeError) as e:
            print(f"Error loading settings: {e}")
            return cls()
