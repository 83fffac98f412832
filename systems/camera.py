"""
Camera Module
=============
Pan/zoom camera for the galaxy view.

Features:
- Target-following with exponential smoothing
- Timed eased transitions driven from outside
- World <-> screen transforms used by rendering, hit-testing and audio
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class CameraTransform:
    """Pan offset and zoom factor applied to the galaxy view."""
    pan_x: float = 0.0
    pan_y: float = 0.0
    zoom: float = 1.0


IDENTITY = CameraTransform()


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def ease_in_out_cubic(t: float) -> float:
    """Cubic ease-in-out: slow start, fast middle, slow finish."""
    if t < 0.5:
        return 4 * t * t * t
    return 1 - pow(-2 * t + 2, 3) / 2


def world_to_screen(wx: float, wy: float, transform: CameraTransform,
                    width: float, height: float) -> Tuple[float, float]:
    """Project a world point through the camera onto the screen."""
    cx, cy = width / 2, height / 2
    return (
        (wx - cx) * transform.zoom + cx - transform.pan_x,
        (wy - cy) * transform.zoom + cy - transform.pan_y,
    )


def screen_to_world(sx: float, sy: float, transform: CameraTransform,
                    width: float, height: float) -> Tuple[float, float]:
    """Exact inverse of world_to_screen."""
    cx, cy = width / 2, height / 2
    return (
        (sx - cx) / transform.zoom + cx + transform.pan_x / transform.zoom,
        (sy - cy) / transform.zoom + cy + transform.pan_y / transform.zoom,
    )


class Camera:
    """
    Holds the current and target pan/zoom.

    Two update modes, one per frame:
    - tick(): move current values a fixed fraction toward the targets
    - apply_transition(): set current values from an eased interpolation
    """

    def __init__(self,
                 smoothing: float = 0.05,
                 min_zoom: float = 0.5,
                 max_zoom: float = 3.0,
                 scroll_sensitivity: float = 0.001):
        if min_zoom <= 0:
            raise ValueError(f"min_zoom must be positive, got {min_zoom}")
        if min_zoom > max_zoom:
            raise ValueError(f"min_zoom {min_zoom} exceeds max_zoom {max_zoom}")

        self.smoothing = smoothing
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom
        self.scroll_sensitivity = scroll_sensitivity

        self.pan_x = 0.0
        self.pan_y = 0.0
        self.zoom = 1.0

        self.target_pan_x = 0.0
        self.target_pan_y = 0.0
        self.target_zoom = 1.0

    # -- targets (user input) --

    def set_target(self, pan_x: float, pan_y: float, zoom: float):
        """Set the smoothing targets. Zoom is clamped to the user range."""
        self.target_pan_x = pan_x
        self.target_pan_y = pan_y
        self.target_zoom = clamp(zoom, self.min_zoom, self.max_zoom)

    def pan_by(self, dx: float, dy: float):
        """Drag: move the target pan opposite to the pointer, scaled by zoom."""
        self.target_pan_x -= dx / self.zoom
        self.target_pan_y -= dy / self.zoom

    def zoom_by(self, delta: float):
        """Scroll: positive delta (scrolling down) zooms out."""
        self.target_zoom = clamp(
            self.target_zoom + delta * -self.scroll_sensitivity,
            self.min_zoom, self.max_zoom
        )

    # -- per-frame updates --

    def tick(self):
        """Smoothed convergence toward the targets."""
        self.zoom = lerp(self.zoom, self.target_zoom, self.smoothing)
        self.pan_x = lerp(self.pan_x, self.target_pan_x, self.smoothing)
        self.pan_y = lerp(self.pan_y, self.target_pan_y, self.smoothing)

    def apply_transition(self, start: CameraTransform, end: CameraTransform, progress: float):
        """Set current values along an eased path. Zoom is not clamped here."""
        t = ease_in_out_cubic(clamp(progress, 0.0, 1.0))
        self.pan_x = lerp(start.pan_x, end.pan_x, t)
        self.pan_y = lerp(start.pan_y, end.pan_y, t)
        self.zoom = lerp(start.zoom, end.zoom, t)

    # -- state --

    def current_transform(self) -> CameraTransform:
        return CameraTransform(self.pan_x, self.pan_y, self.zoom)

    def target_transform(self) -> CameraTransform:
        return CameraTransform(self.target_pan_x, self.target_pan_y, self.target_zoom)

    def reset(self):
        """Canonical centered, unit-zoom state for both current and target."""
        self.pan_x = self.pan_y = 0.0
        self.target_pan_x = self.target_pan_y = 0.0
        self.zoom = self.target_zoom = 1.0
