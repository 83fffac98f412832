"""
Galaxy Renderer
===============
Draws the explorer onto an OpenCV (BGR) frame.

Features:
- Drifting noise background
- Pulsing stars with translucent glow
- Star system view with orbiting planets
- Info and navigation panels, debug hit rings
"""

from typing import Tuple

import cv2
import numpy as np

from .camera import CameraTransform, world_to_screen
from .galaxy import Star
from .noise_field import NoiseField
from .simulation import SimulationState
from .view_state import ViewMode


def bgr(color) -> Tuple[int, int, int]:
    """RGB(A) tuple to an OpenCV BGR tuple."""
    return (int(color[2]), int(color[1]), int(color[0]))


class GalaxyRenderer:
    """Renders the galaxy and system views plus the UI overlay."""

    # Colors (RGB, converted at draw time)
    BG_COLOR = (10, 15, 30)
    BACKGROUND_STAR = (200, 200, 255)
    ORBIT_COLOR = (100, 100, 100)
    PANEL_FILL = (10, 15, 30)
    PANEL_BORDER = (100, 150, 255)
    TEXT_COLOR = (255, 255, 255)
    DEBUG_RING = (255, 0, 0)

    GLOW_ALPHA = 100 / 255
    BACKGROUND_ALPHA = 150 / 255
    ORBIT_ALPHA = 100 / 255
    PANEL_ALPHA = 200 / 255

    NUM_BACKGROUND_STARS = 200

    def __init__(self, width: int, height: int, noise: NoiseField):
        self.width = width
        self.height = height
        self.noise = noise
        self.font = cv2.FONT_HERSHEY_SIMPLEX

    def resize(self, width: int, height: int):
        self.width = width
        self.height = height

    def render(self, frame: np.ndarray, state: SimulationState):
        """Render one frame for the current view mode."""
        frame[:] = bgr(self.BG_COLOR)

        if state.mode == ViewMode.DETAIL:
            self.render_system(frame, state)
        else:
            self.render_galaxy(frame, state)

        self.render_ui(frame, state)

    # =====================
    # GALAXY VIEW
    # =====================
    def render_galaxy(self, frame: np.ndarray, state: SimulationState):
        transform = state.camera.current_transform()
        zoom = transform.zoom

        self._draw_background_field(frame, transform, state.frame_count)

        # Star glows (translucent)
        glow_layer = frame.copy()
        for star in state.stars:
            sx, sy = self._project(star, transform)
            glow_size = star.size * (1 + star.pulse)
            cv2.circle(glow_layer, (sx, sy), self._radius(glow_size * 4 * zoom), bgr(star.color), -1)
        cv2.addWeighted(glow_layer, self.GLOW_ALPHA, frame, 1 - self.GLOW_ALPHA, 0, frame)

        for star in state.stars:
            sx, sy = self._project(star, transform)
            glow_size = star.size * (1 + star.pulse)
            cv2.circle(frame, (sx, sy), self._radius(glow_size * zoom), bgr(star.color), -1)

            if state.debug:
                self._draw_debug_ring(frame, star, sx, sy, zoom)

    def _draw_background_field(self, frame: np.ndarray, transform: CameraTransform, frame_count: int):
        """Dim non-interactive stars that drift slowly with the noise field."""
        layer = frame.copy()
        t = frame_count * 0.0001
        for i in range(self.NUM_BACKGROUND_STARS):
            x = self.noise.sample(i * 0.1, t) * self.width
            y = self.noise.sample(i * 0.1 + 100, t) * self.height
            size = self.noise.sample(i * 0.1 + 200) * 1.5

            sx, sy = world_to_screen(x, y, transform, self.width, self.height)
            cv2.circle(layer, (int(sx), int(sy)), self._radius(size * transform.zoom),
                       bgr(self.BACKGROUND_STAR), -1)
        cv2.addWeighted(layer, self.BACKGROUND_ALPHA, frame, 1 - self.BACKGROUND_ALPHA, 0, frame)

    def _draw_debug_ring(self, frame: np.ndarray, star: Star, sx: int, sy: int, zoom: float):
        """Visualize the clickable area and name."""
        hit_radius = star.hit_radius * zoom
        cv2.circle(frame, (sx, sy), self._radius(hit_radius), bgr(self.DEBUG_RING), 1)
        cv2.putText(frame, star.name, (sx, int(sy + hit_radius + 10)),
                    self.font, 0.3, bgr(self.TEXT_COLOR), 1)

    # =====================
    # SYSTEM VIEW
    # =====================
    def render_system(self, frame: np.ndarray, state: SimulationState):
        star = state.selected_star
        if star is None:
            return

        cx, cy = self.width // 2, self.height // 2
        glow_size = star.size * 4 * (1 + star.pulse * 0.5)

        layer = frame.copy()
        cv2.circle(layer, (cx, cy), self._radius(glow_size * 2), bgr(star.color), -1)
        cv2.addWeighted(layer, self.GLOW_ALPHA, frame, 1 - self.GLOW_ALPHA, 0, frame)
        cv2.circle(frame, (cx, cy), self._radius(glow_size), bgr(star.color), -1)

        layer = frame.copy()
        for planet in star.planets:
            cv2.circle(layer, (cx, cy), int(planet.distance), bgr(self.ORBIT_COLOR), 1)
        cv2.addWeighted(layer, self.ORBIT_ALPHA, frame, 1 - self.ORBIT_ALPHA, 0, frame)

        for planet in star.planets:
            px, py = planet.position(cx, cy)
            cv2.circle(frame, (int(px), int(py)), self._radius(planet.size), bgr(planet.color), -1)

    # =====================
    # UI OVERLAY
    # =====================
    def render_ui(self, frame: np.ndarray, state: SimulationState):
        self._draw_panel(frame, 10, 10, 260, 110)

        lines = []
        if state.mode == ViewMode.OVERVIEW:
            lines = [
                "Galaxy View",
                f"Stars: {len(state.stars)}",
                "Click on a star to explore",
            ]
            if state.debug:
                lines.append("Debug Mode ON")
        elif state.mode == ViewMode.TRANSITIONING_TO_DETAIL:
            target = state.view.transition.target_star
            lines = [
                f"Approaching {target.name}" if target else "Approaching",
                f"Progress: {state.view.progress_percent(state.now)}%",
            ]
        elif state.selected_star is not None:
            lines = [
                f"{state.selected_star.name} System",
                f"Planets: {len(state.selected_star.planets)}",
                "Click anywhere to return",
            ]
        self._draw_lines(frame, lines, 20, 35)

        if state.debug and state.mode == ViewMode.OVERVIEW:
            camera = state.camera
            self._draw_lines(frame, [
                f"Pointer: {state.pointer_x:.0f}, {state.pointer_y:.0f}",
                f"Zoom: {camera.zoom:.2f}",
                f"Camera: {camera.pan_x:.0f}, {camera.pan_y:.0f}",
            ], 280, 35)

        nav_x = self.width - 150
        self._draw_panel(frame, nav_x, 10, self.width - 10, 110)
        self._draw_lines(frame, [
            "Navigation:",
            "Drag to move",
            "Scroll to zoom",
        ], nav_x + 10, 35)

    def _draw_panel(self, frame: np.ndarray, x1: int, y1: int, x2: int, y2: int):
        layer = frame.copy()
        cv2.rectangle(layer, (x1, y1), (x2, y2), bgr(self.PANEL_FILL), -1)
        cv2.addWeighted(layer, self.PANEL_ALPHA, frame, 1 - self.PANEL_ALPHA, 0, frame)
        cv2.rectangle(frame, (x1, y1), (x2, y2), bgr(self.PANEL_BORDER), 1)

    def _draw_lines(self, frame: np.ndarray, lines, x: int, y: int, spacing: int = 20):
        for line in lines:
            cv2.putText(frame, line, (x, y), self.font, 0.5, bgr(self.TEXT_COLOR), 1)
            y += spacing

    # -- helpers --

    def _project(self, star: Star, transform: CameraTransform) -> Tuple[int, int]:
        sx, sy = star.screen_pos(transform, self.width, self.height)
        return int(sx), int(sy)

    @staticmethod
    def _radius(diameter: float) -> int:
        return max(1, int(diameter / 2))
