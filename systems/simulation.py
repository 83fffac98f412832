"""
Explorer Simulation
===================
Single owner of the galaxy, camera and view state, plus the input entry points.

Features:
- Click to fly into a star, click again to return
- Drag to pan and scroll to zoom in the overview
- Top UI band swallows clicks meant for buttons
- Pull-based tone amplitudes for the audio layer
"""

from dataclasses import dataclass
from typing import List, Optional

from .audio import tone_amplitude
from .camera import Camera
from .galaxy import Star
from .hit_test import HitTester
from .view_state import ViewMode, ViewStateMachine


# =====================
# SIMULATION STATE
# =====================
@dataclass
class SimulationState:
    """Holds everything the explorer mutates between frames."""
    stars: List[Star]
    camera: Camera
    view: ViewStateMachine
    width: int = 1920
    height: int = 1080

    # Frame clock
    start_time: float = 0.0
    now: float = 0.0
    frame_count: int = 0

    # Pointer, screen pixels
    pointer_x: float = 0.0
    pointer_y: float = 0.0

    debug: bool = False
    last_event: Optional[str] = None

    @property
    def elapsed(self) -> float:
        return self.now - self.start_time

    @property
    def mode(self) -> ViewMode:
        return self.view.mode

    @property
    def selected_star(self) -> Optional[Star]:
        return self.view.selected_star


class ExplorerController:
    """Handles explorer interaction logic."""

    def __init__(self, state: SimulationState,
                 ui_band_height: int = 150,
                 audio_falloff: float = 200.0,
                 max_amplitude: float = 0.2):
        self.state = state
        self.hit_tester = HitTester(state.stars)
        self.ui_band_height = ui_band_height
        self.audio_falloff = audio_falloff
        self.max_amplitude = max_amplitude

    # -- input entry points --

    def on_click(self, x: float, y: float) -> Optional[str]:
        """
        Route a click.

        Returns:
            "transition_started", "missed", "returned" or None if swallowed
        """
        if y < self.ui_band_height:
            return None

        state = self.state
        view = state.view

        if view.mode == ViewMode.OVERVIEW:
            star = self.hit_tester.resolve(
                x, y, state.camera.current_transform(), state.width, state.height
            )
            if star is None:
                print("No star found at click position")
                return "missed"

            if view.select_star(star, state.now, state.width, state.height):
                print(f"Star selected: {star.name} at ({star.x:.0f}, {star.y:.0f})")
                return "transition_started"
            return None

        if view.mode == ViewMode.DETAIL:
            view.return_to_overview()
            print("Returned to galaxy view")
            return "returned"

        # Clicks during a transition are ignored
        return None

    def on_drag_delta(self, dx: float, dy: float):
        if self.state.view.accepts_navigation:
            self.state.camera.pan_by(dx, dy)

    def on_scroll(self, delta: float):
        if self.state.view.accepts_navigation:
            self.state.camera.zoom_by(delta)

    def on_resize(self, width: int, height: int):
        """Only the surface changes; star world positions stay put."""
        if width <= 0 or height <= 0:
            return
        self.state.width = width
        self.state.height = height

    def on_pointer_move(self, x: float, y: float):
        self.state.pointer_x = x
        self.state.pointer_y = y

    # -- buttons --

    def toggle_debug(self) -> bool:
        self.state.debug = not self.state.debug
        print(f"Debug mode: {'ON' if self.state.debug else 'OFF'}")
        return self.state.debug

    def force_system_view(self) -> bool:
        """Show the first star's system without the fly-in."""
        if not self.state.stars:
            return False
        star = self.state.stars[0]
        if self.state.view.force_detail(star):
            print(f"Forced system view with star: {star.name}")
            return True
        return False

    def return_to_galaxy(self) -> bool:
        if self.state.view.force_overview():
            print("Returned to galaxy view")
            return True
        return False

    # -- frame --

    def start(self, now: float):
        self.state.start_time = now
        self.state.now = now

    def tick(self, now: float) -> Optional[str]:
        """Advance one frame: pulses, planet orbits, then the view."""
        state = self.state
        state.now = now
        state.frame_count += 1

        elapsed = state.elapsed
        for star in state.stars:
            star.update_pulse(elapsed)
            for planet in star.planets:
                planet.advance()

        event = state.view.update(now)
        if event == "arrived":
            print(f"Arrived at {state.view.selected_star.name} system")
        state.last_event = event
        return event

    # -- queries --

    def tone_amplitudes(self) -> List[float]:
        """Per-star tone volume from pointer proximity; silent outside the overview."""
        state = self.state
        if state.view.mode != ViewMode.OVERVIEW:
            return [0.0] * len(state.stars)

        transform = state.camera.current_transform()
        return [
            tone_amplitude(
                star.distance_to_pointer(state.pointer_x, state.pointer_y,
                                         transform, state.width, state.height),
                star.pulse,
                self.audio_falloff,
                self.max_amplitude,
            )
            for star in state.stars
        ]
