"""
Explorer Scene
==============
Per-frame glue between the display, the simulation and its collaborators.

Features:
- Generates the galaxy once on creation
- UI buttons get first pick of clicks
- Feeds drag, scroll, resize and pointer input to the controller
- Pushes pulled tone amplitudes to the audio bank
"""

from typing import Optional

import numpy as np

from systems.audio import StarToneBank
from systems.camera import Camera
from systems.galaxy import GalaxyGenerator
from systems.noise_field import NoiseField
from systems.renderer import GalaxyRenderer
from systems.simulation import ExplorerController, SimulationState
from systems.view_state import ViewStateMachine
from ui.buttons import ButtonBar
from ui.settings import ExplorerSettings


def create_simulation(settings: ExplorerSettings, width: int, height: int,
                      noise: NoiseField) -> SimulationState:
    """Generate the galaxy and wire up camera and view state."""
    galaxy = settings.galaxy
    generator = GalaxyGenerator(
        seed=noise.seed,
        noise=noise,
        max_attempts=galaxy.max_attempts,
        separation_margin=galaxy.separation_margin,
        edge_margin=galaxy.edge_margin,
        warning_ratio=galaxy.warning_ratio,
    )
    stars = generator.generate(galaxy.num_stars, width, height)

    cam = settings.camera
    camera = Camera(
        smoothing=cam.smoothing,
        min_zoom=cam.min_zoom,
        max_zoom=cam.max_zoom,
        scroll_sensitivity=cam.scroll_sensitivity,
    )
    view = ViewStateMachine(
        camera,
        transition_duration=cam.transition_duration,
        transition_zoom=cam.transition_zoom,
    )
    return SimulationState(stars=stars, camera=camera, view=view, width=width, height=height)


class ExplorerScene:
    """
    Interactive galaxy explorer.

    Controls:
    - Click a star to fly into its system
    - Click anywhere in a system to return
    - Drag to pan, scroll to zoom (galaxy view only)
    """

    def __init__(self, settings: ExplorerSettings, width: int, height: int,
                 seed: Optional[int] = None):
        self.settings = settings

        if seed is None:
            seed = settings.galaxy.seed
        self.noise = NoiseField(seed)
        print(f"Galaxy seed: {self.noise.seed}")

        self.state = create_simulation(settings, width, height, self.noise)
        self.controller = ExplorerController(
            self.state,
            ui_band_height=settings.input.ui_band_height,
            audio_falloff=settings.audio.falloff,
            max_amplitude=settings.audio.max_amplitude,
        )
        self.renderer = GalaxyRenderer(width, height, self.noise)
        self.audio = StarToneBank(sample_rate=settings.audio.sample_rate)

        self.buttons = ButtonBar(x=20, y=120)
        self.buttons.add("Start Audio", self.start_audio)
        self.buttons.add("Toggle Debug", self.controller.toggle_debug)
        self.buttons.add("Test System View", self.controller.force_system_view)
        self.buttons.add("Return to Galaxy", self.controller.return_to_galaxy)

    def start(self, now: float):
        self.controller.start(now)

    def start_audio(self) -> bool:
        return self.audio.start(self.state.stars)

    def handle_events(self, events: dict):
        """Route one frame's worth of display events."""
        if events['resized']:
            self.resize(*events['resized'])

        mx, my = events['mouse_pos']
        self.controller.on_pointer_move(mx, my)
        self.buttons.update_hover(mx, my)

        for x, y in events['clicks']:
            if self.buttons.handle_click(x, y):
                continue
            self.controller.on_click(x, y)

        dx, dy = events['drag']
        if dx or dy:
            self.controller.on_drag_delta(dx, dy)

        if events['scroll']:
            self.controller.on_scroll(events['scroll'])

    def resize(self, width: int, height: int):
        self.controller.on_resize(width, height)
        self.renderer.resize(width, height)

    def update(self, now: float) -> Optional[str]:
        event = self.controller.tick(now)
        if self.audio.started:
            self.audio.set_amplitudes(self.controller.tone_amplitudes())
        return event

    def render(self, frame: np.ndarray):
        self.renderer.render(frame, self.state)
        self.buttons.draw(frame)

    def close(self):
        self.audio.stop()
