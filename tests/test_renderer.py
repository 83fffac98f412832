"""
Smoke tests for GalaxyRenderer and the UI button row
"""

import numpy as np
import pytest

from systems.noise_field import NoiseField
from systems.renderer import GalaxyRenderer, bgr
from ui.buttons import ButtonBar

from conftest import HEIGHT, WIDTH


@pytest.fixture
def renderer():
    return GalaxyRenderer(WIDTH, HEIGHT, NoiseField(seed=7))


@pytest.fixture
def frame():
    return np.zeros((HEIGHT, WIDTH, 3), dtype=np.uint8)


def test_bgr_swaps_channels():
    assert bgr((10, 20, 30, 255)) == (30, 20, 10)


def test_galaxy_view_draws_stars(renderer, frame, state, controller):
    controller.tick(0.1)
    renderer.render(frame, state)

    star = state.stars[1]
    px, py = int(star.x), int(star.y)
    assert frame[py, px].tolist() != list(bgr(GalaxyRenderer.BG_COLOR))


def test_debug_and_transition_views_render(renderer, frame, state, controller):
    controller.toggle_debug()
    controller.tick(0.1)
    renderer.render(frame, state)

    sx, sy = state.stars[0].x, state.stars[0].y
    controller.on_click(sx, sy)
    controller.tick(0.5)
    renderer.render(frame, state)
    assert frame.any()


def test_system_view_centers_star(renderer, frame, state, controller):
    controller.force_system_view()
    controller.tick(0.1)
    renderer.render(frame, state)

    star = state.selected_star
    center = frame[HEIGHT // 2, WIDTH // 2].tolist()
    assert center == list(bgr(star.color))


def test_button_bar_routes_clicks():
    pressed = []
    bar = ButtonBar(x=20, y=120)
    first = bar.add("Start Audio", lambda: pressed.append("audio"))
    second = bar.add("Toggle Debug", lambda: pressed.append("debug"))

    assert second.x == first.x + first.width + bar.spacing
    assert bar.handle_click(first.x + 2, 125)
    assert bar.handle_click(second.x + 2, 125)
    assert not bar.handle_click(first.x + 2, 300)
    assert pressed == ["audio", "debug"]


def test_button_bar_draws(frame):
    bar = ButtonBar()
    bar.add("Return to Galaxy", lambda: None)
    bar.update_hover(25, 125)
    bar.draw(frame)
    assert frame[125, 22].any()
