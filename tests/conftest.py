"""
Shared fixtures for Star Explorer tests.
"""

import pytest

from systems.camera import Camera
from systems.galaxy import Planet, Star
from systems.simulation import ExplorerController, SimulationState
from systems.view_state import ViewStateMachine


WIDTH, HEIGHT = 1280, 720


def make_star(star_id: int, x: float, y: float, size: float = 4.0) -> Star:
    return Star(
        id=star_id,
        name=f"Test {star_id}",
        x=x,
        y=y,
        size=size,
        color=(200, 200, 200, 255),
        pulse_rate=1.0,
        frequency=440.0,
        planets=[Planet(distance=50.0, size=4.0, color=(150, 150, 150), orbit_speed=0.01)],
    )


@pytest.fixture
def stars():
    return [
        make_star(0, 300.0, 300.0),
        make_star(1, 640.0, 400.0),
        make_star(2, 900.0, 500.0, size=3.0),
    ]


@pytest.fixture
def camera():
    return Camera()


@pytest.fixture
def view(camera):
    return ViewStateMachine(camera, transition_duration=1.5, transition_zoom=5.0)


@pytest.fixture
def state(stars, camera, view):
    return SimulationState(stars=stars, camera=camera, view=view, width=WIDTH, height=HEIGHT)


@pytest.fixture
def controller(state):
    ctrl = ExplorerController(state)
    ctrl.start(0.0)
    return ctrl
