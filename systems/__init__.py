"""
Galaxy systems and data models for Star Explorer.
"""

from .noise_field import NoiseField
from .galaxy import (
    Star, Planet, StarNameGenerator, GalaxyGenerator, GenerationReport
)
from .camera import (
    Camera, CameraTransform, ease_in_out_cubic, world_to_screen, screen_to_world
)
from .hit_test import HitTester
from .view_state import ViewMode, ViewTransition, ViewStateMachine
from .simulation import SimulationState, ExplorerController

__all__ = [
    # Generation
    'NoiseField', 'Star', 'Planet', 'StarNameGenerator',
    'GalaxyGenerator', 'GenerationReport',
    # Camera and view
    'Camera', 'CameraTransform', 'ease_in_out_cubic',
    'world_to_screen', 'screen_to_world',
    'HitTester', 'ViewMode', 'ViewTransition', 'ViewStateMachine',
    # Simulation
    'SimulationState', 'ExplorerController',
]
