"""
UI components and settings for Star Explorer.
"""

from .settings import (
    ExplorerSettings, GalaxySettings, CameraSettings,
    InputSettings, AudioSettings, GraphicsSettings
)
from .buttons import Button, ButtonBar

__all__ = [
    'ExplorerSettings', 'GalaxySettings', 'CameraSettings',
    'InputSettings', 'AudioSettings', 'GraphicsSettings',
    'Button', 'ButtonBar',
]
