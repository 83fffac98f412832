"""
Scenes for Star Explorer.
"""

from .explorer_scene import ExplorerScene, create_simulation

__all__ = [
    'ExplorerScene',
    'create_simulation',
]
