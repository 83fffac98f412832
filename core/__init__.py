"""
Core engine components for Star Explorer.
"""

from .display import GameDisplay

__all__ = [
    'GameDisplay',
]
