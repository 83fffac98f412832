"""
Hit Testing
===========
Resolves a screen point to the star under it.
"""

from typing import List, Optional

from .camera import CameraTransform, screen_to_world
from .galaxy import Star


class HitTester:
    """
    First-match hit testing in generation order.

    Overlapping hit circles favor the earlier-generated star.
    """

    def __init__(self, stars: List[Star]):
        self.stars = stars

    def resolve(self, screen_x: float, screen_y: float,
                transform: CameraTransform, width: int, height: int) -> Optional[Star]:
        """Return the first star whose hit radius contains the point, or None."""
        if not self.stars:
            return None

        world_x, world_y = screen_to_world(screen_x, screen_y, transform, width, height)

        for star in self.stars:
            if star.distance_to(world_x, world_y) < star.hit_radius:
                return star

        return None
