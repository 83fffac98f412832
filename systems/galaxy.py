"""
Galaxy Module
=============
Procedurally generated galaxy of star systems.

Features:
- Noise-driven star placement along swirling arms
- Rejection sampling with a minimum separation between stars
- Random planetary system for every star
- Generation report instead of hard failure when space runs out
"""

import math
import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .camera import CameraTransform, world_to_screen
from .noise_field import NoiseField


# Pulse phase per second: 0.02 per frame at 60 fps
PULSE_SPEED = 60 * 0.02

HIT_RADIUS_SCALE = 5


# =====================
# PLANET DATA
# =====================
@dataclass
class Planet:
    """A planet orbiting exactly one star."""
    distance: float
    size: float
    color: Tuple[int, int, int]
    orbit_speed: float
    angle: float = 0.0

    def advance(self):
        """Advance one frame along the orbit. Trig wraps the angle."""
        self.angle += self.orbit_speed

    def position(self, cx: float, cy: float) -> Tuple[float, float]:
        return (
            cx + math.cos(self.angle) * self.distance,
            cy + math.sin(self.angle) * self.distance,
        )


# =====================
# STAR DATA
# =====================
@dataclass
class Star:
    """A star in the galaxy. Position is in world pixels, fixed at generation."""
    id: int
    name: str
    x: float
    y: float
    size: float
    color: Tuple[int, int, int, int]
    pulse_rate: float
    frequency: float
    planets: List[Planet] = field(default_factory=list)

    # Visual state, recomputed every frame
    pulse: float = 0.0

    @property
    def hit_radius(self) -> float:
        return self.size * HIT_RADIUS_SCALE

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.color[:3]

    def pulse_at(self, elapsed: float) -> float:
        """Pulse value in [0, 1] as a pure function of elapsed seconds."""
        return (math.sin(elapsed * PULSE_SPEED * self.pulse_rate) + 1) * 0.5

    def update_pulse(self, elapsed: float) -> float:
        self.pulse = self.pulse_at(elapsed)
        return self.pulse

    def distance_to(self, x: float, y: float) -> float:
        return math.hypot(self.x - x, self.y - y)

    def screen_pos(self, transform: CameraTransform, width: int, height: int) -> Tuple[float, float]:
        return world_to_screen(self.x, self.y, transform, width, height)

    def distance_to_pointer(self, pointer_x: float, pointer_y: float,
                            transform: CameraTransform, width: int, height: int) -> float:
        """On-screen distance from the pointer to this star."""
        sx, sy = self.screen_pos(transform, width, height)
        return math.hypot(pointer_x - sx, pointer_y - sy)


# =====================
# STAR NAME GENERATOR
# =====================
class StarNameGenerator:
    """Generates star names from two word pools."""

    NAMES = [
        "Proxima", "Sirius", "Vega", "Altair", "Antares", "Rigel", "Deneb",
        "Canopus", "Arcturus", "Aldebaran", "Pollux", "Spica", "Betelgeuse",
        "Castor", "Regulus", "Polaris", "Fomalhaut", "Capella", "Achernar"
    ]

    SUFFIXES = [
        "Alpha", "Beta", "Gamma", "Delta", "Epsilon", "Zeta", "Theta",
        "Prime", "Secundus", "Tertius", "Minor", "Major", "Centauri"
    ]

    @classmethod
    def generate(cls, rng: random.Random) -> str:
        return f"{rng.choice(cls.NAMES)} {rng.choice(cls.SUFFIXES)}"


# =====================
# GENERATION REPORT
# =====================
@dataclass
class GenerationReport:
    """Outcome of one generate() call."""
    requested: int
    accepted: int
    attempts: int
    max_attempts: int
    warning_ratio: float = 0.8

    @property
    def exhausted(self) -> bool:
        """Attempt cap reached before the requested count."""
        return self.accepted < self.requested

    @property
    def below_warning(self) -> bool:
        return self.accepted < self.requested * self.warning_ratio

    def summary(self) -> str:
        return (f"Generated {self.accepted}/{self.requested} stars "
                f"in {self.attempts}/{self.max_attempts} attempts")


# =====================
# GALAXY GENERATOR
# =====================
class GalaxyGenerator:
    """Scatters stars along noise-driven arms, keeping them apart."""

    def __init__(self,
                 seed: Optional[int] = None,
                 noise: Optional[NoiseField] = None,
                 max_attempts: int = 1000,
                 separation_margin: float = 30.0,
                 edge_margin: float = 50.0,
                 warning_ratio: float = 0.8):
        if seed is None:
            seed = noise.seed if noise is not None else random.randint(1, 999999)
        self.seed = seed
        self.rng = random.Random(seed)
        self.noise = noise if noise is not None else NoiseField(seed)

        self.max_attempts = max_attempts
        self.separation_margin = separation_margin
        self.edge_margin = edge_margin
        self.warning_ratio = warning_ratio

        self.last_report: Optional[GenerationReport] = None

    def generate(self, target_count: int, canvas_width: int, canvas_height: int) -> List[Star]:
        """
        Generate up to target_count stars on the given canvas.

        Args:
            target_count: Number of stars wanted
            canvas_width: Canvas width in pixels
            canvas_height: Canvas height in pixels

        Returns:
            Accepted stars in generation order. May be shorter than
            target_count when the attempt cap runs out.
        """
        stars: List[Star] = []
        attempts = 0
        target_count = max(0, target_count)

        while len(stars) < target_count and attempts < self.max_attempts:
            attempts += 1

            x, y = self._candidate_position(attempts, canvas_width, canvas_height)
            size = self.rng.uniform(2, 6)

            if self._is_valid_position(x, y, size, stars):
                stars.append(self._create_star(len(stars), x, y, size))

        self.last_report = GenerationReport(
            requested=target_count,
            accepted=len(stars),
            attempts=attempts,
            max_attempts=self.max_attempts,
            warning_ratio=self.warning_ratio,
        )
        self._report(self.last_report)

        return stars

    def _candidate_position(self, attempt: int, width: int, height: int) -> Tuple[float, float]:
        """Polar offset from the canvas center, taken from the noise field."""
        angle = self.noise.sample(attempt * 0.1) * math.pi * 2 * 4
        radius = self.noise.sample(attempt * 0.05 + 100) * min(width, height) * 0.45

        x = width / 2 + math.cos(angle) * radius
        y = height / 2 + math.sin(angle) * radius

        return (self._constrain(x, width), self._constrain(y, height))

    def _constrain(self, value: float, dimension: float) -> float:
        """Keep away from the edges; tiny canvases collapse to the center line."""
        low = min(self.edge_margin, dimension / 2)
        high = max(dimension - self.edge_margin, dimension / 2)
        return max(low, min(high, value))

    def _is_valid_position(self, x: float, y: float, size: float, stars: List[Star]) -> bool:
        """Check the candidate is far enough from every accepted star."""
        min_dist = self.separation_margin + size
        for star in stars:
            if star.distance_to(x, y) < min_dist + star.size:
                return False
        return True

    def _create_star(self, star_id: int, x: float, y: float, size: float) -> Star:
        """Create a star with randomized properties."""
        color = (
            int(self.rng.uniform(150, 255)),
            int(self.rng.uniform(150, 255)),
            int(self.rng.uniform(150, 255)),
            255,
        )
        name = StarNameGenerator.generate(self.rng)
        pulse_rate = self.rng.uniform(0.5, 2)
        frequency = self.rng.uniform(200, 800)

        return Star(
            id=star_id,
            name=name,
            x=x,
            y=y,
            size=size,
            color=color,
            pulse_rate=pulse_rate,
            frequency=frequency,
            planets=self._create_planets(),
        )

    def _create_planets(self) -> List[Planet]:
        planets = []
        for _ in range(self.rng.randint(1, 5)):
            planets.append(Planet(
                distance=self.rng.uniform(20, 100),
                size=self.rng.uniform(2, 8),
                color=(
                    int(self.rng.uniform(100, 255)),
                    int(self.rng.uniform(100, 255)),
                    int(self.rng.uniform(100, 255)),
                ),
                orbit_speed=self.rng.uniform(0.005, 0.02),
                angle=self.rng.uniform(0, math.pi * 2),
            ))
        return planets

    def _report(self, report: GenerationReport):
        print(report.summary())
        if report.below_warning:
            print(f"Warning: only {report.accepted} of {report.requested} stars placed "
                  f"(below {int(report.warning_ratio * 100)}% of target)")
