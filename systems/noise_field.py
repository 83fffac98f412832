"""
Noise Field Module
==================
Seeded coherent noise shared by galaxy placement and the background field.

Features:
- One seed per run, drawn once if not supplied
- Octave-summed OpenSimplex noise
- 1D, 2D and 3D sampling, always in [0, 1)
"""

import random
from typing import Optional

from opensimplex import OpenSimplex


class NoiseField:
    """Deterministic coherent noise in the unit interval."""

    OCTAVES = 4
    PERSISTENCE = 0.5
    LACUNARITY = 2.0

    # Largest float below 1.0 keeps samples inside [0, 1)
    _UPPER = 1.0 - 1e-12

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = random.randint(1, 999999)
        self.seed = seed
        self._noise = OpenSimplex(seed=seed)

    def sample(self, x: float, y: float = 0.0, z: Optional[float] = None) -> float:
        """
        Sample the field.

        Args:
            x: First coordinate
            y: Second coordinate (single-channel calls use the y = 0 row)
            z: Optional third coordinate for 3D noise

        Returns:
            Noise value in [0, 1)
        """
        amp = 1.0
        freq = 1.0
        total = 0.0
        max_amp = 0.0

        for _ in range(self.OCTAVES):
            if z is None:
                total += amp * self._noise.noise2(x * freq, y * freq)
            else:
                total += amp * self._noise.noise3(x * freq, y * freq, z * freq)
            max_amp += amp
            amp *= self.PERSISTENCE
            freq *= self.LACUNARITY

        value = (total / max_amp + 1.0) * 0.5
        return max(0.0, min(self._UPPER, value))

    def __call__(self, x: float, y: float = 0.0, z: Optional[float] = None) -> float:
        return self.sample(x, y, z)
