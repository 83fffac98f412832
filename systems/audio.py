"""
Star Audio
==========
One sine tone per star, louder as the pointer gets close.

The controller computes amplitudes; this module only plays them.
"""

import math
from typing import List, Sequence

import numpy as np
import pygame

from .galaxy import Star


def tone_amplitude(distance: float, pulse: float,
                   falloff: float = 200.0, max_amplitude: float = 0.2) -> float:
    """Linear falloff to zero at `falloff` pixels, scaled by the star's pulse."""
    if falloff <= 0:
        return 0.0
    amp = max_amplitude * (1 - distance / falloff)
    amp = max(0.0, min(max_amplitude, amp))
    return amp * max(0.0, min(1.0, pulse))


def sine_wave(frequency: float, sample_rate: int = 44100) -> np.ndarray:
    """
    One loopable buffer of a sine tone as int16 samples.

    The buffer holds a whole number of cycles so looping is seamless.
    """
    cycles = max(1, int(round(frequency)))
    n_samples = int(round(sample_rate * cycles / frequency))
    t = np.arange(n_samples) / sample_rate
    wave = np.sin(2 * math.pi * frequency * t)
    return (wave * 32767).astype(np.int16)


class StarToneBank:
    """Looped pygame.mixer tones, one channel per star."""

    def __init__(self, sample_rate: int = 44100):
        self.sample_rate = sample_rate
        self.sounds: List[pygame.mixer.Sound] = []
        self.channels: List[pygame.mixer.Channel] = []
        self.started = False

    def start(self, stars: Sequence[Star]) -> bool:
        """Create and start one silent tone per star. Second call is a no-op."""
        if self.started:
            return True

        try:
            pygame.mixer.init(frequency=self.sample_rate, size=-16, channels=1)
            pygame.mixer.set_num_channels(len(stars))

            for star in stars:
                sound = pygame.sndarray.make_sound(self._buffer_for(star.frequency))
                sound.set_volume(0.0)
                channel = sound.play(loops=-1)
                self.sounds.append(sound)
                self.channels.append(channel)
        except pygame.error as e:
            print(f"Audio unavailable: {e}")
            self.sounds = []
            self.channels = []
            return False

        self.started = True
        print("Audio started")
        return True

    def _buffer_for(self, frequency: float) -> np.ndarray:
        samples = sine_wave(frequency, self.sample_rate)
        _, _, mixer_channels = pygame.mixer.get_init()
        if mixer_channels > 1:
            samples = np.repeat(samples[:, None], mixer_channels, axis=1)
        return np.ascontiguousarray(samples)

    def set_amplitudes(self, amplitudes: Sequence[float]):
        if not self.started:
            return
        for channel, amp in zip(self.channels, amplitudes):
            if channel is not None:
                channel.set_volume(amp)

    def stop(self):
        if not self.started:
            return
        for channel in self.channels:
            if channel is not None:
                channel.stop()
        self.sounds = []
        self.channels = []
        self.started = False
        pygame.mixer.quit()
