"""
Tests for star tone amplitude and waveform helpers
"""

import numpy as np
import pytest

from systems.audio import StarToneBank, sine_wave, tone_amplitude


def test_amplitude_linear_falloff():
    assert tone_amplitude(0, 1.0) == pytest.approx(0.2)
    assert tone_amplitude(100, 1.0) == pytest.approx(0.1)
    assert tone_amplitude(200, 1.0) == pytest.approx(0.0)
    assert tone_amplitude(450, 1.0) == 0.0


def test_amplitude_scaled_by_pulse():
    assert tone_amplitude(50, 0.5) == pytest.approx(0.075)
    assert tone_amplitude(0, 0.0) == 0.0


def test_amplitude_always_clamped():
    for distance in (-100, 0, 37, 199, 1e6):
        for pulse in (0.0, 0.3, 1.0, 2.0):
            assert 0.0 <= tone_amplitude(distance, pulse) <= 0.2


def test_sine_wave_loops_whole_cycles():
    samples = sine_wave(441.0, sample_rate=44100)

    assert samples.dtype == np.int16
    assert len(samples) == 44100
    assert samples[0] == 0
    assert np.abs(samples).max() <= 32767


def test_bank_ignores_amplitudes_before_start():
    bank = StarToneBank()
    bank.set_amplitudes([0.1, 0.2])
    bank.stop()
    assert not bank.started
