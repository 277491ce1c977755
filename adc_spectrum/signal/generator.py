from __future__ import annotations

import numpy as np

from adc_spectrum.config import Settings, settings
from adc_spectrum.signal.noise import LsbNoise
from adc_spectrum.signal.quantizer import quantize


def phase_radians(window_length: int, samples_per_cycle: int) -> np.ndarray:
    """
    Sample phase within the fundamental cycle, wrapping every cycle so the
    window stays phase-continuous across cycles.
    """
    idx = np.arange(window_length) % samples_per_cycle
    degrees = idx * (360.0 / samples_per_cycle)
    return np.deg2rad(degrees)


def generate_harmonic(
    amplitude: float,
    order: int,
    window_length: int,
    *,
    cfg: Settings | None = None,
    noise: LsbNoise | None = None,
) -> np.ndarray:
    """
    One window of amplitude * sin(order * phase) as the ADC would see it,
    with a random LSB error of up to +-max_lsb_error steps on every sample.

    The exact sample is quantized to the ADC step but the quantized level is
    not fed back: noise is added to the exact value.
    """
    cfg = cfg or settings
    noise = noise or LsbNoise()

    radians = phase_radians(window_length, cfg.samples_per_cycle)
    exact = float(amplitude) * np.sin(order * radians)

    adc_levels = quantize(exact, cfg.step_size)  # noqa: F841 - resolution only

    lsb = noise.draw(cfg.max_lsb_error, window_length)
    return exact + cfg.step_size * lsb
