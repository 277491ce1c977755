from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from adc_spectrum.config import Settings, settings
from adc_spectrum.signal.composite import combine
from adc_spectrum.signal.fft_engine import transform
from adc_spectrum.signal.generator import generate_harmonic
from adc_spectrum.signal.metrics import crest_factor, harmonic_orders, thd_percent
from adc_spectrum.signal.noise import LsbNoise
from adc_spectrum.signal.peaks import extract_peaks
from adc_spectrum.signal.validity import unreachable_harmonics, window_is_coherent
from adc_spectrum.utils.logging import info, warn


@dataclass
class SpectrumResult:
    waveform: np.ndarray
    coefficients: np.ndarray
    peaks: dict[float, float]
    thd: float
    crest: float
    harmonics: dict[int, float] = field(default_factory=dict)


class SpectrumPipeline:
    """
    Synthesize an ADC capture of a distorted waveform and recover its peaks.

    generate (per harmonic) -> combine -> FFT -> peak extraction.
    Each pipeline owns its noise source, so runs on separate pipelines never
    share generator state.
    """

    def __init__(self, cfg: Settings | None = None, noise: LsbNoise | None = None):
        cfg = settings if cfg is None else cfg
        if not isinstance(cfg, Settings):
            raise TypeError(f"Expected Settings, got {type(cfg).__name__}")

        self.cfg = cfg
        self.noise = noise if noise is not None else LsbNoise()

        if not window_is_coherent(cfg):
            warn(
                f"Window of {cfg.window} samples is not a whole number of "
                f"{cfg.samples_per_cycle}-sample cycles; expect spectral leakage."
            )
        for order in unreachable_harmonics(cfg):
            warn(
                f"Harmonic {order} ({order * cfg.fundamental_hz}Hz) is outside the scanned "
                f"bins (Nyquist {cfg.nyquist_hz:g}Hz); it will not be reported."
            )

    def components(self) -> list[np.ndarray]:
        """Fundamental first, then one window per configured harmonic."""
        cfg = self.cfg
        return [
            generate_harmonic(amp, order, cfg.window, cfg=cfg, noise=self.noise)
            for order, amp in cfg.harmonic_amplitudes.items()
        ]

    def synthesize(self) -> np.ndarray:
        waves = self.components()
        info(f"Synthesized {len(waves)} components x {self.cfg.window} samples.")
        return combine(waves, self.cfg.window)

    def analyze(self, waveform: np.ndarray) -> tuple[np.ndarray, dict[float, float]]:
        cfg = self.cfg
        coeffs = transform(waveform)
        peaks = extract_peaks(coeffs, cfg.window, cfg.sampling_hz, cfg.noise_threshold)
        info(f"{len(peaks)} peaks above {cfg.noise_threshold:.4f}V noise floor.")
        return coeffs, peaks

    def run(self) -> SpectrumResult:
        waveform = self.synthesize()
        coeffs, peaks = self.analyze(waveform)
        harms = harmonic_orders(peaks, self.cfg.fundamental_hz)
        return SpectrumResult(
            waveform=waveform,
            coefficients=coeffs,
            peaks=peaks,
            thd=thd_percent(harms),
            crest=crest_factor(waveform),
            harmonics=harms,
        )
