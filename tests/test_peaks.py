from __future__ import annotations

import numpy as np
import pytest

from adc_spectrum.signal.fft_engine import transform
from adc_spectrum.signal.generator import generate_harmonic
from adc_spectrum.signal.peaks import extract_peaks, magnitude_spectrum, scanned_bins


def test_scanned_bins_skip_dc_and_upper_half() -> None:
    bins = scanned_bins(800)
    assert bins[0] == 1
    assert bins[-1] == 399
    assert scanned_bins(9).tolist() == [1, 2, 3]


def test_pure_sinusoid_gives_single_peak(cfg, zero_noise) -> None:
    x = generate_harmonic(100.0, 3, cfg.window, cfg=cfg, noise=zero_noise)
    peaks = extract_peaks(transform(x), cfg.window, cfg.sampling_hz, cfg.noise_threshold)

    assert list(peaks) == [150.0]
    assert peaks[150.0] == pytest.approx(100.0, abs=1e-6)


def test_bin_on_threshold_is_excluded() -> None:
    n = 8
    c = np.zeros(n, dtype=complex)
    c[0] = 1000.0       # DC never reported
    c[1] = 4.0          # magnitude exactly 1.0
    c[2] = 3.0 + 3.0j   # magnitude ~1.06
    c[4] = 1000.0       # Nyquist bin is outside the scan

    peaks = extract_peaks(c, n, 800, threshold=1.0)
    assert peaks == {200.0: pytest.approx(np.sqrt(18.0) / 4.0)}


def test_keys_sit_on_bin_grid_and_clear_threshold(cfg, seeded_noise) -> None:
    x = generate_harmonic(20.0, 7, cfg.window, cfg=cfg, noise=seeded_noise)
    coeffs = transform(x)
    thr = 0.05
    peaks = extract_peaks(coeffs, cfg.window, cfg.sampling_hz, thr)

    assert peaks
    grid = {cfg.sampling_hz * i / cfg.window for i in scanned_bins(cfg.window)}
    for f, m in peaks.items():
        assert f in grid
        assert m > thr


def test_magnitude_spectrum_is_single_sided(cfg, zero_noise) -> None:
    x = generate_harmonic(10.0, 2, cfg.window, cfg=cfg, noise=zero_noise)
    freqs, mags = magnitude_spectrum(transform(x), cfg.window, cfg.sampling_hz)

    assert freqs.shape == mags.shape == (cfg.window // 2 - 1,)
    assert freqs[0] == 5.0
    assert freqs[int(np.argmax(mags))] == 100.0
    assert np.max(mags) == pytest.approx(10.0, abs=1e-6)
