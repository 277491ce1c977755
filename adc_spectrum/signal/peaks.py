from __future__ import annotations

import numpy as np


def scanned_bins(window_length: int) -> np.ndarray:
    """Bins 1 .. N/2 - 1: DC and the mirrored upper half are skipped."""
    return np.arange(1, window_length // 2)


def bin_frequencies(window_length: int, sampling_rate_hz: float) -> np.ndarray:
    return float(sampling_rate_hz) * scanned_bins(window_length) / float(window_length)


def magnitude_spectrum(
    coefficients: np.ndarray,
    window_length: int,
    sampling_rate_hz: float,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Single-sided amplitude spectrum (volts) over the scanned bins.
    Coefficients are normalised by N and doubled to fold the negative
    frequencies back in.
    """
    c = np.asarray(coefficients)
    bins = scanned_bins(window_length)
    n = float(window_length)

    re = c.real[bins] / n
    im = c.imag[bins] / n
    mags = np.sqrt(re * re + im * im) * 2.0

    return bin_frequencies(window_length, sampling_rate_hz), mags


def extract_peaks(
    coefficients: np.ndarray,
    window_length: int,
    sampling_rate_hz: float,
    threshold: float,
) -> dict[float, float]:
    """
    Frequency (Hz) -> magnitude (V) for every scanned bin strictly above
    threshold. A bin sitting exactly on the threshold is treated as noise.
    """
    freqs, mags = magnitude_spectrum(coefficients, window_length, sampling_rate_hz)

    out: dict[float, float] = {}
    for f, m in zip(freqs, mags):
        if m > threshold:
            out[float(f)] = float(m)
    return out
