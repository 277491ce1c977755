from __future__ import annotations

import numpy as np


def harmonic_orders(peaks: dict[float, float], fundamental_hz: float) -> dict[int, float]:
    """
    Re-key a peak relation by harmonic order.
    Peaks that don't land on a whole multiple of the fundamental are dropped.
    """
    out: dict[int, float] = {}
    if fundamental_hz <= 0:
        return out
    for freq, mag in peaks.items():
        ratio = float(freq) / float(fundamental_hz)
        order = int(round(ratio))
        if order >= 1 and abs(ratio - order) <= 1e-9:
            out[order] = float(mag)
    return out


def thd_percent(harmonics: dict[int, float]) -> float:
    """Total harmonic distortion of an order -> volts relation, in % of the fundamental."""
    v1 = float(harmonics.get(1, 0.0))
    if v1 <= 1e-12:
        return 0.0
    overtones = np.array([v for h, v in harmonics.items() if h > 1], dtype=float)
    return float(np.linalg.norm(overtones)) / v1 * 100.0


def crest_factor(waveform: np.ndarray) -> float:
    """Peak over RMS of a capture; 0 for an empty or silent one."""
    x = np.asarray(waveform, dtype=float)
    if x.size == 0 or not np.any(x):
        return 0.0
    return float(np.max(np.abs(x)) / np.sqrt(np.mean(np.square(x))))
