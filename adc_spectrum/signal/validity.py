from __future__ import annotations

from adc_spectrum.config import Settings


def bin_resolution_hz(sampling_hz: float, window: int) -> float:
    """Spacing between FFT bins."""
    if window <= 0:
        return 0.0
    return float(sampling_hz) / float(window)


def window_is_coherent(cfg: Settings) -> bool:
    """
    True when the window holds a whole number of fundamental cycles,
    so every harmonic lands exactly on a bin (no leakage).
    """
    return cfg.window % cfg.samples_per_cycle == 0


def highest_scanned_hz(cfg: Settings) -> float:
    return (cfg.window // 2 - 1) * bin_resolution_hz(cfg.sampling_hz, cfg.window)


def unreachable_harmonics(cfg: Settings) -> list[int]:
    """
    Configured orders the peak scan can never report: above the last scanned
    bin (Nyquist and beyond) or off the bin grid.
    """
    res = bin_resolution_hz(cfg.sampling_hz, cfg.window)
    top = highest_scanned_hz(cfg)

    out: list[int] = []
    for order in cfg.harmonics:
        f = order * cfg.fundamental_hz
        on_grid = res > 0 and abs(f / res - round(f / res)) <= 1e-9
        if f > top or not on_grid:
            out.append(order)
    return out
