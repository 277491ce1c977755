from __future__ import annotations


def format_peak(freq_hz: float, magnitude_v: float) -> str:
    return f"{freq_hz:g}Hz = {magnitude_v:g}V"


def format_peaks(peaks: dict[float, float]) -> list[str]:
    """One '<freq>Hz = <magnitude>V' line per peak, lowest frequency first."""
    return [format_peak(f, peaks[f]) for f in sorted(peaks)]


def summary_lines(thd: float, crest: float, harmonics: dict[int, float]) -> list[str]:
    lines = [f"THD: {thd:.2f}%", f"Crest factor: {crest:.3f}"]
    v1 = harmonics.get(1, 0.0)
    for order in sorted(harmonics):
        if order == 1 or v1 <= 1e-12:
            continue
        lines.append(f"H{order}: {harmonics[order] / v1 * 100.0:.1f}% of fundamental")
    return lines
