from __future__ import annotations

from pathlib import Path

import numpy as np
import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import matplotlib.ticker as mticker


def _format_hz(x, _pos=None) -> str:
    """Hz -> '50', '1.5k'."""
    try:
        x = float(x)
    except (TypeError, ValueError):
        return ""
    if abs(x) >= 1000:
        return f"{x / 1000:g}k"
    return f"{x:g}"


def plot_spectrum(
    freqs: np.ndarray,
    mags: np.ndarray,
    peaks: dict[float, float],
    threshold: float,
    out_path: str,
    title: str,
):
    """
    Stem chart of the scanned spectrum with the noise floor and labelled peaks.
    """
    out_path = str(out_path)
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)

    fig = plt.figure(figsize=(6.6, 2.6), dpi=160)
    ax = fig.add_subplot(111)

    if len(freqs) == 0:
        ax.set_title(title, fontsize=11)
        ax.text(0.5, 0.5, "Empty spectrum", ha="center", va="center", fontsize=10)
        ax.set_axis_off()
        plt.tight_layout()
        fig.savefig(out_path, bbox_inches="tight")
        plt.close(fig)
        return

    ax.vlines(freqs, 0.0, mags, linewidth=0.8)
    ax.axhline(threshold, linestyle="--", linewidth=0.9, alpha=0.7, color="tab:red")

    for f in sorted(peaks):
        ax.annotate(
            f"{peaks[f]:.1f}V",
            (f, peaks[f]),
            textcoords="offset points",
            xytext=(0, 3),
            ha="center",
            fontsize=7,
        )

    ax.set_title(title, fontsize=11, pad=10)
    ax.set_xlabel("Frequency (Hz)", fontsize=9)
    ax.set_ylabel("Magnitude (V)", fontsize=9)
    ax.xaxis.set_major_locator(mticker.MaxNLocator(nbins=8))
    ax.xaxis.set_major_formatter(mticker.FuncFormatter(_format_hz))
    ax.tick_params(axis="both", labelsize=8)
    ax.grid(True, axis="y", alpha=0.25)

    plt.tight_layout()
    fig.savefig(out_path, bbox_inches="tight")
    plt.close(fig)
