from __future__ import annotations

from typing import Optional

import typer
from rich.markup import escape

from adc_spectrum.config import settings
from adc_spectrum.pipeline import SpectrumPipeline
from adc_spectrum.report.text import format_peaks, summary_lines
from adc_spectrum.signal.fft_engine import TransformAllocationError
from adc_spectrum.signal.noise import LsbNoise
from adc_spectrum.signal.peaks import extract_peaks, magnitude_spectrum
from adc_spectrum.utils.logging import error, info, set_quiet

app = typer.Typer(add_completion=False)


def _parse_harmonics(items: list[str]) -> dict[int, int]:
    """'2:50' '4:25' -> {2: 50, 4: 25}"""
    out: dict[int, int] = {}
    for item in items:
        try:
            order, pct = item.split(":", 1)
            out[int(order)] = int(pct)
        except ValueError:
            raise typer.BadParameter(f"Expected ORDER:PERCENT, got {item!r}", param_hint="--harmonic")
    return out


# -------------------------
# Typer CLI
# -------------------------
@app.command()
def run(
    sampling_hz: Optional[int] = typer.Option(None, help="ADC sampling rate (Hz)"),
    fundamental_hz: Optional[int] = typer.Option(None, help="Fundamental frequency (Hz)"),
    window: Optional[int] = typer.Option(None, help="Samples per capture"),
    step_size: Optional[float] = typer.Option(None, help="Volts per ADC step"),
    max_lsb_error: Optional[int] = typer.Option(None, help="Max random error in LSB steps"),
    amplitude: Optional[float] = typer.Option(None, help="Fundamental amplitude (V)"),
    harmonic: Optional[list[str]] = typer.Option(None, help="ORDER:PERCENT, repeatable"),
    seed: Optional[int] = typer.Option(None, help="Seed for the LSB noise generator"),
    full: bool = typer.Option(False, "--full", help="List every bin above one ADC step"),
    plot: Optional[str] = typer.Option(None, help="Write a spectrum chart to this PNG path"),
    quiet: bool = typer.Option(False, "--quiet", help="Only print results"),
):
    set_quiet(quiet)

    try:
        cfg = settings.with_overrides(
            sampling_hz=sampling_hz,
            fundamental_hz=fundamental_hz,
            window=window,
            step_size=step_size,
            max_lsb_error=max_lsb_error,
            fundamental_amplitude=amplitude,
            harmonics=_parse_harmonics(harmonic) if harmonic else None,
        )
    except ValueError as e:
        error(f"Invalid configuration: {escape(str(e))}")
        raise typer.Exit(code=2)

    pipeline = SpectrumPipeline(cfg, noise=LsbNoise.seeded(seed))

    try:
        result = pipeline.run()
    except TransformAllocationError as e:
        error(escape(str(e)))
        raise typer.Exit(code=1)

    if full:
        # every bin the ADC can resolve, not just those above the noise floor
        listing = extract_peaks(result.coefficients, cfg.window, cfg.sampling_hz, cfg.step_size)
    else:
        listing = result.peaks

    for line in format_peaks(listing):
        typer.echo(line)
    for line in summary_lines(result.thd, result.crest, result.harmonics):
        typer.echo(line)

    if plot:
        from adc_spectrum.report.plots import plot_spectrum

        freqs, mags = magnitude_spectrum(result.coefficients, cfg.window, cfg.sampling_hz)
        plot_spectrum(
            freqs,
            mags,
            result.peaks,
            cfg.noise_threshold,
            plot,
            title=f"{cfg.fundamental_hz}Hz capture, {cfg.window} samples @ {cfg.sampling_hz}Hz",
        )
        info(f"Spectrum chart written: {plot}")


if __name__ == "__main__":
    app()
