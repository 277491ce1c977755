from __future__ import annotations

import pytest
from typer.testing import CliRunner

from adc_spectrum.main import app

runner = CliRunner()


def _peaks(output: str) -> dict[float, float]:
    out: dict[float, float] = {}
    for line in output.splitlines():
        if "Hz = " not in line or not line.endswith("V"):
            continue
        freq, mag = line.split("Hz = ")
        out[float(freq)] = float(mag[:-1])
    return out


def test_prints_peaks_and_summary() -> None:
    result = runner.invoke(app, ["--seed", "1", "--quiet"])

    assert result.exit_code == 0, result.output
    peaks = _peaks(result.output)
    assert sorted(peaks) == [50.0, 100.0, 200.0, 250.0, 1950.0]
    assert peaks[50.0] == pytest.approx(315.0, abs=0.25)
    assert peaks[100.0] == pytest.approx(157.5, abs=0.25)
    assert "THD: " in result.output
    assert "H2: " in result.output


def test_custom_harmonics() -> None:
    result = runner.invoke(
        app,
        ["--max-lsb-error", "1", "--harmonic", "3:20", "--seed", "2", "--quiet"],
    )

    assert result.exit_code == 0, result.output
    peaks = _peaks(result.output)
    assert sorted(peaks) == [50.0, 150.0]
    assert peaks[150.0] == pytest.approx(63.0, abs=0.1)


def test_full_listing_is_a_superset() -> None:
    short = runner.invoke(app, ["--seed", "3", "--quiet"])
    full = runner.invoke(app, ["--seed", "3", "--quiet", "--full"])

    assert full.exit_code == 0, full.output
    assert set(_peaks(short.output)) <= set(_peaks(full.output))


def test_invalid_configuration_exits_2() -> None:
    assert runner.invoke(app, ["--window", "0"]).exit_code == 2
    assert runner.invoke(app, ["--fundamental-hz", "60"]).exit_code == 2
    assert runner.invoke(app, ["--harmonic", "three"]).exit_code == 2


def test_plot_is_written(tmp_path) -> None:
    out = tmp_path / "charts" / "spectrum.png"
    result = runner.invoke(app, ["--seed", "4", "--quiet", "--plot", str(out)])

    assert result.exit_code == 0, result.output
    assert out.exists()
    assert out.stat().st_size > 0


def test_fft_allocation_failure_exits_1(monkeypatch) -> None:
    import adc_spectrum.signal.fft_engine as fft_engine

    def _no_memory(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr(fft_engine, "fft", _no_memory)
    result = runner.invoke(app, ["--seed", "5", "--quiet"])

    assert result.exit_code == 1
    assert "Insufficient memory" in result.output
    assert _peaks(result.output) == {}
