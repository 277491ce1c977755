from __future__ import annotations

import numpy as np
from scipy.fft import fft


class TransformAllocationError(RuntimeError):
    """FFT working buffers could not be allocated. Fatal for the run."""


def transform(waveform: np.ndarray) -> np.ndarray:
    """
    Forward FFT of a real capture.
    Samples are staged into a complex buffer (imag = 0) sized to the window;
    returns one complex coefficient per bin, same length as the input.
    """
    x = np.asarray(waveform, dtype=float)
    n = int(x.size)

    try:
        buf = np.zeros(n, dtype=np.complex128)
        buf.real = x
        out = fft(buf, n=n)
    except MemoryError as e:
        raise TransformAllocationError(f"Insufficient memory for {n}-point FFT") from e

    return out
