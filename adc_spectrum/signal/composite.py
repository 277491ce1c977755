from __future__ import annotations

from typing import Sequence

import numpy as np

DECIMALS = 4


def combine(sequences: Sequence[np.ndarray], window_length: int) -> np.ndarray:
    """
    Sample-wise sum of harmonic windows, rounded to 4 decimals so float
    summation noise doesn't leak into the FFT.
    Inputs may carry trailing samples past the window; they are ignored.
    """
    total = np.zeros(window_length, dtype=float)
    for k, seq in enumerate(sequences):
        x = np.asarray(seq, dtype=float)
        if x.size < window_length:
            raise ValueError(f"Sequence {k} has {x.size} samples, window needs {window_length}")
        total += x[:window_length]

    scale = 10.0 ** DECIMALS
    return np.round(total * scale) / scale
