from __future__ import annotations

import numpy as np


def quantize(value, step: float):
    """
    Round value to the nearest multiple of an ADC step.
    step == 0 means no quantization, the value passes through.
    Works on scalars and numpy arrays alike.
    """
    if step == 0:
        return value
    if isinstance(value, np.ndarray):
        return np.round(value / step) * step
    return round(float(value) / step) * step
