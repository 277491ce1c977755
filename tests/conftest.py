from __future__ import annotations

import numpy as np
import pytest

from adc_spectrum.config import Settings
from adc_spectrum.signal.noise import LsbNoise


class ZeroNoise(LsbNoise):
    """LSB source pinned to 0 so captures are exact sinusoids."""

    def draw(self, max_lsb_error: int, size: int) -> np.ndarray:
        return np.zeros(size, dtype=int)


@pytest.fixture
def zero_noise() -> LsbNoise:
    return ZeroNoise()


@pytest.fixture
def seeded_noise() -> LsbNoise:
    return LsbNoise.seeded(1234)


@pytest.fixture
def cfg() -> Settings:
    return Settings()
