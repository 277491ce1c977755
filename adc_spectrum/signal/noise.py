from __future__ import annotations

import numpy as np


class LsbNoise:
    """
    Uniform integer LSB error source backed by a numpy Generator.
    One instance per pipeline; every draw advances the generator state.
    """

    def __init__(self, rng: np.random.Generator | None = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    @classmethod
    def seeded(cls, seed: int | None) -> "LsbNoise":
        return cls(np.random.default_rng(seed))

    def draw(self, max_lsb_error: int, size: int) -> np.ndarray:
        """size integers from the closed range [-max_lsb_error, +max_lsb_error]."""
        return self.rng.integers(-max_lsb_error, max_lsb_error, size=size, endpoint=True)
