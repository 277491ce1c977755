from pydantic import BaseModel, ConfigDict, field_validator, model_validator

class Settings(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    # 12 bit differential ADC, 500V full scale -> 500 / 2^12 per step
    sampling_hz: int = 4000
    step_size: float = 0.1221
    max_lsb_error: int = 3

    # 800 samples per capture = 10 cycles at 50Hz
    window: int = 800
    fundamental_hz: int = 50
    fundamental_amplitude: float = 315.0

    # harmonic order -> % of fundamental amplitude
    harmonics: dict[int, int] = {2: 50, 4: 25, 5: 10, 39: 5, 40: 10}

    @field_validator("sampling_hz", "window", "fundamental_hz")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("must be a positive integer")
        return v

    @field_validator("step_size", "fundamental_amplitude")
    @classmethod
    def _non_negative_float(cls, v: float) -> float:
        if v < 0:
            raise ValueError("must be >= 0")
        return v

    @field_validator("max_lsb_error")
    @classmethod
    def _non_negative_int(cls, v: int) -> int:
        if v < 0:
            raise ValueError("must be >= 0")
        return v

    @field_validator("harmonics")
    @classmethod
    def _harmonic_map(cls, v: dict[int, int]) -> dict[int, int]:
        for order, pct in v.items():
            if order < 1:
                raise ValueError(f"harmonic order {order} must be >= 1")
            if not 0 <= pct <= 100:
                raise ValueError(f"harmonic {order}: amplitude {pct}% outside 0..100")
        return dict(sorted(v.items()))

    @model_validator(mode="after")
    def _whole_cycle(self) -> "Settings":
        if self.sampling_hz % self.fundamental_hz != 0:
            raise ValueError(
                f"sampling rate {self.sampling_hz}Hz is not a whole multiple of "
                f"the {self.fundamental_hz}Hz fundamental"
            )
        return self

    @property
    def samples_per_cycle(self) -> int:
        return self.sampling_hz // self.fundamental_hz

    @property
    def noise_threshold(self) -> float:
        """Largest amplitude the LSB noise alone can produce."""
        return self.step_size * self.max_lsb_error

    @property
    def nyquist_hz(self) -> float:
        return self.sampling_hz / 2.0

    @property
    def harmonic_amplitudes(self) -> dict[int, float]:
        """Order -> volts, with the fundamental as order 1."""
        out: dict[int, float] = {1: float(self.fundamental_amplitude)}
        for order, pct in self.harmonics.items():
            amp = self.fundamental_amplitude * pct / 100.0
            out[order] = out.get(order, 0.0) + amp
        return out

    def with_overrides(self, **changes) -> "Settings":
        """Copy with some fields replaced, re-running validation."""
        data = self.model_dump()
        data.update({k: v for k, v in changes.items() if v is not None})
        return Settings(**data)

settings = Settings()
