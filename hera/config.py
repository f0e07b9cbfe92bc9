"""
Run-time configuration for the generator and the run driver.

Defaults reproduce the ZEUS kinematic explorer. Any field can be
overridden from the environment, e.g. HERA_MAX_ATTEMPTS=200.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, fields

from . import constants


def _env_overrides(cls, prefix: str) -> dict:
    overrides = {}
    for f in fields(cls):
        raw = os.getenv(f"{prefix}{f.name.upper()}")
        if raw is None or raw == "":
            continue
        cast = int if f.type in ("int", int) else float
        try:
            overrides[f.name] = cast(raw)
        except ValueError:
            raise ValueError(f"{prefix}{f.name.upper()}={raw!r} is not a valid {cast.__name__}") from None
    return overrides


@dataclass(frozen=True)
class GeneratorConfig:
    q2_min: float = constants.Q2_MIN
    q2_max: float = constants.Q2_MAX
    x_min: float = constants.X_MIN
    x_max: float = constants.X_MAX
    y_min: float = constants.Y_MIN
    y_max: float = constants.Y_MAX
    isr_probability: float = constants.ISR_PROBABILITY
    min_electron_energy: float = constants.MIN_ELECTRON_ENERGY
    max_attempts: int = constants.MAX_ATTEMPTS

    def __post_init__(self):
        if not 0.0 < self.q2_min < self.q2_max:
            raise ValueError(f"Need 0 < q2_min < q2_max, got {self.q2_min}, {self.q2_max}")
        if not 0.0 < self.x_min < self.x_max <= 1.0:
            raise ValueError(f"Need 0 < x_min < x_max <= 1, got {self.x_min}, {self.x_max}")
        if not 0.0 <= self.y_min < self.y_max <= 1.0:
            raise ValueError(f"Need 0 <= y_min < y_max <= 1, got {self.y_min}, {self.y_max}")
        if not 0.0 <= self.isr_probability <= 1.0:
            raise ValueError(f"isr_probability must be in [0, 1], got {self.isr_probability}")
        if not 0.0 < self.min_electron_energy < constants.E_ELECTRON:
            raise ValueError(
                f"min_electron_energy must be in (0, {constants.E_ELECTRON}), "
                f"got {self.min_electron_energy}"
            )
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")

    @classmethod
    def from_env(cls, prefix: str = "HERA_") -> "GeneratorConfig":
        return cls(**_env_overrides(cls, prefix))


@dataclass(frozen=True)
class SimulationConfig:
    batch_size: int = constants.BATCH_SIZE
    buffer_size: int = constants.DISPLAY_BUFFER_SIZE
    luminosity_per_tick: float = constants.LUMINOSITY_PER_TICK

    def __post_init__(self):
        if self.batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {self.batch_size}")
        if self.buffer_size < 1:
            raise ValueError(f"buffer_size must be >= 1, got {self.buffer_size}")
        if self.luminosity_per_tick < 0.0:
            raise ValueError(f"luminosity_per_tick must be >= 0, got {self.luminosity_per_tick}")

    @classmethod
    def from_env(cls, prefix: str = "HERA_") -> "SimulationConfig":
        return cls(**_env_overrides(cls, prefix))
