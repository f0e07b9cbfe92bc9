"""
Beam configurations for the HERA running periods.

The electron beam energy is shared by all runs; the proton energy was
lowered for the medium (MER) and low (LER) energy runs at the end of HERA II.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional, Union

import numpy as np

from .constants import E_ELECTRON, PROTON_ENERGIES, ALL_MODE_THRESHOLDS


class BeamConfig(Enum):
    HER = "HER"
    MER = "MER"
    LER = "LER"

    @property
    def proton_energy(self) -> float:
        return PROTON_ENERGIES[self.value]

    @property
    def s(self) -> float:
        """Nominal centre-of-mass energy squared (GeV^2)."""
        return centre_of_mass_s(self)

    @classmethod
    def parse(cls, value: Union[str, "BeamConfig"]) -> "BeamConfig":
        if isinstance(value, BeamConfig):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(
                f"Unknown beam configuration '{value}' "
                f"(expected one of {[b.value for b in cls]})"
            ) from None


class RunMode(Enum):
    HER = "HER"
    MER = "MER"
    LER = "LER"
    ALL = "ALL"

    @classmethod
    def parse(cls, value: Union[str, "RunMode", BeamConfig]) -> "RunMode":
        if isinstance(value, RunMode):
            return value
        if isinstance(value, BeamConfig):
            return cls(value.value)
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(
                f"Unknown run mode '{value}' "
                f"(expected one of {[m.value for m in cls]})"
            ) from None


def centre_of_mass_s(beam: BeamConfig, photon_energy: float = 0.0) -> float:
    """s = 4 E_e E_p, with the electron energy reduced by any radiated photon."""
    return 4.0 * (E_ELECTRON - photon_energy) * beam.proton_energy


def resolve_beam(mode: Union[str, RunMode, BeamConfig],
                 rng: Optional[np.random.Generator] = None) -> BeamConfig:
    """
    Pick the beam for one event.

    A concrete mode maps straight to its beam and consumes no random numbers.
    ALL draws a single uniform number and splits it at 0.33 / 0.66.
    """
    mode = RunMode.parse(mode)
    if mode is not RunMode.ALL:
        return BeamConfig(mode.value)

    rng = rng or np.random.default_rng()
    r = rng.random()
    low, high = ALL_MODE_THRESHOLDS
    if r < low:
        return BeamConfig.HER
    if r < high:
        return BeamConfig.MER
    return BeamConfig.LER
