"""
Toy initial-state radiation.

A fixed fraction of attempts radiates a photon off the incoming electron.
The photon energy is flat between zero and the energy that leaves the
electron with MIN_ELECTRON_ENERGY.
"""
from __future__ import annotations

from typing import Tuple

import numpy as np

from .constants import E_ELECTRON, ISR_PROBABILITY, MIN_ELECTRON_ENERGY


def max_photon_energy(electron_energy: float = E_ELECTRON,
                      min_electron_energy: float = MIN_ELECTRON_ENERGY) -> float:
    return electron_energy - min_electron_energy


def sample_isr(rng: np.random.Generator,
               allow_isr: bool,
               probability: float = ISR_PROBABILITY,
               electron_energy: float = E_ELECTRON,
               min_electron_energy: float = MIN_ELECTRON_ENERGY) -> Tuple[bool, float]:
    """
    Decide whether this attempt radiates and return (is_isr, E_gamma).

    With ISR disabled no random number is drawn.
    """
    if not allow_isr:
        return False, 0.0
    if rng.random() >= probability:
        return False, 0.0

    z = rng.random()
    return True, z * max_photon_energy(electron_energy, min_electron_energy)
