"""
Kinematics helpers for the HERA toolkit.

Units: GeV (natural units c = 1). Beam particles are treated as massless.
Coordinates follow the HERA convention: the proton travels along +z, the
electron along -z, and polar angles are measured from the proton direction.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .beams import BeamConfig
from .constants import E_ELECTRON
from .events import PhysicsEvent


# -----------------------------
# FourVector
# -----------------------------
@dataclass(frozen=True)
class FourVector:
    E: float
    px: float
    py: float
    pz: float

    @property
    def p(self) -> np.ndarray:
        return np.array([self.px, self.py, self.pz], dtype=float)

    @property
    def magnitude(self) -> float:
        return float(np.linalg.norm(self.p))

    def dot(self, other: "FourVector") -> float:
        """Minkowski product with (+,-,-,-) signature."""
        return self.E * other.E - (self.px * other.px + self.py * other.py + self.pz * other.pz)

    @property
    def mass2(self) -> float:
        return self.dot(self)

    @property
    def mass(self) -> float:
        return math.sqrt(max(self.mass2, 0.0))

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.E, self.px, self.py, self.pz)

    def __add__(self, other: "FourVector") -> "FourVector":
        return FourVector(self.E + other.E, self.px + other.px, self.py + other.py, self.pz + other.pz)

    def __sub__(self, other: "FourVector") -> "FourVector":
        return FourVector(self.E - other.E, self.px - other.px, self.py - other.py, self.pz - other.pz)

    def __repr__(self) -> str:
        return f"FourVector(E={self.E:.6f}, px={self.px:.6f}, py={self.py:.6f}, pz={self.pz:.6f})"


# -----------------------------
# Beams
# -----------------------------
def beam_four_vectors(beam: BeamConfig,
                      electron_energy: float = E_ELECTRON) -> Tuple[FourVector, FourVector]:
    """Return (electron, proton) four-vectors for head-on massless beams."""
    Ep = beam.proton_energy
    electron = FourVector(electron_energy, 0.0, 0.0, -electron_energy)
    proton = FourVector(Ep, 0.0, 0.0, Ep)
    return electron, proton


# -----------------------------
# Scattered electron
# -----------------------------
def scattered_electron_energy(electron_energy: float, Q2: float, y: float) -> float:
    """E' = E (1 - y) + Q2 / (4 E)."""
    return electron_energy * (1.0 - y) + Q2 / (4.0 * electron_energy)


def scattered_electron_angle(electron_energy: float, Q2: float, y: float) -> float:
    """
    Polar angle of the scattered electron in radians, from Q2 = 2 E E' (1 + cos theta).
    """
    E_prime = scattered_electron_energy(electron_energy, Q2, y)
    cos_theta = Q2 / (2.0 * electron_energy * E_prime) - 1.0
    cos_theta = min(1.0, max(-1.0, cos_theta))
    return math.acos(cos_theta)


def scattered_electron(event: PhysicsEvent) -> FourVector:
    """Scattered electron four-vector in the x-z plane (phi = 0)."""
    E_in = event.electron_energy
    E_prime = scattered_electron_energy(E_in, event.Q2, event.y)
    theta = scattered_electron_angle(E_in, event.Q2, event.y)
    return FourVector(
        E_prime,
        E_prime * math.sin(theta),
        0.0,
        E_prime * math.cos(theta),
    )


def momentum_transfer(event: PhysicsEvent) -> FourVector:
    """Exchanged boson four-momentum q = k - k'."""
    electron, _ = beam_four_vectors(event.beam, event.electron_energy)
    return electron - scattered_electron(event)
