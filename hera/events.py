from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from .beams import BeamConfig
from .constants import E_ELECTRON


class KinematicLimitPoint(NamedTuple):
    x: float
    Q2: float


@dataclass(frozen=True)
class PhysicsEvent:
    """
    One accepted DIS event.

    `s` is the effective centre-of-mass energy squared seen by the hard
    scatter, i.e. after any ISR photon has left with `E_gamma`.
    """

    id: int
    beam: BeamConfig
    is_isr: bool
    Q2: float
    x: float
    y: float
    s: float
    E_gamma: float
    detected: bool
    timestamp: float

    @property
    def electron_energy(self) -> float:
        """Electron energy entering the hard scatter (GeV)."""
        return E_ELECTRON - self.E_gamma

    @property
    def W2(self) -> float:
        """Hadronic invariant mass squared, proton mass neglected."""
        return self.Q2 * (1.0 - self.x) / self.x

    def __repr__(self) -> str:
        tag = "ISR" if self.is_isr else "DIS"
        return (
            f"PhysicsEvent(id={self.id}, {self.beam.value} {tag}, Q2={self.Q2:.3f}, "
            f"x={self.x:.3e}, y={self.y:.4f}, s={self.s:.1f}, E_gamma={self.E_gamma:.3f})"
        )
