import sys
from pathlib import Path
sys.path.append(str(Path(__file__).resolve().parents[1]))

import math

import pytest

from hera import BeamConfig, generate_batch
from hera.kinematics import (
    FourVector,
    beam_four_vectors,
    momentum_transfer,
    scattered_electron,
    scattered_electron_angle,
    scattered_electron_energy,
)


def _assert_close(a, b, tol=1e-9, msg=""):
    assert abs(a - b) < tol, msg or f"Values differ: {a} vs {b} (tol={tol})"


def test_fourvector_arithmetic():
    a = FourVector(5, 1, 2, 3)
    b = FourVector(3, 1, 0, -1)
    assert (a + b).to_tuple() == (8, 2, 2, 2)
    assert (a - b).to_tuple() == (2, 0, 2, 4)
    _assert_close(a.dot(b), 15 - (1 + 0 - 3))


def test_fourvector_mass():
    p = FourVector(5.0, 0.0, 0.0, 3.0)
    _assert_close(p.mass2, 16.0)
    _assert_close(p.mass, 4.0)
    _assert_close(p.magnitude, 3.0)


def test_spacelike_mass_clamped():
    assert FourVector(1.0, 0.0, 0.0, 2.0).mass == 0.0


@pytest.mark.parametrize("beam", list(BeamConfig))
def test_beam_invariant_mass(beam):
    k, P = beam_four_vectors(beam)
    assert (k + P).mass2 == pytest.approx(beam.s, rel=1e-12)
    assert k.mass2 == 0.0 and P.mass2 == 0.0


def test_radiated_beam_invariant_mass():
    k, P = beam_four_vectors(BeamConfig.MER, electron_energy=27.5 - 7.5)
    assert (k + P).mass2 == pytest.approx(4 * 20.0 * 575.0)


def test_scattered_electron_formula():
    E, Q2, y = 27.5, 100.0, 0.3
    E_prime = scattered_electron_energy(E, Q2, y)
    _assert_close(E_prime, E * 0.7 + Q2 / (4 * E))
    theta = scattered_electron_angle(E, Q2, y)
    _assert_close(Q2, 2 * E * E_prime * (1 + math.cos(theta)))


def test_event_kinematics_reconstruct_q2_and_y():
    """q = k - k' must reproduce Q2 and y for generated events."""
    events = generate_batch(300, "ALL", allow_isr=True, seed=4)["events"]
    assert events
    for e in events:
        k, P = beam_four_vectors(e.beam, e.electron_energy)
        q = momentum_transfer(e)
        assert -q.mass2 == pytest.approx(e.Q2, rel=1e-6)
        assert P.dot(q) / P.dot(k) == pytest.approx(e.y, abs=1e-9)
        assert scattered_electron(e).mass == pytest.approx(0.0, abs=1e-4)


def test_w2_matches_hadronic_system():
    """W2 = Q2 (1 - x) / x equals (P + q)^2 for massless beams."""
    events = generate_batch(200, "ALL", allow_isr=True, seed=8)["events"]
    assert events
    for e in events:
        _, P = beam_four_vectors(e.beam, e.electron_energy)
        hadrons = P + momentum_transfer(e)
        assert e.W2 == pytest.approx(e.Q2 * (1 - e.x) / e.x, rel=1e-12)
        assert hadrons.mass2 == pytest.approx(e.W2, rel=1e-6)


def test_w2_simple_values():
    from hera import PhysicsEvent
    e = PhysicsEvent(id=0, beam=BeamConfig.HER, is_isr=False, Q2=10.0, x=0.5, y=0.0002,
                     s=101200.0, E_gamma=0.0, detected=True, timestamp=0.0)
    _assert_close(e.W2, 10.0)
    _assert_close(e.electron_energy, 27.5)
