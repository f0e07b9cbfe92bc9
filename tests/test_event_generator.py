"""
Event generator test suite.

Covers:
  - Kinematic invariants of accepted events (y relation, y window, s relation)
  - ISR on/off behaviour and photon energy range
  - Beam resolution for the ALL mode
  - Reproducibility under a seeded RNG
  - Exhaustion of the attempt budget
"""
import sys
from pathlib import Path
sys.path.append(str(Path(__file__).resolve().parents[1]))

from collections import Counter

import numpy as np
import pytest

from hera import BeamConfig, RunMode, generate_event, generate_batch, estimate_w_max
from hera.beams import resolve_beam
from hera.config import GeneratorConfig
from hera.constants import E_ELECTRON, MIN_ELECTRON_ENERGY
from hera.cross_sections import CrossSection, FlatCrossSection
from hera.event_generator import log_uniform, sample_phase_space
from hera.unweighting import UnweightingController


class ZeroCrossSection(CrossSection):
    name = "Zero"

    def differential(self, x, Q2, y):
        return 0.0


class FixedRandom:
    """Stand-in RNG returning preset values in order."""

    def __init__(self, *values):
        self.values = list(values)

    def random(self):
        if not self.values:
            raise AssertionError("Unexpected random draw")
        return self.values.pop(0)


def _events(mode="ALL", allow_isr=True, n=2000, seed=1, **kwargs):
    return generate_batch(n, mode, allow_isr=allow_isr, seed=seed, **kwargs)["events"]


# ----------------------------- Invariants ---------------------------------
@pytest.mark.parametrize("mode", ["HER", "MER", "LER", "ALL"])
def test_y_relation_and_window(mode):
    events = _events(mode)
    assert events
    for e in events:
        assert e.y == pytest.approx(e.Q2 / (e.s * e.x), rel=1e-9)
        assert 0.005 < e.y < 0.95
        assert 0.0 < e.x < 1.0
        assert e.Q2 > 0.0
        assert e.detected is True


def test_non_isr_events_have_nominal_s():
    events = [e for e in _events("ALL") if not e.is_isr]
    assert events
    for e in events:
        assert e.E_gamma == 0.0
        assert e.s == pytest.approx(4 * E_ELECTRON * e.beam.proton_energy, rel=1e-12)


def test_isr_events_have_reduced_s():
    events = [e for e in _events("ALL", n=4000) if e.is_isr]
    assert events, "Expected some ISR events with ISR enabled"
    for e in events:
        assert 0.0 < e.E_gamma < E_ELECTRON - MIN_ELECTRON_ENERGY
        assert e.s == pytest.approx(4 * (E_ELECTRON - e.E_gamma) * e.beam.proton_energy, rel=1e-12)
        assert e.s < 4 * E_ELECTRON * e.beam.proton_energy


@pytest.mark.parametrize("seed", range(5))
def test_no_isr_when_disabled(seed):
    events = _events("ALL", allow_isr=False, n=1000, seed=seed)
    assert not any(e.is_isr for e in events)
    assert all(e.E_gamma == 0.0 for e in events)


def test_beam_is_resolved_never_all():
    for e in _events("ALL", n=500):
        assert isinstance(e.beam, BeamConfig)


@pytest.mark.parametrize("beam", list(BeamConfig))
def test_fixed_mode_keeps_beam(beam):
    assert all(e.beam is beam for e in _events(beam.value, n=300))


def test_flat_model_respects_window():
    events = _events("HER", n=500, cross_section=FlatCrossSection())
    assert all(0.005 < e.y < 0.95 for e in events)


# ------------------------------ Beam choice -------------------------------
@pytest.mark.parametrize(
    "u,expected",
    [
        (0.0, BeamConfig.HER),
        (0.3299, BeamConfig.HER),
        (0.33, BeamConfig.MER),
        (0.6599, BeamConfig.MER),
        (0.66, BeamConfig.LER),
        (0.9999, BeamConfig.LER),
    ],
)
def test_all_mode_partition(u, expected):
    assert resolve_beam(RunMode.ALL, FixedRandom(u)) is expected


def test_fixed_mode_draws_nothing():
    assert resolve_beam("MER", FixedRandom()) is BeamConfig.MER


def test_all_mode_shares_are_balanced():
    counts = Counter()
    for seed in range(10):
        counts.update(e.beam for e in _events("ALL", n=1000, seed=seed))
    total = sum(counts.values())
    assert total > 9000
    for beam in BeamConfig:
        assert abs(counts[beam] / total - 1 / 3) < 0.05, f"{beam}: {counts[beam]}/{total}"


# ----------------------------- Sampling -----------------------------------
def test_log_uniform_endpoints():
    assert log_uniform(0.0, 1.0, 40000.0) == pytest.approx(1.0)
    assert log_uniform(1.0, 1e-5, 0.8) == pytest.approx(0.8)
    assert log_uniform(0.5, 1.0, 100.0) == pytest.approx(10.0)


def test_phase_space_draw_order():
    """Q2 uses the first draw, x the second."""
    Q2, x = sample_phase_space(FixedRandom(0.0, 1.0))
    assert Q2 == pytest.approx(1.0)
    assert x == pytest.approx(0.8)


def test_scripted_event():
    """Walk one attempt through with known draws."""
    # Q2 = 10, x = 1e-3, no ISR (0.9 >= 0.25), accept (0.0 < w)
    u_q2 = np.log(10.0) / np.log(40000.0)
    u_x = (np.log(1e-3) - np.log(1e-5)) / (np.log(0.8) - np.log(1e-5))
    rng = FixedRandom(u_q2, u_x, 0.9, 0.0)
    e = generate_event(7, "HER", allow_isr=True, rng=rng, clock=lambda: 123.0)
    assert e is not None
    assert e.id == 7
    assert e.beam is BeamConfig.HER
    assert not e.is_isr
    assert e.Q2 == pytest.approx(10.0)
    assert e.x == pytest.approx(1e-3)
    assert e.y == pytest.approx(10.0 / (101200.0 * 1e-3))
    assert e.timestamp == 123.0


def test_scripted_isr_event():
    # ISR flag draw 0.1 < 0.25, z = 0.5 -> E_gamma = 12.75
    u_q2 = np.log(10.0) / np.log(40000.0)
    u_x = (np.log(1e-3) - np.log(1e-5)) / (np.log(0.8) - np.log(1e-5))
    rng = FixedRandom(u_q2, u_x, 0.1, 0.5, 0.0)
    e = generate_event(0, "LER", allow_isr=True, rng=rng)
    assert e.is_isr
    assert e.E_gamma == pytest.approx(0.5 * (E_ELECTRON - 2.0))
    assert e.s == pytest.approx(4 * (E_ELECTRON - e.E_gamma) * 460.0)


# ---------------------------- Reproducibility -----------------------------
def test_seeded_generation_is_reproducible():
    def run():
        rng = np.random.default_rng(2024)
        return [generate_event(i, "ALL", True, rng, clock=lambda: 0.0) for i in range(200)]

    assert run() == run()


def test_different_seeds_differ():
    a = _events("ALL", n=20, seed=1)
    b = _events("ALL", n=20, seed=2)
    assert [e.Q2 for e in a] != [e.Q2 for e in b]


# ------------------------------ Exhaustion --------------------------------
def test_exhaustion_returns_none():
    rng = np.random.default_rng(0)
    assert generate_event(0, "HER", True, rng, cross_section=ZeroCrossSection()) is None


def test_exhaustion_respects_attempt_budget():
    config = GeneratorConfig(max_attempts=3)
    controller = UnweightingController()
    rng = np.random.default_rng(0)
    generate_event(0, "HER", False, rng, cross_section=ZeroCrossSection(),
                   config=config, unweighting_controller=controller)
    assert controller.accepted == 0
    assert controller.rejected <= 3


def test_batch_counts_exhausted_slots():
    results = generate_batch(10, "MER", seed=3, cross_section=ZeroCrossSection())
    assert results["success"] == 0
    assert results["exhausted"] == 10
    assert results["events"] == []


def test_batch_ids_follow_start_id():
    results = generate_batch(25, "HER", seed=5, start_id=100)
    ids = [e.id for e in results["events"]]
    assert ids == sorted(ids)
    assert all(100 <= i < 125 for i in ids)
    assert results["success"] + results["exhausted"] == results["total"] == 25


def test_invalid_mode_fails_fast():
    with pytest.raises(ValueError):
        generate_event(0, "XER", True, np.random.default_rng(0))


# ------------------------------ Weights -----------------------------------
def test_w_max_exceeds_one():
    """The default weight is unclamped; the scan should find values above 1."""
    w_max = estimate_w_max("HER", n_trials=3000, rng=np.random.default_rng(11))
    assert w_max > 1.0


def test_w_max_flat_model():
    assert estimate_w_max("LER", n_trials=500, rng=np.random.default_rng(1),
                          cross_section=FlatCrossSection()) == 1.0
