import logging
import math
import time
from typing import Callable, Dict, Optional, Tuple, Union

import numpy as np

from .beams import BeamConfig, RunMode, centre_of_mass_s, resolve_beam
from .config import GeneratorConfig
from .constants import E_ELECTRON
from .cross_sections import CrossSection, get_cross_section
from .events import PhysicsEvent
from .radiation import sample_isr
from .unweighting import UnweightingController


logger = logging.getLogger(__name__)

ModeLike = Union[str, RunMode, BeamConfig]

_DEFAULT_CONFIG = GeneratorConfig()


def log_uniform(u: float, lo: float, hi: float) -> float:
    """Map u in [0, 1) onto [lo, hi) uniformly in ln."""
    return math.exp(u * (math.log(hi) - math.log(lo)) + math.log(lo))


def sample_phase_space(rng: np.random.Generator,
                       config: GeneratorConfig = _DEFAULT_CONFIG) -> Tuple[float, float]:
    """Draw (Q2, x), each log-uniform and independent. Q2 is drawn first."""
    Q2 = log_uniform(rng.random(), config.q2_min, config.q2_max)
    x = log_uniform(rng.random(), config.x_min, config.x_max)
    return Q2, x


def inelasticity(Q2: float, x: float, s: float) -> float:
    """y = Q2 / (s x)."""
    return Q2 / (s * x)


def in_y_window(y: float, config: GeneratorConfig = _DEFAULT_CONFIG) -> bool:
    return config.y_min < y < config.y_max


def generate_event(event_id: int,
                   mode: ModeLike,
                   allow_isr: bool = True,
                   rng: Optional[np.random.Generator] = None,
                   cross_section: Optional[CrossSection] = None,
                   config: Optional[GeneratorConfig] = None,
                   unweighting_controller: Optional[UnweightingController] = None,
                   clock: Callable[[], float] = time.time) -> Optional[PhysicsEvent]:
    """
    Generate one DIS event by weighted rejection sampling.

    Args:
        event_id: Identifier stamped on the event (owned by the caller)
        mode: HER, MER, LER or ALL (ALL picks a beam per event)
        allow_isr: Let a fraction of attempts radiate an ISR photon
        rng: Random generator; pass a seeded one for reproducible output
        cross_section: Weight model (default: registry "toy_dis")
        config: Phase-space limits, cuts and attempt budget
        unweighting_controller: Optional accept/reject bookkeeping
        clock: Source of the event timestamp

    Returns:
        PhysicsEvent, or None if no attempt passed within the attempt budget

    Raises:
        ValueError: unknown mode
    """
    mode = RunMode.parse(mode)
    rng = rng or np.random.default_rng()
    cross_section = cross_section or get_cross_section()
    config = config or _DEFAULT_CONFIG
    controller = unweighting_controller or UnweightingController()

    # Step 1: the beam is fixed for every attempt of this event
    beam = resolve_beam(mode, rng)

    # Step 2: nominal centre-of-mass energy
    s_nominal = centre_of_mass_s(beam)

    window_rejected = 0
    for attempt in range(1, config.max_attempts + 1):
        # Step 3a: sample the (x, Q2) plane
        Q2, x = sample_phase_space(rng, config)

        # Step 3b/c: optional ISR lowers the effective electron energy
        s_effective = s_nominal
        is_isr, E_gamma = sample_isr(
            rng,
            allow_isr,
            probability=config.isr_probability,
            electron_energy=E_ELECTRON,
            min_electron_energy=config.min_electron_energy,
        )
        if is_isr:
            s_effective = centre_of_mass_s(beam, E_gamma)

        # Step 3d/e: inelasticity with the effective s, then the y cut
        y = inelasticity(Q2, x, s_effective)
        if not in_y_window(y, config):
            window_rejected += 1
            continue

        # Step 3f/g: accept/reject on the (unclamped) MC weight
        weight = cross_section.mc_weight(x, Q2, y)
        if not controller.accept(weight, rng):
            continue

        logger.debug(
            f"Event {event_id}: {beam.value} {'ISR' if is_isr else 'DIS'} accepted on "
            f"attempt {attempt} [Q2={Q2:.3f}, x={x:.3e}, y={y:.4f}, w={weight:.3f}]"
        )
        return PhysicsEvent(
            id=event_id,
            beam=beam,
            is_isr=is_isr,
            Q2=Q2,
            x=x,
            y=y,
            s=s_effective,
            E_gamma=E_gamma,
            detected=True,
            timestamp=clock(),
        )

    logger.debug(
        f"Event {event_id}: sampling exhausted after {config.max_attempts} attempts "
        f"({window_rejected} outside the y window)"
    )
    return None


def generate_batch(n: int,
                   mode: ModeLike,
                   allow_isr: bool = True,
                   seed: Optional[int] = None,
                   rng: Optional[np.random.Generator] = None,
                   start_id: int = 0,
                   cross_section: Optional[CrossSection] = None,
                   config: Optional[GeneratorConfig] = None) -> Dict[str, object]:
    """
    Generate n events, skipping slots whose sampling was exhausted.

    Event ids run from start_id to start_id + n - 1; skipped slots leave gaps.
    """
    mode = RunMode.parse(mode)
    rng = rng or np.random.default_rng(seed)
    controller = UnweightingController()

    events = []
    exhausted = 0
    for i in range(n):
        event = generate_event(
            start_id + i,
            mode,
            allow_isr=allow_isr,
            rng=rng,
            cross_section=cross_section,
            config=config,
            unweighting_controller=controller,
        )
        if event is None:
            exhausted += 1
            continue
        events.append(event)

    isr = sum(1 for e in events if e.is_isr)
    logger.info(
        f"Batch complete: {len(events)}/{n} events ({mode.value}, ISR {'on' if allow_isr else 'off'}), "
        f"{isr} ISR, {exhausted} exhausted"
    )
    logger.info(f"Acceptance efficiency: {controller.efficiency:.3f}")

    return {
        "events": events,
        "success": len(events),
        "exhausted": exhausted,
        "isr": isr,
        "total": n,
        "efficiency": controller.efficiency,
        "overweight": controller.overweight,
    }


def estimate_w_max(mode: ModeLike = RunMode.ALL,
                   n_trials: int = 5000,
                   rng: Optional[np.random.Generator] = None,
                   allow_isr: bool = True,
                   cross_section: Optional[CrossSection] = None,
                   config: Optional[GeneratorConfig] = None) -> float:
    """
    Largest MC weight seen over n_trials phase-space points inside the y window.

    The default weight is not bounded by 1; this shows how far above 1 it
    reaches for a given beam.
    """
    mode = RunMode.parse(mode)
    rng = rng or np.random.default_rng()
    cross_section = cross_section or get_cross_section()
    config = config or _DEFAULT_CONFIG

    w_max = 0.0

    for _ in range(n_trials):
        beam = resolve_beam(mode, rng)
        Q2, x = sample_phase_space(rng, config)
        _, E_gamma = sample_isr(
            rng,
            allow_isr,
            probability=config.isr_probability,
            min_electron_energy=config.min_electron_energy,
        )
        y = inelasticity(Q2, x, centre_of_mass_s(beam, E_gamma))
        if not in_y_window(y, config):
            continue

        w_max = max(w_max, cross_section.mc_weight(x, Q2, y))

    if w_max <= 0:
        raise RuntimeError("Failed to estimate w_max (no phase-space point passed the y window)")
    return w_max
