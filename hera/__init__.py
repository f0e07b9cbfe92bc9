"""
HERA deep-inelastic scattering toolkit.

Usage:
    import numpy as np
    from hera import generate_event, compute_limit, BeamConfig, RunMode

    rng = np.random.default_rng(42)
    event = generate_event(0, RunMode.ALL, allow_isr=True, rng=rng)
    limit = compute_limit(BeamConfig.HER)
"""
from .beams import BeamConfig, RunMode
from .events import PhysicsEvent, KinematicLimitPoint
from .kinematic_limit import compute_limit, compute_limits
from .event_generator import generate_event, generate_batch, estimate_w_max
from .simulation import SimulationRun

__all__ = [
    "BeamConfig",
    "RunMode",
    "PhysicsEvent",
    "KinematicLimitPoint",
    "compute_limit",
    "compute_limits",
    "generate_event",
    "generate_batch",
    "estimate_w_max",
    "SimulationRun",
]
