"""
Kinematic limit of the (x, Q2) plane.

Q2 = s * x * y, so at fixed beam energy the largest reachable Q2 for a
given x sits on the y = 1 line: Q2_max = s * x.
"""
from __future__ import annotations

import math
from typing import Dict, List, Union

from .beams import BeamConfig, centre_of_mass_s
from .constants import LIMIT_X_MIN, LIMIT_X_MAX, LIMIT_STEPS
from .events import KinematicLimitPoint


def compute_limit(beam: Union[str, BeamConfig]) -> List[KinematicLimitPoint]:
    """
    Return the y = 1 boundary for one beam as 21 points, x ascending.

    x is spaced logarithmically from 1e-5 to 1 inclusive.
    """
    beam = BeamConfig.parse(beam)
    s = centre_of_mass_s(beam)

    log_min = math.log10(LIMIT_X_MIN)
    log_max = math.log10(LIMIT_X_MAX)

    points: List[KinematicLimitPoint] = []
    for i in range(LIMIT_STEPS + 1):
        log_x = log_min + (i / LIMIT_STEPS) * (log_max - log_min)
        x = 10.0 ** log_x
        points.append(KinematicLimitPoint(x=x, Q2=s * x))
    return points


def compute_limits() -> Dict[BeamConfig, List[KinematicLimitPoint]]:
    """Limit curves for every beam configuration."""
    return {beam: compute_limit(beam) for beam in BeamConfig}
