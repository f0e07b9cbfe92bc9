# validation.py
# Consistency checks for generated events.
#
# Every accepted event must satisfy:
# - y == Q2 / (s x)
# - s == 4 (E_e - E_gamma) E_p
# - y strictly inside the acceptance window
# - E_gamma == 0 without ISR, 0 < E_gamma < E_e - MIN_ELECTRON_ENERGY with it
import math
from typing import Dict, Iterable

from .beams import centre_of_mass_s
from .config import GeneratorConfig
from .events import PhysicsEvent
from .radiation import max_photon_energy


def check_event(event: PhysicsEvent,
                rel_tol: float = 1e-9,
                config: GeneratorConfig = GeneratorConfig()) -> Dict[str, object]:
    """
    Check the kinematic invariants of one event.

    Parameters
    ----------
    event : PhysicsEvent
        Event to check.
    rel_tol : float
        Relative tolerance for the y and s relations (default 1e-9).
    config : GeneratorConfig
        Source of the y window and the ISR energy ceiling.

    Returns
    -------
    dict
        Flags 'y_consistent', 's_consistent', 'y_in_window', 'isr_consistent',
        the deltas 'delta_y', 'delta_s', and the overall 'consistent'.

    Examples
    --------
    >>> diag = check_event(event)
    >>> diag['consistent']
    True
    """
    y_expected = event.Q2 / (event.s * event.x)
    s_expected = centre_of_mass_s(event.beam, event.E_gamma)

    y_consistent = math.isclose(event.y, y_expected, rel_tol=rel_tol)
    s_consistent = math.isclose(event.s, s_expected, rel_tol=rel_tol)
    y_in_window = config.y_min < event.y < config.y_max

    if event.is_isr:
        ceiling = max_photon_energy(min_electron_energy=config.min_electron_energy)
        isr_consistent = 0.0 < event.E_gamma < ceiling
    else:
        isr_consistent = event.E_gamma == 0.0

    return {
        "y_consistent": y_consistent,
        "s_consistent": s_consistent,
        "y_in_window": y_in_window,
        "isr_consistent": isr_consistent,
        "delta_y": event.y - y_expected,
        "delta_s": event.s - s_expected,
        "consistent": y_consistent and s_consistent and y_in_window and isr_consistent,
    }


def validate_events(events: Iterable[PhysicsEvent],
                    rel_tol: float = 1e-9,
                    config: GeneratorConfig = GeneratorConfig()) -> Dict[str, int]:
    """Count how many events pass each check under the config that generated them."""
    summary = {
        "total": 0,
        "consistent": 0,
        "y_consistent": 0,
        "s_consistent": 0,
        "y_in_window": 0,
        "isr_consistent": 0,
    }
    for event in events:
        diag = check_event(event, rel_tol=rel_tol, config=config)
        summary["total"] += 1
        for key in ("consistent", "y_consistent", "s_consistent", "y_in_window", "isr_consistent"):
            summary[key] += int(diag[key])
    summary["violations"] = summary["total"] - summary["consistent"]
    return summary
