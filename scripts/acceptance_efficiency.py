from hera import BeamConfig, generate_event, estimate_w_max
from hera.unweighting import UnweightingController
import numpy as np

rng = np.random.default_rng(42)

for beam in BeamConfig:
    # Diagnostic only: generation keeps w_max = 1 (accept iff u < weight).
    # Feeding the scanned w_max into the controller would reshape the
    # accepted (x, Q2) distribution.
    wmax = estimate_w_max(beam, n_trials=2000, rng=rng)
    uw = UnweightingController()

    accepted = 0
    for i in range(5000):
        event = generate_event(i, beam, allow_isr=True, rng=rng, unweighting_controller=uw)
        if event:
            accepted += 1

    print(f"{beam.value}: scanned w_max = {wmax:.3f} (diagnostic, not used for unweighting)")
    print("  Accepted:", accepted)
    print("  Efficiency:", round(uw.efficiency, 4))
    print("  Overweight attempts:", uw.overweight)
