import numpy as np


class UnweightingController:
    """
    Accept/reject against a weight ceiling.

    With the default w_max = 1.0 an attempt is accepted iff u < weight for
    u uniform in [0, 1), so weights above 1 always pass.
    """

    def __init__(self, w_max: float = 1.0, safety_factor: float = 1.0):
        if w_max <= 0.0:
            raise ValueError(f"w_max must be positive, got {w_max}")
        self.w_max = w_max * safety_factor
        self.accepted = 0
        self.rejected = 0
        self.overweight = 0

    def accept(self, weight: float, rng: np.random.Generator) -> bool:
        if weight > self.w_max:
            self.overweight += 1
        r = rng.random() * self.w_max
        if r < weight:
            self.accepted += 1
            return True
        else:
            self.rejected += 1
            return False

    @property
    def efficiency(self) -> float:
        total = self.accepted + self.rejected
        return self.accepted / total if total > 0 else 0.0

    def reset(self):
        self.accepted = 0
        self.rejected = 0
        self.overweight = 0
