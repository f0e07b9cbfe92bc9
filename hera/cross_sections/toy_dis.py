"""
Toy neutral-current DIS cross section.

    d2sigma / dx dQ2 ~ 1/Q^4 * Y+ * F2,   Y+ = 1 + (1 - y)^2,   F2 = 0.5 * x^-0.2

The propagator is steep enough that sampling the raw cross section leaves
the high-Q2 corner empty. The MC weight therefore multiplies it back out,
leaving Y+ * F2: an acceptance that is nearly flat in log(x), log(Q2).
The weight is not bounded by 1; above 1 an attempt is always accepted.
"""
from .base import CrossSection


class ToyDISCrossSection(CrossSection):

    name = "Toy DIS"
    description = "1/Q^4 propagator, Y+ helicity factor, F2 ~ x^-0.2; flattened MC weight"

    def __init__(self, f2_norm: float = 0.5, f2_slope: float = -0.2):
        self.f2_norm = f2_norm
        self.f2_slope = f2_slope

    @staticmethod
    def propagator(Q2: float) -> float:
        return 1.0 / (Q2 ** 2)

    @staticmethod
    def y_plus(y: float) -> float:
        return 1.0 + (1.0 - y) ** 2

    def F2(self, x: float) -> float:
        return self.f2_norm * x ** self.f2_slope

    def differential(self, x: float, Q2: float, y: float) -> float:
        return self.propagator(Q2) * self.y_plus(y) * self.F2(x)

    def mc_weight(self, x: float, Q2: float, y: float) -> float:
        return self.differential(x, Q2, y) * Q2 ** 2
