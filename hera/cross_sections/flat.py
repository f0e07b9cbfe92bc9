from .base import CrossSection


class FlatCrossSection(CrossSection):
    """Uniform acceptance (no dynamics)."""

    name = "Flat"
    description = "Returns weight 1.0 everywhere inside the y window"

    def differential(self, x: float, Q2: float, y: float) -> float:
        return 1.0
