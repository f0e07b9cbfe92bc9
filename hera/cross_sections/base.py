from abc import ABC, abstractmethod


class CrossSection(ABC):
    """
    Base class for all DIS cross-section models.

    Models are pure functions of the kinematics (no RNG, no I/O).
    """

    name: str = "abstract"
    description: str = ""

    @abstractmethod
    def differential(self, x: float, Q2: float, y: float) -> float:
        """
        Unnormalized d2sigma/dx dQ2 at the given point.

        Args:
            x: Bjorken-x
            Q2: momentum transfer squared (GeV^2)
            y: inelasticity

        Returns:
            Non-negative float proportional to the cross section
        """

    def mc_weight(self, x: float, Q2: float, y: float) -> float:
        """
        Weight used in the accept/reject step.

        Defaults to the differential cross section itself.
        """
        return self.differential(x, Q2, y)
