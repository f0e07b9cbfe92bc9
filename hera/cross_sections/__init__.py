"""
Cross-section models for the DIS event generator.

Usage:
    from hera.cross_sections import get_cross_section

    model = get_cross_section("toy_dis")
    w = model.mc_weight(x=1e-3, Q2=10.0, y=0.3)
"""
from .base import CrossSection
from .flat import FlatCrossSection
from .toy_dis import ToyDISCrossSection
from .registry import register, get_cross_section, list_registered_models, DEFAULT_MODEL

__all__ = [
    "CrossSection",
    "FlatCrossSection",
    "ToyDISCrossSection",
    "register",
    "get_cross_section",
    "list_registered_models",
    "DEFAULT_MODEL",
]
