"""
Cross-section registry: maps model names to instances.

Key format: lower-case model name, e.g. "toy_dis".
"""
from .base import CrossSection
from .flat import FlatCrossSection
from .toy_dis import ToyDISCrossSection


DEFAULT_MODEL = "toy_dis"

# Global registry: name -> CrossSection instance
_REGISTRY: dict = {}


def register(name: str, model: CrossSection):
    """
    Register a cross-section model under a name.

    Example:
        >>> register("toy_dis", ToyDISCrossSection())
    """
    _REGISTRY[name.lower()] = model


def get_cross_section(name: str = DEFAULT_MODEL) -> CrossSection:
    """
    Resolve a cross-section model by name.

    Raises:
        ValueError: if no model is registered under that name
    """
    try:
        return _REGISTRY[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown cross-section model '{name}' (registered: {sorted(_REGISTRY)})"
        ) from None


def list_registered_models():
    """List all registered models as {name: display name}."""
    return {k: v.name for k, v in _REGISTRY.items()}


# ========== AUTO-REGISTER KNOWN MODELS ==========
register("toy_dis", ToyDISCrossSection())
register("flat", FlatCrossSection())
