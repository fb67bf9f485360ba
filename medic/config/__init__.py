"""Configuration handling for medic."""

from .models import ColorChoice, MedicConfig
from .loader import ConfigLoader, load_config

__all__ = [
    "ColorChoice",
    "MedicConfig",
    "ConfigLoader",
    "load_config",
]
