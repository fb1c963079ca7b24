"""Configuration module -- exports Settings and load_config."""

from groupie.config.loader import load_config
from groupie.config.settings import Settings

__all__ = ["Settings", "load_config"]
