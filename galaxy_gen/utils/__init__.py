"""Utility functions for reproducibility and configuration."""

from galaxy_gen.utils.reproducibility import set_all_seeds
from galaxy_gen.utils.config import load_config, save_config, Config

__all__ = ["set_all_seeds", "load_config", "save_config", "Config"]
