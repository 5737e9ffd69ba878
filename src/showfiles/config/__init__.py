"""Configuration package."""

from showfiles.config.config import WIDTH_RATIO_DEFAULT, Config
from showfiles.config.paths import default_config_path

__all__ = ["Config", "WIDTH_RATIO_DEFAULT", "default_config_path"]
