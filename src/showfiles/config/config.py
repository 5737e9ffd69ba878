"""Configuration management for showfiles."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from showfiles.config.paths import default_config_path
from showfiles.features.layout import DEFAULT_MIN_COLUMN_SPACING, DEFAULT_TERMINAL_WIDTH
from showfiles.platform.logging import logger

WIDTH_RATIO_DEFAULT: Final[float] = 0.8


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path; no file logging when unset
    log_file: Path | None = _path_field()

    # Layout tuning
    min_column_spacing: int = DEFAULT_MIN_COLUMN_SPACING
    width_ratio: float = WIDTH_RATIO_DEFAULT
    fallback_width: int = DEFAULT_TERMINAL_WIDTH

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths and reset out-of-range values to defaults."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

        if not _is_int(self.min_column_spacing) or self.min_column_spacing < 0:
            logger.warning(
                "Invalid min_column_spacing %r; using %d",
                self.min_column_spacing,
                DEFAULT_MIN_COLUMN_SPACING,
            )
            self.min_column_spacing = DEFAULT_MIN_COLUMN_SPACING

        if not _is_number(self.width_ratio) or not 0 < self.width_ratio <= 1:
            logger.warning(
                "Invalid width_ratio %r; using %s", self.width_ratio, WIDTH_RATIO_DEFAULT
            )
            self.width_ratio = WIDTH_RATIO_DEFAULT

        if not _is_int(self.fallback_width) or self.fallback_width <= 0:
            logger.warning(
                "Invalid fallback_width %r; using %d",
                self.fallback_width,
                DEFAULT_TERMINAL_WIDTH,
            )
            self.fallback_width = DEFAULT_TERMINAL_WIDTH

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults; the file is never created.

        Args:
            config_file: Explicit file to read instead of the default location.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None and config_file is None:
            return cls._instance

        path = config_file if config_file is not None else default_config_path()

        if not path.exists():
            logger.debug("No configuration file at %s; using defaults", path)
            instance = cls()
        else:
            try:
                with open(path, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
            instance = cls(**{k: v for k, v in config_dict.items() if k in known})
            logger.debug("Configuration loaded from %s", path)

        if config_file is None:
            cls._instance = instance
            cls._loaded_from = path
        return instance


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return _is_int(value) or isinstance(value, float)


__all__ = ["Config", "WIDTH_RATIO_DEFAULT"]
