"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the configuration lookup at a temporary file."""

    path = tmp_path / "config.toml"
    monkeypatch.setenv("SHOWFILES_CONFIG", str(path))
    return path


@pytest.fixture(autouse=True)
def reset_config_singleton() -> Iterator[None]:
    """Reset the configuration singleton around a test run."""

    from showfiles.config.config import Config

    original_instance = Config._instance  # pyright: ignore[reportPrivateUsage]
    original_loaded_from = Config._loaded_from  # pyright: ignore[reportPrivateUsage]
    Config._instance = None  # pyright: ignore[reportPrivateUsage]
    Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]
    try:
        yield None
    finally:
        Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
        Config._loaded_from = original_loaded_from  # pyright: ignore[reportPrivateUsage]
