"""Shared fixtures for integration tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from examples.selection_visualizer import VisualizerContext, create_visualizer_context

from selvis.infra.catalog import CatalogSettings
from selvis.infra.observability import LoggingSettings
from selvis.infra.persistence import StoreSettings

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture()
def config_path(tmp_path: Path) -> Path:
    """Location of the settings document inside a temporary plugin folder."""
    return tmp_path / "plugins" / "SelectionVisualizer" / "config.yml"


@pytest.fixture()
def make_context(config_path: Path) -> Callable[..., VisualizerContext]:
    """Factory creating a loaded context over ``config_path``."""

    def _make(host_version: str = "1.20.4") -> VisualizerContext:
        return create_visualizer_context(
            StoreSettings(config_path=config_path),
            CatalogSettings(host_version=host_version),
            LoggingSettings(log_level="DEBUG", environment="test"),
        )

    return _make
