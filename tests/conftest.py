"""Pytest configuration and shared fixtures.

This module provides:
- Settings cache isolation between tests
- A fresh clip-id generator per test so ids are predictable
- Fake avatar resizers that record the sizes they were asked for
- Small badge presets with round numbers for layout assertions
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from sponsorsvg.core.config import clear_settings_cache
from sponsorsvg.rendering.svg import ClipIdGenerator
from sponsorsvg.schemas import (
    AvatarConfig,
    BadgePreset,
    ContainerConfig,
    NameLabelConfig,
    RenderOptions,
)


@pytest.fixture(autouse=True)
def _clear_settings():
    """Drop cached settings so env changes in one test don't leak."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def clip_ids() -> ClipIdGenerator:
    return ClipIdGenerator()


@pytest.fixture
def fake_resize() -> MagicMock:
    """Synchronous resizer returning a marker payload per target size."""
    return MagicMock(side_effect=lambda data, size, fmt: f"resized-{size}".encode())


@pytest.fixture
def fake_async_resize() -> AsyncMock:
    return AsyncMock(side_effect=lambda data, size, fmt: f"resized-{size}".encode())


@pytest.fixture
def render_options() -> RenderOptions:
    return RenderOptions(width=800, image_format="webp", svg_inline_css="text{}")


@pytest.fixture
def row_preset() -> BadgePreset:
    """100x90 cells with a 60px avatar and no label."""
    return BadgePreset(avatar=AvatarConfig(size=60), box_width=100, box_height=90)


@pytest.fixture
def labeled_preset() -> BadgePreset:
    return BadgePreset(
        avatar=AvatarConfig(size=60),
        box_width=100,
        box_height=90,
        name=NameLabelConfig(max_length=10),
        container=ContainerConfig(side_padding=50),
    )
