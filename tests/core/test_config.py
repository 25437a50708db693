"""Unit tests for core.config settings loading."""

import pytest
from pydantic import ValidationError

from sponsorsvg.core.config import (
    DEFAULT_INLINE_CSS,
    Settings,
    clear_settings_cache,
    get_settings,
)
from sponsorsvg.schemas import RenderOptions

pytestmark = pytest.mark.unit


class TestSettings:
    """Tests for Settings loading and validation."""

    def test_defaults(self, monkeypatch):
        """Test settings defaults without environment overrides."""
        for name in ("WIDTH", "IMAGE_FORMAT", "SVG_INLINE_CSS", "LOG_FORMAT"):
            monkeypatch.delenv(f"SPONSORSVG_{name}", raising=False)

        settings = Settings(_env_file=None)

        assert settings.width == 800
        assert settings.image_format == "webp"
        assert settings.svg_inline_css == DEFAULT_INLINE_CSS
        assert settings.log_format == "console"

    def test_reads_prefixed_env(self, monkeypatch):
        """Test SPONSORSVG_ prefixed variables are read."""
        monkeypatch.setenv("SPONSORSVG_WIDTH", "640")
        monkeypatch.setenv("SPONSORSVG_IMAGE_FORMAT", "png")

        settings = Settings(_env_file=None)

        assert settings.width == 640
        assert settings.image_format == "png"

    def test_rejects_unknown_image_format(self):
        """Test image formats other than png and webp are rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, image_format="gif")

    def test_rejects_non_positive_width(self):
        """Test a zero width is rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, width=0)

    def test_rejects_unknown_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError, match="LOG_LEVEL"):
            Settings(_env_file=None, log_level="LOUD")

    def test_settings_are_frozen(self):
        """Test settings cannot be mutated."""
        settings = Settings(_env_file=None)
        with pytest.raises(ValidationError):
            settings.width = 100


class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_cached(self):
        """Test get_settings returns the cached instance."""
        assert get_settings() is get_settings()

    def test_cache_clear_picks_up_env(self, monkeypatch):
        """Test clearing the cache reloads the environment."""
        monkeypatch.setenv("SPONSORSVG_WIDTH", "500")
        clear_settings_cache()

        assert get_settings().width == 500


class TestRenderOptionsFromSettings:
    """Tests for RenderOptions defaults and from_settings."""

    def test_copies_render_fields(self):
        """Test render fields are copied from settings."""
        settings = Settings(
            _env_file=None, width=320, image_format="png", svg_inline_css="a{}"
        )

        options = RenderOptions.from_settings(settings)

        assert options == RenderOptions(
            width=320, image_format="png", svg_inline_css="a{}"
        )

    def test_defaults_to_cached_settings(self, monkeypatch):
        """Test from_settings falls back to the cached settings."""
        monkeypatch.setenv("SPONSORSVG_WIDTH", "720")
        clear_settings_cache()

        assert RenderOptions.from_settings().width == 720

    def test_default_options_use_default_stylesheet(self):
        """Test options built directly get the same stylesheet as settings."""
        assert RenderOptions().svg_inline_css == DEFAULT_INLINE_CSS
        assert RenderOptions(width=400).svg_inline_css == (
            Settings(_env_file=None).svg_inline_css
        )
