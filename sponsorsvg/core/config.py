"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal, Self

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ImageFormat = Literal["png", "webp"]

DEFAULT_INLINE_CSS = """
text {
  font-weight: 300;
  font-size: 14px;
  fill: #777777;
  font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Helvetica, Arial, sans-serif, "Apple Color Emoji", "Segoe UI Emoji";
}
.sponsorsvg-link {
  cursor: pointer;
}
.sponsorsvg-tier-title {
  font-weight: 500;
  font-size: 20px;
}
"""


class Settings(BaseSettings):
    """Render settings loaded from SPONSORSVG_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SPONSORSVG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Document width in SVG user units; rows are centered within it
    width: int = Field(default=800, gt=0)

    # Encoding for embedded avatars. png upscales large avatars to 120px,
    # webp embeds them as fetched.
    image_format: ImageFormat = "webp"

    svg_inline_css: str = DEFAULT_INLINE_CSS

    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    @model_validator(mode="after")
    def validate_config(self) -> Self:
        if self.log_level.upper() not in {
            "DEBUG",
            "INFO",
            "WARNING",
            "ERROR",
            "CRITICAL",
        }:
            raise ValueError(
                f"SPONSORSVG_LOG_LEVEL must be a standard level name, "
                f"got {self.log_level!r}"
            )
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Call this in tests to reset settings between test cases.
    After clearing, the next get_settings() call will create
    a fresh Settings instance with current environment variables.

    Example:
        def test_something(monkeypatch):
            monkeypatch.setenv("SPONSORSVG_WIDTH", "640")
            clear_settings_cache()
            settings = get_settings()  # Fresh instance
    """
    get_settings.cache_clear()
