"""Pydantic schemas for sponsors, badge presets and render options."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from sponsorsvg.core.config import (
    DEFAULT_INLINE_CSS,
    ImageFormat,
    Settings,
    get_settings,
)

SponsorType = Literal["User", "Organization"]


class Sponsor(BaseModel):
    """A single sponsor as shown in the rendered listing.

    ``avatar_buffer`` holds the raw avatar bytes once the caller has fetched
    them; rendering a badge for a sponsor without it is an error.
    """

    login: str
    name: str | None = None
    type: SponsorType = "User"
    avatar_url: str | None = None
    website_url: str | None = None
    link_url: str | None = None
    avatar_buffer: bytes | None = Field(default=None, repr=False)

    @property
    def url(self) -> str | None:
        """Link target for the badge: website first, then profile link."""
        return self.website_url or self.link_url


class Sponsorship(BaseModel):
    """A sponsor plus the tier metadata used to place it."""

    sponsor: Sponsor
    # -1 marks a past sponsor whose sponsorship has ended
    monthly_dollars: float = 0
    is_one_time: bool = False
    tier_name: str | None = None
    created_at: datetime | None = None


class AvatarConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    size: int = Field(ge=0)


class NameLabelConfig(BaseModel):
    """Name label rendered under the avatar.

    A ``max_length`` of None disables truncation.
    """

    model_config = ConfigDict(frozen=True)

    max_length: int | None = Field(default=None, ge=3)
    classes: str | None = None
    color: str | None = None


class ContainerConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    side_padding: int = Field(default=0, ge=0)


class BadgePreset(BaseModel):
    """Visual configuration for one tier of sponsors.

    ``box_width``/``box_height`` are the layout cell for one badge; the
    avatar is centered horizontally within the cell. Leaving ``name`` unset
    renders avatars without labels, and leaving ``container`` unset means no
    side padding around the grid.
    """

    model_config = ConfigDict(frozen=True)

    avatar: AvatarConfig
    box_width: int = Field(ge=0)
    box_height: int = Field(ge=0)
    name: NameLabelConfig | None = None
    classes: str | None = None
    container: ContainerConfig | None = None

    @property
    def side_padding(self) -> int:
        return self.container.side_padding if self.container else 0


class RenderOptions(BaseModel):
    """Document-wide render configuration, fixed for a composer's lifetime."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(default=800, gt=0)
    image_format: ImageFormat = "webp"
    svg_inline_css: str = DEFAULT_INLINE_CSS

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "RenderOptions":
        settings = settings or get_settings()
        return cls(
            width=settings.width,
            image_format=settings.image_format,
            svg_inline_css=settings.svg_inline_css,
        )
