"""Render sponsor listings as SVG badge grids."""

from sponsorsvg.rendering import (
    ClipIdGenerator,
    LayoutError,
    SvgComposer,
    compose_tiers,
    generate_badge,
)
from sponsorsvg.schemas import (
    AvatarConfig,
    BadgePreset,
    ContainerConfig,
    NameLabelConfig,
    RenderOptions,
    Sponsor,
    Sponsorship,
)

__all__ = [
    "AvatarConfig",
    "BadgePreset",
    "ClipIdGenerator",
    "ContainerConfig",
    "LayoutError",
    "NameLabelConfig",
    "RenderOptions",
    "Sponsor",
    "Sponsorship",
    "SvgComposer",
    "compose_tiers",
    "generate_badge",
]
