"""Rendering module for the sponsor listing.

This module handles all markup generation:
- Sponsor badge and row/grid layout (SvgComposer)
- Avatar resizing for embedding
- Named badge presets and tiered layouts
"""

from sponsorsvg.rendering.image import (
    ImageResizeError,
    ImageResizer,
    resize_image,
    resize_image_async,
)
from sponsorsvg.rendering.presets import PRESETS, get_preset
from sponsorsvg.rendering.svg import (
    ClipIdGenerator,
    LayoutError,
    SvgComposer,
    encode_html_entities,
    generate_badge,
)
from sponsorsvg.rendering.tiers import (
    DEFAULT_TIERS,
    Tier,
    compose_tiers,
    partition_tiers,
)

__all__ = [
    "DEFAULT_TIERS",
    "PRESETS",
    "ClipIdGenerator",
    "ImageResizeError",
    "ImageResizer",
    "LayoutError",
    "SvgComposer",
    "Tier",
    "compose_tiers",
    "encode_html_entities",
    "generate_badge",
    "get_preset",
    "partition_tiers",
    "resize_image",
    "resize_image_async",
]
