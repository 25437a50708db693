"""Named badge presets.

Sizes are in SVG user units. Presets from ``medium`` up carry a name label;
the smaller ones render avatars only and pack tighter.
"""

from sponsorsvg.schemas import (
    AvatarConfig,
    BadgePreset,
    ContainerConfig,
    NameLabelConfig,
)

NONE = BadgePreset(
    avatar=AvatarConfig(size=0),
    box_width=0,
    box_height=0,
    container=ContainerConfig(side_padding=0),
)

XS = BadgePreset(
    avatar=AvatarConfig(size=25),
    box_width=30,
    box_height=30,
    container=ContainerConfig(side_padding=30),
)

SMALL = BadgePreset(
    avatar=AvatarConfig(size=35),
    box_width=38,
    box_height=38,
    container=ContainerConfig(side_padding=30),
)

BASE = BadgePreset(
    avatar=AvatarConfig(size=40),
    box_width=48,
    box_height=48,
    container=ContainerConfig(side_padding=30),
)

MEDIUM = BadgePreset(
    avatar=AvatarConfig(size=50),
    box_width=80,
    box_height=90,
    container=ContainerConfig(side_padding=20),
    name=NameLabelConfig(max_length=10),
)

LARGE = BadgePreset(
    avatar=AvatarConfig(size=70),
    box_width=95,
    box_height=115,
    container=ContainerConfig(side_padding=20),
    name=NameLabelConfig(max_length=16),
)

XL = BadgePreset(
    avatar=AvatarConfig(size=90),
    box_width=120,
    box_height=130,
    container=ContainerConfig(side_padding=20),
    name=NameLabelConfig(max_length=20),
)

PRESETS: dict[str, BadgePreset] = {
    "none": NONE,
    "xs": XS,
    "small": SMALL,
    "base": BASE,
    "medium": MEDIUM,
    "large": LARGE,
    "xl": XL,
}


def get_preset(name: str) -> BadgePreset:
    """Look up a preset by name."""
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(
            f"Unknown badge preset {name!r}; expected one of {sorted(PRESETS)}"
        ) from None
