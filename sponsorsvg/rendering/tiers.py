"""Tiered sponsor layout.

Sponsorships are bucketed by monthly amount into tiers, and each non-empty
tier is rendered as a titled grid, highest tier first.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from sponsorsvg.rendering import presets
from sponsorsvg.rendering.svg import SvgComposer
from sponsorsvg.schemas import BadgePreset, Sponsorship


class Tier(BaseModel):
    """A monthly-amount threshold with the preset used to render it."""

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    monthly_dollars: float = 0
    preset: BadgePreset = presets.BASE
    padding_top: int = 20
    padding_bottom: int = 10


DEFAULT_TIERS: tuple[Tier, ...] = (
    Tier(title="Past Sponsors", monthly_dollars=-1, preset=presets.XS),
    Tier(title="Backers", preset=presets.BASE),
    Tier(title="Sponsors", monthly_dollars=10, preset=presets.MEDIUM),
    Tier(title="Silver Sponsors", monthly_dollars=50, preset=presets.LARGE),
    Tier(title="Gold Sponsors", monthly_dollars=100, preset=presets.XL),
)


def _created_at_key(sponsorship: Sponsorship) -> tuple[bool, datetime]:
    created_at = sponsorship.created_at
    return (created_at is None, created_at or datetime.min)


def partition_tiers(
    sponsorships: Sequence[Sponsorship],
    tiers: Sequence[Tier],
    include_past_sponsors: bool = False,
) -> list[tuple[Tier, list[Sponsorship]]]:
    """Assign each sponsorship to the highest tier whose threshold it meets.

    Args:
        sponsorships: Sponsorships to place
        tiers: Tier definitions in any order
        include_past_sponsors: Keep sponsorships with a negative amount

    Returns:
        (tier, sponsorships) pairs ordered from highest threshold to lowest.
        Within a tier, sponsorships are ordered by ``created_at``, oldest
        first, with undated ones last.

    Raises:
        ValueError: If no tiers are given
    """
    if not tiers:
        raise ValueError("At least one tier is required")

    ordered_tiers = sorted(tiers, key=lambda t: t.monthly_dollars, reverse=True)
    buckets: list[tuple[Tier, list[Sponsorship]]] = [(t, []) for t in ordered_tiers]

    for sponsorship in sorted(sponsorships, key=_created_at_key):
        if sponsorship.monthly_dollars < 0 and not include_past_sponsors:
            continue
        bucket = next(
            (b for b in buckets if sponsorship.monthly_dollars >= b[0].monthly_dollars),
            buckets[-1],
        )
        bucket[1].append(sponsorship)

    return buckets


async def compose_tiers(
    composer: SvgComposer,
    sponsorships: Sequence[Sponsorship],
    tiers: Sequence[Tier] = DEFAULT_TIERS,
    *,
    include_past_sponsors: bool = False,
    padding_top: int = 20,
    padding_bottom: int = 20,
) -> SvgComposer:
    """Render every non-empty tier as a titled grid onto ``composer``."""
    composer.add_span(padding_top)

    for tier, members in partition_tiers(sponsorships, tiers, include_past_sponsors):
        if not members or not tier.preset.avatar.size:
            continue
        if tier.padding_top:
            composer.add_span(tier.padding_top)
        if tier.title:
            composer.add_title(tier.title).add_span(5)
        await composer.add_sponsor_grid(members, tier.preset)
        if tier.padding_bottom:
            composer.add_span(tier.padding_bottom)

    composer.add_span(padding_bottom)
    return composer
