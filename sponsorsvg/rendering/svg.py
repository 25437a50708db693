"""Sponsor badge SVG generation.

This module composes the sponsor listing document:
- One badge per sponsor: link wrapper, optional name label, clipped avatar
- Rows and grids of badges centered in the document width
- Titles and text lines between rows

Layout is driven by a vertical cursor (``SvgComposer.height``) that only
ever grows. Avatar bytes must already be fetched; resizing is delegated to an
injectable resizer so no network or file I/O happens here.
"""

from __future__ import annotations

import asyncio
import base64
import inspect
import itertools
import threading
from collections.abc import Sequence
from typing import Self

from sponsorsvg.core.config import ImageFormat
from sponsorsvg.rendering.image import ImageResizer, resize_image_async
from sponsorsvg.schemas import BadgePreset, RenderOptions, Sponsor, Sponsorship


ATTRIBUTION = "Generated by sponsorsvg"
DEFAULT_LINK_CLASS = "sponsorsvg-link"
DEFAULT_NAME_CLASS = "sponsorsvg-name"
DEFAULT_TITLE_CLASS = "sponsorsvg-tier-title"
DEFAULT_TEXT_CLASS = "text"
LINE_HEIGHT = 20

ORGANIZATION_RADIUS = 0.1
USER_RADIUS = 0.5


class LayoutError(ValueError):
    """Raised when a preset cannot be laid out in the document width."""


class ClipIdGenerator:
    """Thread-safe source of unique ``c<N>`` clip-path ids.

    Ids are never reused for the lifetime of a generator. Documents rendered
    with the same generator can be inlined into one page without clashing.
    """

    def __init__(self, start: int = 0) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            return f"c{next(self._counter)}"


# Process-wide generator used when none is injected
_default_clip_ids = ClipIdGenerator()


def encode_html_entities(value: str) -> str:
    """Encode ``&``, ``<``, ``>`` and ``"`` for use in text and attributes."""
    return (
        str(value)
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def truncate_name(name: str, max_length: int | None) -> str:
    """Shorten a display name to fit under an avatar.

    Names with a space keep their first word, which may still be longer
    than ``max_length``. Single words are cut and suffixed with ``...`` so
    the result is exactly ``max_length`` characters.
    """
    if not max_length or len(name) <= max_length:
        return name
    if " " in name:
        return name.split(" ")[0]
    return f"{name[: max_length - 3]}..."


def avatar_target_size(size: int, image_format: ImageFormat) -> int | None:
    """Pixel size to resize an avatar to, or None to embed it as-is."""
    if size < 50:
        return 50
    if size < 80:
        return 80
    if image_format == "png":
        return 120
    return None


def _num(value: float) -> str:
    # 400.0 -> "400" so coordinates match the integer layout values
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _gen_svg_image(
    x: float,
    y: float,
    size: int,
    radius: float,
    base64_image: str,
    image_format: ImageFormat,
    clip_id: str,
) -> str:
    corner = _num(size * radius)
    return f"""
  <clipPath id="{clip_id}">
    <rect x="{_num(x)}" y="{_num(y)}" width="{size}" height="{size}" rx="{corner}" ry="{corner}" />
  </clipPath>
  <image x="{_num(x)}" y="{_num(y)}" width="{size}" height="{size}" href="data:image/{image_format};base64,{base64_image}" clip-path="url(#{clip_id})"/>"""


async def generate_badge(
    x: float,
    y: float,
    sponsor: Sponsor,
    preset: BadgePreset,
    radius: float,
    image_format: ImageFormat,
    *,
    resize: ImageResizer = resize_image_async,
    clip_ids: ClipIdGenerator | None = None,
) -> str:
    """Render the markup for one sponsor badge.

    Args:
        x: Left edge of the avatar
        y: Top edge of the avatar
        sponsor: Sponsor to render; ``avatar_buffer`` must be set
        preset: Badge preset for the sponsor's tier
        radius: Corner radius as a fraction of the avatar size
        image_format: Encoding of the embedded avatar
        resize: Image resizer, sync or async
        clip_ids: Clip-path id source. Defaults to the process-wide one.

    Returns:
        An ``<a>`` element wrapping the optional label and clipped avatar

    Raises:
        ValueError: If the sponsor has no avatar bytes
        ImageResizeError: Propagated from the resizer
    """
    if sponsor.avatar_buffer is None:
        raise ValueError(f"Sponsor {sponsor.login!r} has no avatar image data")

    # Taken before the first await so ids follow the order badges are started
    clip_id = (clip_ids or _default_clip_ids).next_id()

    name = (sponsor.name or sponsor.login).strip()
    if preset.name:
        name = truncate_name(name, preset.name.max_length)

    size = preset.avatar.size
    avatar = sponsor.avatar_buffer
    target = avatar_target_size(size, image_format)
    if target is not None:
        resized = resize(avatar, target, image_format)
        if inspect.isawaitable(resized):
            resized = await resized
        avatar = resized

    avatar_base64 = base64.b64encode(avatar).decode("ascii")

    href = f'href="{encode_html_entities(sponsor.url)}" ' if sponsor.url else ""
    link_class = encode_html_entities(preset.classes or DEFAULT_LINK_CLASS)
    label = ""
    if preset.name:
        label_class = encode_html_entities(preset.name.classes or DEFAULT_NAME_CLASS)
        label_color = encode_html_entities(preset.name.color or "currentColor")
        label = (
            f'<text x="{_num(x + size / 2)}" y="{_num(y + size + 18)}" '
            f'text-anchor="middle" class="{label_class}" fill="{label_color}">'
            f"{encode_html_entities(name)}</text>\n  "
        )

    image = _gen_svg_image(x, y, size, radius, avatar_base64, image_format, clip_id)
    return (
        f'<a {href}class="{link_class}" target="_blank" '
        f'id="{encode_html_entities(sponsor.login)}">\n  {label}{image}\n</a>'
    ).strip()


class SvgComposer:
    """Accumulates titles, text and sponsor rows into one SVG document.

    Synchronous add operations return the composer for chaining. The row
    operations are coroutines and must be awaited before anything that
    depends on the updated cursor.

    Example:
        composer = SvgComposer(RenderOptions(width=800))
        composer.add_span(20).add_title("Gold Sponsors")
        await composer.add_sponsor_grid(gold, presets.XL)
        svg = composer.generate_svg()
    """

    def __init__(
        self,
        config: RenderOptions,
        *,
        resize: ImageResizer = resize_image_async,
        clip_ids: ClipIdGenerator | None = None,
    ) -> None:
        self._config = config
        self._resize = resize
        self._clip_ids = clip_ids or _default_clip_ids
        self._height: float = 0
        self._body = ""

    @property
    def config(self) -> RenderOptions:
        return self._config

    @property
    def height(self) -> float:
        return self._height

    @property
    def body(self) -> str:
        return self._body

    def add_span(self, height: float = 0) -> Self:
        if height < 0:
            raise ValueError(f"Span height must be non-negative, got {height}")
        self._height += height
        return self

    def add_title(self, text: str, classes: str = DEFAULT_TITLE_CLASS) -> Self:
        return self.add_text(text, classes)

    def add_text(self, text: str, classes: str = DEFAULT_TEXT_CLASS) -> Self:
        self._body += (
            f'<text x="{_num(self._config.width / 2)}" y="{_num(self._height)}" '
            f'text-anchor="middle" class="{encode_html_entities(classes)}">'
            f"{encode_html_entities(text)}</text>"
        )
        self._height += LINE_HEIGHT
        return self

    def add_raw(self, svg: str) -> Self:
        self._body += svg
        return self

    async def add_sponsor_line(
        self, sponsors: Sequence[Sponsorship], preset: BadgePreset
    ) -> Self:
        """Render one centered row of badges and advance by the box height.

        If any badge fails, the remaining renders are cancelled, the first
        error is re-raised and nothing from the row is appended.
        """
        offset_x = (self._config.width - len(sponsors) * preset.box_width) / 2 + (
            preset.box_width - preset.avatar.size
        ) / 2
        y = self._height

        try:
            async with asyncio.TaskGroup() as tg:
                tasks = [
                    tg.create_task(
                        generate_badge(
                            offset_x + preset.box_width * i,
                            y,
                            s.sponsor,
                            preset,
                            ORGANIZATION_RADIUS
                            if s.sponsor.type == "Organization"
                            else USER_RADIUS,
                            self._config.image_format,
                            resize=self._resize,
                            clip_ids=self._clip_ids,
                        )
                    )
                    for i, s in enumerate(sponsors)
                ]
        except ExceptionGroup as eg:
            raise eg.exceptions[0] from eg

        self._body += "\n".join(task.result() for task in tasks)
        self._height += preset.box_height
        return self

    async def add_sponsor_grid(
        self, sponsors: Sequence[Sponsorship], preset: BadgePreset
    ) -> Self:
        """Lay sponsors out in as many full rows as needed, in input order.

        Raises:
            LayoutError: If not even one box fits between the side paddings
        """
        available = self._config.width - preset.side_padding * 2
        per_line = int(available // preset.box_width) if preset.box_width > 0 else 0
        if per_line <= 0:
            raise LayoutError(
                f"Preset box width {preset.box_width} does not fit in document "
                f"width {self._config.width} with side padding {preset.side_padding}"
            )

        for start in range(0, len(sponsors), per_line):
            await self.add_sponsor_line(sponsors[start : start + per_line], preset)

        return self

    def generate_svg(self) -> str:
        width = self._config.width
        height = _num(self._height)
        return f"""<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 {width} {height}" width="{width}" height="{height}">
<!-- {ATTRIBUTION} -->
<style>{self._config.svg_inline_css}</style>
{self._body}
</svg>
"""
