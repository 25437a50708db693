"""Avatar resizing with Pillow.

The composer treats resizing as a collaborator: any callable taking
``(data, size, image_format)`` and returning bytes, or an awaitable of bytes,
can be passed in. ``resize_image_async`` is the default and keeps the
CPU-bound decode/encode off the event loop.
"""

from __future__ import annotations

import asyncio
import io
from collections.abc import Awaitable, Callable

from PIL import Image, ImageOps

from sponsorsvg.core.config import ImageFormat
from sponsorsvg.core.logger import get_logger

logger = get_logger(__name__)

ImageResizer = Callable[[bytes, int, ImageFormat], bytes | Awaitable[bytes]]

_PIL_FORMATS: dict[str, str] = {
    "png": "PNG",
    "webp": "WEBP",
}


class ImageResizeError(Exception):
    """Raised when an avatar cannot be decoded, resized or re-encoded."""


def resize_image(data: bytes, size: int, image_format: ImageFormat) -> bytes:
    """Cover-fit an image to a ``size`` x ``size`` square and re-encode it.

    Args:
        data: Raw source image bytes in any format Pillow can decode
        size: Target width and height in pixels
        image_format: Output encoding ("png" or "webp")

    Returns:
        The encoded image bytes

    Raises:
        ImageResizeError: If the source cannot be decoded or the output
            cannot be encoded
    """
    try:
        pil_format = _PIL_FORMATS[image_format]
    except KeyError:
        raise ImageResizeError(f"Unsupported image format: {image_format!r}") from None

    try:
        with Image.open(io.BytesIO(data)) as source:
            image = ImageOps.fit(
                source.convert("RGBA"),
                (size, size),
                method=Image.Resampling.LANCZOS,
            )
        buffer = io.BytesIO()
        image.save(buffer, format=pil_format)
    except (OSError, ValueError) as e:
        logger.warning(
            "avatar.resize.failed",
            size=size,
            image_format=image_format,
            source_bytes=len(data),
            error=str(e),
        )
        raise ImageResizeError(f"Could not resize avatar to {size}px: {e}") from e

    return buffer.getvalue()


async def resize_image_async(
    data: bytes, size: int, image_format: ImageFormat
) -> bytes:
    """Run :func:`resize_image` in a worker thread."""
    return await asyncio.to_thread(resize_image, data, size, image_format)
