"""High-quality image resize with gamma correction."""

from __future__ import annotations

import logging

import numpy as np
from PIL import Image

from ..config import Config

logger = logging.getLogger("shotframe.composition.resize")


def high_quality_resize(
    image: Image.Image, target_size: tuple[int, int]
) -> Image.Image:
    """High-quality RGBA resize in linear light with premultiplied alpha.

    Each channel is resampled as a float image so no precision is lost
    between decode and encode, and premultiplying keeps transparent pixels
    from bleeding their color into opaque edges.

    Args:
        image: Source PIL image.
        target_size: Target (width, height).

    Returns:
        Resized RGBA image; the source unchanged if the target is empty.
    """
    if target_size[0] <= 0 or target_size[1] <= 0:
        return image

    if image.mode != "RGBA":
        image = image.convert("RGBA")

    if image.size == tuple(target_size):
        return image.copy()

    arr = np.asarray(image, dtype=np.float32) / 255.0
    alpha = arr[:, :, 3]
    linear = np.power(arr[:, :, :3], Config.GAMMA) * alpha[:, :, None]

    channels = [linear[:, :, i] for i in range(3)] + [alpha]
    resized = [
        np.asarray(
            Image.fromarray(np.ascontiguousarray(c)).resize(
                target_size, Config.RESIZE_QUALITY
            )
        )
        for c in channels
    ]

    out_alpha = np.clip(resized[3], 0.0, 1.0)
    rgb = np.stack(resized[:3], axis=2)
    safe_alpha = np.where(out_alpha > 1e-6, out_alpha, 1.0)[:, :, None]
    rgb = np.clip(rgb / safe_alpha, 0.0, 1.0)
    rgb = np.where(out_alpha[:, :, None] > 1e-6, rgb, 0.0)

    encoded = np.power(rgb, 1.0 / Config.GAMMA)
    result = np.dstack([encoded, out_alpha])
    return Image.fromarray(np.rint(result * 255).astype(np.uint8))
