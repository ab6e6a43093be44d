"""Iterative 3x3 box blur used for redaction marks."""

from __future__ import annotations

import logging

import cv2
import numpy as np

logger = logging.getLogger("shotframe.composition.blur")


def box_blur(buffer: np.ndarray, iterations: int) -> np.ndarray:
    """Blur the interior of an RGB(A) buffer with repeated 3x3 means.

    Each pass replaces R, G and B of every interior pixel with the unweighted
    mean of its 3x3 neighborhood, read from the previous pass. The outermost
    ring of pixels is never written and alpha passes through, so repeated
    passes only compound inside the border.

    Args:
        buffer: ``uint8`` array of shape (height, width, 3 or 4).
        iterations: Number of passes; 0 returns an unchanged copy.

    Returns:
        New ``uint8`` array of the same shape.
    """
    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got {iterations}")

    result = buffer.copy()
    height, width = buffer.shape[:2]
    if iterations == 0 or height < 3 or width < 3:
        return result

    rgb = np.ascontiguousarray(buffer[:, :, :3], dtype=np.float32)
    for _ in range(iterations):
        # Interior outputs only read in-bounds neighbours, so the border mode
        # never reaches them.
        blurred = cv2.blur(rgb, (3, 3), borderType=cv2.BORDER_REPLICATE)
        rgb[1:-1, 1:-1] = blurred[1:-1, 1:-1]

    result[1:-1, 1:-1, :3] = np.clip(np.rint(rgb[1:-1, 1:-1]), 0, 255).astype(np.uint8)
    return result
