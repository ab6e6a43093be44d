"""Shared pytest fixtures for ShotFrame tests."""

from __future__ import annotations

import numpy as np
import pytest
from PIL import Image

from backend.shotframe.models import ImageAsset, RenderSettings, Solid


@pytest.fixture
def landscape_asset() -> ImageAsset:
    """800x600 opaque red source."""
    return ImageAsset.from_image(Image.new("RGB", (800, 600), (255, 0, 0)), name="shot.png")


@pytest.fixture
def noisy_asset() -> ImageAsset:
    """400x300 source with per-pixel variation, deterministic."""
    rng = np.random.default_rng(1234)
    arr = rng.integers(0, 256, size=(300, 400, 3), dtype=np.uint8)
    return ImageAsset.from_image(Image.fromarray(arr), name="noise.png")


@pytest.fixture
def checkerboard() -> np.ndarray:
    """20x20 RGBA black/white checkerboard with a fixed alpha of 200."""
    yy, xx = np.mgrid[0:20, 0:20]
    value = np.where((xx + yy) % 2 == 0, 255, 0).astype(np.uint8)
    buf = np.zeros((20, 20, 4), dtype=np.uint8)
    buf[:, :, 0] = value
    buf[:, :, 1] = value
    buf[:, :, 2] = value
    buf[:, :, 3] = 200
    return buf


@pytest.fixture
def plain_settings() -> RenderSettings:
    return RenderSettings(padding=20, border_radius=0, background=Solid((10, 20, 30, 255)))


@pytest.fixture
def png_file(tmp_path):
    """Write a 200x150 PNG and return its path as a string."""
    path = tmp_path / "capture.png"
    Image.new("RGB", (200, 150), (0, 128, 255)).save(path, format="PNG")
    return str(path)
