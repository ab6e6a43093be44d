"""Shared constants for ShotFrame."""

from __future__ import annotations

from .config import Config
from .enums import BackgroundKind, RenderMode

# Supported file extensions
SUPPORTED_EXTENSIONS = (".png", ".jpg", ".jpeg", ".webp", ".gif", ".bmp")

# Box blur passes per render surface
BLUR_ITERATIONS = {
    RenderMode.PREVIEW: Config.PREVIEW_BLUR_ITERATIONS,
    RenderMode.EXPORT: Config.EXPORT_BLUR_ITERATIONS,
}

# Aspect ratio presets shown in the UI
ASPECT_PRESETS = {
    "Original": "original",
    "Square (1:1)": "1:1",
    "Classic (4:3)": "4:3",
    "Photo (3:2)": "3:2",
    "Widescreen (16:9)": "16:9",
    "Portrait (3:4)": "3:4",
    "Story (9:16)": "9:16",
}

# Background presets: label -> (kind, value)
BACKGROUND_PRESETS = {
    "Light Gray": (BackgroundKind.SOLID, "#f3f4f6"),
    "White": (BackgroundKind.SOLID, "#ffffff"),
    "Charcoal": (BackgroundKind.SOLID, "#1f2937"),
    "Sky": (BackgroundKind.SOLID, "#dbeafe"),
    "Violet Dusk": (
        BackgroundKind.GRADIENT,
        "linear-gradient(135deg, #667eea 0%, #764ba2 100%)",
    ),
    "Sunset": (
        BackgroundKind.GRADIENT,
        "linear-gradient(135deg, #f093fb 0%, #f5576c 100%)",
    ),
    "Ocean": (
        BackgroundKind.GRADIENT,
        "linear-gradient(90deg, #4facfe 0%, #00f2fe 100%)",
    ),
    "Mint": (
        BackgroundKind.GRADIENT,
        "linear-gradient(180deg, #a8edea 0%, #fed6e3 100%)",
    ),
}
