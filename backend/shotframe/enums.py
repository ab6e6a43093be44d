"""Enumerations for ShotFrame."""

from __future__ import annotations

from enum import Enum


class RenderMode(Enum):
    """Which surface a render is produced for."""
    PREVIEW = "preview"
    EXPORT = "export"


class BackgroundKind(Enum):
    """Background fill variants."""
    SOLID = "solid"
    GRADIENT = "gradient"
