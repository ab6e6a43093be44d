"""Composition engine for ShotFrame."""

from .background import fill_background
from .blur import box_blur
from .clip import clip_mask, rounded_rect_path
from .engine import CompositionEngine
from .redaction import RedactionStore, apply_marks

__all__ = [
    "CompositionEngine",
    "RedactionStore",
    "apply_marks",
    "box_blur",
    "clip_mask",
    "fill_background",
    "rounded_rect_path",
]
