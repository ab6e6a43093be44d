"""Layout resolution for ShotFrame."""

from .geometry import fit_image, layout_image, resolve_canvas, scale_for

__all__ = ["fit_image", "layout_image", "resolve_canvas", "scale_for"]
