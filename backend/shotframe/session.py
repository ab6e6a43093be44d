"""Editor session: the mutable shell state around the composition engine."""

from __future__ import annotations

import io
import logging
import time
from dataclasses import replace
from pathlib import Path

from PIL import Image

from .composition import CompositionEngine, RedactionStore
from .config import Config
from .enums import RenderMode
from .exceptions import NoImageLoadedError
from .layout import resolve_canvas
from .models import CanvasGeometry, ImageAsset, RedactionMark, RenderResult, RenderSettings
from .parser import get_parser, parse_aspect, parse_background
from .validators import validate_border_radius, validate_mark_radius, validate_padding

logger = logging.getLogger("shotframe.session")


def default_settings() -> RenderSettings:
    return RenderSettings(
        aspect=parse_aspect(Config.DEFAULT_ASPECT),
        padding=Config.DEFAULT_PADDING,
        border_radius=Config.DEFAULT_BORDER_RADIUS,
        background=parse_background(Config.DEFAULT_BACKGROUND),
    )


class EditorSession:
    """Holds the loaded image, current parameters and redaction marks.

    Parameter setters validate their input and replace the settings value;
    every render works from a frozen snapshot, so nothing a render reads can
    change underneath it.
    """

    def __init__(
        self,
        preview_bounds: tuple[int, int] = (Config.PREVIEW_MAX_WIDTH, Config.PREVIEW_MAX_HEIGHT),
        preview_iterations: int = Config.PREVIEW_BLUR_ITERATIONS,
        export_iterations: int = Config.EXPORT_BLUR_ITERATIONS,
    ) -> None:
        self.engine = CompositionEngine()
        self.preview_bounds = preview_bounds
        self.preview_iterations = preview_iterations
        self.export_iterations = export_iterations

        self.asset: ImageAsset | None = None
        self.settings = default_settings()
        self.mark_radius = Config.DEFAULT_MARK_RADIUS
        self.redactions = RedactionStore()

    # Image intake

    def load_file(self, file_path: str) -> ImageAsset:
        """Load an image file, replacing the current image and its marks.

        Raises:
            ValidationError: If the path is missing or not an image type.
            ParseError: If decoding fails.
        """
        asset = get_parser(file_path).parse(file_path)
        self._set_asset(asset)
        return asset

    def load_image(self, image: Image.Image, name: str | None = None) -> ImageAsset:
        """Use an already decoded image as the source."""
        asset = ImageAsset.from_image(image, name=name)
        self._set_asset(asset)
        return asset

    def _set_asset(self, asset: ImageAsset) -> None:
        if len(self.redactions):
            logger.info("New image loaded, dropping %d marks", len(self.redactions))
        self.redactions.clear()
        self.asset = asset

    # Parameters

    def set_aspect(self, value: str) -> None:
        self.settings = replace(self.settings, aspect=parse_aspect(value))

    def set_padding(self, padding: int) -> None:
        self.settings = replace(self.settings, padding=validate_padding(padding))

    def set_border_radius(self, radius_percent: int) -> None:
        self.settings = replace(
            self.settings, border_radius=validate_border_radius(radius_percent)
        )

    def set_background(self, value: str) -> None:
        self.settings = replace(self.settings, background=parse_background(value))

    def set_mark_radius(self, radius: int) -> None:
        self.mark_radius = validate_mark_radius(radius)

    def snapshot(self) -> RenderSettings:
        return self.settings

    # Redaction

    def place_mark(self, x: float, y: float, radius: float | None = None) -> RedactionMark:
        """Place a mark given in logical units."""
        radius = self.mark_radius if radius is None else validate_mark_radius(radius)
        return self.redactions.place_mark(x, y, radius)

    def place_mark_at_preview(self, x: float, y: float) -> RedactionMark:
        """Place a mark from a click on the preview surface."""
        geometry = self.geometry()
        return self.redactions.place_mark_from_preview(
            x, y, self.mark_radius, geometry.preview_to_logical
        )

    def clear_marks(self) -> None:
        self.redactions.clear()

    # Rendering

    def _require_asset(self) -> ImageAsset:
        if self.asset is None:
            raise NoImageLoadedError("No image loaded. Call load_file() first.")
        return self.asset

    def geometry(self) -> CanvasGeometry:
        asset = self._require_asset()
        return resolve_canvas(asset.size, self.settings.aspect, self.preview_bounds)

    def render_preview(self) -> RenderResult:
        """Render at the bounded preview size."""
        return self._render(RenderMode.PREVIEW)

    def render_export(self) -> RenderResult:
        """Render at the full logical resolution."""
        return self._render(RenderMode.EXPORT)

    def _render(self, mode: RenderMode) -> RenderResult:
        asset = self._require_asset()
        settings = self.snapshot()
        marks = self.redactions.marks
        geometry = resolve_canvas(asset.size, settings.aspect, self.preview_bounds)

        if mode is RenderMode.PREVIEW:
            size, iterations = geometry.preview_pixel_size, self.preview_iterations
        else:
            size, iterations = geometry.full_pixel_size, self.export_iterations

        result = self.engine.render(
            size, asset, settings, marks, geometry, mode=mode, iterations=iterations
        )
        for warning in result.warnings:
            logger.warning("%s render: %s", mode.value, warning)
        return result

    # Export

    def export_bytes(self) -> bytes:
        """Encode the full-resolution render as PNG."""
        buffer = io.BytesIO()
        self.render_export().image.save(buffer, format=Config.EXPORT_FORMAT)
        return buffer.getvalue()

    def export_png(self, directory: str | Path) -> Path:
        """Write the export to ``directory`` and return the file path."""
        path = Path(directory) / export_filename()
        path.write_bytes(self.export_bytes())
        logger.info("Exported %s", path)
        return path

    def reset(self) -> None:
        """Drop the image and marks and restore default parameters."""
        self.asset = None
        self.settings = default_settings()
        self.mark_radius = Config.DEFAULT_MARK_RADIUS
        self.redactions.clear()


def export_filename(timestamp_ms: int | None = None) -> str:
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"{Config.EXPORT_PREFIX}-{timestamp_ms}.png"
