"""Image file parser (PNG, JPG, WEBP, ...) for ShotFrame."""

from __future__ import annotations

import io
import logging
from pathlib import Path

from PIL import Image, ImageOps, UnidentifiedImageError

from ..constants import SUPPORTED_EXTENSIONS
from ..exceptions import ParseError, UnsupportedFormatError
from ..models import ImageAsset
from ..validators import validate_file_path

logger = logging.getLogger("shotframe.parser.image")


class ImageParser:
    """Decode raster image files into an ``ImageAsset``.

    EXIF orientation is applied so the asset's natural size matches what a
    browser would display.
    """

    def supports(self, file_path: str) -> bool:
        return Path(file_path).suffix.lower() in SUPPORTED_EXTENSIONS

    def parse(self, file_path: str) -> ImageAsset:
        """Parse an image file into an asset.

        Args:
            file_path: Path to the image file.

        Returns:
            Decoded RGBA asset.

        Raises:
            ValidationError: If the file is missing or has an unknown extension.
            ParseError: If the image cannot be decoded.
        """
        validate_file_path(file_path)
        try:
            with Image.open(file_path) as img:
                asset = self._to_asset(img, Path(file_path).name)
        except (OSError, UnidentifiedImageError) as e:
            raise ParseError(f"Failed to open image '{file_path}': {e}") from e

        logger.info("Parsed image %s: %dx%d", asset.name, asset.width, asset.height)
        return asset

    def parse_bytes(self, data: bytes, name: str | None = None) -> ImageAsset:
        """Decode an in-memory image (e.g. an upload or clipboard paste)."""
        try:
            with Image.open(io.BytesIO(data)) as img:
                asset = self._to_asset(img, name)
        except (OSError, UnidentifiedImageError) as e:
            raise ParseError(f"Failed to decode image data: {e}") from e

        logger.info("Parsed image bytes: %dx%d", asset.width, asset.height)
        return asset

    @staticmethod
    def _to_asset(img: Image.Image, name: str | None) -> ImageAsset:
        img = ImageOps.exif_transpose(img)
        return ImageAsset.from_image(img.convert("RGBA"), name=name)


def get_parser(file_path: str) -> ImageParser:
    """Return the parser for a file.

    Raises:
        UnsupportedFormatError: If the extension is not supported.
    """
    parser = ImageParser()
    if parser.supports(file_path):
        return parser
    raise UnsupportedFormatError(
        f"No parser for '{file_path}'. Supported: {', '.join(SUPPORTED_EXTENSIONS)}"
    )
