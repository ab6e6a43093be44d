"""Data structures for ShotFrame."""

from __future__ import annotations

from dataclasses import dataclass, field

from PIL import Image as PILImage

from .exceptions import ValidationError

RGBA = tuple[int, int, int, int]


@dataclass(frozen=True, eq=False)
class ImageAsset:
    """Decoded source image. Read-only for the engine."""
    image: PILImage.Image
    width: int
    height: int
    name: str | None = None

    @classmethod
    def from_image(cls, image: PILImage.Image, name: str | None = None) -> ImageAsset:
        rgba = image if image.mode == "RGBA" else image.convert("RGBA")
        w, h = rgba.size
        if w <= 0 or h <= 0:
            raise ValidationError(f"Image must have positive dimensions, got {w}x{h}")
        return cls(image=rgba, width=w, height=h, name=name)

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def ratio(self) -> float:
        return self.width / self.height


@dataclass(frozen=True)
class OriginalAspect:
    """Use the source image's own aspect ratio."""

    def __str__(self) -> str:
        return "original"


@dataclass(frozen=True)
class Ratio:
    """Explicit output aspect ratio ``width:height``."""
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValidationError(
                f"Aspect ratio terms must be positive, got {self.width}:{self.height}"
            )

    def __str__(self) -> str:
        return f"{self.width}:{self.height}"


AspectSpec = OriginalAspect | Ratio


@dataclass(frozen=True)
class Solid:
    """Flat background color."""
    color: RGBA


@dataclass(frozen=True)
class GradientStop:
    color: RGBA
    position: float  # 0..1


@dataclass(frozen=True)
class Gradient:
    """Linear gradient, CSS angle convention (0 = up, clockwise)."""
    angle: float
    stops: tuple[GradientStop, ...] = ()


Background = Solid | Gradient


@dataclass(frozen=True)
class RenderSettings:
    """Immutable per-render snapshot of the layout parameters.

    Padding and border radius live in the full-resolution logical space.
    """
    aspect: AspectSpec = field(default_factory=OriginalAspect)
    padding: int = 20
    border_radius: int = 0
    background: Background = field(default_factory=lambda: Solid((243, 244, 246, 255)))


@dataclass(frozen=True)
class RedactionMark:
    """Circular blur region in logical units."""
    center_x: float
    center_y: float
    radius: float

    def scaled(self, factor: float) -> tuple[float, float, float]:
        return (self.center_x * factor, self.center_y * factor, self.radius * factor)


@dataclass(frozen=True)
class CanvasGeometry:
    """Resolved canvas sizes: full-resolution logical and bounded preview."""
    full_width: float
    full_height: float
    preview_width: float
    preview_height: float

    @property
    def full_pixel_size(self) -> tuple[int, int]:
        return (max(1, round(self.full_width)), max(1, round(self.full_height)))

    @property
    def preview_pixel_size(self) -> tuple[int, int]:
        return (max(1, round(self.preview_width)), max(1, round(self.preview_height)))

    @property
    def preview_to_logical(self) -> float:
        """Factor that maps preview surface pixels to logical units."""
        return self.full_width / self.preview_pixel_size[0]


@dataclass(frozen=True)
class DrawRect:
    """Fitted image rectangle in target pixels."""
    x: float
    y: float
    width: float
    height: float

    @property
    def x2(self) -> float:
        return self.x + self.width

    @property
    def y2(self) -> float:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def scale(self, factor: float) -> DrawRect:
        return DrawRect(
            x=self.x * factor,
            y=self.y * factor,
            width=self.width * factor,
            height=self.height * factor,
        )

    def to_pixel_box(self) -> tuple[int, int, int, int]:
        """Integer (left, top, right, bottom) covering the rectangle."""
        return (round(self.x), round(self.y), round(self.x2), round(self.y2))


@dataclass
class RenderResult:
    """Rendered surface plus the geometry used to produce it."""
    image: PILImage.Image
    draw_rect: DrawRect
    scale: float
    warnings: list[str] = field(default_factory=list)
