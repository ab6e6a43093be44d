"""Custom exception hierarchy for ShotFrame."""

from __future__ import annotations


class ShotFrameError(Exception):
    """Base exception for all ShotFrame errors."""


class ParseError(ShotFrameError):
    """Raised when an input file or descriptor cannot be parsed."""


class UnsupportedFormatError(ParseError):
    """Raised when input file format is not supported."""


class ValidationError(ShotFrameError):
    """Raised when input validation fails."""


class CompositionError(ShotFrameError):
    """Raised when final image composition fails."""


class NoImageLoadedError(CompositionError):
    """Raised when a render is requested before an image is loaded."""
